# verdant/cli/__init__.py
from verdant.cli.cli import app

__all__ = ["app"]
