# verdant/render/__init__.py
"""Output encoders: classic (.md) and dense (.vrd)."""

from .base import RenderContext, RenderedOutput, Renderer
from .registry import get_renderer

__all__ = ["RenderContext", "RenderedOutput", "Renderer", "get_renderer"]
