# verdant/cli/commands/__init__.py
