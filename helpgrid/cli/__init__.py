# helpgrid/cli/__init__.py
# Command-line interface for rendering help specs

from .app import app

__all__ = ["app"]
