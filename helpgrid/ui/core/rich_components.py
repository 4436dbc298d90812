# helpgrid/ui/core/rich_components.py
# Centralized Rich component imports & configuration

from __future__ import annotations

# Core Rich components
from rich.console import Console, RenderableType
from rich.text import Text
from rich.theme import Theme

# Layout & display components
from rich.padding import Padding
from rich.table import Table


# * Borderless grid builder - typesetter rows & settings listings share this shape
def themed_grid(expand: bool = False, padding: int | tuple[int, int] = 0) -> Table:
    return Table.grid(padding=padding, expand=expand)


__all__ = [
    # Core
    "Console",
    "RenderableType",
    "Text",
    "Theme",
    # Layout & display
    "Padding",
    "Table",
    # Builders
    "themed_grid",
]
