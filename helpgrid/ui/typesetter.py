# helpgrid/ui/typesetter.py
# Typesetter protocol & Rich-backed implementation: column layout, wrapping & padding are delegated to Rich

from __future__ import annotations

import io
from typing import Protocol, runtime_checkable

from .core.rich_components import Console, Padding, RenderableType, Text, Theme, themed_grid
from ..core.types import Cell, PaddingSpec, NO_PADDING


# * Protocol for anything that turns bands & rows into final text
@runtime_checkable
class Typesetter(Protocol):
    def start_block(self, text: Text, padding: PaddingSpec = NO_PADDING) -> None: ...

    def row(self, *cells: Cell) -> None: ...

    def render(self) -> str: ...


# wrap renderable in Rich Padding only when padding is non-zero
def _padded(renderable: RenderableType, padding: PaddingSpec) -> RenderableType:
    if padding == NO_PADDING:
        return renderable
    return Padding(renderable, padding, expand=False)


# * Typesetter printing into an in-memory Rich console of fixed width
class RichTypesetter:
    def __init__(self, width: int, theme: Theme | None = None, color: bool = True):
        self.width = width
        self._buffer = io.StringIO()
        self._console = Console(
            file=self._buffer,
            width=width,
            theme=theme,
            force_terminal=color,
            color_system="truecolor" if color else None,
            no_color=not color,
            highlight=False,
            markup=False,
            emoji=False,
            legacy_windows=False,
        )

    # title bands & other full-width blocks
    def start_block(self, text: Text, padding: PaddingSpec = NO_PADDING) -> None:
        self._console.print(_padded(text, padding))

    def row(self, *cells: Cell) -> None:
        if len(cells) == 1 and cells[0].width is None:
            only = cells[0]
            self._console.print(_padded(only.text, only.padding), justify=only.align)
            return

        # unsized cells share the remaining width when any of them must align to the right edge
        expand = any(c.width is None and c.align == "right" for c in cells)
        grid = themed_grid(expand=expand)
        for c in cells:
            grid.add_column(
                width=c.width,
                justify=c.align or "left",
                ratio=1 if expand and c.width is None else None,
                overflow="fold",
            )
        grid.add_row(*(_padded(c.text, c.padding) for c in cells))
        self._console.print(grid)

    # final text w/ trailing cell padding stripped from every line
    def render(self) -> str:
        return "\n".join(line.rstrip() for line in self._buffer.getvalue().split("\n"))
