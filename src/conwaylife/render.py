from __future__ import annotations
from enum import Enum
from typing import IO, Optional
import click
from .grid import Grid


class Style(Enum):
    #: ``[0, 1, 0]``
    ARRAY = "array"
    #: ``010``
    DIGITS = "digits"
    #: ``.#.``
    CELLS = "cells"

    def render_row(self, row: tuple[bool, ...]) -> str:
        if self is Style.ARRAY:
            return "[" + ", ".join(str(int(c)) for c in row) + "]"
        elif self is Style.DIGITS:
            return "".join(str(int(c)) for c in row)
        else:
            return "".join("#" if c else "." for c in row)


def render_grid(grid: Grid, style: Style = Style.ARRAY) -> str:
    if grid.is_empty:
        return "[]" if style is Style.ARRAY else ""
    return "\n".join(style.render_row(r) for r in grid)


def emit(
    grid: Grid,
    style: Style = Style.ARRAY,
    file: Optional[IO[str]] = None,
    header: Optional[str] = None,
) -> None:
    """
    Write ``grid`` to ``file`` (default: stdout), preceded by ``header`` if
    given and followed by a blank line
    """
    if header is not None:
        click.echo(header, file=file)
    if text := render_grid(grid, style):
        click.echo(text, file=file)
    click.echo(file=file)
