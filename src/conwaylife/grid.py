from __future__ import annotations
from collections.abc import Iterable, Iterator
from typing import Any


class Grid:
    """
    An immutable rectangular matrix of cells, stored row-major.  Each cell is
    a `bool`: `True` for alive, `False` for dead.

    A grid with no cells is the *empty grid*, which is how extinction is
    represented.  The canonical empty grid has zero rows; a grid built from
    rows of zero width is normalized to it, so ``Grid([[]]) == Grid([])``.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Iterable[Any]] = ()) -> None:
        cells = tuple(tuple(map(_cell, r)) for r in rows)
        widths = {len(r) for r in cells}
        if len(widths) > 1:
            raise ValueError(
                f"Grid rows must all have the same length; got {sorted(widths)}"
            )
        if widths == {0}:
            cells = ()
        self._rows: tuple[tuple[bool, ...], ...] = cells

    @classmethod
    def empty(cls) -> Grid:
        return cls()

    def __repr__(self) -> str:
        return f"Grid({self.to_lists()!r})"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Grid):
            return self._rows == other._rows
        else:
            return NotImplemented

    def __hash__(self) -> int:
        return hash(self._rows)

    def __iter__(self) -> Iterator[tuple[bool, ...]]:
        return iter(self._rows)

    @property
    def rows(self) -> tuple[tuple[bool, ...], ...]:
        return self._rows

    @property
    def height(self) -> int:
        return len(self._rows)

    @property
    def width(self) -> int:
        return len(self._rows[0]) if self._rows else 0

    @property
    def dimensions(self) -> tuple[int, int]:
        """``(height, width)``"""
        return (self.height, self.width)

    @property
    def is_empty(self) -> bool:
        return not self._rows

    @property
    def population(self) -> int:
        """The number of live cells in the grid"""
        return sum(map(sum, self._rows))

    @property
    def is_minimal(self) -> bool:
        """
        True iff the grid is non-empty and its first & last rows and first &
        last columns each contain at least one live cell
        """
        if self.is_empty:
            return False
        return (
            any(self._rows[0])
            and any(self._rows[-1])
            and any(r[0] for r in self._rows)
            and any(r[-1] for r in self._rows)
        )

    def get(self, i: int, j: int, default: bool = False) -> bool:
        """
        Return the cell at row ``i``, column ``j``.  Coordinates outside the
        grid (including negative ones, which do not wrap) yield ``default``.
        """
        if 0 <= i < self.height and 0 <= j < self.width:
            return self._rows[i][j]
        else:
            return default

    def rotate180(self) -> Grid:
        return Grid(r[::-1] for r in reversed(self._rows))

    def to_lists(self) -> list[list[int]]:
        return [list(map(int, r)) for r in self._rows]


def _cell(value: Any) -> bool:
    if value is True or value is False:
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise ValueError(f"Invalid cell value: {value!r}")
