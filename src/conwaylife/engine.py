"""
The three stages of a generation: padding the grid with a ring of dead cells,
applying the transition rule to every cell, and trimming the result back down
to the bounding box of its live cells
"""

from __future__ import annotations
from .grid import Grid

#: The (row, column) offsets of a cell's Moore neighborhood
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1) if (di, dj) != (0, 0)
)


def pad(grid: Grid) -> Grid:
    """
    Surround ``grid`` with one ring of dead cells so that births just outside
    its current bounds can be represented.  The empty grid is returned as-is.
    """
    if grid.is_empty:
        return grid
    blank = (False,) * (grid.width + 2)
    return Grid([blank, *((False, *r, False) for r in grid), blank])


def neighbor_count(grid: Grid, i: int, j: int) -> int:
    """
    Count the live cells adjacent to position ``(i, j)``.  Positions outside
    the grid count as dead.
    """
    return sum(grid.get(i + di, j + dj) for di, dj in NEIGHBOR_OFFSETS)


def next_state(alive: bool, neighbors: int) -> bool:
    if alive:
        return neighbors in (2, 3)
    else:
        return neighbors == 3


def step(grid: Grid) -> Grid:
    """
    Apply Conway's rules to every cell of ``grid`` simultaneously, returning a
    grid of the same dimensions
    """
    return Grid(
        [next_state(alive, neighbor_count(grid, i, j)) for j, alive in enumerate(r)]
        for i, r in enumerate(grid)
    )


def trim_rows(grid: Grid) -> Grid:
    """Strip leading & trailing rows that contain no live cells"""
    populated = [i for i, r in enumerate(grid) if any(r)]
    if not populated:
        return Grid.empty()
    return Grid(grid.rows[populated[0] : populated[-1] + 1])


def trim_columns(grid: Grid) -> Grid:
    """Strip leading & trailing columns that contain no live cells"""
    populated = [j for j in range(grid.width) if any(r[j] for r in grid)]
    if not populated:
        return Grid.empty()
    first, last = populated[0], populated[-1]
    return Grid(r[first : last + 1] for r in grid)


def trim(grid: Grid) -> Grid:
    """
    Reduce ``grid`` to the minimal bounding box of its live cells, or to the
    empty grid if it has none
    """
    return trim_columns(trim_rows(grid))
