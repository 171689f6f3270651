from __future__ import annotations
from collections.abc import Callable, Iterator
from itertools import chain
import logging
from typing import Optional
from .engine import pad, step, trim
from .grid import Grid

log = logging.getLogger(__name__)


def advance(grid: Grid) -> Grid:
    """Compute the (trimmed) generation following ``grid``"""
    if grid.is_empty:
        return grid
    return trim(step(pad(grid)))


def simulate(
    grid: Grid,
    generations: int,
    sink: Optional[Callable[[Grid], None]] = None,
) -> Iterator[Grid]:
    """
    Lazily yield the grid after each of ``generations`` steps starting from
    ``grid``.  If ``sink`` is given, it is called with each grid as it is
    produced.

    Extinction is terminal: the generation in which the last cell dies is
    yielded, after which the iteration stops early.
    """
    if generations < 0:
        raise ValueError(f"Generation count must be non-negative: {generations}")
    return _simulate(grid, generations, sink)


def _simulate(
    grid: Grid,
    generations: int,
    sink: Optional[Callable[[Grid], None]],
) -> Iterator[Grid]:
    for gen in range(1, generations + 1):
        if grid.is_empty:
            break
        grid = advance(grid)
        log.debug(
            "Generation %d: %dx%d grid, population %d",
            gen,
            grid.height,
            grid.width,
            grid.population,
        )
        if grid.is_empty:
            log.info("All cells died in generation %d", gen)
        if sink is not None:
            sink(grid)
        yield grid


def history(grid: Grid, generations: int) -> Iterator[tuple[int, Grid]]:
    """
    Yield ``(0, grid)`` followed by ``(n, grid_n)`` for each simulated
    generation ``n``
    """
    steps = simulate(grid, generations)
    return chain([(0, grid)], enumerate(steps, start=1))
