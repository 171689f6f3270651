"""
Conway's Game of Life on an unbounded plane

``conway-life`` simulates Conway's Game of Life starting from a rectangular
grid of live & dead cells.  After every generation the grid is padded with a
ring of dead cells (so that life can spread past its edges), the birth &
survival rules are applied, and the result is trimmed back down to the
bounding box of its live cells.

The engine can be used as a library (see `simulate()` and `history()`) or via
the ``conway-life`` command.
"""

from importlib.metadata import version
from .engine import pad, step, trim
from .grid import Grid
from .parsing import ParseError, parse_generations, parse_grid
from .simulation import advance, history, simulate

__version__ = version("conway-life")

__all__ = [
    "Grid",
    "ParseError",
    "advance",
    "history",
    "pad",
    "parse_generations",
    "parse_grid",
    "simulate",
    "step",
    "trim",
]
