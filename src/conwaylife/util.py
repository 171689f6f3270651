from __future__ import annotations
from collections.abc import Callable
import logging
from typing import Any, TypeVar
import click
from .grid import Grid
from .parsing import DEFAULT_DELIMITER, ParseError, parse_generations, parse_grid
from .render import Style

log = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def output_options(func: F) -> F:
    """Add the ``--style``, ``--delimiter``, and ``--numbered`` options"""
    func = click.option(
        "-n",
        "--numbered",
        is_flag=True,
        help="Print a 'Generation N:' header above each grid",
    )(func)
    func = click.option(
        "-d",
        "--delimiter",
        default=DEFAULT_DELIMITER,
        show_default=True,
        help="String separating the rows of CELLS",
        callback=_validate_delimiter,
    )(func)
    func = click.option(
        "-s",
        "--style",
        type=click.Choice([s.value for s in Style]),
        default=Style.ARRAY.value,
        show_default=True,
        help="How to print each grid",
        callback=lambda _ctx, _param, value: Style(value),
    )(func)
    return func


def _validate_delimiter(
    _ctx: click.Context, _param: click.Parameter, value: str
) -> str:
    if not value or "0" in value or "1" in value:
        raise click.BadParameter("must be non-empty and contain neither '0' nor '1'")
    return value


def load_input(cells: str, generations: str, delimiter: str) -> tuple[Grid, int]:
    """
    Parse the ``CELLS`` and ``GENERATIONS`` command-line arguments, reporting
    malformed input as a usage error
    """
    try:
        grid = parse_grid(cells, delimiter)
    except ParseError as e:
        raise click.BadParameter(str(e), param_hint="CELLS")
    try:
        gens = parse_generations(generations)
    except ParseError as e:
        raise click.BadParameter(str(e), param_hint="GENERATIONS")
    log.debug(
        "Starting grid is %dx%d with population %d; simulating %d generation(s)",
        grid.height,
        grid.width,
        grid.population,
        gens,
    )
    return grid, gens
