import logging
import click
from ..clack import ConfigurableCommand
from ..render import Style, emit
from ..simulation import history
from ..util import load_input, output_options

log = logging.getLogger(__name__)


@click.command(cls=ConfigurableCommand)
@output_options
@click.argument("cells")
@click.argument("generations")
def cli(
    cells: str, generations: str, style: Style, delimiter: str, numbered: bool
) -> None:
    """Print only the grid for the last generation reached"""
    grid, gens = load_input(cells, generations, delimiter)
    n, last = 0, grid
    for n, last in history(grid, gens):
        pass
    if n < gens:
        log.info("Simulation stopped after %d of %d generations", n, gens)
    emit(last, style, header=f"Generation {n}:" if numbered else None)
