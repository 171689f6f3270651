import click
from ..clack import ConfigurableCommand
from ..render import Style, emit
from ..simulation import history
from ..util import load_input, output_options


@click.command(cls=ConfigurableCommand)
@output_options
@click.argument("cells")
@click.argument("generations")
def cli(
    cells: str, generations: str, style: Style, delimiter: str, numbered: bool
) -> None:
    """
    Print the grid for every generation.

    CELLS is a grid of 0s (dead) and 1s (alive) with rows separated by the
    delimiter, e.g., "010R010R010".  The starting grid is printed first,
    followed by each of the next GENERATIONS generations, stopping early if
    every cell dies.
    """
    grid, gens = load_input(cells, generations, delimiter)
    for n, g in history(grid, gens):
        emit(g, style, header=f"Generation {n}:" if numbered else None)
