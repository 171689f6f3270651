from __future__ import annotations
import re
from .grid import Grid

#: The row separator used in grid strings like ``"010R010R010"``
DEFAULT_DELIMITER = "R"


class ParseError(ValueError):
    pass


def parse_grid(text: str, delimiter: str = DEFAULT_DELIMITER) -> Grid:
    """
    Parse a string of ``0``s & ``1``s with rows separated by ``delimiter``
    into a `Grid`.  The empty string parses to the empty grid.

    :raises ParseError: if a character is not ``0`` or ``1`` or if the rows
        are not all the same length
    """
    if not delimiter or "0" in delimiter or "1" in delimiter:
        raise ValueError(f"Invalid row delimiter: {delimiter!r}")
    rows = text.split(delimiter)
    for lineno, r in enumerate(rows, start=1):
        if m := re.search(r"[^01]", r):
            raise ParseError(
                f"Invalid cell {m[0]!r} in row {lineno}; expected '0' or '1'"
            )
    if len({len(r) for r in rows}) > 1:
        raise ParseError(
            "Rows are not all the same length: "
            + ", ".join(str(len(r)) for r in rows)
        )
    return Grid([c == "1" for c in r] for r in rows)


def parse_generations(text: str) -> int:
    """
    Parse a non-negative decimal generation count

    :raises ParseError: if ``text`` is not an unsigned integer
    """
    if m := re.fullmatch(r"\s*([0-9]+)\s*", text):
        return int(m[1])
    else:
        raise ParseError(f"Invalid generation count: {text!r}")
