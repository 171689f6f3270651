from __future__ import annotations
import pytest
from conwaylife import Grid, ParseError, parse_generations, parse_grid


@pytest.mark.parametrize(
    "text,rows",
    [
        ("010R010R010", [[0, 1, 0], [0, 1, 0], [0, 1, 0]]),
        ("1", [[1]]),
        ("0", [[0]]),
        ("1100", [[1, 1, 0, 0]]),
        ("1R0R1", [[1], [0], [1]]),
        ("", []),
    ],
)
def test_parse_grid(text: str, rows: list[list[int]]) -> None:
    assert parse_grid(text) == Grid(rows)


def test_parse_grid_keeps_dead_border() -> None:
    g = parse_grid("000R010R000")
    assert g.dimensions == (3, 3)
    assert g.population == 1


@pytest.mark.parametrize(
    "text,delimiter,rows",
    [
        ("01\n10", "\n", [[0, 1], [1, 0]]),
        ("01/10/11", "/", [[0, 1], [1, 0], [1, 1]]),
        ("01, 10", ", ", [[0, 1], [1, 0]]),
    ],
)
def test_parse_grid_delimiter(text: str, delimiter: str, rows: list[list[int]]) -> None:
    assert parse_grid(text, delimiter) == Grid(rows)


@pytest.mark.parametrize(
    "text,msg",
    [
        ("012", "Invalid cell '2' in row 1; expected '0' or '1'"),
        ("01R0x", "Invalid cell 'x' in row 2; expected '0' or '1'"),
        ("01r01", "Invalid cell 'r' in row 1; expected '0' or '1'"),
        ("01R 1", "Invalid cell ' ' in row 2; expected '0' or '1'"),
        ("01R011", "Rows are not all the same length: 2, 3"),
        ("1R", "Rows are not all the same length: 1, 0"),
        ("R1", "Rows are not all the same length: 0, 1"),
        ("11R1R11", "Rows are not all the same length: 2, 1, 2"),
    ],
)
def test_parse_grid_error(text: str, msg: str) -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_grid(text)
    assert str(excinfo.value) == msg


def test_parse_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_grid("2")


@pytest.mark.parametrize("delimiter", ["", "0", "1", "R1"])
def test_parse_grid_bad_delimiter(delimiter: str) -> None:
    with pytest.raises(ValueError) as excinfo:
        parse_grid("01", delimiter)
    assert not isinstance(excinfo.value, ParseError)


@pytest.mark.parametrize(
    "text,n",
    [("0", 0), ("1", 1), ("42", 42), ("007", 7), (" 5\n", 5)],
)
def test_parse_generations(text: str, n: int) -> None:
    assert parse_generations(text) == n


@pytest.mark.parametrize("text", ["", "-1", "+1", "1.5", "ten", "1e3", "0x10", "1 2"])
def test_parse_generations_error(text: str) -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_generations(text)
    assert str(excinfo.value) == f"Invalid generation count: {text!r}"
