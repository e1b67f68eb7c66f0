"""Line-oriented text format for puzzles and solutions.

A puzzle reads like this::

    9,9
    0,1,4
    0,3,6
    ...

The first line gives the grid dimensions, which must be ``9,9``. Every other
line assigns a color to a cell as ``<row>,<column>,<color>``. Rows and
columns are zero-based, colors run from 1 to 9, and 0 marks an empty cell.
Cells not mentioned are empty.

A solution is written as nine lines of nine space-separated colors.
"""

from __future__ import annotations

from typing import IO, Iterable

from .structs import SIZE, Grid, empty_grid

HEADER = f"{SIZE},{SIZE}"


class FormatError(ValueError):
    def __init__(self, message: str, lineno: int | None = None) -> None:
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message)
        self.lineno = lineno


def _parse_field(value: str, upper: int, name: str, lineno: int) -> int:
    try:
        number = int(value)
    except ValueError:
        raise FormatError(f"{name} is not an integer: {value!r}", lineno)
    if not 0 <= number <= upper:
        raise FormatError(f"{name} out of range [0, {upper}]: {number}", lineno)
    return number


def read_grid(lines: Iterable[str]) -> Grid:
    """Read a puzzle from an iterable of lines, such as an open file.

    Blank lines, and lines with fewer than three comma-separated fields, are
    skipped. Fields after the third are ignored.
    """
    it = iter(lines)
    try:
        header = next(it)
    except StopIteration:
        raise FormatError("missing header")
    if header.strip() != HEADER:
        raise FormatError(f"expected {HEADER!r}, got {header.strip()!r}", 1)

    grid = empty_grid()
    for lineno, line in enumerate(it, 2):
        fields = line.strip().split(",")
        if len(fields) < 3:
            continue
        row = _parse_field(fields[0].strip(), SIZE - 1, "row", lineno)
        col = _parse_field(fields[1].strip(), SIZE - 1, "column", lineno)
        grid[row][col] = _parse_field(fields[2].strip(), SIZE, "color", lineno)
    return grid


def parse_grid(text: str) -> Grid:
    return read_grid(text.splitlines())


def format_grid(grid: Grid) -> str:
    return "".join(" ".join(str(color) for color in row) + "\n" for row in grid)


def write_grid(stream: IO[str], grid: Grid) -> None:
    stream.write(format_grid(grid))
