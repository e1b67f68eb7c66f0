from __future__ import annotations

from collections import namedtuple
from typing import TYPE_CHECKING, Iterator, List, NamedTuple, Sequence

SIZE = 9
BLOCK_SIZE = 3

EMPTY = 0
COLORS = range(1, SIZE + 1)

Grid = List[List[int]]

if TYPE_CHECKING:

    class Cell(NamedTuple):
        row: int
        col: int

    class State(NamedTuple):
        """Search state of the backtracking driver."""

        cursor: int
        work: Sequence[Cell]

else:
    Cell = namedtuple("Cell", ["row", "col"])
    State = namedtuple("State", ["cursor", "work"])


def empty_grid() -> Grid:
    """Return a new grid with every cell empty."""
    return [[EMPTY] * SIZE for _ in range(SIZE)]


def block_origin(row: int, col: int) -> Cell:
    """Return the top-left cell of the block containing ``(row, col)``."""
    return Cell(row // BLOCK_SIZE * BLOCK_SIZE, col // BLOCK_SIZE * BLOCK_SIZE)


def iter_neighbors(row: int, col: int) -> Iterator[Cell]:
    """Walk the row, the column and the block of a cell.

    This yields 27 cells. Cells at the intersections are yielded more than
    once, and the cell itself is part of all three groups.
    """
    for i in range(SIZE):
        yield Cell(row, i)
    for i in range(SIZE):
        yield Cell(i, col)
    row0, col0 = block_origin(row, col)
    for alt_row in range(row0, row0 + BLOCK_SIZE):
        for alt_col in range(col0, col0 + BLOCK_SIZE):
            yield Cell(alt_row, alt_col)


def build_work_list(grid: Grid) -> list[Cell]:
    """Collect the empty cells of a grid in row-major order."""
    return [
        Cell(row, col)
        for row in range(SIZE)
        for col in range(SIZE)
        if grid[row][col] == EMPTY
    ]
