import pytest

from sudokulib import BaseReporter
from sudokulib.formats import parse_grid

PUZZLE_TEXT = """\
9,9
0,1,4
0,3,6
0,7,3
0,8,2
1,2,8
1,4,2
2,0,7
2,3,8
3,3,5
4,1,5
4,5,3
4,6,6
5,0,6
5,1,8
5,7,9
6,1,9
6,2,5
6,5,6
6,7,7
7,4,4
7,7,6
8,0,4
8,5,7
8,6,2
8,8,3
"""

SOLUTION_TEXT = """\
1 4 9 6 7 5 8 3 2
5 3 8 1 2 9 7 4 6
7 2 6 8 3 4 1 5 9
9 1 4 5 6 8 3 2 7
2 5 7 4 9 3 6 1 8
6 8 3 7 1 2 5 9 4
3 9 5 2 8 6 4 7 1
8 7 2 3 4 1 9 6 5
4 6 1 9 5 7 2 8 3
"""


class TestReporter(BaseReporter):
    def __init__(self):
        self._indent = 0
        self.events = []

    def starting(self, state):
        self.events.append(("starting", len(state.work)))

    def pinning(self, cell, color):
        print(" " * self._indent, "Pin  ", cell, "=", color, sep="")
        self.events.append(("pinning", cell, color))
        self._indent += 1

    def backtracking(self, cell):
        self._indent -= 1
        assert self._indent >= 0
        print(" " * self._indent, "Back ", cell, sep="")
        self.events.append(("backtracking", cell))

    def ending(self, state):
        self.events.append(("ending", state.cursor))


def _check_solution(grid):
    """Every row, column and block must be a permutation of 1 to 9."""
    digits = set(range(1, 10))
    units = [list(row) for row in grid]
    units.extend([grid[r][c] for r in range(9)] for c in range(9))
    units.extend(
        [grid[r][c] for r in range(r0, r0 + 3) for c in range(c0, c0 + 3)]
        for r0 in (0, 3, 6)
        for c0 in (0, 3, 6)
    )
    for unit in units:
        assert len(unit) == 9 and set(unit) == digits, unit


@pytest.fixture(scope="session")
def reporter_cls():
    return TestReporter


@pytest.fixture()
def reporter(reporter_cls):
    return reporter_cls()


@pytest.fixture()
def check_solution():
    return _check_solution


@pytest.fixture()
def puzzle_text():
    return PUZZLE_TEXT


@pytest.fixture()
def puzzle():
    return parse_grid(PUZZLE_TEXT)


@pytest.fixture()
def solution_text():
    return SOLUTION_TEXT


@pytest.fixture()
def solution():
    return [[int(c) for c in line.split()] for line in SOLUTION_TEXT.splitlines()]
