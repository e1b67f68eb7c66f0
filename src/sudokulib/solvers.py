import collections

from .reporters import BaseReporter
from .structs import COLORS, EMPTY, SIZE, State, build_work_list, iter_neighbors


class SolverException(Exception):
    """A base class for all exceptions raised by this module.

    Exceptions derived by this class should all be handled by the caller of
    the solver. Anything else bubbling out of it should be treated as a bug.
    """


class UnsolvableError(SolverException):
    """The search space is exhausted without finding a solution.

    This covers contradicting givens as well; the solver does not tell them
    apart. When raised, every cell in ``work`` is empty again.
    """

    def __init__(self, work):
        super(UnsolvableError, self).__init__("No solution found for this sudoku")
        self.work = work


def next_color(grid, row, col, start):
    """Assign the smallest color ``>= start`` that fits into ``(row, col)``.

    A color fits if no other cell in the same row, column or block holds it.
    The cell is cleared before its neighbors are scanned. Returns whether a
    color was found; if not, the cell is left empty.
    """
    grid[row][col] = EMPTY
    if start > SIZE:
        return False

    # Index 0 stands for an empty cell and is never available.
    available = [False] * start + [True] * (SIZE + 1 - start)
    for alt_row, alt_col in iter_neighbors(row, col):
        available[grid[alt_row][alt_col]] = False

    for color in COLORS:
        if available[color]:
            grid[row][col] = color
            return True
    return False


Result = collections.namedtuple("Result", "grid work rounds")


class Solution(object):
    """Stateful solve object.

    This is designed as a one-off object that walks the work list of a grid
    with an explicit cursor, and holds the results afterwards. The grid is
    mutated in place and never copied.

    Each call to `step` is one transition of the search: either the cell
    under the cursor gets its next color and the cursor advances, or the
    cell is cleared and the cursor retreats. At every point, cells before
    the cursor hold consistent colors, and cells after the cursor are
    empty. The cell under the cursor is empty after an advance, and still
    holds its last color after a retreat, so the next step resumes from
    that color plus one.
    """

    def __init__(self, grid, reporter):
        self._g = grid
        self._r = reporter
        self._work = build_work_list(grid)
        self._cursor = 0
        self._rounds = 0
        self._started = False

    @property
    def state(self):
        return State(cursor=self._cursor, work=self._work)

    @property
    def done(self):
        return self._cursor == len(self._work)

    def step(self):
        if self.done:
            raise RuntimeError("already solved")
        self._started = True
        self._rounds += 1

        cell = self._work[self._cursor]
        row, col = cell
        if next_color(self._g, row, col, self._g[row][col] + 1):
            self._r.pinning(cell, self._g[row][col])
            self._cursor += 1
            return

        # No color left for this cell. Nowhere to go back to means the
        # givens admit no solution at all.
        if self._cursor == 0:
            raise UnsolvableError(self._work)
        self._r.backtracking(cell)
        self._cursor -= 1

    def solve(self):
        if self._started:
            raise RuntimeError("already solved")
        self._started = True

        self._r.starting(self.state)
        while not self.done:
            self.step()
        self._r.ending(self.state)

        return Result(grid=self._g, work=self._work, rounds=self._rounds)


class AbstractSolver(object):
    """The thing that performs the actual solving work."""

    base_exception = Exception

    def __init__(self, reporter=None):
        if reporter is None:
            reporter = BaseReporter()
        self.reporter = reporter

    def solve(self, grid):
        """Take a grid with empty cells, and fill them in.

        This returns a result object if a solution is found. The exact return
        type is decided by the implementation. Subclasses should raise an
        exception derived from ``base_exception`` if no solution exists.
        """
        raise NotImplementedError


class Solver(AbstractSolver):
    """Chronological backtracking over the empty cells of a grid.
    """

    base_exception = SolverException

    def solve(self, grid):
        """Fill in every empty cell of ``grid`` in place.

        Empty cells are visited in row-major order, and each gets the
        smallest color that does not conflict with its row, column and
        block. The first solution found under this order is kept, so the
        same grid always yields the same solution.

        The return value is a tuple subclass with three public members:

        * `grid`: The grid passed in, now fully colored.
        * `work`: A list of the cells that were empty, in the order visited.
        * `rounds`: How many search steps were taken.

        `UnsolvableError` is raised if no solution exists. The grid then
        holds only its givens again.
        """
        solution = Solution(grid, self.reporter)
        return solution.solve()
