from .formats import format_grid, parse_grid, read_grid
from .solvers import Solver


class Sudoku(object):
    """A single puzzle and, once solved, its solution.

    The problem grid is copied on construction; the caller's grid is never
    touched. Solving happens on the copy.
    """

    def __init__(self, problem, solver=None):
        if solver is None:
            solver = Solver()
        self._grid = [list(row) for row in problem]
        self._solver = solver
        self._solved = False

    @classmethod
    def from_file(cls, path, solver=None):
        with open(path) as f:
            problem = read_grid(f)
        return cls(problem, solver=solver)

    @classmethod
    def from_text(cls, text, solver=None):
        return cls(parse_grid(text), solver=solver)

    @property
    def is_solved(self):
        return self._solved

    def solve(self):
        """Solve the puzzle. Does nothing if it has been solved already.
        """
        if self._solved:
            return
        self._solver.solve(self._grid)
        self._solved = True

    @property
    def solution(self):
        if not self._solved:
            raise RuntimeError("solve the sudoku first")
        return [list(row) for row in self._grid]

    def __str__(self):
        if not self._solved:
            return "Unsolved Sudoku"
        return format_grid(self._grid)
