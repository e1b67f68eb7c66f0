__all__ = [
    "AbstractSolver",
    "BaseReporter",
    "FormatError",
    "SolverException",
    "Solver",
    "Sudoku",
    "UnsolvableError",
    "__version__",
]

__version__ = "0.1.0.dev0"


from .formats import FormatError
from .puzzle import Sudoku
from .reporters import BaseReporter
from .solvers import AbstractSolver, Solver, SolverException, UnsolvableError
