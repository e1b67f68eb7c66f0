"""Solve a puzzle from the command line.

Reads a puzzle from FILE, or from stdin if no FILE is given, and writes the
solution to stdout.
"""

import argparse
import sys

from .formats import FormatError, read_grid, write_grid
from .reporters import BaseReporter
from .solvers import Solver, UnsolvableError


class VerboseReporter(BaseReporter):
    def __init__(self, stream):
        self.stream = stream
        self.pins = 0
        self.backtracks = 0

    def starting(self, state):
        print(f"starting({len(state.work)} empty cells)", file=self.stream)

    def pinning(self, cell, color):
        self.pins += 1
        print(f"  pinning({cell.row},{cell.col} = {color})", file=self.stream)

    def backtracking(self, cell):
        self.backtracks += 1
        print(f"  backtracking({cell.row},{cell.col})", file=self.stream)

    def ending(self, state):
        print(
            f"ending({self.pins} pins, {self.backtracks} backtracks)",
            file=self.stream,
        )


def _build_parser():
    parser = argparse.ArgumentParser(prog="sudokulib", description=__doc__)
    parser.add_argument(
        "puzzle",
        metavar="FILE",
        nargs="?",
        default="-",
        help="Puzzle to solve. Reads stdin if omitted or '-'.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Report search progress to stderr.",
    )
    return parser


def main(argv=None):
    options = _build_parser().parse_args(argv)

    try:
        if options.puzzle == "-":
            grid = read_grid(sys.stdin)
        else:
            with open(options.puzzle) as f:
                grid = read_grid(f)
    except FormatError as e:
        print(f"sudokulib: invalid puzzle: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"sudokulib: cannot read puzzle: {e}", file=sys.stderr)
        return 2

    if options.verbose:
        reporter = VerboseReporter(sys.stderr)
    else:
        reporter = BaseReporter()

    try:
        Solver(reporter).solve(grid)
    except UnsolvableError as e:
        print(f"sudokulib: {e}", file=sys.stderr)
        return 1

    write_grid(sys.stdout, grid)
    return 0


if __name__ == "__main__":
    sys.exit(main())
