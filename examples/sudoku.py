import sys

import sudokulib
from sudokulib.formats import write_grid


class Reporter(sudokulib.BaseReporter):
    def __init__(self):
        self.pins = 0
        self.backtracks = 0

    def starting(self, state):
        print(f"starting({len(state.work)} empty cells)")

    def pinning(self, cell, color):
        self.pins += 1

    def backtracking(self, cell):
        self.backtracks += 1

    def ending(self, state):
        print(f"ending({self.pins} pins, {self.backtracks} backtracks)")


def main():
    clues = [
        [5, 3, 0, 0, 7, 0, 0, 0, 0],
        [6, 0, 0, 1, 9, 5, 0, 0, 0],
        [0, 9, 8, 0, 0, 0, 0, 6, 0],
        [8, 0, 0, 0, 6, 0, 0, 0, 3],
        [4, 0, 0, 8, 0, 3, 0, 0, 1],
        [7, 0, 0, 0, 2, 0, 0, 0, 6],
        [0, 6, 0, 0, 0, 0, 2, 8, 0],
        [0, 0, 0, 4, 1, 9, 0, 0, 5],
        [0, 0, 0, 0, 8, 0, 0, 7, 9],
    ]
    print("Clues:")
    for row in clues:
        print(" ".join(str(color) for color in row))

    solver = sudokulib.Solver(Reporter())
    result = solver.solve(clues)

    print("Solution:")
    write_grid(sys.stdout, result.grid)


if __name__ == "__main__":
    main()
