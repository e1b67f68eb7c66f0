import pytest

from sudokulib import BaseReporter


class TestReporter(BaseReporter):
    def __init__(self):
        self._indent = 0

    def backtracking(self, cell):
        self._indent -= 1
        assert self._indent >= 0
        print(" " * self._indent, "Back ", cell, sep="")

    def pinning(self, cell, color):
        print(" " * self._indent, "Pin  ", cell, " = ", color, sep="")
        self._indent += 1

    def ending(self, state):
        assert self._indent == state.cursor == len(state.work)


@pytest.fixture()
def reporter():
    return TestReporter()
