class BaseReporter(object):
    """Delegate class to provide progress reporting for the solver.
    """
    def starting(self, state):
        """Called before the search actually starts.

        ``state`` holds the work list and a cursor at zero.
        """

    def pinning(self, cell, color):
        """Called after a color has been assigned to a cell.
        """

    def backtracking(self, cell):
        """Called after a cell ran out of colors and is cleared.

        The search moves back to the previous cell in the work list. This is
        NOT called when there is no previous cell; the search fails instead.
        """

    def ending(self, state):
        """Called before the search ends successfully.
        """
