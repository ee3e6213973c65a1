import logging

logger = logging.getLogger(__name__)

DIGITS = range(1, 10)


class SudokuSolver:
    def __init__(self):
        pass

    def is_valid(self, grid, row, col, num):
        """Check if placing num at (row, col) is valid"""
        # Check row
        for j in range(9):
            if grid[row][j] == num:
                return False

        # Check column
        for i in range(9):
            if grid[i][col] == num:
                return False

        # Check 3x3 box
        start_row = (row // 3) * 3
        start_col = (col // 3) * 3

        for i in range(start_row, start_row + 3):
            for j in range(start_col, start_col + 3):
                if grid[i][j] == num:
                    return False

        return True

    def find_empty_cell(self, grid):
        """Return (row, col) of the first 0 in row-major order, or None"""
        for i in range(9):
            for j in range(9):
                if grid[i][j] == 0:
                    return i, j
        return None

    def solve(self, grid):
        """Solve Sudoku in place using backtracking.

        Returns True when grid has been completed. On False the grid is
        left partially filled and should be discarded by the caller.

        Givens that already clash are rejected before searching; the
        search alone would only prove such a grid unsolvable after
        exhausting every assignment of the empty cells.
        """
        if not self.is_valid_sudoku(grid):
            logger.warning("The grid contains duplicates in a row/column/box")
            return False
        return self._solve_helper(grid)

    def _solve_helper(self, grid):
        """Recursive helper for solving"""
        empty = self.find_empty_cell(grid)
        if empty is None:
            return True

        row, col = empty
        for num in DIGITS:
            if self.is_valid(grid, row, col, num):
                grid[row][col] = num

                if self._solve_helper(grid):
                    return True

                grid[row][col] = 0  # Backtrack

        return False

    def solved_copy(self, grid):
        """Solve a copy of grid, leaving the original untouched"""
        solution = [row[:] for row in grid]
        empty_count = sum(row.count(0) for row in solution)

        solved = self.solve(solution)
        logger.debug("Search over %d empty cells %s", empty_count,
                     "succeeded" if solved else "failed")
        if solved:
            return solution
        return None

    def is_valid_sudoku(self, grid):
        """Check if the current grid state is valid"""
        for i in range(9):
            for j in range(9):
                if grid[i][j] != 0:
                    num = grid[i][j]
                    grid[i][j] = 0  # Temporarily remove

                    if not self.is_valid(grid, i, j, num):
                        grid[i][j] = num  # Restore
                        return False

                    grid[i][j] = num  # Restore
        return True

    def is_solved(self, grid):
        """Check every row, column and box holds each digit exactly once"""
        expected = set(DIGITS)
        for i in range(9):
            if set(grid[i]) != expected:
                return False
            if {grid[j][i] for j in range(9)} != expected:
                return False

        for box_row in range(0, 9, 3):
            for box_col in range(0, 9, 3):
                box = {grid[i][j]
                       for i in range(box_row, box_row + 3)
                       for j in range(box_col, box_col + 3)}
                if box != expected:
                    return False
        return True
