EXAMPLE_PUZZLE = [
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

ALLOWED_VALUES = ('', '1', '2', '3', '4', '5', '6', '7', '8', '9')


def empty_cells():
    return [['' for _ in range(9)] for _ in range(9)]


class Board:
    """Text state of the board as the user edits it.

    Cells hold '' for empty or a single digit character. Conversion to the
    integer grid used by SudokuSolver happens in to_grid / load_grid.
    """

    def __init__(self):
        self.cells = empty_cells()
        self.givens = [[False] * 9 for _ in range(9)]

    def set_cell(self, row, col, value):
        """Write value into a cell if it is '' or '1'-'9'"""
        if not (0 <= row < 9 and 0 <= col < 9):
            raise IndexError(f"Cell [{row},{col}] is outside the board")

        if value not in ALLOWED_VALUES:
            return False

        self.cells[row][col] = value
        self.givens[row][col] = value != ''
        return True

    def clear(self):
        self.cells = empty_cells()
        self.givens = [[False] * 9 for _ in range(9)]

    def load_example(self):
        self.clear()
        self.load_grid(EXAMPLE_PUZZLE)
        self.mark_givens()

    def to_grid(self):
        """Convert text cells to the 0-9 integer grid"""
        return [[0 if cell == '' else int(cell) for cell in row]
                for row in self.cells]

    def load_grid(self, grid):
        """Replace cells from an integer grid (0 becomes empty)"""
        self.cells = [[str(cell) if cell != 0 else '' for cell in row]
                      for row in grid]

    def mark_givens(self):
        """Treat every filled cell as entered by the user"""
        self.givens = [[cell != '' for cell in row] for row in self.cells]

    def format(self):
        """Plain text rendering with box separators"""
        lines = []
        for i, row in enumerate(self.cells):
            if i % 3 == 0 and i != 0:
                lines.append("------+-------+------")

            row_str = ""
            for j, cell in enumerate(row):
                if j % 3 == 0 and j != 0:
                    row_str += "| "
                row_str += (cell or '.') + " "

            lines.append(row_str.rstrip())
        return "\n".join(lines)
