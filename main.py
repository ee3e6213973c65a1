import argparse
import logging
import queue
import threading

import cv2

from models.board import Board
from models.sudoku_solver import SudokuSolver
from utils.board_rendering import cell_at, draw_board

logger = logging.getLogger(__name__)

NO_SOLUTION_MESSAGE = "No solution exists for this puzzle!"

# cv2.waitKeyEx codes, GTK and Windows variants
KEY_LEFT = (65361, 2424832)
KEY_UP = (65362, 2490368)
KEY_RIGHT = (65363, 2555904)
KEY_DOWN = (65364, 2621440)
KEY_DELETE = (65535, 3014656)
KEY_BACKSPACE = (8, 127)
KEY_ENTER = (10, 13)
KEY_ESC = 27

MOVES = {}
for _codes, _delta in ((KEY_LEFT, (0, -1)), (KEY_UP, (-1, 0)),
                       (KEY_RIGHT, (0, 1)), (KEY_DOWN, (1, 0))):
    for _code in _codes:
        MOVES[_code] = _delta


class SudokuApp:
    def __init__(self, solve_delay=0.5, window_name='Sudoku Solver'):
        self.board = Board()
        self.sudoku_solver = SudokuSolver()
        self.solve_delay = solve_delay
        self.window_name = window_name

        self.selected = (0, 0)
        self.status = ''
        self.solving = False
        self.worker = None
        self.results = queue.Queue()
        self.running = False

    def run(self):
        cv2.namedWindow(self.window_name)
        cv2.setMouseCallback(self.window_name, self.on_mouse)

        print("Sudoku Solver Started!")
        print("Controls:")
        print("  Click / arrows - Select a cell")
        print("  1-9 - Enter digit, 0 / Backspace / Delete - Clear cell")
        print("  SPACE / Enter - Solve puzzle")
        print("  'c' - Clear board")
        print("  'e' - Load example")
        print("  'q' / Esc - Quit")

        self.running = True
        tick = 0
        while self.running:
            self.poll_result()

            frame = draw_board(self.board, self.selected, self.status,
                               self.solving, tick)
            cv2.imshow(self.window_name, frame)
            tick += 1

            key = cv2.waitKeyEx(30)
            if key != -1:
                self.handle_key(key)

        cv2.destroyAllWindows()

    def on_mouse(self, event, x, y, flags, param):
        if event != cv2.EVENT_LBUTTONDOWN or self.solving:
            return

        cell = cell_at(x, y)
        if cell is not None:
            self.selected = cell

    def handle_key(self, key):
        """Dispatch a key code from cv2.waitKeyEx"""
        if key in (ord('q'), KEY_ESC):
            self.running = False
            return

        # Board is locked while the solver runs
        if self.solving:
            return

        if key in MOVES:
            self.move_selection(*MOVES[key])
        elif ord('1') <= key <= ord('9'):
            self.enter_value(chr(key))
        elif key in (ord('0'), ord('.')) or key in KEY_BACKSPACE + KEY_DELETE:
            self.enter_value('')
        elif key == ord(' ') or key in KEY_ENTER:
            self.start_solve()
        elif key == ord('c'):
            self.board.clear()
            self.status = ''
        elif key == ord('e'):
            self.board.load_example()
            self.status = 'Example loaded'

    def move_selection(self, d_row, d_col):
        row, col = self.selected
        self.selected = (min(max(row + d_row, 0), 8), min(max(col + d_col, 0), 8))

    def enter_value(self, value):
        row, col = self.selected
        if not self.board.set_cell(row, col, value):
            return

        grid = self.board.to_grid()
        self.status = 'Solved!' if self.sudoku_solver.is_solved(grid) else ''

    def start_solve(self):
        """Solve the current board on a background thread after solve_delay"""
        if self.solving:
            return

        grid = self.board.to_grid()
        self.print_grid("Solving:")

        self.solving = True
        self.worker = threading.Timer(self.solve_delay, self._solve_worker, args=(grid,))
        self.worker.daemon = True
        self.worker.start()

    def _solve_worker(self, grid):
        try:
            solution = self.sudoku_solver.solved_copy(grid)
        except Exception:
            logger.exception("Solver crashed")
            solution = None

        self.results.put(solution)

    def poll_result(self):
        """Apply a finished solve to the board, if there is one"""
        try:
            solution = self.results.get_nowait()
        except queue.Empty:
            return

        self.solving = False
        self.worker = None

        if solution is None:
            print(NO_SOLUTION_MESSAGE)
            self.status = NO_SOLUTION_MESSAGE
            return

        self.board.load_grid(solution)
        self.status = 'Solved!'
        self.print_grid("Solution:")

    def print_grid(self, title="Grid:"):
        """Print grid to console"""
        print(f"\n{title}")
        print(self.board.format())


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Interactive Sudoku solver")
    parser.add_argument('--example', action='store_true',
                        help="Start with the example puzzle loaded")
    parser.add_argument('--delay', type=float, default=0.5,
                        help="Seconds to wait before solving starts")
    parser.add_argument('--verbose', action='store_true',
                        help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=logging.DEBUG if args.verbose else logging.INFO
    )

    # Create and run the app
    app = SudokuApp(solve_delay=args.delay)
    if args.example:
        app.board.load_example()
    app.run()


if __name__ == "__main__":
    main()
