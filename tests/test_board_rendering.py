import numpy as np

from models.board import Board
from utils.board_rendering import (
    CELL_SIZE, GRID_SIZE, IMAGE_HEIGHT, IMAGE_WIDTH, MARGIN, SELECTED_COLOR,
    cell_at, cell_origin, draw_board
)


def test_cell_at_maps_corners():
    assert cell_at(MARGIN, MARGIN) == (0, 0)
    assert cell_at(MARGIN + GRID_SIZE - 1, MARGIN + GRID_SIZE - 1) == (8, 8)
    assert cell_at(MARGIN + 4 * CELL_SIZE + 1, MARGIN + 2 * CELL_SIZE + 1) == (2, 4)


def test_cell_at_outside_grid():
    assert cell_at(0, 0) is None
    assert cell_at(MARGIN + GRID_SIZE, MARGIN) is None
    assert cell_at(MARGIN, IMAGE_HEIGHT - 1) is None


def test_cell_origin_round_trips_through_cell_at():
    x, y = cell_origin(5, 7)
    assert cell_at(x + 1, y + 1) == (5, 7)


def test_draw_board_shape():
    board = Board()
    board.load_example()

    image = draw_board(board, selected=(0, 2), status="Example loaded")

    assert image.shape == (IMAGE_HEIGHT, IMAGE_WIDTH, 3)
    assert image.dtype == np.uint8


def test_draw_board_highlights_selection():
    board = Board()
    image = draw_board(board, selected=(4, 4))

    x, y = cell_origin(4, 4)
    center = image[y + 5, x + 5]
    assert tuple(int(v) for v in center) == SELECTED_COLOR


def test_solving_dims_the_board():
    board = Board()
    idle = draw_board(board)
    busy = draw_board(board, solving=True, tick=3)

    assert busy.shape == idle.shape
    assert not np.array_equal(idle, busy)
    # Background is dimmed away from pure white
    assert busy[MARGIN + 5, MARGIN + 5].max() < 255
