import pytest

from models.board import EXAMPLE_PUZZLE, Board


def test_new_board_is_empty():
    board = Board()

    assert not any(any(row) for row in board.cells)
    assert board.to_grid() == [[0] * 9 for _ in range(9)]


@pytest.mark.parametrize("value", ['1', '5', '9', ''])
def test_set_cell_accepts_digits_and_blank(value):
    board = Board()

    assert board.set_cell(2, 3, value)
    assert board.cells[2][3] == value


@pytest.mark.parametrize("value", ['0', 'a', '12', ' ', 7, None])
def test_set_cell_rejects_other_input(value):
    board = Board()
    board.set_cell(2, 3, '4')

    assert not board.set_cell(2, 3, value)
    assert board.cells[2][3] == '4'


def test_set_cell_outside_board_raises():
    board = Board()

    with pytest.raises(IndexError):
        board.set_cell(9, 0, '1')


def test_set_cell_tracks_givens():
    board = Board()
    board.set_cell(0, 0, '3')
    assert board.givens[0][0]

    board.set_cell(0, 0, '')
    assert not board.givens[0][0]


def test_load_example_and_clear():
    board = Board()
    board.load_example()

    assert board.to_grid() == EXAMPLE_PUZZLE
    assert board.cells[0][:3] == ['5', '3', '']
    assert board.givens[0][0] and not board.givens[0][2]

    board.clear()
    assert not any(any(row) for row in board.cells)
    assert not any(any(row) for row in board.givens)


def test_load_grid_keeps_givens():
    board = Board()
    board.set_cell(0, 0, '1')
    solution = [[1] * 9 for _ in range(9)]

    board.load_grid(solution)

    assert board.cells[8][8] == '1'
    assert board.givens[0][0]
    assert not board.givens[8][8]


def test_format():
    board = Board()
    board.load_example()
    lines = board.format().splitlines()

    assert len(lines) == 11
    assert lines[0] == "5 3 . | . 7 . | . . ."
    assert lines[3] == "------+-------+------"
