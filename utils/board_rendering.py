import cv2
import numpy as np

GRID_SIZE = 450
CELL_SIZE = GRID_SIZE // 9
MARGIN = 20
STATUS_HEIGHT = 40

IMAGE_WIDTH = GRID_SIZE + 2 * MARGIN
IMAGE_HEIGHT = GRID_SIZE + 2 * MARGIN + STATUS_HEIGHT

# BGR
BACKGROUND_COLOR = (255, 255, 255)
FILLED_COLOR = (250, 240, 230)
SELECTED_COLOR = (255, 200, 150)
LINE_COLOR = (0, 0, 0)
GIVEN_COLOR = (255, 0, 0)
SOLUTION_COLOR = (0, 150, 0)
STATUS_COLOR = (60, 60, 60)
SPINNER_COLOR = (0, 120, 0)


def cell_at(x, y):
    """Map window pixel coordinates to (row, col), or None outside the grid"""
    gx = x - MARGIN
    gy = y - MARGIN
    if not (0 <= gx < GRID_SIZE and 0 <= gy < GRID_SIZE):
        return None
    return gy // CELL_SIZE, gx // CELL_SIZE


def cell_origin(row, col):
    """Top-left pixel of a cell"""
    return MARGIN + col * CELL_SIZE, MARGIN + row * CELL_SIZE


def draw_board(board, selected=None, status='', solving=False, tick=0):
    """Render the board into a BGR image"""
    image = np.full((IMAGE_HEIGHT, IMAGE_WIDTH, 3), BACKGROUND_COLOR, dtype=np.uint8)

    # Cell backgrounds
    for i in range(9):
        for j in range(9):
            if (i, j) == selected:
                color = SELECTED_COLOR
            elif board.cells[i][j]:
                color = FILLED_COLOR
            else:
                continue
            x, y = cell_origin(i, j)
            cv2.rectangle(image, (x, y), (x + CELL_SIZE, y + CELL_SIZE), color, -1)

    # Grid lines, thick on box boundaries
    for i in range(10):
        thickness = 3 if i % 3 == 0 else 1
        offset = MARGIN + i * CELL_SIZE
        cv2.line(image, (offset, MARGIN), (offset, MARGIN + GRID_SIZE),
                 LINE_COLOR, thickness)
        cv2.line(image, (MARGIN, offset), (MARGIN + GRID_SIZE, offset),
                 LINE_COLOR, thickness)

    # Digits: blue for entered, green for solution
    for i in range(9):
        for j in range(9):
            digit = board.cells[i][j]
            if not digit:
                continue
            x, y = cell_origin(i, j)
            x += CELL_SIZE // 2
            y += CELL_SIZE // 2
            color = GIVEN_COLOR if board.givens[i][j] else SOLUTION_COLOR
            cv2.putText(image, digit, (x - 10, y + 10),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.8, color, 2)

    if solving:
        image = draw_spinner(image, tick)
        status = "Solving..."

    if status:
        cv2.putText(image, status, (MARGIN, IMAGE_HEIGHT - STATUS_HEIGHT // 2),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.6, STATUS_COLOR, 1)

    return image


def draw_spinner(image, tick):
    """Dim the board and draw a rotating arc over its centre"""
    overlay = np.zeros_like(image)
    result = cv2.addWeighted(image, 0.6, overlay, 0.4, 0)

    center = (MARGIN + GRID_SIZE // 2, MARGIN + GRID_SIZE // 2)
    start = (tick * 30) % 360
    cv2.ellipse(result, center, (30, 30), 0, start, start + 270,
                SPINNER_COLOR, 4)
    return result
