"""
pixel <-> cell math for the board widget; no Qt in here so it can be
tested on its own
"""
from ..board import BOARD_SIZE

# default board area, matches the original 300x300 window
BOARD_PIXELS = 300


def board_square(width, height):
    """
    largest centered square in a width x height area: (x, y, side)
    """
    side = min(width, height)
    return (width - side) / 2, (height - side) / 2, side


def cell_size(width, height, size=BOARD_SIZE):
    return board_square(width, height)[2] / size


def cell_at(x, y, width, height, size=BOARD_SIZE):
    """
    map a point to (row, col); None outside the grid
    """
    ox, oy, side = board_square(width, height)
    if side <= 0:
        return None
    # only inside grid
    if not (ox <= x < ox + side and oy <= y < oy + side):
        return None
    cell = side / size
    col = int((x - ox) // cell); row = int((y - oy) // cell)
    # clamp float edge cases to valid range
    row = max(0, min(row, size - 1)); col = max(0, min(col, size - 1))
    return row, col


def cell_center(row, col, width, height, size=BOARD_SIZE):
    ox, oy, side = board_square(width, height)
    cell = side / size
    return ox + col * cell + cell / 2, oy + row * cell + cell / 2
