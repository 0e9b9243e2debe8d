from puyo.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    GRID_HEIGHT,
    GRID_WIDTH,
    MIN_TILE_SIZE,
)


def compute_board_geometry(window_width: int, window_height: int):
    """Return (tile_size, start_x, start_y) for the board in window pixels.

    The board may not exceed the configured fraction of the window; start_x
    leaves the remaining width on the right for the queue preview.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN) * BOARD_MAX_HEIGHT_PCT
    tile_by_w = max_board_w / GRID_WIDTH
    tile_by_h = max_board_h / GRID_HEIGHT
    tile_size = int(min(tile_by_w, tile_by_h))
    if tile_size < MIN_TILE_SIZE:
        tile_size = MIN_TILE_SIZE
    total_width = GRID_WIDTH * tile_size
    start_x = (window_width * BOARD_MAX_WIDTH_PCT - total_width) / 2 + BOTTOM_MARGIN
    start_y = BOTTOM_MARGIN
    return tile_size, start_x, start_y


def cell_rect(x: int, y: int, tile_size: int, start_x: float, start_y: float):
    """Return (left, right, bottom, top) for grid cell (x, y).

    Grid rows grow downward while window y grows upward.
    """
    left = start_x + x * tile_size
    bottom = start_y + (GRID_HEIGHT - 1 - y) * tile_size
    return left, left + tile_size, bottom, bottom + tile_size
