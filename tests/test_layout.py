from puyo.constants import GRID_HEIGHT, GRID_WIDTH, MIN_TILE_SIZE
from puyo.events.bus import EVENT_GROUPS_POPPED, EVENT_PAIR_SPAWNED
from puyo.session import GameSession
from puyo.systems.render import RenderSystem
from puyo.ui.layout import cell_rect, compute_board_geometry

from tests.helpers import DummyWindow


def test_board_fits_window():
    tile_size, start_x, start_y = compute_board_geometry(480, 640)
    assert tile_size * GRID_WIDTH <= 480 * 0.6
    assert start_y + tile_size * GRID_HEIGHT <= 640
    assert start_x >= 0


def test_tiny_window_keeps_minimum_tile():
    tile_size, _, _ = compute_board_geometry(50, 50)
    assert tile_size == MIN_TILE_SIZE


def test_top_row_drawn_highest():
    top = cell_rect(0, 0, 40, 10, 20)
    bottom = cell_rect(0, GRID_HEIGHT - 1, 40, 10, 20)
    assert bottom == (10, 50, 20, 60)
    assert top[2] > bottom[2]
    assert cell_rect(3, 5, 40, 10, 20)[0] == 130


def test_render_system_tracks_resize_and_flash():
    session = GameSession()
    render = RenderSystem(session.world, session.event_bus, DummyWindow())
    assert render.layout == compute_board_geometry(480, 640)
    render.notify_resize(800, 600)
    assert render.layout == compute_board_geometry(800, 600)

    session.advance(0.01)
    session.event_bus.emit(EVENT_GROUPS_POPPED, groups=[], sizes=[], chain_length=1, combo_score=0)
    assert render._flash_until > render._time
    session.event_bus.emit(EVENT_PAIR_SPAWNED, pair=None, queue=[])
    assert render._flash_until == 0.0
