from esper import World

from puyo.constants import GRID_HEIGHT, GRID_WIDTH, MIN_TILE_SIZE, PREVIEW_GAP
from puyo.events.bus import EventBus, EVENT_GROUPS_POPPED, EVENT_PAIR_SPAWNED, EVENT_TICK
from puyo.ui.layout import cell_rect, compute_board_geometry
from puyo.utils.game_state import get_palette
from puyo.utils.snapshot import build_snapshot

PADDING = 3
BOARD_BACKGROUND = (24, 24, 36)
BOARD_BORDER = (150, 150, 180)
TEXT_COLOR = (235, 235, 235)


class RenderSystem:
    """Draws the current snapshot with arcade.

    The window only needs ``width`` and ``height``; without an active arcade
    window (tests) ``process`` returns without drawing.
    """

    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self._time = 0.0
        self._flash_until = 0.0
        self.layout = compute_board_geometry(window.width, window.height)
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_GROUPS_POPPED, self.on_groups_popped)
        self.event_bus.subscribe(EVENT_PAIR_SPAWNED, self.on_pair_spawned)

    def notify_resize(self, width: int, height: int):
        self.layout = compute_board_geometry(width, height)

    def on_tick(self, sender, **kwargs):
        try:
            self._time += float(kwargs.get('dt', 1/60))
        except (TypeError, ValueError):
            self._time += 1/60

    def on_groups_popped(self, sender, **kwargs):
        # Brief border flash per chain step.
        self._flash_until = self._time + 0.15

    def on_pair_spawned(self, sender, **kwargs):
        self._flash_until = 0.0

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        try:
            arcade.get_window()
        except RuntimeError:
            return
        snapshot = build_snapshot(self.world)
        palette = get_palette(self.world)
        tile_size, start_x, start_y = self.layout
        board_right = start_x + GRID_WIDTH * tile_size
        board_top = start_y + GRID_HEIGHT * tile_size

        arcade.draw_lrbt_rectangle_filled(start_x, board_right, start_y, board_top, BOARD_BACKGROUND)
        border = (255, 255, 255) if self._time < self._flash_until else BOARD_BORDER
        arcade.draw_lrbt_rectangle_outline(start_x, board_right, start_y, board_top, border, 2)

        for y, row in enumerate(snapshot.cells):
            for x, color in enumerate(row):
                if color is None:
                    continue
                left, right, bottom, top = cell_rect(x, y, tile_size, start_x, start_y)
                arcade.draw_lrbt_rectangle_filled(
                    left + PADDING, right - PADDING, bottom + PADDING, top - PADDING,
                    palette.rgb_for(color),
                )

        self._render_queue(arcade, snapshot, palette, board_right + PREVIEW_GAP, board_top, tile_size)
        self._render_status(arcade, snapshot, board_right + PREVIEW_GAP, start_y)

    def _render_queue(self, arcade, snapshot, palette, left, top, tile_size):
        preview = max(MIN_TILE_SIZE, int(tile_size * 0.75))
        arcade.draw_text("NEXT", left, top - 16, TEXT_COLOR, 12)
        y = top - 24 - preview
        for primary, secondary in snapshot.queue:
            # Secondary drawn above the primary, matching the spawn facing.
            arcade.draw_lrbt_rectangle_filled(left, left + preview, y, y + preview, palette.rgb_for(primary))
            arcade.draw_lrbt_rectangle_filled(
                left, left + preview, y + preview, y + 2 * preview, palette.rgb_for(secondary),
            )
            y -= 2 * preview + PREVIEW_GAP

    def _render_status(self, arcade, snapshot, left, bottom):
        lines = [f"SCORE {snapshot.score}"]
        if snapshot.combo is not None:
            lines.append(f"CHAIN {snapshot.combo.chain_length} +{snapshot.combo.score}")
        if snapshot.dead:
            lines.append("GAME OVER")
        y = bottom + 18 * (len(lines) - 1)
        for line in lines:
            arcade.draw_text(line, left, y, TEXT_COLOR, 14)
            y -= 18
