"""Entry point for the falling-pair puzzle.

Sets up the game session (world, event bus, core systems) and an Arcade window
that forwards keys and frame deltas and draws the snapshot each frame.
"""
import logging

from arcade import Window, run, set_background_color, color, key

from puyo.constants import WINDOW_HEIGHT, WINDOW_WIDTH
from puyo.session import GameSession
from puyo.systems.render import RenderSystem

KEY_NAMES = {
    key.LEFT: "left",
    key.RIGHT: "right",
    key.DOWN: "down",
    key.UP: "up",
    key.X: "x",
    key.Z: "z",
    key.Q: "q",
    key.ESCAPE: "escape",
}


class PuyoWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, "Puyo")
        self.set_update_rate(1/60)
        self.session = GameSession()
        self.render_system = RenderSystem(self.session.world, self.session.event_bus, self)
        set_background_color(color.BLACK)

    def on_resize(self, width: int, height: int):
        self.render_system.notify_resize(width, height)
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.session.advance(delta_time)
        if not self.session.running:
            self.close()

    def on_key_press(self, symbol: int, modifiers: int):
        name = KEY_NAMES.get(symbol)
        if name is not None:
            self.session.key_down(name)

    def on_key_release(self, symbol: int, modifiers: int):
        name = KEY_NAMES.get(symbol)
        if name is not None:
            self.session.key_up(name)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    PuyoWindow()
    run()

if __name__ == "__main__":
    main()
