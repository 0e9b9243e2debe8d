from __future__ import annotations

import random

from puyo.components.color import Color, Pair, Unit
from puyo.components.palette import Palette


class PairRandomizer:
    """Uniform source of new pairs drawn from the palette's spawnable hues."""

    def __init__(self, palette: Palette, rng: random.Random | None = None):
        self.palette = palette
        self.rng = rng or random.Random()

    def random_color(self) -> Color:
        return self.rng.choice(self.palette.spawnable_colors())

    def random_unit(self) -> Unit:
        return Unit(self.random_color())

    def __call__(self) -> Pair:
        return Pair(self.random_unit(), self.random_unit())
