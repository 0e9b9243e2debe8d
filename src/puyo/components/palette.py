from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from puyo.components.color import ACTIVE_COLORS, Color

RGB = Tuple[int, int, int]

DEFAULT_RGB: Dict[Color, RGB] = {
    Color.GREY:   (128, 128, 128),
    Color.RED:    (220, 60, 60),
    Color.YELLOW: (230, 200, 60),
    Color.GREEN:  (70, 180, 90),
    Color.BLUE:   (70, 110, 220),
    Color.PURPLE: (160, 80, 200),
}


@dataclass(slots=True)
class Palette:
    """Canonical color definitions stored on a single entity.

    ``spawnable`` is the active subset the randomizer draws from. The sentinel
    color can be drawn but never spawned.
    """
    colors: Dict[Color, RGB] = field(default_factory=lambda: dict(DEFAULT_RGB))
    spawnable: List[Color] = field(default_factory=list)

    def __post_init__(self) -> None:
        candidates = self.spawnable or list(ACTIVE_COLORS)
        self.spawnable = self._filter(candidates) or self._filter(ACTIVE_COLORS)

    def _filter(self, colors: Iterable[Color]) -> List[Color]:
        # Membership by identity: the sentinel is never equal to itself.
        seen: List[Color] = []
        for color in colors:
            if color.is_sentinel or color not in self.colors:
                continue
            if any(color is existing for existing in seen):
                continue
            seen.append(color)
        return seen

    def rgb_for(self, color: Color) -> RGB:
        return self.colors[color]

    def spawnable_colors(self) -> List[Color]:
        return list(self.spawnable)

    def set_spawnable(self, colors: Iterable[Color]) -> None:
        filtered = self._filter(colors)
        if not filtered:
            raise ValueError("Palette needs at least one spawnable active color")
        self.spawnable = filtered

    def set_active_count(self, count: int) -> List[Color]:
        """Restrict spawning to the first ``count`` active hues (4 or 5)."""
        if count not in (4, 5):
            raise ValueError(f"Palette size must be 4 or 5, got {count}")
        self.set_spawnable(ACTIVE_COLORS[:count])
        return self.spawnable_colors()
