from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Tuple

from puyo.components.grid import Point
from puyo.constants import SPAWN_COLUMN, SPAWN_ROW


class Direction(IntEnum):
    """Facing of the secondary unit relative to the anchor, clockwise order."""
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    def rotated(self, by: "Rotation") -> "Direction":
        return Direction((self + by) % 4)

    def opposite(self) -> "Direction":
        return Direction((self + 2) % 4)


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}


class Rotation(IntEnum):
    """Quarter turns applied to a facing."""
    NONE = 0
    CLOCKWISE = 1
    HALF_TURN = 2
    COUNTER_CLOCKWISE = 3


def _spawn_anchor() -> Point:
    return Point(SPAWN_COLUMN, SPAWN_ROW)


@dataclass(slots=True)
class PiecePosition:
    """Anchor (primary cell) plus the facing of the secondary cell."""
    anchor: Point = field(default_factory=_spawn_anchor)
    facing: Direction = Direction.UP

    @classmethod
    def spawn(cls) -> "PiecePosition":
        return cls()

    def pair_location(self) -> Point:
        return self.anchor.shifted(self.facing)

    def rotate(self, by: Rotation) -> None:
        self.facing = self.facing.rotated(by)

    def kickback(self) -> None:
        """Step the anchor away from the current facing."""
        self.anchor = self.anchor.shifted(self.facing.opposite())

    def copy(self) -> "PiecePosition":
        return replace(self)
