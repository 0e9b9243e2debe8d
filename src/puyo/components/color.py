from dataclasses import dataclass
from enum import Enum


class Color(Enum):
    """Unit colors.

    GREY is the sentinel: it is never spawned and never compares equal to
    anything, itself included, so grey units can never join a popping group.
    """
    GREY = "X"
    RED = "R"
    YELLOW = "Y"
    GREEN = "G"
    BLUE = "B"
    PURPLE = "P"

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return self is other and self is not Color.GREY

    __hash__ = Enum.__hash__

    @property
    def is_sentinel(self) -> bool:
        return self is Color.GREY

    def __str__(self) -> str:
        return self.value


ACTIVE_COLORS = (Color.RED, Color.YELLOW, Color.GREEN, Color.BLUE, Color.PURPLE)


@dataclass(frozen=True, slots=True, eq=False)
class Unit:
    """A single colored piece occupying one grid cell."""
    color: Color

    def __eq__(self, other):
        if not isinstance(other, Unit):
            return NotImplemented
        return self.color == other.color

    def __hash__(self) -> int:
        return hash(self.color)

    def __str__(self) -> str:
        return f"({self.color})"


@dataclass(frozen=True, slots=True)
class Pair:
    """Primary and secondary units controlled together while falling."""
    primary: Unit
    secondary: Unit

    @classmethod
    def of(cls, primary: Color, secondary: Color) -> "Pair":
        return cls(Unit(primary), Unit(secondary))

    @property
    def colors(self) -> tuple[Color, Color]:
        return self.primary.color, self.secondary.color

    def __str__(self) -> str:
        return f"{self.primary}{self.secondary}"
