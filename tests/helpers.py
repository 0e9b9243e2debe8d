from __future__ import annotations

from itertools import cycle
from typing import Iterable, Sequence

from puyo.components.board import Board
from puyo.components.color import Color, Pair, Unit
from puyo.components.grid import Grid, Point


class DummyWindow:
    def __init__(self, width=480, height=640):
        self.width = width
        self.height = height


def fixed_randomizer(pairs: Sequence[Pair] | None = None):
    """Return a randomizer cycling through ``pairs`` (all red by default)."""
    source = cycle(pairs or [Pair.of(Color.RED, Color.RED)])
    return lambda: next(source)


def make_board(pairs: Sequence[Pair] | None = None, queue_length: int = 2) -> Board:
    return Board(fixed_randomizer(pairs), queue_length=queue_length)


def place(grid: Grid, cells: Iterable[tuple[int, int, Color]]) -> None:
    for x, y, color in cells:
        assert grid.try_place(Point(x, y), Unit(color)), f"cell {(x, y)} already taken"


def colors_at(grid: Grid, points: Iterable[tuple[int, int]]):
    result = []
    for x, y in points:
        unit = grid.get(Point(x, y))
        result.append(unit.color if unit is not None else None)
    return result
