from __future__ import annotations

from collections import deque
from typing import Callable, Iterator, List, NamedTuple, Optional, Set, Tuple

from puyo.components.color import Color, Unit
from puyo.constants import GRID_HEIGHT, GRID_WIDTH, POP_THRESHOLD


class Point(NamedTuple):
    """Grid coordinate; origin top-left, y grows downward."""
    x: int
    y: int

    def shifted(self, direction) -> "Point":
        dx, dy = direction.delta
        return Point(self.x + dx, self.y + dy)

    def neighbours(self) -> Tuple["Point", ...]:
        return (
            Point(self.x, self.y - 1),
            Point(self.x + 1, self.y),
            Point(self.x, self.y + 1),
            Point(self.x - 1, self.y),
        )


Cell = Optional[Unit]


class Grid:
    """Fixed WIDTH x HEIGHT matrix of cells.

    Out-of-bounds points read as occupied for collision checks and are
    ignored by placement and removal, so callers never branch on bounds.
    """

    WIDTH = GRID_WIDTH
    HEIGHT = GRID_HEIGHT

    def __init__(self) -> None:
        self._cells: List[List[Cell]] = [[None] * self.WIDTH for _ in range(self.HEIGHT)]

    def in_bounds(self, point: Point) -> bool:
        x, y = point
        return 0 <= x < self.WIDTH and 0 <= y < self.HEIGHT

    def get(self, point: Point) -> Cell:
        if not self.in_bounds(point):
            return None
        return self._cells[point[1]][point[0]]

    def is_free(self, point: Point) -> bool:
        return self.in_bounds(point) and self._cells[point[1]][point[0]] is None

    def is_occupied(self, point: Point) -> bool:
        return not self.is_free(point)

    def try_place(self, point: Point, unit: Unit) -> bool:
        if not self.is_free(point):
            return False
        self._cells[point[1]][point[0]] = unit
        return True

    def try_remove(self, point: Point) -> Cell:
        """Clear a cell and return what was there (None if out of bounds)."""
        if not self.in_bounds(point):
            return None
        x, y = point
        previous = self._cells[y][x]
        self._cells[y][x] = None
        return previous

    def try_fall(self, point: Point) -> bool:
        """Move the unit at ``point`` down exactly one row if the cell below is free."""
        unit = self.get(point)
        if unit is None:
            return False
        below = Point(point[0], point[1] + 1)
        if not self.is_free(below):
            return False
        self._cells[point[1]][point[0]] = None
        self._cells[below.y][below.x] = unit
        return True

    def pop(self, callback: Callable[[int], None]) -> List[List[Point]]:
        """Clear every 4-connected same-color group of POP_THRESHOLD or more.

        ``callback(size)`` fires once per removed group. Returns the removed
        groups, each sorted by (x, y).
        """
        visited: Set[Point] = set()
        groups: List[List[Point]] = []
        for y in range(self.HEIGHT):
            for x in range(self.WIDTH):
                origin = Point(x, y)
                if origin in visited or self._cells[y][x] is None:
                    continue
                group = self._flood(origin, visited)
                if len(group) >= POP_THRESHOLD:
                    groups.append(sorted(group))
        for group in groups:
            for point in group:
                self.try_remove(point)
            callback(len(group))
        return groups

    def _flood(self, origin: Point, visited: Set[Point]) -> List[Point]:
        color = self._cells[origin.y][origin.x].color
        visited.add(origin)
        group = [origin]
        frontier = deque([origin])
        while frontier:
            current = frontier.popleft()
            for neighbour in current.neighbours():
                if neighbour in visited:
                    continue
                unit = self.get(neighbour)
                # Asymmetric equality: a grey origin never collects neighbours.
                if unit is None or not unit.color == color:
                    continue
                visited.add(neighbour)
                group.append(neighbour)
                frontier.append(neighbour)
        return group

    def units(self) -> Iterator[Tuple[Point, Unit]]:
        for y, row in enumerate(self._cells):
            for x, unit in enumerate(row):
                if unit is not None:
                    yield Point(x, y), unit

    def rows(self) -> Tuple[Tuple[Optional[Color], ...], ...]:
        return tuple(
            tuple(unit.color if unit is not None else None for unit in row)
            for row in self._cells
        )

    def __str__(self) -> str:
        lines = []
        for row in self._cells:
            lines.append("".join(str(unit) if unit is not None else "   " for unit in row))
        return "\n".join(lines) + "\n"
