from __future__ import annotations

from collections import deque
from typing import Callable, Deque, List, Optional

from puyo.components.color import Pair
from puyo.components.combo import Combo
from puyo.components.grid import Grid, Point
from puyo.components.position import Direction, PiecePosition, Rotation

Randomizer = Callable[[], Pair]


class BoardInvariantError(RuntimeError):
    """The active pair's primary cell could not be lifted or redrawn."""


class Board:
    """Grid, active pair, its position and the lookahead queue.

    Every position change lifts the active pair off the grid, mutates the
    position and redraws it, so the grid always shows exactly the current
    placement of the pair.
    """

    def __init__(self, randomizer: Randomizer, queue_length: int = 2):
        self.grid = Grid()
        self.queue: Deque[Pair] = deque(randomizer() for _ in range(queue_length))
        self.active_pair: Optional[Pair] = None
        self.position = PiecePosition.spawn()
        self.last_popped: List[List[Point]] = []
        if not self.try_spawn_next_pair(randomizer):
            raise BoardInvariantError("Spawn failed on an empty grid")

    # -- active pair bookkeeping -------------------------------------------

    def _draw_active_pair(self) -> None:
        pair = self.active_pair
        if pair is None:
            return
        if not self.grid.try_place(self.position.anchor, pair.primary):
            raise BoardInvariantError(f"Primary could not be placed at {self.position.anchor}")
        self.grid.try_place(self.position.pair_location(), pair.secondary)

    def _clear_active_pair(self) -> None:
        if self.active_pair is None:
            return
        if self.grid.try_remove(self.position.anchor) is None:
            raise BoardInvariantError(f"Primary missing at {self.position.anchor}")
        # The secondary may legitimately be above the playfield.
        self.grid.try_remove(self.position.pair_location())

    def _reposition(self, mutate: Callable[[PiecePosition], Optional[PiecePosition]]) -> bool:
        """Lift the pair, let ``mutate`` propose a position, redraw.

        ``mutate`` returns the new position or None to reject. The pair is
        redrawn on every exit path.
        """
        if self.active_pair is None:
            return False
        self._clear_active_pair()
        try:
            candidate = mutate(self.position.copy())
            if candidate is None:
                return False
            self.position = candidate
            return True
        finally:
            self._draw_active_pair()

    # -- player / tick operations ------------------------------------------

    def shift(self, direction: Direction) -> bool:
        def mutate(position: PiecePosition) -> Optional[PiecePosition]:
            anchor = position.anchor.shifted(direction)
            if self.grid.is_occupied(anchor) or self.grid.is_occupied(anchor.shifted(position.facing)):
                return None
            position.anchor = anchor
            return position

        return self._reposition(mutate)

    def rotate(self, rotation: Rotation) -> bool:
        # Facing UP on row 0 puts the secondary off the board, which counts as
        # occupied, so the kickback moves the anchor down a row.
        def mutate(position: PiecePosition) -> Optional[PiecePosition]:
            position.rotate(rotation)
            if self.grid.is_occupied(position.pair_location()):
                position.kickback()
                if self.grid.is_occupied(position.anchor):
                    return None
            return position

        return self._reposition(mutate)

    def try_spawn_next_pair(self, randomizer: Randomizer) -> bool:
        """Bring the queue front into play; False (queue untouched) if the spawn cell is taken."""
        spawn = PiecePosition.spawn()
        if self.grid.is_occupied(spawn.anchor):
            return False
        self.position = spawn
        self.active_pair = self.queue.popleft()
        self.queue.append(randomizer())
        self._draw_active_pair()
        return True

    def release_active_pair(self) -> Optional[Pair]:
        """Leave the landed pair on the grid as ordinary units."""
        pair = self.active_pair
        self.active_pair = None
        return pair

    def gravity(self) -> bool:
        """One bottom-up sweep of single-row falls; True if anything moved."""
        moved = False
        for y in range(Grid.HEIGHT - 1, -1, -1):
            for x in range(Grid.WIDTH):
                if self.grid.try_fall(Point(x, y)):
                    moved = True
        return moved

    def pop(self, combo: Combo) -> bool:
        self.last_popped = self.grid.pop(combo.register_pop)
        if not self.last_popped:
            return False
        combo.advance_chain()
        return True

    def __str__(self) -> str:
        queue = "".join(f"{pair} | " for pair in self.queue)
        return f"QUEUE: {queue}\n{self.grid}"
