from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from esper import World

from puyo.components.color import Color
from puyo.components.game_state import GamePhase
from puyo.utils.game_state import get_board, get_game_state

CellRows = Tuple[Tuple[Optional[Color], ...], ...]


@dataclass(frozen=True, slots=True)
class ComboView:
    chain_length: int
    score: int


@dataclass(frozen=True, slots=True)
class RenderSnapshot:
    """Everything a render sink needs for one frame; no references into the world."""

    cells: CellRows
    queue: Tuple[Tuple[Color, Color], ...]
    score: int
    combo: Optional[ComboView]
    dead: bool
    phase: GamePhase

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    @property
    def height(self) -> int:
        return len(self.cells)

    def color_at(self, x: int, y: int) -> Optional[Color]:
        return self.cells[y][x]


def build_snapshot(world: World) -> RenderSnapshot:
    state = get_game_state(world)
    board = get_board(world)
    combo = None
    if state.combo is not None:
        combo = ComboView(chain_length=state.combo.chain_length, score=state.combo.score)
    return RenderSnapshot(
        cells=board.grid.rows(),
        queue=tuple(pair.colors for pair in board.queue),
        score=state.score,
        combo=combo,
        dead=state.dead,
        phase=state.phase,
    )


def format_snapshot(snapshot: RenderSnapshot) -> str:
    """Text rendering: queue line, grid rows of ``(R)`` cells, status lines."""
    lines = ["QUEUE: " + "".join(f"({a})({b}) | " for a, b in snapshot.queue)]
    for row in snapshot.cells:
        lines.append("".join(f"({color})" if color is not None else "   " for color in row))
    lines.append(f"SCORE: {snapshot.score}")
    if snapshot.combo is not None:
        lines.append(f"CHAIN: {snapshot.combo.chain_length} (+{snapshot.combo.score})")
    if snapshot.dead:
        lines.append("GAME OVER")
    return "\n".join(lines)
