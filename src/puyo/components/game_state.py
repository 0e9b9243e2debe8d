"""Game state resource: score, death flag and the optional combo."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from puyo.components.combo import Combo
from puyo.constants import DEFAULT_TICK_TIME


class ComboStateError(RuntimeError):
    """Raised when a combo is started twice or ended when none exists."""


class GamePhase(Enum):
    CONTROLLABLE = auto()
    RESOLVING = auto()
    DEAD = auto()


@dataclass(slots=True)
class GameState:
    """Singleton component driving the tick state machine.

    ``gravity_active`` and ``soft_drop_held`` only influence tick cadence.
    """
    tick_time: float = DEFAULT_TICK_TIME
    dead: bool = False
    score: int = 0
    combo: Optional[Combo] = None
    gravity_active: bool = False
    soft_drop_held: bool = False

    @property
    def phase(self) -> GamePhase:
        if self.dead:
            return GamePhase.DEAD
        if self.combo is not None:
            return GamePhase.RESOLVING
        return GamePhase.CONTROLLABLE

    @property
    def controllable(self) -> bool:
        return self.phase is GamePhase.CONTROLLABLE

    def begin_combo(self, chain_score_offset: int = 0) -> Combo:
        if self.combo is not None:
            raise ComboStateError("A combo is already in progress")
        self.combo = Combo(chain_score_offset=chain_score_offset)
        return self.combo

    def end_combo(self) -> Combo:
        """Fold the combo score into the running total and clear it."""
        if self.combo is None:
            raise ComboStateError("No combo in progress to end")
        combo = self.combo
        self.score += combo.score
        self.combo = None
        self.gravity_active = False
        return combo
