from dataclasses import dataclass

from puyo.constants import (
    DEAD_TICK_TIME,
    DEFAULT_CHAIN_SCORE_OFFSET,
    DEFAULT_PALETTE_SIZE,
    DEFAULT_QUEUE_LENGTH,
    DEFAULT_SOFT_DROP_POINTS,
    DEFAULT_TICK_TIME,
    FAST_TICK_TIME,
)


@dataclass(slots=True)
class GameConfig:
    """Per-game tunables stored next to the GameState."""
    palette_size: int = DEFAULT_PALETTE_SIZE
    queue_length: int = DEFAULT_QUEUE_LENGTH
    tick_time: float = DEFAULT_TICK_TIME
    fast_tick_time: float = FAST_TICK_TIME
    dead_tick_time: float = DEAD_TICK_TIME
    chain_score_offset: int = DEFAULT_CHAIN_SCORE_OFFSET
    soft_drop_points: int = DEFAULT_SOFT_DROP_POINTS

    def __post_init__(self) -> None:
        if self.palette_size not in (4, 5):
            raise ValueError(f"palette_size must be 4 or 5, got {self.palette_size}")
        if self.queue_length < 1:
            raise ValueError(f"queue_length must be at least 1, got {self.queue_length}")
        for name in ("tick_time", "fast_tick_time", "dead_tick_time"):
            value = float(getattr(self, name))
            if value <= 0.0:
                raise ValueError(f"{name} must be positive, got {value}")
            setattr(self, name, value)
        if self.chain_score_offset not in (0, 1):
            raise ValueError(f"chain_score_offset must be 0 or 1, got {self.chain_score_offset}")
        if self.soft_drop_points < 0:
            raise ValueError(f"soft_drop_points cannot be negative, got {self.soft_drop_points}")
