from dataclasses import dataclass
from typing import Callable

from puyo.components.color import Pair


@dataclass(slots=True)
class PairSource:
    """Board-entity component holding the randomizer that feeds the queue."""
    randomizer: Callable[[], Pair]

    def __call__(self) -> Pair:
        return self.randomizer()
