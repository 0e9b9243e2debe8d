from dataclasses import dataclass


@dataclass(slots=True)
class Combo:
    """Resolution state that lives from a landing until the board is stable.

    chain_length: pop passes in this combo that removed at least one group.
    score: points accumulated by those passes, folded into the total at the end.
    chain_score_offset: 0 scores ``chain_length * size``; 1 scores ``(chain_length + 1) * size``.
    """
    chain_length: int = 0
    score: int = 0
    chain_score_offset: int = 0

    def register_pop(self, size: int) -> int:
        # Chain length is read before this pass increments it.
        points = (self.chain_length + self.chain_score_offset) * size
        self.score += points
        return points

    def advance_chain(self) -> int:
        self.chain_length += 1
        return self.chain_length
