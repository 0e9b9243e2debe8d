import logging

from esper import World

from puyo.components.position import Direction
from puyo.events.bus import (
    EventBus,
    EVENT_COMBO_COMPLETE,
    EVENT_GAME_OVER,
    EVENT_GAME_STEP,
    EVENT_GRAVITY_APPLIED,
    EVENT_GROUPS_POPPED,
    EVENT_PAIR_SPAWNED,
    EVENT_PIECE_LANDED,
    EVENT_PIECE_MOVED,
)
from puyo.utils.game_state import get_board, get_config, get_game_state, get_pair_source

logger = logging.getLogger(__name__)


class ResolutionSystem:
    """Advances the tick state machine by one step per EVENT_GAME_STEP.

    Controllable: the pair descends one row; a blocked descent lands it and
    opens a combo. Resolving: gravity first, then a pop pass, and once both
    are idle the combo is folded into the score and the next pair spawns.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_GAME_STEP, self.on_step)

    def on_step(self, sender, **kwargs):
        self.step()

    def step(self) -> None:
        state = get_game_state(self.world)
        if state.dead:
            return
        if state.combo is None:
            self._descend()
        else:
            self._resolve()

    def _descend(self) -> None:
        board = get_board(self.world)
        state = get_game_state(self.world)
        if board.shift(Direction.DOWN):
            position = board.position
            self.event_bus.emit(
                EVENT_PIECE_MOVED,
                kind='shift',
                success=True,
                anchor=position.anchor,
                facing=position.facing,
                source='gravity',
                direction=Direction.DOWN,
            )
            return
        position = board.position
        board.release_active_pair()
        state.begin_combo(get_config(self.world).chain_score_offset)
        logger.debug("pair landed at %s facing %s", position.anchor, position.facing.name)
        self.event_bus.emit(EVENT_PIECE_LANDED, anchor=position.anchor, facing=position.facing)

    def _resolve(self) -> None:
        board = get_board(self.world)
        state = get_game_state(self.world)
        if board.gravity():
            state.gravity_active = True
            self.event_bus.emit(EVENT_GRAVITY_APPLIED)
            return
        state.gravity_active = False
        combo = state.combo
        if board.pop(combo):
            groups = [list(group) for group in board.last_popped]
            logger.debug("chain %d popped %d group(s)", combo.chain_length, len(groups))
            self.event_bus.emit(
                EVENT_GROUPS_POPPED,
                groups=groups,
                sizes=[len(group) for group in groups],
                chain_length=combo.chain_length,
                combo_score=combo.score,
            )
            return
        finished = state.end_combo()
        logger.info("combo finished: chain=%d score=%d total=%d",
                    finished.chain_length, finished.score, state.score)
        self.event_bus.emit(
            EVENT_COMBO_COMPLETE,
            chain_length=finished.chain_length,
            score=finished.score,
            total_score=state.score,
        )
        self._spawn_next()

    def _spawn_next(self) -> None:
        board = get_board(self.world)
        state = get_game_state(self.world)
        if board.try_spawn_next_pair(get_pair_source(self.world)):
            self.event_bus.emit(EVENT_PAIR_SPAWNED, pair=board.active_pair, queue=list(board.queue))
            return
        state.dead = True
        logger.info("spawn blocked, game over with score %d", state.score)
        self.event_bus.emit(EVENT_GAME_OVER, score=state.score)
