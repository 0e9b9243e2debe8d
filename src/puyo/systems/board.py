import logging
from typing import Callable, Optional

from esper import World

from puyo.components.board import Board
from puyo.components.color import Pair
from puyo.components.pair_source import PairSource
from puyo.components.position import Direction
from puyo.events.bus import (
    EventBus,
    EVENT_PIECE_MOVED,
    EVENT_PIECE_ROTATE_REQUEST,
    EVENT_PIECE_SHIFT_REQUEST,
)
from puyo.utils.game_state import get_config, get_game_state, get_palette
from puyo.utils.randomizer import PairRandomizer

logger = logging.getLogger(__name__)


class BoardSystem:
    """Owns the board entity and applies player moves while the pair is controllable."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        randomizer: Optional[Callable[[], Pair]] = None,
    ):
        self.world = world
        self.event_bus = event_bus
        if randomizer is None:
            randomizer = PairRandomizer(get_palette(world), rng=getattr(world, "random", None))
        config = get_config(world)
        source = PairSource(randomizer)
        self.board = Board(source, queue_length=config.queue_length)
        self.board_entity = self.world.create_entity(self.board, source)
        self.event_bus.subscribe(EVENT_PIECE_SHIFT_REQUEST, self.on_shift_request)
        self.event_bus.subscribe(EVENT_PIECE_ROTATE_REQUEST, self.on_rotate_request)

    def _accepts_input(self) -> bool:
        return get_game_state(self.world).controllable and self.board.active_pair is not None

    def on_shift_request(self, sender, **kwargs):
        direction = kwargs.get('direction')
        if direction is None or not self._accepts_input():
            return
        source = kwargs.get('source', 'player')
        success = self.board.shift(direction)
        if success and direction == Direction.DOWN and source == 'soft_drop':
            self._award_soft_drop()
        self._emit_moved('shift', success, source=source, direction=direction)

    def on_rotate_request(self, sender, **kwargs):
        rotation = kwargs.get('rotation')
        if rotation is None or not self._accepts_input():
            return
        success = self.board.rotate(rotation)
        self._emit_moved('rotate', success, source='player', rotation=rotation)

    def _award_soft_drop(self) -> None:
        points = get_config(self.world).soft_drop_points
        if points:
            get_game_state(self.world).score += points

    def _emit_moved(self, kind: str, success: bool, **extra) -> None:
        position = self.board.position
        logger.debug("%s %s -> anchor=%s facing=%s", kind, "ok" if success else "blocked",
                     position.anchor, position.facing.name)
        self.event_bus.emit(
            EVENT_PIECE_MOVED,
            kind=kind,
            success=success,
            anchor=position.anchor,
            facing=position.facing,
            **extra,
        )
