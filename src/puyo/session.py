"""Owned game context: event bus, world and core systems without any window.

The arcade entry point and the tests both drive the game through this
object, so the simulation stays free of I/O.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional

from puyo.components.board import Board
from puyo.components.color import Pair
from puyo.components.game_config import GameConfig
from puyo.components.game_state import GameState
from puyo.events.bus import (
    EventBus,
    EVENT_GAME_STEP,
    EVENT_KEY_PRESS_RAW,
    EVENT_KEY_RELEASE_RAW,
    EVENT_QUIT_REQUESTED,
    EVENT_TICK,
)
from puyo.systems.board import BoardSystem
from puyo.systems.clock import ClockSystem
from puyo.systems.input import InputSystem
from puyo.systems.resolution import ResolutionSystem
from puyo.utils.game_state import get_game_state
from puyo.utils.snapshot import RenderSnapshot, build_snapshot
from puyo.world import create_world

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class KeyEvent:
    key: str
    pressed: bool = True


class GameSession:
    def __init__(
        self,
        *,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
        randomizer: Optional[Callable[[], Pair]] = None,
    ):
        self.event_bus = EventBus()
        self.world = create_world(config=config, rng=rng)
        self.running = True
        self.clock_system = ClockSystem(self.world, self.event_bus)
        self.input_system = InputSystem(self.world, self.event_bus)
        self.board_system = BoardSystem(self.world, self.event_bus, randomizer=randomizer)
        self.resolution_system = ResolutionSystem(self.world, self.event_bus)
        self.event_bus.subscribe(EVENT_QUIT_REQUESTED, self._on_quit)

    @property
    def board(self) -> Board:
        return self.board_system.board

    @property
    def state(self) -> GameState:
        return get_game_state(self.world)

    def key_down(self, key: str) -> None:
        if self.running:
            self.event_bus.emit(EVENT_KEY_PRESS_RAW, key=key)

    def key_up(self, key: str) -> None:
        if self.running:
            self.event_bus.emit(EVENT_KEY_RELEASE_RAW, key=key)

    def advance(self, dt: float) -> None:
        """Feed a frame delta to the clock; steps fire when the cadence is due."""
        if self.running:
            self.event_bus.emit(EVENT_TICK, dt=dt)

    def step(self, event: KeyEvent | None = None) -> RenderSnapshot:
        """Handle one input event, or one tick deadline when ``event`` is None.

        Once the session has stopped, neither reaches the systems.
        """
        if event is None:
            if self.running:
                self.event_bus.emit(EVENT_GAME_STEP)
        elif event.pressed:
            self.key_down(event.key)
        else:
            self.key_up(event.key)
        return self.snapshot()

    def snapshot(self) -> RenderSnapshot:
        return build_snapshot(self.world)

    def _on_quit(self, sender, **kwargs):
        logger.info("quit requested via %s", kwargs.get("key"))
        self.running = False
