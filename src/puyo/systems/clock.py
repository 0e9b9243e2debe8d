from __future__ import annotations

from esper import World

from puyo.components.game_config import GameConfig
from puyo.components.game_state import GameState
from puyo.events.bus import EventBus, EVENT_GAME_STEP, EVENT_TICK
from puyo.utils.game_state import get_config, get_game_state


def current_tick_interval(state: GameState, config: GameConfig) -> float:
    """Seconds until the next game step given the current state."""
    if state.dead:
        return config.dead_tick_time
    if state.gravity_active:
        return config.fast_tick_time
    if state.soft_drop_held and state.controllable:
        return config.fast_tick_time
    return state.tick_time


class ClockSystem:
    """Turns frame deltas into game steps at the current cadence.

    At most one EVENT_GAME_STEP is emitted per EVENT_TICK; the accumulator
    restarts after each step.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self._elapsed = 0.0
        self.steps = 0
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 0.0)
        try:
            self._elapsed += max(0.0, float(dt))
        except (TypeError, ValueError):
            return
        interval = current_tick_interval(get_game_state(self.world), get_config(self.world))
        if self._elapsed < interval:
            return
        self._elapsed = 0.0
        self.steps += 1
        self.event_bus.emit(EVENT_GAME_STEP)
