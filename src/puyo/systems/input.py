from __future__ import annotations

from enum import Enum, auto
from typing import Any, Dict, Iterable, Mapping

from esper import World

from puyo.components.position import Direction, Rotation
from puyo.events.bus import (
    EventBus,
    EVENT_KEY_DOWN,
    EVENT_KEY_PRESS_RAW,
    EVENT_KEY_RELEASE_RAW,
    EVENT_KEY_UP,
    EVENT_PIECE_ROTATE_REQUEST,
    EVENT_PIECE_SHIFT_REQUEST,
    EVENT_QUIT_REQUESTED,
)
from puyo.utils.game_state import get_game_state
from puyo.utils.key_tracker import KeyTracker


class Action(Enum):
    SHIFT_LEFT = auto()
    SHIFT_RIGHT = auto()
    SOFT_DROP = auto()
    ROTATE_CLOCKWISE = auto()
    ROTATE_COUNTER_CLOCKWISE = auto()


DEFAULT_KEYMAP: Dict[str, Action] = {
    "left": Action.SHIFT_LEFT,
    "right": Action.SHIFT_RIGHT,
    "down": Action.SOFT_DROP,
    "up": Action.ROTATE_CLOCKWISE,
    "x": Action.ROTATE_CLOCKWISE,
    "z": Action.ROTATE_COUNTER_CLOCKWISE,
}
DEFAULT_QUIT_KEYS = frozenset({"q", "escape"})

_SHIFTS = {
    Action.SHIFT_LEFT: Direction.LEFT,
    Action.SHIFT_RIGHT: Direction.RIGHT,
    Action.SOFT_DROP: Direction.DOWN,
}
_ROTATIONS = {
    Action.ROTATE_CLOCKWISE: Rotation.CLOCKWISE,
    Action.ROTATE_COUNTER_CLOCKWISE: Rotation.COUNTER_CLOCKWISE,
}


class InputSystem:
    """Bridges raw key events to de-duplicated key events and piece requests."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        keymap: Mapping[str, Action] | None = None,
        quit_keys: Iterable[str] | None = None,
        tracker: KeyTracker | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.keymap = dict(DEFAULT_KEYMAP if keymap is None else keymap)
        self.quit_keys = frozenset(DEFAULT_QUIT_KEYS if quit_keys is None else quit_keys)
        self._tracker = tracker or KeyTracker()
        self.event_bus.subscribe(EVENT_KEY_PRESS_RAW, self._on_key_press_raw)
        self.event_bus.subscribe(EVENT_KEY_RELEASE_RAW, self._on_key_release_raw)

    @property
    def tracker(self) -> KeyTracker:
        return self._tracker

    def _on_key_press_raw(self, sender: Any, **payload: Any) -> None:
        key = payload.get("key")
        if not isinstance(key, str) or not self._tracker.press(key):
            return
        self.event_bus.emit(EVENT_KEY_DOWN, key=key)
        self.key_down(key)

    def _on_key_release_raw(self, sender: Any, **payload: Any) -> None:
        key = payload.get("key")
        if not isinstance(key, str) or not self._tracker.release(key):
            return
        self.event_bus.emit(EVENT_KEY_UP, key=key)
        self.key_up(key)

    def key_down(self, key: str) -> None:
        if key in self.quit_keys:
            self.event_bus.emit(EVENT_QUIT_REQUESTED, key=key)
            return
        action = self.keymap.get(key)
        if action is None:
            return
        state = get_game_state(self.world)
        if action is Action.SOFT_DROP:
            state.soft_drop_held = True
        if not state.controllable:
            return
        if action in _SHIFTS:
            source = "soft_drop" if action is Action.SOFT_DROP else "player"
            self.event_bus.emit(EVENT_PIECE_SHIFT_REQUEST, direction=_SHIFTS[action], source=source)
        else:
            self.event_bus.emit(EVENT_PIECE_ROTATE_REQUEST, rotation=_ROTATIONS[action])

    def key_up(self, key: str) -> None:
        if self.keymap.get(key) is Action.SOFT_DROP:
            get_game_state(self.world).soft_drop_held = False
