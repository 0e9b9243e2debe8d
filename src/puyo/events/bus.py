from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                    # payload: dt=float (frame delta in seconds)
EVENT_GAME_STEP = "game_step"          # payload: None (one tick deadline reached)
EVENT_QUIT_REQUESTED = "quit_requested"  # payload: key=str


# ============================================================================
# INPUT
# ============================================================================
EVENT_KEY_PRESS_RAW = "key_press_raw"      # payload: key=str (may repeat while held)
EVENT_KEY_RELEASE_RAW = "key_release_raw"  # payload: key=str
EVENT_KEY_DOWN = "key_down"                # payload: key=str (once per physical press)
EVENT_KEY_UP = "key_up"                    # payload: key=str


# ============================================================================
# ACTIVE PAIR
# ============================================================================
EVENT_PIECE_SHIFT_REQUEST = "piece_shift_request"    # payload: direction=Direction, source=str
EVENT_PIECE_ROTATE_REQUEST = "piece_rotate_request"  # payload: rotation=Rotation
EVENT_PIECE_MOVED = "piece_moved"                    # payload: kind=str, success=bool, anchor=Point, facing=Direction, source=str
EVENT_PIECE_LANDED = "piece_landed"                  # payload: anchor=Point, facing=Direction
EVENT_PAIR_SPAWNED = "pair_spawned"                  # payload: pair=Pair, queue=list[Pair]


# ============================================================================
# RESOLUTION
# ============================================================================
EVENT_GRAVITY_APPLIED = "gravity_applied"  # payload: None
EVENT_GROUPS_POPPED = "groups_popped"      # payload: groups=list[list[Point]], sizes=list[int], chain_length=int, combo_score=int
EVENT_COMBO_COMPLETE = "combo_complete"    # payload: chain_length=int, score=int, total_score=int
EVENT_GAME_OVER = "game_over"              # payload: score=int
