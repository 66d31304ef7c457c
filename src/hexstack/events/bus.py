from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button
EVENT_MOUSE_MOVE = "mouse_move"            # payload: x, y, dx, dy
EVENT_MOUSE_RELEASE = "mouse_release"      # payload: x, y, button
EVENT_DRAG_STARTED = "drag_started"        # payload: hand_index=int
EVENT_DRAG_ENDED = "drag_ended"            # payload: hand_index=int, target=(q,r)|None
EVENT_DROP_HIGHLIGHT = "drop_highlight"    # payload: target=(q,r)|None


# ============================================================================
# PLACEMENT & MERGING
# ============================================================================
EVENT_PLACE_REQUEST = "place_request"              # payload: q, r, hand_index
EVENT_PLACEMENT_REJECTED = "placement_rejected"    # payload: q, r, hand_index, reason=str
EVENT_TILE_PLACED = "tile_placed"                  # payload: q, r, hand_index, tiles=tuple[TileColor,...]
EVENT_MERGE_STEP = "merge_step"                    # payload: source=(q,r), target=(q,r), color=TileColor, count=int, points=int
EVENT_STACK_OVERFLOWED = "stack_overflowed"        # payload: q, r, height=int, bonus=int
EVENT_CASCADE_COMPLETE = "cascade_complete"        # payload: result=CascadeResult
EVENT_PLACEMENT_RESOLVED = "placement_resolved"    # payload: q, r, hand_index, result=CascadeResult


# ============================================================================
# HAND & SCORE
# ============================================================================
EVENT_HAND_CHANGED = "hand_changed"        # payload: slots=list[tuple[TileColor,...]]
EVENT_HAND_GENERATED = "hand_generated"    # payload: slots=list[tuple[TileColor,...]]
EVENT_SCORE_CHANGED = "score_changed"      # payload: score=int, delta=int


# ============================================================================
# ANIMATION
# ============================================================================
EVENT_ANIMATION_START = "animation_start"          # payload: kind=str, items=list, meta=...
EVENT_ANIMATION_COMPLETE = "animation_complete"    # payload: kind=str, items=list


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_STARTED = "game_started"                # payload: slots=list[tuple[TileColor,...]]
EVENT_GAME_MODE_CHANGED = "game_mode_changed"      # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_GAME_OVER = "game_over"                      # payload: score=int
EVENT_RESTART_REQUEST = "restart_request"          # payload: None
