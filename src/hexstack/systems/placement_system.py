from __future__ import annotations

import logging

from esper import World

from hexstack.components.game_state import GameMode
from hexstack.constants import OVERFLOW_BONUS
from hexstack.events.bus import (
    EventBus,
    EVENT_CASCADE_COMPLETE,
    EVENT_HAND_CHANGED,
    EVENT_MERGE_STEP,
    EVENT_PLACE_REQUEST,
    EVENT_PLACEMENT_REJECTED,
    EVENT_PLACEMENT_RESOLVED,
    EVENT_SCORE_CHANGED,
    EVENT_STACK_OVERFLOWED,
    EVENT_TILE_PLACED,
)
from hexstack.systems.board_ops import is_in_bounds, is_occupied, set_stack
from hexstack.systems.hand_ops import take_from_hand
from hexstack.systems.merge import CascadeResult, resolve_cascade
from hexstack.utils.game_state import get_game_state, get_hand, get_score

logger = logging.getLogger(__name__)


class PlacementSystem:
    """Moves a hand stack onto the grid and resolves the resulting merge cascade.

    Invalid requests are ignored; the only trace they leave is a
    placement_rejected event for presentation feedback.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_PLACE_REQUEST, self.on_place_request)

    def on_place_request(self, sender, **kwargs):
        q = kwargs.get('q')
        r = kwargs.get('r')
        hand_index = kwargs.get('hand_index')
        if q is None or r is None or hand_index is None:
            return
        try:
            q_int, r_int, index_int = int(q), int(r), int(hand_index)
        except (TypeError, ValueError):
            return
        self.place_tile(q_int, r_int, index_int)

    def place_tile(self, q: int, r: int, hand_index: int) -> CascadeResult | None:
        reason = self.rejection_reason(q, r, hand_index)
        if reason is not None:
            logger.debug("Ignoring placement of slot %s at (%s, %s): %s", hand_index, q, r, reason)
            self.event_bus.emit(EVENT_PLACEMENT_REJECTED, q=q, r=r, hand_index=hand_index, reason=reason)
            return None
        state = get_game_state(self.world)
        state.cascade_active = True
        try:
            tiles = take_from_hand(self.world, hand_index)
            set_stack(self.world, q, r, tiles)
            self.event_bus.emit(EVENT_TILE_PLACED, q=q, r=r, hand_index=hand_index, tiles=tuple(tiles))
            self.event_bus.emit(EVENT_HAND_CHANGED, slots=get_hand(self.world).snapshot())
            result = resolve_cascade(self.world, q, r)
            self._publish(result)
            # Refill and game-over evaluation run inside the lock as well.
            self.event_bus.emit(EVENT_PLACEMENT_RESOLVED, q=q, r=r, hand_index=hand_index, result=result)
        finally:
            state.cascade_active = False
        return result

    def rejection_reason(self, q: int, r: int, hand_index: int) -> str | None:
        state = get_game_state(self.world)
        if state.mode == GameMode.GAME_OVER:
            return "game_over"
        if state.cascade_active:
            return "cascade_active"
        if not is_in_bounds(self.world, q, r):
            return "out_of_bounds"
        if is_occupied(self.world, q, r):
            return "occupied"
        slots = get_hand(self.world).slots
        if not 0 <= hand_index < len(slots) or not slots[hand_index]:
            return "empty_slot"
        return None

    def _publish(self, result: CascadeResult) -> None:
        for step in result.steps:
            self.event_bus.emit(
                EVENT_MERGE_STEP,
                source=step.source,
                target=step.target,
                color=step.color,
                count=step.count,
                points=step.points,
            )
        if result.overflowed:
            q, r = result.origin
            self.event_bus.emit(EVENT_STACK_OVERFLOWED, q=q, r=r, height=result.overflow_height, bonus=OVERFLOW_BONUS)
        if result.points > 0:
            score = get_score(self.world)
            score.value += result.points
            self.event_bus.emit(EVENT_SCORE_CHANGED, score=score.value, delta=result.points)
        self.event_bus.emit(EVENT_CASCADE_COMPLETE, result=result)
