from __future__ import annotations

import logging

from esper import World

from hexstack.components.game_state import GameMode
from hexstack.events.bus import (
    EventBus,
    EVENT_GAME_OVER,
    EVENT_GAME_STARTED,
    EVENT_HAND_GENERATED,
    EVENT_PLACEMENT_RESOLVED,
    EVENT_SCORE_CHANGED,
)
from hexstack.systems.board_ops import clear_board, empty_cells
from hexstack.systems.hand_ops import deal_new_hand
from hexstack.utils.game_state import get_game_state, get_hand, get_score, set_game_mode

logger = logging.getLogger(__name__)


class GameFlowSystem:
    """Owns the Playing/GameOver state machine and the hand refill cycle."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_PLACEMENT_RESOLVED, self._on_placement_resolved)

    def init_game(self) -> None:
        """Clear grid, score and hand, then deal a fresh hand; valid from any mode."""
        clear_board(self.world)
        state = get_game_state(self.world)
        state.cascade_active = False
        score = get_score(self.world)
        previous_score = score.value
        score.value = 0
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)
        self.event_bus.emit(EVENT_SCORE_CHANGED, score=0, delta=-previous_score)
        slots = self._deal()
        logger.info("New game started")
        self.event_bus.emit(EVENT_GAME_STARTED, slots=slots)

    def _on_placement_resolved(self, sender, **kwargs):
        hand = get_hand(self.world)
        if hand.is_spent():
            self._deal()
        self.check_game_over()

    def check_game_over(self) -> bool:
        """Enter GAME_OVER when the board is full and the hand still holds stacks."""
        state = get_game_state(self.world)
        if state.mode == GameMode.GAME_OVER:
            return True
        if empty_cells(self.world):
            return False
        if not get_hand(self.world).has_playable():
            return False
        set_game_mode(self.world, self.event_bus, GameMode.GAME_OVER)
        final_score = get_score(self.world).value
        logger.info("Game over with score %d", final_score)
        self.event_bus.emit(EVENT_GAME_OVER, score=final_score)
        return True

    def _deal(self) -> list:
        deal_new_hand(self.world)
        slots = get_hand(self.world).snapshot()
        self.event_bus.emit(EVENT_HAND_GENERATED, slots=slots)
        return slots
