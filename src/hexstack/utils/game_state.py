from __future__ import annotations

from esper import World

from hexstack.components.game_state import GameMode, GameState
from hexstack.components.hand import Hand
from hexstack.components.score import Score
from hexstack.events.bus import EVENT_GAME_MODE_CHANGED, EventBus


def get_game_state(world: World) -> GameState:
    """Return the shared GameState component, creating it if absent."""
    for _, state in world.get_component(GameState):
        return state
    world.create_entity(GameState())
    return list(world.get_component(GameState))[0][1]


def get_hand(world: World) -> Hand:
    for _, hand in world.get_component(Hand):
        return hand
    raise RuntimeError("Hand component not found")


def get_score(world: World) -> Score:
    for _, score in world.get_component(Score):
        return score
    raise RuntimeError("Score component not found")


def set_game_mode(world: World, event_bus: EventBus, mode: GameMode) -> None:
    """Update the global game mode and emit a change event when it differs."""

    state = get_game_state(world)
    previous_mode = state.mode
    if previous_mode == mode:
        return
    state.mode = mode
    event_bus.emit(
        EVENT_GAME_MODE_CHANGED,
        previous_mode=previous_mode,
        new_mode=mode,
    )
