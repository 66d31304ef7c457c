import random

from esper import World
from .events.bus import EventBus
from hexstack.components.board import Board
from hexstack.components.game_state import GameState, GameMode
from hexstack.components.hand import Hand
from hexstack.components.hex_cell import HexCell
from hexstack.components.score import Score
from hexstack.components.tile_color import TileColor
from hexstack.components.tile_palette import TilePalette
from hexstack.constants import GRID_RADIUS, HAND_SIZE
from hexstack.utils.hex_math import cells_in_radius


def create_world(
    event_bus: EventBus,
    initial_mode: GameMode = GameMode.PLAYING,
    *,
    radius: int = GRID_RADIUS,
    rng: random.Random | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    # Global game state resource: mode, score and hand share one entity.
    state_entity = world.create_entity()
    world.add_component(state_entity, GameState(mode=initial_mode))
    world.add_component(state_entity, Score())
    world.add_component(state_entity, Hand(slots=[[] for _ in range(HAND_SIZE)]))

    # Board descriptor plus one entity per in-bounds cell, created in canonical order.
    world.create_entity(Board(radius=radius))
    for q, r in cells_in_radius(radius):
        world.create_entity(HexCell(q=q, r=r))

    # Create single registry entity with display colors
    world.create_entity(
        TilePalette(
            colors={
                TileColor.RED:    (255, 77, 77),     # #FF4D4D
                TileColor.GREEN:  (76, 175, 80),     # #4CAF50
                TileColor.BLUE:   (33, 150, 243),    # #2196F3
                TileColor.AMBER:  (255, 193, 7),     # #FFC107
                TileColor.VIOLET: (156, 39, 176),    # #9C27B0
            },
        ),
    )
    return world
