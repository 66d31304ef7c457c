from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from esper import World

from hexstack.components.board import Board
from hexstack.components.hex_cell import HexCell
from hexstack.components.tile_color import TileColor
from hexstack.components.tile_palette import TilePalette
from hexstack.components.tile_stack import TileStack
from hexstack.utils.hex_math import Coord, cells_in_radius, in_bounds

GridSnapshot = Dict[Coord, Tuple[TileColor, ...]]


def get_palette(world: World) -> TilePalette:
    for _, palette in world.get_component(TilePalette):
        return palette
    raise RuntimeError("TilePalette definitions not found")


def board_radius(world: World) -> int | None:
    for _, board in world.get_component(Board):
        return board.radius
    return None


def board_cells(world: World) -> List[Coord]:
    """In-bounds cells in canonical order."""
    radius = board_radius(world)
    if radius is None:
        return []
    return cells_in_radius(radius)


def get_entity_at(world: World, q: int, r: int) -> int | None:
    for entity, cell in world.get_component(HexCell):
        if cell.q == q and cell.r == r:
            return entity
    return None


def is_in_bounds(world: World, q: int, r: int) -> bool:
    radius = board_radius(world)
    return radius is not None and in_bounds(q, r, radius)


def get_stack(world: World, q: int, r: int) -> TileStack | None:
    entity = get_entity_at(world, q, r)
    if entity is None:
        return None
    try:
        return world.component_for_entity(entity, TileStack)
    except KeyError:
        return None


def is_occupied(world: World, q: int, r: int) -> bool:
    return get_stack(world, q, r) is not None


def is_legal_drop(world: World, q: int, r: int) -> bool:
    """True when (q, r) is an in-bounds, unoccupied cell."""
    if not is_in_bounds(world, q, r):
        return False
    return not is_occupied(world, q, r)


def set_stack(world: World, q: int, r: int, tiles: Iterable[TileColor]) -> TileStack | None:
    """Store tiles at (q, r); an empty sequence clears the cell instead."""
    entity = get_entity_at(world, q, r)
    if entity is None:
        return None
    tile_list = list(tiles)
    if not tile_list:
        clear_stack(world, q, r)
        return None
    stack = TileStack(tiles=tile_list)
    world.add_component(entity, stack)
    return stack


def clear_stack(world: World, q: int, r: int) -> List[TileColor]:
    """Remove the stack at (q, r) and return its tiles."""
    entity = get_entity_at(world, q, r)
    if entity is None:
        return []
    try:
        stack = world.component_for_entity(entity, TileStack)
    except KeyError:
        return []
    world.remove_component(entity, TileStack)
    return list(stack.tiles)


def clear_board(world: World) -> None:
    for entity in [entity for entity, _ in world.get_component(TileStack)]:
        world.remove_component(entity, TileStack)


def empty_cells(world: World) -> List[Coord]:
    occupied = {coord for coord in grid_snapshot(world)}
    return [coord for coord in board_cells(world) if coord not in occupied]


def grid_snapshot(world: World) -> GridSnapshot:
    """Occupied cells mapped to their tiles, bottom to top."""
    snapshot: GridSnapshot = {}
    for entity, stack in world.get_component(TileStack):
        cell: HexCell = world.component_for_entity(entity, HexCell)
        if stack.tiles:
            snapshot[(cell.q, cell.r)] = tuple(stack.tiles)
    return snapshot
