from __future__ import annotations

from typing import Iterable, Sequence

from esper import World

from hexstack.components.tile_color import TileColor
from hexstack.systems.board_ops import board_cells, set_stack
from hexstack.utils.game_state import get_hand

# Three colors never shared by adjacent cells: (q - r) mod 3 differs across every axial direction.
NON_MATCHING = (TileColor.RED, TileColor.GREEN, TileColor.BLUE)


def color_for(q: int, r: int) -> TileColor:
    return NON_MATCHING[(q - r) % 3]


def set_hand(world: World, slots: Sequence[Sequence[TileColor]]) -> None:
    """Overwrite the hand with explicit slots."""
    get_hand(world).slots = [list(slot) for slot in slots]


def fill_board(world: World, skip: Iterable[tuple[int, int]] = ()) -> None:
    """Occupy every cell with a single tile that matches none of its neighbors."""
    skipped = set(skip)
    for q, r in board_cells(world):
        if (q, r) in skipped:
            continue
        set_stack(world, q, r, [color_for(q, r)])
