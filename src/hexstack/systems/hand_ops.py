from __future__ import annotations

import random
from typing import List, Sequence

from esper import World

from hexstack.components.tile_color import TileColor
from hexstack.constants import HAND_SIZE, HAND_STACK_MAX, HAND_STACK_MIN
from hexstack.systems.board_ops import get_palette
from hexstack.utils.game_state import get_hand


def roll_stack(rng: random.Random, colors: Sequence[TileColor]) -> List[TileColor]:
    """A single-color stack of random height within the hand limits."""
    count = rng.randint(HAND_STACK_MIN, HAND_STACK_MAX)
    color = rng.choice(list(colors))
    return [color] * count


def roll_hand(rng: random.Random, colors: Sequence[TileColor], size: int = HAND_SIZE) -> List[List[TileColor]]:
    return [roll_stack(rng, colors) for _ in range(size)]


def deal_new_hand(world: World) -> List[List[TileColor]]:
    """Replace every hand slot with a fresh stack drawn from the spawnable palette."""
    hand = get_hand(world)
    rng = getattr(world, "random", None) or random.Random()
    hand.slots = roll_hand(rng, get_palette(world).spawnable_colors())
    return hand.slots


def take_from_hand(world: World, hand_index: int) -> List[TileColor]:
    """Empty the slot at hand_index and return its tiles ([] for invalid or played slots)."""
    hand = get_hand(world)
    if not 0 <= hand_index < len(hand.slots):
        return []
    tiles = hand.slots[hand_index]
    hand.slots[hand_index] = []
    return tiles
