"""Origin-centric merge cascade.

Only the stack that just grew can newly match a neighbor, so the cascade
repeatedly pulls matching top runs from the origin's neighbors into the origin
until nothing changes or the origin overflows.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from esper import World

from hexstack.components.tile_color import TileColor
from hexstack.constants import (
    CASCADE_ITERATION_LIMIT,
    MAX_STACK_HEIGHT,
    MERGE_POINTS_PER_TILE,
    OVERFLOW_BONUS,
)
from hexstack.systems.board_ops import clear_stack, get_stack
from hexstack.utils.hex_math import Coord, neighbors

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MergeStep:
    source: Coord
    target: Coord
    color: TileColor
    count: int
    points: int


@dataclass(slots=True)
class CascadeResult:
    origin: Coord
    points: int = 0
    steps: List[MergeStep] = field(default_factory=list)
    overflowed: bool = False
    overflow_height: int = 0
    iterations: int = 0
    cap_reached: bool = False

    @property
    def merged(self) -> bool:
        return bool(self.steps)


def resolve_cascade(world: World, q: int, r: int, *, max_iterations: int = CASCADE_ITERATION_LIMIT) -> CascadeResult:
    """Run the merge cascade rooted at (q, r), mutating the grid in place."""
    origin = (q, r)
    result = CascadeResult(origin=origin)
    changed = True
    while changed and result.iterations < max_iterations:
        changed = False
        current = get_stack(world, q, r)
        if current is None or not current.tiles:
            break
        result.iterations += 1
        top = current.top
        for nq, nr in neighbors(q, r):
            neighbor = get_stack(world, nq, nr)
            if neighbor is None or neighbor.top != top:
                continue
            match_count = neighbor.top_run_length(top)
            if match_count <= 0:
                continue
            del neighbor.tiles[-match_count:]
            current.tiles.extend([top] * match_count)
            if not neighbor.tiles:
                clear_stack(world, nq, nr)
            points = match_count * MERGE_POINTS_PER_TILE
            result.points += points
            result.steps.append(MergeStep(source=(nq, nr), target=origin, color=top, count=match_count, points=points))
            changed = True
        # Overflow wins over any further merging, including on the first pass.
        if current.height >= MAX_STACK_HEIGHT:
            result.overflow_height = current.height
            clear_stack(world, q, r)
            result.points += OVERFLOW_BONUS
            result.overflowed = True
            return result
    if changed and result.iterations >= max_iterations:
        result.cap_reached = True
        logger.warning(
            "Cascade at %s hit the %d iteration cap while still merging",
            origin,
            max_iterations,
        )
    return result
