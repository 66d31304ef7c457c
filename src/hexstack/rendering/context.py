from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from esper import World

from hexstack.components.hex_cell import HexCell
from hexstack.components.presentation_timer import PresentationTimer
from hexstack.systems.animation import KIND_OVERFLOW_BURST, KIND_SETTLE
from hexstack.ui.layout import cell_center
from hexstack.utils.hex_math import Coord


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped rendering data shared across renderer subcomponents."""

    world: World
    window_width: int
    window_height: int
    cell_positions: Dict[Coord, Tuple[int, float, float]]
    highlight: Coord | None = None
    settle_by_pos: Dict[Coord, PresentationTimer] = field(default_factory=dict)
    burst_by_pos: Dict[Coord, PresentationTimer] = field(default_factory=dict)


def build_render_context(
    world: World,
    window_width: int,
    window_height: int,
    *,
    highlight: Coord | None = None,
) -> RenderContext:
    """Populate a RenderContext for the current frame."""

    positions: Dict[Coord, Tuple[int, float, float]] = {}
    for entity, cell in world.get_component(HexCell):
        x, y = cell_center(cell.q, cell.r, window_width, window_height)
        positions[(cell.q, cell.r)] = (entity, x, y)

    settle_by_pos, burst_by_pos = collect_animation_maps(world)
    return RenderContext(
        world=world,
        window_width=window_width,
        window_height=window_height,
        cell_positions=positions,
        highlight=highlight,
        settle_by_pos=settle_by_pos,
        burst_by_pos=burst_by_pos,
    )


def collect_animation_maps(world: World):
    settle_by_pos: Dict[Coord, PresentationTimer] = {}
    burst_by_pos: Dict[Coord, PresentationTimer] = {}
    for _, timer in world.get_component(PresentationTimer):
        if timer.kind == KIND_SETTLE:
            for pos in timer.items:
                settle_by_pos[tuple(pos)] = timer
        elif timer.kind == KIND_OVERFLOW_BURST:
            for pos in timer.items:
                burst_by_pos[tuple(pos)] = timer
    return settle_by_pos, burst_by_pos
