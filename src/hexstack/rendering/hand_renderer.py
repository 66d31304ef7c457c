from __future__ import annotations

from typing import TYPE_CHECKING

from hexstack.constants import HAND_SLOT_RADIUS, HEX_SIZE, STACK_LAYER_OFFSET
from hexstack.ui.layout import hand_slot_center
from hexstack.utils.game_state import get_hand
from hexstack.utils.hex_math import hex_corners

if TYPE_CHECKING:
    from hexstack.components.tile_palette import TilePalette
    from hexstack.rendering.context import RenderContext
    from hexstack.systems.render import RenderSystem

TRAY_COLOR = (40, 42, 54)


class HandRenderer:
    """Draws the hand tray and the stack being dragged."""

    def __init__(self, render_system: RenderSystem):
        self._rs = render_system

    def render(self, arcade, ctx: RenderContext, palette: TilePalette, headless: bool) -> None:
        rs = self._rs
        slots = get_hand(ctx.world).slots
        dragging = rs.input_system.dragging if rs.input_system is not None else None
        drag_pos = rs.input_system.drag_pos if rs.input_system is not None else None
        rs._last_hand_layout = []
        for index, slot in enumerate(slots):
            x, y = hand_slot_center(index, ctx.window_width)
            rs._last_hand_layout.append({"index": index, "center": (x, y), "height": len(slot)})
            if headless:
                continue
            arcade.draw_circle_filled(x, y, HAND_SLOT_RADIUS, TRAY_COLOR)
            if not slot or index == dragging:
                continue
            self._draw_stack(arcade, slot, x, y, palette)

        if headless or dragging is None or drag_pos is None:
            return
        if 0 <= dragging < len(slots) and slots[dragging]:
            self._draw_stack(arcade, slots[dragging], drag_pos[0], drag_pos[1], palette)

    @staticmethod
    def _draw_stack(arcade, tiles, x: float, y: float, palette: TilePalette) -> None:
        for layer, tile in enumerate(tiles):
            corners = hex_corners(x, y + layer * STACK_LAYER_OFFSET, HEX_SIZE - 2)
            arcade.draw_polygon_filled(corners, palette.background_for(tile))
            arcade.draw_polygon_outline(corners, (0, 0, 0, 90), 1)
