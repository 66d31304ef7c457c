from __future__ import annotations

from typing import TYPE_CHECKING

from hexstack.components.tile_stack import TileStack
from hexstack.constants import HEX_SIZE, RENDER_LAYER_CAP, STACK_LAYER_OFFSET
from hexstack.utils.hex_math import hex_corners

if TYPE_CHECKING:
    from hexstack.components.tile_palette import TilePalette
    from hexstack.rendering.context import RenderContext
    from hexstack.systems.render import RenderSystem

SLOT_COLOR = (60, 64, 80)
SLOT_OUTLINE = (90, 96, 120)
HIGHLIGHT_COLOR = (255, 255, 255)
BURST_COLOR = (255, 215, 0)


class BoardRenderer:
    def __init__(self, render_system: RenderSystem, padding: int = 2):
        self._rs = render_system
        self._padding = padding

    def render(self, arcade, ctx: RenderContext, palette: TilePalette, headless: bool) -> None:
        rs = self._rs
        rs._last_cell_layout = {}
        size = HEX_SIZE - self._padding

        for coord, (ent, x, y) in ctx.cell_positions.items():
            try:
                stack = ctx.world.component_for_entity(ent, TileStack)
            except KeyError:
                stack = None
            height = stack.height if stack else 0
            rs._last_cell_layout[coord] = {
                "entity": ent,
                "center": (x, y),
                "height": height,
                "highlight": coord == ctx.highlight,
            }
            if headless:
                continue

            base = hex_corners(x, y, size)
            arcade.draw_polygon_filled(base, SLOT_COLOR)
            outline = HIGHLIGHT_COLOR if coord == ctx.highlight else SLOT_OUTLINE
            arcade.draw_polygon_outline(base, outline, 3 if coord == ctx.highlight else 1)

            if stack and stack.tiles:
                settle = ctx.settle_by_pos.get(coord)
                # Newly placed stacks grow in over the settle delay.
                scale = 0.6 + 0.4 * settle.progress if settle is not None else 1.0
                visible = stack.tiles[-RENDER_LAYER_CAP:]
                for layer, tile in enumerate(visible):
                    corners = hex_corners(x, y + layer * STACK_LAYER_OFFSET, size * scale)
                    arcade.draw_polygon_filled(corners, palette.background_for(tile))
                    arcade.draw_polygon_outline(corners, (0, 0, 0, 90), 1)
                top_y = y + (len(visible) - 1) * STACK_LAYER_OFFSET
                arcade.draw_text(
                    str(height), x, top_y, (255, 255, 255), 12,
                    anchor_x="center", anchor_y="center", bold=True,
                )

            burst = ctx.burst_by_pos.get(coord)
            if burst is not None:
                alpha = int(255 * (1.0 - burst.progress))
                radius = size * (1.0 + 2.0 * burst.progress)
                arcade.draw_circle_outline(x, y, radius, (*BURST_COLOR, alpha), 4)
