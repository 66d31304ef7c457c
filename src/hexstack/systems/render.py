from typing import Any

from esper import World

from hexstack.components.game_state import GameMode
from hexstack.events.bus import (EventBus, EVENT_TICK, EVENT_DROP_HIGHLIGHT, EVENT_SCORE_CHANGED,
                                 EVENT_GAME_STARTED)
from hexstack.rendering.board_renderer import BoardRenderer
from hexstack.rendering.context import RenderContext, build_render_context
from hexstack.rendering.hand_renderer import HandRenderer
from hexstack.systems.animation import KIND_SCORE_PULSE
from hexstack.systems.board_ops import get_palette
from hexstack.ui.layout import play_again_bounds
from hexstack.utils.game_state import get_game_state, get_score

SCORE_FONT_SIZE = 28
OVERLAY_COLOR = (0, 0, 0, 180)
BUTTON_COLOR = (76, 175, 80)


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window, *, input_system=None, animation_system=None):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.input_system = input_system
        self.animation_system = animation_system
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_DROP_HIGHLIGHT, self.on_drop_highlight)
        self.event_bus.subscribe(EVENT_SCORE_CHANGED, self.on_score_changed)
        self.event_bus.subscribe(EVENT_GAME_STARTED, self.on_game_started)
        self.highlight = None
        self.displayed_score = 0
        self._time = 0.0
        self._render_ctx: RenderContext | None = None
        self._last_cell_layout: dict[tuple[int, int], dict[str, Any]] = {}
        self._last_hand_layout: list[dict[str, Any]] = []
        self._board_renderer = BoardRenderer(self)
        self._hand_renderer = HandRenderer(self)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        try:
            self._time += float(dt)
        except (TypeError, ValueError):
            self._time += 1/60

    def on_drop_highlight(self, sender, **kwargs):
        self.highlight = kwargs.get('target')

    def on_score_changed(self, sender, **kwargs):
        score = kwargs.get('score')
        if score is not None:
            self.displayed_score = score

    def on_game_started(self, sender, **kwargs):
        self.highlight = None
        self.displayed_score = get_score(self.world).value

    @property
    def cell_layout(self) -> dict[tuple[int, int], dict[str, Any]]:
        return dict(self._last_cell_layout)

    @property
    def hand_layout(self) -> list[dict[str, Any]]:
        return list(self._last_hand_layout)

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        # Headless safeguard: without an active window skip draw calls but still build the layout cache.
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        ctx = build_render_context(
            self.world,
            self.window.width,
            self.window.height,
            highlight=self.highlight,
        )
        self._render_ctx = ctx
        palette = get_palette(self.world)
        self._board_renderer.render(arcade, ctx, palette, headless)
        self._hand_renderer.render(arcade, ctx, palette, headless)
        if headless:
            return
        self._draw_score(arcade)
        if self._overlay_visible():
            self._draw_game_over(arcade)

    def _draw_score(self, arcade):
        font_size = SCORE_FONT_SIZE
        pulse = self.animation_system.active(KIND_SCORE_PULSE) if self.animation_system else None
        if pulse is not None:
            # Swell then settle back over the pulse.
            swell = 1.0 - abs(2 * pulse.progress - 1.0)
            font_size = int(SCORE_FONT_SIZE * (1.0 + 0.25 * swell))
        arcade.draw_text(
            f"Score: {self.displayed_score}",
            self.window.width / 2,
            self.window.height - 50,
            arcade.color.WHITE,
            font_size,
            anchor_x="center",
            anchor_y="center",
            bold=True,
        )

    def _overlay_visible(self) -> bool:
        if get_game_state(self.world).mode != GameMode.GAME_OVER:
            return False
        if self.animation_system is None:
            return True
        return self.animation_system.modal_visible

    def _draw_game_over(self, arcade):
        w, h = self.window.width, self.window.height
        arcade.draw_lrbt_rectangle_filled(0, w, 0, h, OVERLAY_COLOR)
        arcade.draw_text("Game Over", w / 2, h / 2 + 60, arcade.color.WHITE, 32,
                         anchor_x="center", anchor_y="center", bold=True)
        arcade.draw_text(f"Final score: {self.displayed_score}", w / 2, h / 2 + 10, arcade.color.WHITE, 20,
                         anchor_x="center", anchor_y="center")
        left, right, bottom, top = play_again_bounds(w, h)
        arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, BUTTON_COLOR)
        arcade.draw_text("Play Again", (left + right) / 2, (bottom + top) / 2, arcade.color.WHITE, 18,
                         anchor_x="center", anchor_y="center", bold=True)
