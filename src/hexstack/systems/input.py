from hexstack.events.bus import (
    EventBus,
    EVENT_DRAG_ENDED,
    EVENT_DRAG_STARTED,
    EVENT_DROP_HIGHLIGHT,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_RELEASE,
    EVENT_PLACE_REQUEST,
    EVENT_RESTART_REQUEST,
)
from hexstack.components.game_state import GameMode
from hexstack.systems.board_ops import is_legal_drop
from hexstack.ui.layout import hand_slot_at, point_in_play_again, screen_to_axial
from hexstack.utils.game_state import get_game_state, get_hand

class InputSystem:
    """Translates pointer events into drags, drop highlights and placement requests."""
    def __init__(self, event_bus: EventBus, window, world, animation_system=None):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.animation_system = animation_system
        self.dragging: int | None = None
        self.drag_pos: tuple[float, float] | None = None
        self.highlight: tuple[int, int] | None = None
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_MOUSE_MOVE, self.on_mouse_move)
        self.event_bus.subscribe(EVENT_MOUSE_RELEASE, self.on_mouse_release)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        # Left button (1) only; other buttons fall through.
        if button != 1:
            return
        if self._mode() == GameMode.GAME_OVER:
            if self._modal_visible() and point_in_play_again(x, y, self.window.width, self.window.height):
                self.event_bus.emit(EVENT_RESTART_REQUEST)
            return
        index = hand_slot_at(x, y, self.window.width)
        if index is None:
            return
        slots = get_hand(self.world).slots
        if not slots[index]:
            return
        self.dragging = index
        self.drag_pos = (x, y)
        self.event_bus.emit(EVENT_DRAG_STARTED, hand_index=index)
        self._update_highlight(x, y)

    def on_mouse_move(self, sender, **kwargs):
        if self.dragging is None:
            return
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        self.drag_pos = (x, y)
        self._update_highlight(x, y)

    def on_mouse_release(self, sender, **kwargs):
        if self.dragging is None:
            return
        index = self.dragging
        x = kwargs.get('x')
        y = kwargs.get('y')
        target = self.drop_target(x, y) if x is not None and y is not None else None
        self.dragging = None
        self.drag_pos = None
        self._set_highlight(None)
        if target is not None:
            self.event_bus.emit(EVENT_PLACE_REQUEST, q=target[0], r=target[1], hand_index=index)
        self.event_bus.emit(EVENT_DRAG_ENDED, hand_index=index, target=target)

    def drop_target(self, x: float, y: float) -> tuple[int, int] | None:
        """Cell under (x, y) if it is a legal drop, else None."""
        q, r = screen_to_axial(x, y, self.window.width, self.window.height)
        if is_legal_drop(self.world, q, r):
            return (q, r)
        return None

    def _update_highlight(self, x: float, y: float) -> None:
        self._set_highlight(self.drop_target(x, y))

    def _set_highlight(self, target) -> None:
        if target == self.highlight:
            return
        self.highlight = target
        self.event_bus.emit(EVENT_DROP_HIGHLIGHT, target=target)

    def _mode(self) -> GameMode:
        return get_game_state(self.world).mode

    def _modal_visible(self) -> bool:
        if self.animation_system is None:
            return True
        return self.animation_system.modal_visible
