import random

from hexstack.components.tile_color import TileColor
from hexstack.events.bus import (
    EVENT_DRAG_ENDED,
    EVENT_DROP_HIGHLIGHT,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_RELEASE,
    EVENT_TICK,
)
from hexstack.session import GameSession
from hexstack.systems.animation import AnimationSystem
from hexstack.systems.input import InputSystem
from hexstack.ui.layout import cell_center, hand_slot_center, play_again_bounds, screen_to_axial
from tests.helpers import fill_board, set_hand

R, G, B = TileColor.RED, TileColor.GREEN, TileColor.BLUE


class DummyWindow:
    width = 480
    height = 720


def _setup(with_animation=False):
    session = GameSession(rng=random.Random(9))
    animation = AnimationSystem(session.world, session.event_bus) if with_animation else None
    window = DummyWindow()
    input_system = InputSystem(session.event_bus, window, session.world, animation_system=animation)
    return session, input_system, window


def _press(bus, pos):
    bus.emit(EVENT_MOUSE_PRESS, x=pos[0], y=pos[1], button=1)


def test_layout_round_trips_cells():
    for q, r in [(0, 0), (2, -1), (-2, 2), (1, 1)]:
        x, y = cell_center(q, r, 480, 720)
        assert screen_to_axial(x, y, 480, 720) == (q, r)


def test_drag_from_hand_to_cell_places_stack():
    session, input_system, window = _setup()
    set_hand(session.world, [[R, R], [G], [B]])
    bus = session.event_bus
    highlights = []
    ended = []
    bus.subscribe(EVENT_DROP_HIGHLIGHT, lambda s, **k: highlights.append(k['target']))
    bus.subscribe(EVENT_DRAG_ENDED, lambda s, **k: ended.append(k['target']))

    _press(bus, hand_slot_center(0, window.width))
    assert input_system.dragging == 0
    target = cell_center(0, 0, window.width, window.height)
    bus.emit(EVENT_MOUSE_MOVE, x=target[0], y=target[1])
    assert input_system.highlight == (0, 0)
    bus.emit(EVENT_MOUSE_RELEASE, x=target[0], y=target[1], button=1)

    assert session.grid() == {(0, 0): (R, R)}
    assert session.hand() == [(), (G,), (B,)]
    assert input_system.dragging is None
    assert highlights == [(0, 0), None]
    assert ended == [(0, 0)]


def test_drop_on_occupied_cell_does_not_place():
    session, input_system, window = _setup()
    set_hand(session.world, [[R], [G], [B]])
    session.place_tile(0, 0, 0)
    bus = session.event_bus
    _press(bus, hand_slot_center(1, window.width))
    target = cell_center(0, 0, window.width, window.height)
    bus.emit(EVENT_MOUSE_MOVE, x=target[0], y=target[1])
    assert input_system.highlight is None
    bus.emit(EVENT_MOUSE_RELEASE, x=target[0], y=target[1], button=1)
    assert session.grid() == {(0, 0): (R,)}
    assert session.hand() == [(), (G,), (B,)]


def test_drop_off_board_returns_stack():
    session, input_system, window = _setup()
    set_hand(session.world, [[R], [G], [B]])
    bus = session.event_bus
    _press(bus, hand_slot_center(2, window.width))
    bus.emit(EVENT_MOUSE_RELEASE, x=5, y=window.height - 5, button=1)
    assert session.grid() == {}
    assert session.hand() == [(R,), (G,), (B,)]


def test_press_on_empty_slot_or_other_button_does_not_drag():
    session, input_system, window = _setup()
    set_hand(session.world, [[], [G], [B]])
    bus = session.event_bus
    _press(bus, hand_slot_center(0, window.width))
    assert input_system.dragging is None
    x, y = hand_slot_center(1, window.width)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=4)
    assert input_system.dragging is None


def test_play_again_click_restarts_after_modal_shows():
    session, input_system, window = _setup(with_animation=True)
    fill_board(session.world, skip=[(0, 0)])
    set_hand(session.world, [[TileColor.AMBER], [R], [G]])
    session.place_tile(0, 0, 0)
    assert session.game_over
    left, right, bottom, top = play_again_bounds(window.width, window.height)
    button = ((left + right) / 2, (bottom + top) / 2)
    bus = session.event_bus

    _press(bus, button)
    assert session.game_over, "Clicks before the modal shows are ignored"

    bus.emit(EVENT_TICK, dt=0.5)
    _press(bus, button)
    assert not session.game_over
    assert session.grid() == {}


def test_hand_is_locked_during_game_over():
    session, input_system, window = _setup()
    fill_board(session.world, skip=[(0, 0)])
    set_hand(session.world, [[TileColor.AMBER], [R], [G]])
    session.place_tile(0, 0, 0)
    _press(session.event_bus, hand_slot_center(1, window.width))
    assert input_system.dragging is None
