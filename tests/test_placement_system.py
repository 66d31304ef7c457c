import random

from hexstack.components.game_state import GameMode
from hexstack.components.tile_color import TileColor
from hexstack.events.bus import (
    EventBus,
    EVENT_CASCADE_COMPLETE,
    EVENT_HAND_CHANGED,
    EVENT_MERGE_STEP,
    EVENT_PLACE_REQUEST,
    EVENT_PLACEMENT_REJECTED,
    EVENT_SCORE_CHANGED,
    EVENT_STACK_OVERFLOWED,
    EVENT_TILE_PLACED,
)
from hexstack.systems.board_ops import grid_snapshot, set_stack
from hexstack.systems.placement_system import PlacementSystem
from hexstack.utils.game_state import get_game_state, get_hand, get_score
from hexstack.world import create_world
from tests.helpers import set_hand

R, G, B = TileColor.RED, TileColor.GREEN, TileColor.BLUE


def _setup(slots):
    bus = EventBus(); world = create_world(bus, rng=random.Random(7))
    placement = PlacementSystem(world, bus)
    set_hand(world, slots)
    return bus, world, placement


def test_place_moves_whole_stack_and_empties_slot():
    bus, world, placement = _setup([[G, G], [R], [B]])
    placed = {}
    bus.subscribe(EVENT_TILE_PLACED, lambda s, **k: placed.update(k))
    placement.place_tile(0, 0, 0)
    assert grid_snapshot(world) == {(0, 0): (G, G)}
    assert get_hand(world).slots == [[], [R], [B]]
    assert placed == {'q': 0, 'r': 0, 'hand_index': 0, 'tiles': (G, G)}


def test_place_request_event_drives_placement():
    bus, world, _ = _setup([[R], [R], [B]])
    bus.emit(EVENT_PLACE_REQUEST, q=-1, r=2, hand_index=2)
    assert grid_snapshot(world) == {(-1, 2): (B,)}


def test_malformed_place_request_is_ignored():
    bus, world, _ = _setup([[R], [R], [B]])
    bus.emit(EVENT_PLACE_REQUEST, q=0, r=0)
    bus.emit(EVENT_PLACE_REQUEST, q="x", r=0, hand_index=0)
    assert grid_snapshot(world) == {}
    assert get_hand(world).slots == [[R], [R], [B]]


def test_invalid_placements_are_no_ops():
    bus, world, placement = _setup([[R], [], [B]])
    set_stack(world, 0, 0, [G])
    reasons = []
    bus.subscribe(EVENT_PLACEMENT_REJECTED, lambda s, **k: reasons.append(k['reason']))
    before_grid = grid_snapshot(world)

    assert placement.place_tile(0, 0, 0) is None
    assert placement.place_tile(3, 0, 0) is None
    assert placement.place_tile(1, 0, 1) is None
    assert placement.place_tile(1, 0, 5) is None
    assert placement.place_tile(1, 0, -1) is None

    assert reasons == ["occupied", "out_of_bounds", "empty_slot", "empty_slot", "empty_slot"]
    assert grid_snapshot(world) == before_grid
    assert get_hand(world).slots == [[R], [], [B]]
    assert get_score(world).value == 0


def test_placement_rejected_while_game_over():
    bus, world, placement = _setup([[R], [G], [B]])
    get_game_state(world).mode = GameMode.GAME_OVER
    reasons = []
    bus.subscribe(EVENT_PLACEMENT_REJECTED, lambda s, **k: reasons.append(k['reason']))
    placement.place_tile(0, 0, 0)
    assert reasons == ["game_over"]
    assert grid_snapshot(world) == {}


def test_placement_during_cascade_is_locked_out():
    bus, world, placement = _setup([[R], [G], [B]])
    reasons = []
    bus.subscribe(EVENT_PLACEMENT_REJECTED, lambda s, **k: reasons.append(k['reason']))
    # A listener that tries to sneak in a second placement mid-resolution.
    bus.subscribe(EVENT_TILE_PLACED, lambda s, **k: bus.emit(EVENT_PLACE_REQUEST, q=2, r=0, hand_index=1))
    placement.place_tile(0, 0, 0)
    assert reasons == ["cascade_active"]
    assert grid_snapshot(world) == {(0, 0): (R,)}
    assert not get_game_state(world).cascade_active
    placement.place_tile(2, 0, 1)
    assert (2, 0) in grid_snapshot(world)


def test_merge_awards_points_and_emits_events():
    bus, world, placement = _setup([[R], [R], [B]])
    events = []
    bus.subscribe(EVENT_HAND_CHANGED, lambda s, **k: events.append('hand'))
    bus.subscribe(EVENT_MERGE_STEP, lambda s, **k: events.append(('merge', k['source'], k['count'], k['points'])))
    bus.subscribe(EVENT_SCORE_CHANGED, lambda s, **k: events.append(('score', k['score'], k['delta'])))
    bus.subscribe(EVENT_CASCADE_COMPLETE, lambda s, **k: events.append('complete'))
    placement.place_tile(0, 0, 0)
    events.clear()
    result = placement.place_tile(1, 0, 1)
    assert result.points == 20
    assert events == ['hand', ('merge', (0, 0), 1, 20), ('score', 20, 20), 'complete']
    assert get_score(world).value == 20
    assert grid_snapshot(world) == {(1, 0): (R, R)}


def test_overflow_emits_event_and_bonus():
    bus, world, placement = _setup([[R], [G], [B]])
    set_stack(world, 0, 0, [R] * 9)
    overflow = {}
    bus.subscribe(EVENT_STACK_OVERFLOWED, lambda s, **k: overflow.update(k))
    placement.place_tile(1, 0, 0)
    assert overflow == {'q': 1, 'r': 0, 'height': 10, 'bonus': 100}
    assert get_score(world).value >= 100
    assert (1, 0) not in grid_snapshot(world)
    assert (0, 0) not in grid_snapshot(world)


def test_no_score_event_without_points():
    bus, world, placement = _setup([[R], [G], [B]])
    scores = []
    bus.subscribe(EVENT_SCORE_CHANGED, lambda s, **k: scores.append(k))
    placement.place_tile(0, 0, 0)
    placement.place_tile(2, -2, 1)
    assert scores == []
