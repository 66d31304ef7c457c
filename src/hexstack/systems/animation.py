from esper import World

from hexstack.components.duration import Duration
from hexstack.components.presentation_timer import PresentationTimer
from hexstack.constants import (
    GAME_OVER_MODAL_DELAY,
    OVERFLOW_BURST_DURATION,
    PLACEMENT_SETTLE_DELAY,
    SCORE_PULSE_DURATION,
)
from hexstack.events.bus import (
    EventBus,
    EVENT_ANIMATION_COMPLETE,
    EVENT_ANIMATION_START,
    EVENT_GAME_OVER,
    EVENT_GAME_STARTED,
    EVENT_SCORE_CHANGED,
    EVENT_STACK_OVERFLOWED,
    EVENT_TICK,
    EVENT_TILE_PLACED,
)

KIND_SETTLE = 'settle'
KIND_SCORE_PULSE = 'score_pulse'
KIND_OVERFLOW_BURST = 'overflow_burst'
KIND_GAME_OVER_MODAL = 'game_over_modal'

DURATIONS = {
    KIND_SETTLE: PLACEMENT_SETTLE_DELAY,
    KIND_SCORE_PULSE: SCORE_PULSE_DURATION,
    KIND_OVERFLOW_BURST: OVERFLOW_BURST_DURATION,
    KIND_GAME_OVER_MODAL: GAME_OVER_MODAL_DELAY,
}


class AnimationSystem:
    """Drives presentation timing; engine state is already final when a timer starts.

    Each effect is its own entity carrying a PresentationTimer and a Duration.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.modal_visible = False
        event_bus.subscribe(EVENT_TICK, self.on_tick)
        event_bus.subscribe(EVENT_ANIMATION_START, self.on_animation_start)
        event_bus.subscribe(EVENT_TILE_PLACED, self.on_tile_placed)
        event_bus.subscribe(EVENT_SCORE_CHANGED, self.on_score_changed)
        event_bus.subscribe(EVENT_STACK_OVERFLOWED, self.on_stack_overflowed)
        event_bus.subscribe(EVENT_GAME_OVER, self.on_game_over)
        event_bus.subscribe(EVENT_GAME_STARTED, self.on_game_started)

    def on_tile_placed(self, sender, **kwargs):
        q = kwargs.get('q'); r = kwargs.get('r')
        if q is None or r is None:
            return
        self.start(KIND_SETTLE, [(q, r)])

    def on_score_changed(self, sender, **kwargs):
        if kwargs.get('delta', 0) > 0:
            self.start(KIND_SCORE_PULSE, [kwargs.get('score')])

    def on_stack_overflowed(self, sender, **kwargs):
        q = kwargs.get('q'); r = kwargs.get('r')
        if q is None or r is None:
            return
        self.start(KIND_OVERFLOW_BURST, [(q, r)])

    def on_game_over(self, sender, **kwargs):
        self.start(KIND_GAME_OVER_MODAL, [kwargs.get('score')])

    def on_game_started(self, sender, **kwargs):
        self.modal_visible = False
        for ent, _ in list(self.world.get_component(PresentationTimer)):
            self._delete_animation_entity(ent)

    def on_animation_start(self, sender, **kwargs):
        kind = kwargs.get('kind'); items = kwargs.get('items', [])
        if kind in DURATIONS:
            self.start(kind, items)

    def start(self, kind: str, items=None, duration: float | None = None) -> int:
        # One timer per kind: restarting a running effect resets its progress.
        for ent, timer in list(self.world.get_component(PresentationTimer)):
            if timer.kind == kind:
                self._delete_animation_entity(ent)
        value = duration if duration is not None else DURATIONS.get(kind, 0.0)
        return self.world.create_entity(
            PresentationTimer(kind=kind, items=list(items or [])),
            Duration(value),
        )

    def active(self, kind: str) -> PresentationTimer | None:
        for _, timer in self.world.get_component(PresentationTimer):
            if timer.kind == kind:
                return timer
        return None

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        finished = []
        for ent, timer in list(self.world.get_component(PresentationTimer)):
            d = self.world.component_for_entity(ent, Duration)
            if d.value <= 0:
                timer.progress = 1.0
            else:
                timer.progress = min(1.0, timer.progress + dt / d.value)
            if timer.progress >= 1.0:
                finished.append((ent, timer))
        for ent, timer in finished:
            self._delete_animation_entity(ent)
            if timer.kind == KIND_GAME_OVER_MODAL:
                self.modal_visible = True
            self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind=timer.kind, items=timer.items)

    def _delete_animation_entity(self, ent: int):
        # Immediate deletion: the world is never process()-ed, so deferred deletes would linger.
        try:
            self.world.delete_entity(ent, immediate=True)
        except KeyError:
            pass
