"""Entry point for the Hexstack hex tile-merging puzzle.

Sets up the game session, presentation systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, color
from hexstack.constants import WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from hexstack.events.bus import (EventBus, EVENT_TICK, EVENT_MOUSE_PRESS, EVENT_MOUSE_MOVE,
                                 EVENT_MOUSE_RELEASE)
from hexstack.session import GameSession
from hexstack.systems.animation import AnimationSystem
from hexstack.systems.input import InputSystem
from hexstack.systems.render import RenderSystem

class HexstackWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        # Presentation systems subscribe before the session deals its first hand.
        self.session = GameSession(self.event_bus, auto_start=False)
        self.world = self.session.world
        self.animation_system = AnimationSystem(self.world, self.event_bus)
        self.input_system = InputSystem(self.event_bus, self, self.world, animation_system=self.animation_system)
        self.render_system = RenderSystem(
            self.world,
            self.event_bus,
            self,
            input_system=self.input_system,
            animation_system=self.animation_system,
        )
        set_background_color(color.DARK_SLATE_GRAY)
        self.session.init_game()

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float):
        self.event_bus.emit(EVENT_MOUSE_MOVE, x=x, y=y, dx=dx, dy=dy)

    def on_mouse_drag(self, x: float, y: float, dx: float, dy: float, buttons: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_MOVE, x=x, y=y, dx=dx, dy=dy)

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_RELEASE, x=x, y=y, button=button)

def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    window = HexstackWindow()
    run()

if __name__ == "__main__":
    main()
