"""Game session: one world, one event bus, and the systems that drive them.

The session is the engine's outward interface. Presentation layers either
call these methods or emit the equivalent bus events.
"""
from __future__ import annotations

import random

from hexstack.components.game_state import GameMode
from hexstack.components.tile_color import TileColor
from hexstack.events.bus import EventBus
from hexstack.systems.board_ops import GridSnapshot, grid_snapshot, is_legal_drop
from hexstack.systems.game_flow_system import GameFlowSystem
from hexstack.systems.merge import CascadeResult
from hexstack.systems.placement_system import PlacementSystem
from hexstack.systems.restart_system import RestartGate, RestartSystem
from hexstack.utils.game_state import get_game_state, get_hand, get_score
from hexstack.world import create_world


class GameSession:
    def __init__(
        self,
        event_bus: EventBus | None = None,
        *,
        rng: random.Random | None = None,
        restart_gate: RestartGate | None = None,
        auto_start: bool = True,
    ) -> None:
        self.event_bus = event_bus or EventBus()
        self.world = create_world(self.event_bus, rng=rng)
        self.placement_system = PlacementSystem(self.world, self.event_bus)
        self.game_flow_system = GameFlowSystem(self.world, self.event_bus)
        self.restart_system = RestartSystem(
            self.world,
            self.event_bus,
            self.game_flow_system,
            gate=restart_gate,
        )
        if auto_start:
            self.init_game()

    def init_game(self) -> None:
        self.game_flow_system.init_game()

    def place_tile(self, q: int, r: int, hand_index: int) -> CascadeResult | None:
        return self.placement_system.place_tile(q, r, hand_index)

    def query_legal_drop(self, q: int, r: int) -> bool:
        return is_legal_drop(self.world, q, r)

    async def restart(self, gate: RestartGate | None = None) -> None:
        await self.restart_system.restart(gate)

    def grid(self) -> GridSnapshot:
        return grid_snapshot(self.world)

    def hand(self) -> list[tuple[TileColor, ...]]:
        return get_hand(self.world).snapshot()

    @property
    def score(self) -> int:
        return get_score(self.world).value

    @property
    def mode(self) -> GameMode:
        return get_game_state(self.world).mode

    @property
    def game_over(self) -> bool:
        return self.mode == GameMode.GAME_OVER
