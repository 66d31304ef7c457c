from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

from esper import World

from hexstack.events.bus import EventBus, EVENT_RESTART_REQUEST
from hexstack.systems.game_flow_system import GameFlowSystem

logger = logging.getLogger(__name__)

RestartGate = Callable[[], Awaitable[None]]


class RestartSystem:
    """Runs the external restart gate, then reinitializes the game exactly once.

    The gate (an interstitial ad, for example) may resolve or raise; either way
    the game is reset afterwards.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        game_flow: GameFlowSystem,
        *,
        gate: RestartGate | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.game_flow = game_flow
        self.gate = gate
        self._pending = False
        self._task: asyncio.Task | None = None
        self.event_bus.subscribe(EVENT_RESTART_REQUEST, self.on_restart_request)

    @property
    def pending(self) -> bool:
        return self._pending

    async def restart(self, gate: RestartGate | None = None) -> None:
        if self._pending:
            return
        self._pending = True
        await self._gate_then_reset(gate)

    async def _gate_then_reset(self, gate: RestartGate | None) -> None:
        gate = gate or self.gate
        try:
            if gate is not None:
                await gate()
        except Exception as exc:
            logger.warning("Restart gate failed: %s", exc)
        finally:
            self._pending = False
            self.game_flow.init_game()

    def on_restart_request(self, sender, **kwargs):
        if self._pending:
            return
        # Claim the restart before scheduling so a second request is dropped.
        self._pending = True
        coro = self._gate_then_reset(kwargs.get('gate'))
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(coro)
            return
        self._task = loop.create_task(coro)
