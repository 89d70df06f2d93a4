"""Gameflow phase observer driving the lobby report pipeline."""
from __future__ import annotations

import asyncio
import json
from enum import Enum
from typing import TYPE_CHECKING, Optional, Set

from config import settings
from core.errors import TransportError
from core.logging import get_logger
from domain.entities import LobbyReport
from domain.enums import GameflowPhase
from domain.interfaces import EventTransport, OverlayHandle
from infrastructure.api import LCUClient, subscribe_frame
from infrastructure.api.event_feed import WAMP_EVENT

if TYPE_CHECKING:
    from application.use_cases.aggregate_lobby import AggregateLobbyUseCase


class ObserverState(Enum):
    DISCONNECTED = "disconnected"
    SUBSCRIBED = "subscribed"
    IN_CHAMPION_SELECT = "in-champion-select"
    IDLE = "idle"


class LobbyObserver:
    """
    Watches gameflow phase events and starts one report per champion select.

    States:
    ─────────────────────────────────────────────────────────────────
    DISCONNECTED → SUBSCRIBED           feed opened, subscription sent
    SUBSCRIBED/IDLE → IN_CHAMPION_SELECT phase "ChampSelect", run starts
    IN_CHAMPION_SELECT → IDLE           any other phase, overlay closed
    any → DISCONNECTED                  feed error or end of feed
    ─────────────────────────────────────────────────────────────────
    Runs are started on the transition into champion select. With
    ``level_triggered`` every "ChampSelect" event starts a run, which is
    how the first versions behaved and can post the report twice.
    """

    def __init__(
        self,
        transport: EventTransport,
        pipeline: "AggregateLobbyUseCase",
        *,
        api_client: Optional[LCUClient] = None,
        level_triggered: Optional[bool] = None,
    ) -> None:
        self.transport = transport
        self.pipeline = pipeline
        self.api_client = api_client
        self.level_triggered = settings.LEVEL_TRIGGERED if level_triggered is None else level_triggered
        self.state = ObserverState.DISCONNECTED
        self._runs: Set[asyncio.Task] = set()
        self._overlay: Optional[OverlayHandle] = None
        self._log = get_logger(__name__, service="observer")

    @property
    def overlay(self) -> Optional[OverlayHandle]:
        return self._overlay

    async def run(self) -> None:
        """Subscribe and consume the feed until it ends or breaks."""
        try:
            await self.transport.connect()
            await self.transport.send(subscribe_frame())
            self._set_state(ObserverState.SUBSCRIBED)
            await self._sync_current_phase()
            async for frame in self.transport.frames():
                self.handle_frame(frame)
        except TransportError as e:
            self._log.error(lambda: f"event feed lost: {e}")
        finally:
            self._set_state(ObserverState.DISCONNECTED)

    def handle_frame(self, raw: str) -> Optional[str]:
        """Decode one inbound frame and react to its phase.

        Returns the decoded phase, or None when the frame was dropped.
        """
        try:
            payload = json.loads(raw)
        except ValueError:
            self._log.warning(lambda: f"dropping undecodable frame: {raw[:80]!r}")
            return None

        try:
            phase = payload[2]["data"]
        except (IndexError, KeyError, TypeError):
            phase = None
        if not isinstance(phase, str):
            if isinstance(payload, list) and payload and payload[0] != WAMP_EVENT:
                self._log.debug(lambda: f"ignoring control frame opcode={payload[0]}")
            else:
                self._log.warning(lambda: f"dropping frame without phase: {raw[:80]!r}")
            return None

        self.on_phase(phase)
        return phase

    def on_phase(self, phase: str) -> None:
        if GameflowPhase.from_string(phase) is None:
            self._log.debug(lambda: f"unknown gameflow phase {phase!r}")

        if phase == GameflowPhase.CHAMP_SELECT.value:
            entering = self.state is not ObserverState.IN_CHAMPION_SELECT
            self._set_state(ObserverState.IN_CHAMPION_SELECT)
            if entering or self.level_triggered:
                self._start_run()
            return

        if self.state is ObserverState.IN_CHAMPION_SELECT:
            self._set_state(ObserverState.IDLE)
            self._teardown()

    async def drain(self) -> None:
        """Wait for every pipeline run started so far."""
        while self._runs:
            await asyncio.gather(*list(self._runs), return_exceptions=True)

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    async def _sync_current_phase(self) -> None:
        # events only fire on change; a lobby already in champ select would be missed
        if self.api_client is None:
            return
        phase = await self.api_client.get_gameflow_phase()
        if isinstance(phase, str):
            self._log.info(lambda: f"current gameflow phase {phase}")
            self.on_phase(phase)

    def _start_run(self) -> None:
        task = asyncio.get_running_loop().create_task(self._run_pipeline())
        self._runs.add(task)
        task.add_done_callback(self._runs.discard)

    async def _run_pipeline(self) -> None:
        try:
            report: Optional[LobbyReport] = await self.pipeline.execute()
        except Exception:
            self._log.exception("lobby report run failed")
            return
        if report is None or report.overlay is None:
            return
        if self.state is not ObserverState.IN_CHAMPION_SELECT:
            # champion select ended while this run was in flight
            report.overlay.close()
            return
        if self._overlay is not None:
            self._overlay.close()
        self._overlay = report.overlay

    def _teardown(self) -> None:
        if self._overlay is not None:
            self._overlay.close()
            self._overlay = None

    def _set_state(self, state: ObserverState) -> None:
        if state is not self.state:
            self._log.debug(lambda: f"state {self.state.value} -> {state.value}")
            self.state = state
