import asyncio
import json

import pytest

from application import LobbyObserver, ObserverState
from core.errors import TransportError
from tests.fakes import FakeEventTransport, ScriptedPipeline, phase_event

WELCOME = json.dumps([0, "session-1", 1, "Riot WAMP"])


async def _observe(frames, pipeline=None, **kwargs):
    transport = FakeEventTransport(frames, fail_with=kwargs.pop("fail_with", None))
    pipeline = pipeline or ScriptedPipeline()
    observer = LobbyObserver(transport, pipeline, level_triggered=kwargs.pop("level_triggered", False), **kwargs)
    await observer.run()
    await observer.drain()
    return observer, transport, pipeline


@pytest.mark.anyio
async def test_subscribes_to_gameflow_phase_on_connect():
    _, transport, _ = await _observe([])
    assert transport.connected
    assert transport.sent == ['[5, "OnJsonApiEvent_lol-gameflow_v1_gameflow-phase"]']


@pytest.mark.anyio
async def test_one_run_per_entry_into_champion_select():
    frames = [
        WELCOME,
        phase_event("Lobby"),
        phase_event("ChampSelect"),
        phase_event("ChampSelect"),
        phase_event("ChampSelect"),
    ]
    observer, _, pipeline = await _observe(frames)
    assert pipeline.runs == 1


@pytest.mark.anyio
async def test_every_champion_select_event_runs_when_level_triggered():
    frames = [phase_event("ChampSelect"), phase_event("ChampSelect")]
    _, _, pipeline = await _observe(frames, level_triggered=True)
    assert pipeline.runs == 2


@pytest.mark.anyio
async def test_re_entering_champion_select_runs_again():
    frames = [
        phase_event("ChampSelect"),
        phase_event("Lobby"),
        phase_event("Matchmaking"),
        phase_event("ChampSelect"),
    ]
    _, _, pipeline = await _observe(frames)
    assert pipeline.runs == 2


@pytest.mark.anyio
async def test_leaving_champion_select_closes_the_overlay():
    pipeline = ScriptedPipeline()
    observer = LobbyObserver(FakeEventTransport(), pipeline, level_triggered=False)
    observer.on_phase("ChampSelect")
    await observer.drain()
    handle = pipeline.handles[0]
    assert observer.overlay is handle and handle.is_open

    assert observer.handle_frame(phase_event("InProgress")) == "InProgress"
    assert handle.close_calls == 1
    assert observer.overlay is None
    assert observer.state is ObserverState.IDLE


@pytest.mark.anyio
async def test_overlay_of_a_run_finishing_after_champion_select_is_closed():
    gate = asyncio.Event()
    pipeline = ScriptedPipeline(gate=gate)
    transport = FakeEventTransport([phase_event("ChampSelect"), phase_event("GameStart")])
    observer = LobbyObserver(transport, pipeline, level_triggered=False)

    await observer.run()
    gate.set()
    await observer.drain()

    assert pipeline.runs == 1
    assert pipeline.handles[0].close_calls == 1
    assert observer.overlay is None


@pytest.mark.anyio
async def test_new_run_replaces_previous_overlay():
    pipeline = ScriptedPipeline()
    transport = FakeEventTransport([])
    observer = LobbyObserver(transport, pipeline, level_triggered=True)

    observer.on_phase("ChampSelect")
    await observer.drain()
    observer.on_phase("ChampSelect")
    await observer.drain()

    first, second = pipeline.handles
    assert first.close_calls == 1
    assert observer.overlay is second and second.is_open


@pytest.mark.anyio
@pytest.mark.parametrize(
    "frame",
    [
        "not json at all",
        json.dumps({"data": "ChampSelect"}),
        json.dumps([8, "OnJsonApiEvent_lol-gameflow_v1_gameflow-phase"]),
        json.dumps([8, "OnJsonApiEvent_lol-gameflow_v1_gameflow-phase", {"data": 3}]),
        WELCOME,
    ],
)
async def test_undecodable_frames_are_dropped(frame):
    observer = LobbyObserver(FakeEventTransport(), ScriptedPipeline(), level_triggered=False)
    assert observer.handle_frame(frame) is None
    assert observer.state is ObserverState.DISCONNECTED


@pytest.mark.anyio
async def test_bad_frame_does_not_stop_the_feed():
    frames = ["{{{", phase_event("ChampSelect")]
    _, _, pipeline = await _observe(frames)
    assert pipeline.runs == 1


@pytest.mark.anyio
async def test_transport_error_disconnects_without_raising():
    observer, _, pipeline = await _observe(
        [phase_event("Lobby")], fail_with=TransportError("socket reset")
    )
    assert observer.state is ObserverState.DISCONNECTED
    assert pipeline.runs == 0


@pytest.mark.anyio
async def test_connect_failure_disconnects_without_raising():
    transport = FakeEventTransport(connect_error=TransportError("refused"))
    observer = LobbyObserver(transport, ScriptedPipeline(), level_triggered=False)
    await observer.run()
    assert observer.state is ObserverState.DISCONNECTED
    assert transport.sent == []


@pytest.mark.anyio
async def test_failing_run_is_contained():
    pipeline = ScriptedPipeline(error=RuntimeError("pipeline broke"))
    observer, _, _ = await _observe([phase_event("ChampSelect")], pipeline=pipeline)
    assert pipeline.runs == 1
    assert observer.overlay is None


@pytest.mark.anyio
async def test_already_in_champion_select_at_startup(client_stub):
    client_stub.phase = "ChampSelect"
    async with client_stub.client() as lcu:
        observer, _, pipeline = await _observe([], api_client=lcu)
    assert pipeline.runs == 1
