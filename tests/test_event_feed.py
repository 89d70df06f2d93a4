import json

import pytest
from aiohttp import test_utils, web

from core.errors import TransportError
from infrastructure.api import WampEventFeed, subscribe_frame, subscription_topic
from tests.fakes import phase_event


def test_subscription_topic_replaces_slashes():
    assert subscription_topic("/lol-gameflow/v1/gameflow-phase") == "OnJsonApiEvent_lol-gameflow_v1_gameflow-phase"
    assert json.loads(subscribe_frame()) == [5, "OnJsonApiEvent_lol-gameflow_v1_gameflow-phase"]


@pytest.mark.anyio
async def test_feed_sends_subscription_and_yields_frames():
    received = []

    async def wamp(request):
        ws = web.WebSocketResponse(protocols=("wamp",))
        await ws.prepare(request)
        received.append(await ws.receive_str())
        await ws.send_str(phase_event("ChampSelect"))
        await ws.send_str(phase_event("InProgress"))
        await ws.close()
        return ws

    app = web.Application()
    app.router.add_get("/", wamp)
    server = test_utils.TestServer(app)
    await server.start_server()
    try:
        url = str(server.make_url("/")).replace("http://", "ws://")
        async with WampEventFeed(url, verify=True) as feed:
            await feed.connect()
            await feed.send(subscribe_frame())
            frames = [frame async for frame in feed.frames()]
    finally:
        await server.close()

    assert received == [subscribe_frame()]
    assert [json.loads(f)[2]["data"] for f in frames] == ["ChampSelect", "InProgress"]


@pytest.mark.anyio
async def test_unreachable_feed_raises_transport_error():
    async with WampEventFeed("ws://127.0.0.1:1/", verify=True) as feed:
        with pytest.raises(TransportError) as info:
            await feed.connect()
    assert info.value.url == "ws://127.0.0.1:1/"


@pytest.mark.anyio
async def test_send_before_connect_raises_transport_error():
    feed = WampEventFeed("ws://127.0.0.1:1/")
    with pytest.raises(TransportError):
        await feed.send(subscribe_frame())
    await feed.close()


class _RecordingSession:
    def __init__(self):
        self.connects = []

    async def ws_connect(self, url, **kwargs):
        self.connects.append(kwargs)
        return _ClosedSocket()

    async def close(self):
        pass


class _ClosedSocket:
    closed = True


@pytest.mark.anyio
@pytest.mark.parametrize("verify", [True, False])
async def test_certificate_check_follows_verify_flag(verify):
    session = _RecordingSession()
    async with WampEventFeed("wss://127.0.0.1:2999/", verify=verify) as feed:
        feed.session = session
        await feed.connect()

    assert session.connects[0]["ssl"] is verify
    assert session.connects[0]["protocols"] == ("wamp",)
