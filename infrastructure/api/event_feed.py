"""WAMP event feed of the local client."""
import json
import logging
from typing import AsyncIterator, Optional

import aiohttp

from config import settings
from core.errors import TransportError
from domain.interfaces import EventTransport

logger = logging.getLogger(__name__)

WAMP_SUBSCRIBE = 5
WAMP_EVENT = 8
GAMEFLOW_PHASE_PATH = "/lol-gameflow/v1/gameflow-phase"


def subscription_topic(path: str) -> str:
    """``/lol-gameflow/v1/gameflow-phase`` -> ``OnJsonApiEvent_lol-gameflow_v1_gameflow-phase``"""
    return "OnJsonApiEvent" + path.replace("/", "_")


def subscribe_frame(path: str = GAMEFLOW_PHASE_PATH) -> str:
    return json.dumps([WAMP_SUBSCRIBE, subscription_topic(path)])


class WampEventFeed(EventTransport):
    """WebSocket connection speaking the client's ``wamp`` sub-protocol."""

    def __init__(self, url: Optional[str] = None, *, verify: Optional[bool] = None):
        self.url     = url or settings.LCU_WS_URL
        self.verify  = settings.VERIFY_SSL if verify is None else verify
        self.session: Optional[aiohttp.ClientSession] = None
        self._ws: Optional[aiohttp.ClientWebSocketResponse] = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, *_):
        await self.close()

    async def connect(self) -> None:
        if self.session is None:
            self.session = aiohttp.ClientSession()
        try:
            self._ws = await self.session.ws_connect(
                self.url,
                protocols=("wamp",),
                ssl=True if self.verify else False,
                heartbeat=30.0,
            )
        except (aiohttp.ClientError, OSError) as exc:
            raise TransportError(f"cannot open event feed: {exc}", url=self.url) from exc
        logger.info(f"event feed connected: {self.url}")

    async def send(self, message: str) -> None:
        if self._ws is None or self._ws.closed:
            raise TransportError("event feed is not connected", url=self.url)
        try:
            await self._ws.send_str(message)
        except (aiohttp.ClientError, ConnectionError) as exc:
            raise TransportError(f"send failed: {exc}", url=self.url) from exc

    async def frames(self) -> AsyncIterator[str]:
        if self._ws is None:
            raise TransportError("event feed is not connected", url=self.url)
        async for msg in self._ws:
            if msg.type == aiohttp.WSMsgType.TEXT:
                if msg.data:
                    yield msg.data
            elif msg.type == aiohttp.WSMsgType.BINARY:
                yield msg.data.decode("utf-8", errors="replace")
            elif msg.type == aiohttp.WSMsgType.ERROR:
                raise TransportError(f"event feed error: {self._ws.exception()}", url=self.url)
        logger.info(f"event feed closed (code={self._ws.close_code})")

    async def close(self) -> None:
        if self._ws is not None and not self._ws.closed:
            await self._ws.close()
        self._ws = None
        if self.session is not None:
            await self.session.close()
            self.session = None
