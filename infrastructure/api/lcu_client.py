"""Local game client API gateway."""
import json
import logging
from typing import Any, Dict, List, Optional

import httpx

from config import settings

logger = logging.getLogger(__name__)

API_HEADERS = {
    "accept": "application/json",
    "content-type": "application/json",
}


class LCUClient:
    """Asynchronous gateway to the local client's REST API.

    Every call resolves to the parsed JSON body or ``None``: transport
    errors, non-2xx statuses and undecodable bodies are logged here and
    never reach the caller as exceptions.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        verify: Optional[bool] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url  = base_url or settings.LCU_BASE_URL
        self.timeout   = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.verify    = settings.VERIFY_SSL if verify is None else verify
        self.session: Optional[httpx.AsyncClient] = None
        self._transport = transport

    async def __aenter__(self):
        self.session = httpx.AsyncClient(
            base_url=self.base_url,
            headers=API_HEADERS,
            timeout=self.timeout,
            verify=self.verify,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        if self.session:
            await self.session.aclose()
            self.session = None

    async def request(
        self,
        method: str,
        endpoint: str,
        payload: Optional[Any] = None,
    ) -> Optional[Any]:
        if self.session is None:
            raise RuntimeError("LCUClient used outside of 'async with'")

        content = json.dumps(payload) if payload is not None else None
        try:
            response = await self.session.request(method, endpoint, content=content)
        except httpx.HTTPError as exc:
            logger.error(f"{method} {endpoint} failed: {exc!r}")
            return None

        if not response.is_success:
            logger.warning(f"{method} {endpoint} -> HTTP {response.status_code}")
            return None

        try:
            return response.json()
        except ValueError:
            logger.warning(f"{method} {endpoint} -> body is not JSON")
            return None

    # ── Match history ──────────────────────────────────────────────────

    async def get_match_history(
        self,
        puuid: str,
        beg_index: int = 0,
        end_index: int = 21,
    ) -> Optional[Dict]:
        endpoint = (
            f"/lol-match-history/v1/products/lol/{puuid}/matches"
            f"?begIndex={beg_index}&endIndex={end_index}"
        )
        return await self.request("GET", endpoint)

    # ── Ranked ─────────────────────────────────────────────────────────

    async def get_ranked_stats(self, puuid: str) -> Optional[Dict]:
        return await self.request("GET", f"/lol-ranked/v1/ranked-stats/{puuid}")

    # ── Chat ───────────────────────────────────────────────────────────

    async def get_conversations(self) -> Optional[List[Dict]]:
        return await self.request("GET", "/lol-chat/v1/conversations")

    async def post_conversation_message(self, conversation_id: str, body: str) -> Optional[Dict]:
        action = {"body": body, "type": "celebration"}
        return await self.request(
            "POST", f"/lol-chat/v1/conversations/{conversation_id}/messages", action
        )

    async def get_conversation_messages(self, conversation_id: str) -> Optional[List[Dict]]:
        return await self.request("GET", f"/lol-chat/v1/conversations/{conversation_id}/messages")

    async def get_chat_participants(self) -> Optional[Dict]:
        return await self.request("GET", "/riotclient/chat/v5/participants")

    # ── Client ─────────────────────────────────────────────────────────

    async def get_region_locale(self) -> Optional[Dict]:
        return await self.request("GET", "/riotclient/region-locale")

    async def get_gameflow_phase(self) -> Optional[str]:
        return await self.request("GET", "/lol-gameflow/v1/gameflow-phase")
