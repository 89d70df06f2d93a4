"""Lobby context repository implementation."""
import logging
from typing import List, Optional

from domain.entities import LobbyRosterEntry
from domain.interfaces import ILobbyRepository
from infrastructure.api import LCUClient

logger = logging.getLogger(__name__)


class LobbyRepository(ILobbyRepository):
    """Champion-select roster and client region."""

    def __init__(self, api_client: LCUClient):
        self.api_client = api_client

    async def get_roster(self) -> List[LobbyRosterEntry]:
        payload = await self.api_client.get_chat_participants()
        if not payload:
            return []
        try:
            candidates = LobbyRosterEntry.champion_select_payloads(payload)
        except (KeyError, TypeError, AttributeError) as e:
            logger.warning(f"Malformed chat participants payload: {e!r}")
            return []

        roster = LobbyRosterEntry.champion_select_roster(payload)
        skipped = len(candidates) - len(roster)
        if skipped:
            logger.warning(f"Skipped {skipped} champion-select participant(s) without a puuid")
        return roster

    async def get_region(self) -> Optional[str]:
        payload = await self.api_client.get_region_locale()
        if not isinstance(payload, dict):
            return None
        region = payload.get('webRegion')
        return str(region) if region else None
