"""Ranked standing repository implementation."""
import logging

from domain.entities import UNRANKED, RankedStats
from domain.enums import QueueType
from domain.interfaces import IRankedStatsRepository
from infrastructure.api import LCUClient

logger = logging.getLogger(__name__)


class RankedStatsRepository(IRankedStatsRepository):
    """Repository for ranked standings using the local client API."""

    def __init__(self, api_client: LCUClient):
        self.api_client = api_client

    async def fetch_for_player(self, puuid: str) -> str:
        """
        Get the player's rank label.

        Solo/duo wins when valid, flex is the fallback, anything else is
        "Unranked".

        Args:
            puuid: Player UUID

        Returns:
            "G4"-style code, an apex tier name, or "Unranked"
        """
        payload = await self.api_client.get_ranked_stats(puuid)
        if not payload:
            return UNRANKED

        try:
            stats = RankedStats.from_payload(payload)
        except (KeyError, TypeError, AttributeError) as e:
            logger.warning(f"Malformed ranked stats for {puuid}: {e!r}")
            return UNRANKED

        for queue in QueueType.ranked_queues():
            standing = stats.standing(queue)
            if standing is None or not standing.is_valid:
                continue
            try:
                return standing.label
            except ValueError as e:
                logger.warning(f"Unreadable {queue.queue_name} division for {puuid}: {e}")
                continue

        return UNRANKED
