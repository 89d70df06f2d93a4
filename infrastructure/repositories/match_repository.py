"""Match history repository implementation."""
import logging
from typing import Optional

from domain.entities import MatchHistoryBundle, MatchRecord
from domain.interfaces import IMatchHistoryRepository
from infrastructure.api import LCUClient

logger = logging.getLogger(__name__)


class MatchHistoryRepository(IMatchHistoryRepository):
    """Repository for recent matches using the local client API."""

    def __init__(self, api_client: LCUClient):
        """
        Initialize match history repository.

        Args:
            api_client: Local client API gateway
        """
        self.api_client = api_client

    async def fetch_for_player(
        self,
        puuid: str,
        beg_index: int = 0,
        end_index: int = 21
    ) -> Optional[MatchHistoryBundle]:
        """
        Get a window of recent matches as columns.

        Args:
            puuid: Player UUID
            beg_index: First match index of the window
            end_index: Last match index of the window

        Returns:
            MatchHistoryBundle, or None when the lookup failed, the payload
            had an unexpected shape, or the player has no matches
        """
        result = await self.api_client.get_match_history(puuid, beg_index, end_index)
        if result is None:
            logger.warning(f"Match history lookup failed for {puuid}")
            return None

        games = self._games_list(result)
        if games is None:
            logger.warning(f"Match history for {puuid} has no games list")
            return None
        if not games:
            logger.info(f"No matches on record for {puuid}")
            return None

        try:
            records = [MatchRecord.from_game(game) for game in games]
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.warning(f"Malformed match record for {puuid}: {e!r}")
            return None

        return MatchHistoryBundle.from_records(records)

    @staticmethod
    def _games_list(result: object) -> Optional[list]:
        """Unwrap ``{"games": {"games": [...]}}``."""
        if not isinstance(result, dict):
            return None
        outer = result.get('games')
        if not isinstance(outer, dict):
            return None
        games = outer.get('games')
        return games if isinstance(games, list) else None
