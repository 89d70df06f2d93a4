"""Repository interfaces for data access."""
from abc import ABC, abstractmethod
from typing import List, Optional
from ..entities import ChatConversation, LobbyRosterEntry, MatchHistoryBundle


class IMatchHistoryRepository(ABC):
    """Interface for per-player match history."""

    @abstractmethod
    async def fetch_for_player(
        self,
        puuid: str,
        beg_index: int = 0,
        end_index: int = 21
    ) -> Optional[MatchHistoryBundle]:
        """Recent matches as columns, None when no statistics are available."""
        pass


class IRankedStatsRepository(ABC):
    """Interface for per-player ranked standing."""

    @abstractmethod
    async def fetch_for_player(self, puuid: str) -> str:
        """Rank label ("G4", "MASTER" or "Unranked"); never raises."""
        pass


class ILobbyRepository(ABC):
    """Interface for the current lobby context."""

    @abstractmethod
    async def get_roster(self) -> List[LobbyRosterEntry]:
        """Champion-select participants in display order."""
        pass

    @abstractmethod
    async def get_region(self) -> Optional[str]:
        """Web region code of the local client, e.g. ``euw``."""
        pass


class IChatRepository(ABC):
    """Interface for the in-client chat."""

    @abstractmethod
    async def find_champion_select_conversation(self) -> Optional[ChatConversation]:
        pass

    @abstractmethod
    async def post_message(self, conversation_id: str, body: str) -> bool:
        """Post one message; False when the client rejected it."""
        pass

    @abstractmethod
    async def get_message_bodies(self, conversation_id: str) -> List[str]:
        """Bodies of the messages currently in a conversation, oldest first."""
        pass
