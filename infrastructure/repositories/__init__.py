"""Infrastructure repositories module."""
from .chat_repository import ChatRepository
from .lobby_repository import LobbyRepository
from .match_repository import MatchHistoryRepository
from .ranked_repository import RankedStatsRepository

__all__ = [
    'ChatRepository',
    'LobbyRepository',
    'MatchHistoryRepository',
    'RankedStatsRepository',
]
