"""Infrastructure layer - API clients and repositories."""
from .api import LCUClient, WampEventFeed
from .repositories import (
    ChatRepository,
    LobbyRepository,
    MatchHistoryRepository,
    RankedStatsRepository,
)

__all__ = [
    'LCUClient',
    'WampEventFeed',
    'ChatRepository',
    'LobbyRepository',
    'MatchHistoryRepository',
    'RankedStatsRepository',
]
