"""Domain layer - Business entities, enums, and interfaces."""
from .entities import (
    ChatConversation,
    DerivedStats,
    LobbyReport,
    LobbyRosterEntry,
    MatchHistoryBundle,
    MatchRecord,
    PlayerReport,
    QueueStanding,
    RankedStats,
)
from .enums import GameflowPhase, QueueType, Rank, Role
from .interfaces import (
    EventTransport,
    IChatRepository,
    ILobbyRepository,
    IMatchHistoryRepository,
    IRankedStatsRepository,
    OverlayHandle,
    PresentationSink,
)

__all__ = [
    # Entities
    'ChatConversation',
    'DerivedStats',
    'LobbyReport',
    'LobbyRosterEntry',
    'MatchHistoryBundle',
    'MatchRecord',
    'PlayerReport',
    'QueueStanding',
    'RankedStats',
    # Enums
    'GameflowPhase',
    'QueueType',
    'Rank',
    'Role',
    # Interfaces
    'EventTransport',
    'IChatRepository',
    'ILobbyRepository',
    'IMatchHistoryRepository',
    'IRankedStatsRepository',
    'OverlayHandle',
    'PresentationSink',
]
