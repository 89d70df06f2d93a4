"""Domain entities."""
from .chat import ChatConversation
from .match_history import MatchHistoryBundle, MatchRecord
from .ranked import UNRANKED, QueueStanding, RankedStats
from .report import NOT_AVAILABLE, DerivedStats, LobbyReport, PlayerReport
from .roster import LobbyRosterEntry

__all__ = [
    'ChatConversation',
    'DerivedStats',
    'LobbyReport',
    'LobbyRosterEntry',
    'MatchHistoryBundle',
    'MatchRecord',
    'NOT_AVAILABLE',
    'PlayerReport',
    'QueueStanding',
    'RankedStats',
    'UNRANKED',
]
