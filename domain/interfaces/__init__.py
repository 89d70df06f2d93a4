"""Domain interfaces."""
from .ports import EventTransport, OverlayHandle, PresentationSink
from .repository import (
    IChatRepository,
    ILobbyRepository,
    IMatchHistoryRepository,
    IRankedStatsRepository,
)

__all__ = [
    'EventTransport',
    'IChatRepository',
    'ILobbyRepository',
    'IMatchHistoryRepository',
    'IRankedStatsRepository',
    'OverlayHandle',
    'PresentationSink',
]
