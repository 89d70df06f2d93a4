"""Application layer - Services and use cases."""
from .services import DisplayOptions, LobbyObserver, ObserverState
from .use_cases import AggregateLobbyUseCase

__all__ = [
    'AggregateLobbyUseCase',
    'DisplayOptions',
    'LobbyObserver',
    'ObserverState',
]
