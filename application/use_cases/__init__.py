"""Application use cases."""
from .aggregate_lobby import AggregateLobbyUseCase

__all__ = [
    'AggregateLobbyUseCase',
]
