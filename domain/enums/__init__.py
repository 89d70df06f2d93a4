"""Domain enumerations."""
from .gameflow_phase import GameflowPhase
from .queue_type import QueueType
from .rank import Rank, roman_to_number
from .role import Role

__all__ = [
    'GameflowPhase',
    'QueueType',
    'Rank',
    'Role',
    'roman_to_number',
]
