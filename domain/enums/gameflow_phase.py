"""Gameflow phase enumeration."""
from enum import Enum
from typing import Optional


class GameflowPhase(Enum):
    """Phases published on the gameflow-phase event topic."""

    NONE = "None"
    LOBBY = "Lobby"
    MATCHMAKING = "Matchmaking"
    CHECKED_INTO_TOURNAMENT = "CheckedIntoTournament"
    READY_CHECK = "ReadyCheck"
    CHAMP_SELECT = "ChampSelect"
    GAME_START = "GameStart"
    FAILED_TO_LAUNCH = "FailedToLaunch"
    IN_PROGRESS = "InProgress"
    RECONNECT = "Reconnect"
    WAITING_FOR_STATS = "WaitingForStats"
    PRE_END_OF_GAME = "PreEndOfGame"
    END_OF_GAME = "EndOfGame"
    TERMINATED_IN_ERROR = "TerminatedInError"

    @classmethod
    def from_string(cls, phase: str) -> Optional['GameflowPhase']:
        """Return the matching phase, None for values this client does not know."""
        try:
            return cls(phase)
        except ValueError:
            return None
