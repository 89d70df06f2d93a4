"""Report entities produced by one champion-select aggregation run."""
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from .roster import LobbyRosterEntry

if TYPE_CHECKING:
    from ..interfaces import OverlayHandle

NOT_AVAILABLE = "N/A"
FIELD_SEPARATOR = " - "


@dataclass(frozen=True)
class DerivedStats:
    """Presentation-ready statistics for one player."""

    win_rate: str = NOT_AVAILABLE
    roles: str = NOT_AVAILABLE
    kda: str = NOT_AVAILABLE


@dataclass(frozen=True)
class PlayerReport:
    entry: LobbyRosterEntry
    rank: str
    stats: DerivedStats

    @property
    def line(self) -> str:
        """``<name> - <rank> - <win rate> - <roles> - <kda>``"""
        return FIELD_SEPARATOR.join(
            [self.entry.game_name, self.rank, self.stats.win_rate, self.stats.roles, self.stats.kda]
        )


@dataclass
class LobbyReport:
    """Everything a run handed to the sinks.

    ``overlay`` is the panel created for this report; whoever holds the
    report owns it and must close it on teardown.
    """

    players: List[PlayerReport] = field(default_factory=list)
    link: Optional[str] = None
    overlay: Optional['OverlayHandle'] = None

    @property
    def lines(self) -> List[str]:
        return [player.line for player in self.players]
