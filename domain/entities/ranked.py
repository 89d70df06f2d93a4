"""Ranked standing entities."""
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ..enums import QueueType, Rank

UNRANKED = "Unranked"


@dataclass(frozen=True)
class QueueStanding:
    """Tier and division of one ranked queue."""

    tier: str
    division: str
    is_provisional: bool = False

    @property
    def is_valid(self) -> bool:
        return bool(
            self.tier
            and self.division
            and self.tier != "NA"
            and not self.is_provisional
        )

    @property
    def label(self) -> str:
        """Compact label: "G4" for divisioned tiers, the tier unchanged otherwise.

        Raises:
            ValueError: if a divisioned tier carries an unreadable division.
        """
        rank = Rank.from_string(self.tier)
        if rank is None:
            return self.tier
        return rank.short_label(self.division)

    @classmethod
    def from_payload(cls, data: Optional[Mapping[str, Any]]) -> Optional['QueueStanding']:
        if not data:
            return None
        return cls(
            tier=str(data.get('tier') or ''),
            division=str(data.get('division') or ''),
            is_provisional=bool(data.get('isProvisional', False)),
        )


@dataclass(frozen=True)
class RankedStats:
    """Standings per ranked queue for one player."""

    queues: Dict[QueueType, QueueStanding]

    def standing(self, queue: QueueType) -> Optional[QueueStanding]:
        return self.queues.get(queue)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> 'RankedStats':
        """Parse a ranked-stats object keyed by ``queueMap``.

        Raises:
            KeyError, TypeError: if ``queueMap`` is missing or not a mapping.
        """
        queue_map = payload['queueMap']
        queues: Dict[QueueType, QueueStanding] = {}
        for queue in QueueType.ranked_queues():
            standing = QueueStanding.from_payload(queue_map.get(queue.api_queue_name))
            if standing is not None:
                queues[queue] = standing
        return cls(queues=queues)
