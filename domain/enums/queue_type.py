"""Ranked queues as keyed in the client's ranked-stats payload."""
from enum import Enum
from typing import List


class QueueType(Enum):
    """Ranked queues, valued by the queue id found on match history records.

    The member name doubles as the ``queueMap`` key of a ranked-stats
    payload (``RANKED_SOLO_5x5``, ``RANKED_FLEX_SR``).
    """

    RANKED_SOLO_5x5 = 420
    RANKED_FLEX_SR = 440

    @property
    def queue_name(self) -> str:
        return "Ranked Solo/Duo" if self is QueueType.RANKED_SOLO_5x5 else "Ranked Flex 5v5"

    @property
    def api_queue_name(self) -> str:
        return self.name

    @classmethod
    def ranked_queues(cls) -> List['QueueType']:
        """Resolution order for a player's rank: solo first, then flex."""
        return [cls.RANKED_SOLO_5x5, cls.RANKED_FLEX_SR]
