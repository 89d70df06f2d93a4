"""Lane enumeration as reported by match history timelines."""
from enum import Enum


class Role(Enum):
    """Lanes found on match history participant timelines.

    ``NONE`` is what the client reports for games without lanes
    (ARAM, arena, remakes) and never counts as a played role.
    """

    TOP = "TOP"
    JUNGLE = "JUNGLE"
    MIDDLE = "MIDDLE"
    BOTTOM = "BOTTOM"
    NONE = "NONE"

    @classmethod
    def is_sentinel(cls, lane: object) -> bool:
        """True for values that must not be tallied as a role."""
        if lane is None:
            return True
        text = str(lane).strip()
        return not text or text.upper() == cls.NONE.value
