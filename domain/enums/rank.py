"""Rank tier enumeration and division decoding."""
from enum import Enum
from typing import Optional

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def roman_to_number(roman: str) -> int:
    """Decode a Roman numeral such as a ranked division ("IV" -> 4).

    Single right-to-left pass: a symbol is subtracted when it is strictly
    smaller than the one to its right, added otherwise.

    Raises:
        ValueError: if ``roman`` is empty or holds a non-Roman symbol.
    """
    if not roman:
        raise ValueError("empty roman numeral")
    total = 0
    previous = 0
    for symbol in reversed(roman.upper()):
        try:
            value = _ROMAN_VALUES[symbol]
        except KeyError:
            raise ValueError(f"invalid roman numeral {roman!r}") from None
        total += -value if value < previous else value
        previous = value
    return total


class Rank(Enum):
    """League of Legends rank tiers."""

    IRON = "IRON"
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"
    EMERALD = "EMERALD"
    DIAMOND = "DIAMOND"
    MASTER = "MASTER"
    GRANDMASTER = "GRANDMASTER"
    CHALLENGER = "CHALLENGER"

    @property
    def has_divisions(self) -> bool:
        """Apex tiers (Master and above) have no I-IV divisions."""
        return self not in (Rank.MASTER, Rank.GRANDMASTER, Rank.CHALLENGER)

    @property
    def initial(self) -> str:
        return self.value[0]

    def short_label(self, division: str) -> str:
        """Compact label: "G4" for GOLD IV, the bare tier name for apex tiers."""
        if self.has_divisions:
            return f"{self.initial}{roman_to_number(division)}"
        return self.value

    @classmethod
    def from_string(cls, rank_str: str) -> Optional['Rank']:
        """Create Rank from string, None when the tier is unknown."""
        try:
            return cls[rank_str.upper()]
        except (KeyError, AttributeError):
            return None
