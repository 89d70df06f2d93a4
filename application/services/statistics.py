"""Per-player statistics over match history columns.

Every function here is pure and fails soft: missing input becomes "N/A"
instead of an exception.

Columns normally arrive as lists, but a column may also be a comma-joined
string (``"true,false,true"``, ``"3,0,7"``), which is how older payloads
serialised them; both shapes are accepted.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List, Optional, Sequence, Union

from domain.entities import NOT_AVAILABLE, DerivedStats, MatchHistoryBundle
from domain.enums import Role

Column = Union[Sequence[Any], str, None]

PERFECT_KDA = "PERFECT KDA"


def _entries(column: Column) -> Optional[List[Any]]:
    if column is None:
        return None
    if isinstance(column, str):
        return [part.strip() for part in column.split(",")] if column else []
    return list(column)


def _numbers(column: Column) -> List[float]:
    values: List[float] = []
    for entry in _entries(column) or []:
        if isinstance(entry, bool):
            continue
        if isinstance(entry, (int, float)):
            values.append(float(entry))
            continue
        for part in str(entry).split(","):
            try:
                values.append(float(part))
            except ValueError:
                continue
    return values


def _is_win(entry: Any) -> bool:
    if isinstance(entry, bool):
        return entry
    return str(entry).strip().lower() == "true"


def win_rate(column: Column) -> str:
    """Share of won games as a whole percent, rounded half up ("67%")."""
    entries = _entries(column)
    if not entries:
        return NOT_AVAILABLE
    wins = sum(1 for entry in entries if _is_win(entry))
    percent = Decimal(100 * wins) / Decimal(len(entries))
    return f"{percent.quantize(Decimal('1'), rounding=ROUND_HALF_UP)}%"


def most_common_role(column: Column) -> str:
    """Most played lane, capitalised; ties are all reported ("Top/Jungle")."""
    entries = _entries(column)
    if entries is None:
        return NOT_AVAILABLE

    tally: Dict[str, int] = {}
    for lane in entries:
        if Role.is_sentinel(lane):
            continue
        key = str(lane).strip().lower()
        tally[key] = tally.get(key, 0) + 1
    if not tally:
        return NOT_AVAILABLE

    best = max(tally.values())
    # dicts keep insertion order, so ties come out in order of first appearance
    return "/".join(role.capitalize() for role, count in tally.items() if count == best)


def kda(kills: Column, assists: Column, deaths: Column) -> str:
    """(kills + assists) / deaths over all games, two decimals."""
    if kills is None or assists is None or deaths is None:
        return NOT_AVAILABLE
    total_deaths = sum(_numbers(deaths))
    if total_deaths == 0:
        return PERFECT_KDA
    ratio = (sum(_numbers(kills)) + sum(_numbers(assists))) / total_deaths
    return f"{ratio:.2f} KDA"


def derive_stats(bundle: Optional[MatchHistoryBundle]) -> DerivedStats:
    """All three statistics for one player; "N/A" across the board without data."""
    if bundle is None:
        return DerivedStats()
    return DerivedStats(
        win_rate=win_rate(bundle.wins),
        roles=most_common_role(bundle.lanes),
        kda=kda(bundle.kills, bundle.assists, bundle.deaths),
    )
