"""Match history entities: raw per-match records and their columnar bundle."""
from dataclasses import dataclass, fields
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from ..enums import Role

ITEM_SLOTS = 7


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


@dataclass(frozen=True)
class MatchRecord:
    """One past game, seen from the first participant slot of the payload.

    The client puts the requested player first, so that slot is the only
    one read.
    """

    queue_id: int
    game_type: str
    champion_id: int
    kills: int
    deaths: int
    assists: int
    minions: int
    gold: int
    win: bool
    caused_early_surrender: bool
    lane: str
    spell1_id: Optional[int]
    spell2_id: Optional[int]
    items: Tuple[Optional[int], ...]

    @classmethod
    def from_game(cls, game: Mapping[str, Any]) -> 'MatchRecord':
        """Parse one entry of ``games.games``.

        Raises:
            KeyError, IndexError, TypeError, ValueError: on a shape mismatch.
        """
        participant = game['participants'][0]
        stats = participant['stats']
        timeline = participant.get('timeline') or {}
        return cls(
            queue_id=int(game.get('queueId', 0)),
            game_type=str(game.get('gameType', '')),
            champion_id=int(participant.get('championId', 0)),
            kills=int(stats['kills']),
            deaths=int(stats['deaths']),
            assists=int(stats['assists']),
            minions=int(stats.get('neutralMinionsKilled', 0)) + int(stats.get('totalMinionsKilled', 0)),
            gold=int(stats.get('goldEarned', 0)),
            win=_as_bool(stats['win']),
            caused_early_surrender=_as_bool(stats.get('causedEarlySurrender', False)),
            lane=str(timeline.get('lane') or Role.NONE.value),
            spell1_id=participant.get('spell1Id'),
            spell2_id=participant.get('spell2Id'),
            # slots are kept verbatim, empty ones included
            items=tuple(stats.get(f'item{slot}') for slot in range(ITEM_SLOTS)),
        )


@dataclass(frozen=True)
class MatchHistoryBundle:
    """Columnar view of N matches: index i of every column is match i."""

    queue_ids: List[int]
    game_types: List[str]
    champion_ids: List[int]
    kills: List[int]
    deaths: List[int]
    assists: List[int]
    minions: List[int]
    gold: List[int]
    wins: List[str]
    early_surrenders: List[bool]
    lanes: List[str]
    spell1_ids: List[Optional[int]]
    spell2_ids: List[Optional[int]]
    items: List[Tuple[Optional[int], ...]]

    def __post_init__(self) -> None:
        lengths = {f.name: len(getattr(self, f.name)) for f in fields(self)}
        distinct = set(lengths.values())
        if len(distinct) != 1:
            raise ValueError(f"column lengths differ: {lengths}")
        if distinct == {0}:
            raise ValueError("a match history bundle needs at least one match")

    def __len__(self) -> int:
        return len(self.queue_ids)

    @classmethod
    def from_records(cls, records: Iterable[MatchRecord]) -> 'MatchHistoryBundle':
        records = list(records)
        return cls(
            queue_ids=[r.queue_id for r in records],
            game_types=[r.game_type for r in records],
            champion_ids=[r.champion_id for r in records],
            kills=[r.kills for r in records],
            deaths=[r.deaths for r in records],
            assists=[r.assists for r in records],
            minions=[r.minions for r in records],
            gold=[r.gold for r in records],
            wins=["true" if r.win else "false" for r in records],
            early_surrenders=[r.caused_early_surrender for r in records],
            lanes=[r.lane for r in records],
            spell1_ids=[r.spell1_id for r in records],
            spell2_ids=[r.spell2_id for r in records],
            items=[r.items for r in records],
        )

    def only_queue(self, queue_id: int) -> Optional['MatchHistoryBundle']:
        """Restrict every column to games of one queue; None if none remain."""
        keep = [i for i, q in enumerate(self.queue_ids) if q == queue_id]
        if not keep:
            return None
        columns = {f.name: [getattr(self, f.name)[i] for i in keep] for f in fields(self)}
        return MatchHistoryBundle(**columns)
