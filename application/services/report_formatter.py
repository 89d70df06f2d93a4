"""Report lines and the aggregated lookup link."""
from __future__ import annotations

from typing import Optional, Sequence
from urllib.parse import quote

from domain.entities import DerivedStats, LobbyRosterEntry, PlayerReport

NAME_DELIMITER = "%2C"
# characters encodeURIComponent leaves alone on top of quote()'s defaults
_URI_COMPONENT_SAFE = "!*'()"


def build_player_report(entry: LobbyRosterEntry, rank: str, stats: DerivedStats) -> PlayerReport:
    return PlayerReport(entry=entry, rank=rank, stats=stats)


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def build_multisearch_link(
    host: str,
    region: Optional[str],
    roster: Sequence[LobbyRosterEntry],
) -> Optional[str]:
    """``https://<host>/multisearch/<region>?summoners=<a%23T1%2Cb%23T2>``

    None when the region is unknown or the roster is empty.
    """
    if not region or not roster:
        return None
    names = NAME_DELIMITER.join(encode_uri_component(entry.riot_id) for entry in roster)
    return f"https://{host}/multisearch/{region}?summoners={names}"
