"""Lobby roster entry: one participant of the champion-select chat."""
from dataclasses import dataclass
from typing import Any, List, Mapping

CHAMP_SELECT_MARKER = "champ-select"


@dataclass(frozen=True)
class LobbyRosterEntry:
    """A player in the current lobby, in display order."""

    puuid: str
    game_name: str
    game_tag: str
    cid: str = ""

    @property
    def riot_id(self) -> str:
        """Full Riot ID, e.g. ``PlayerOne#EUW``."""
        return f"{self.game_name}#{self.game_tag}"

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> 'LobbyRosterEntry':
        """Build an entry from one chat participant object.

        Raises:
            KeyError: if the participant carries no ``puuid``.
        """
        return cls(
            puuid=str(data['puuid']),
            game_name=str(data.get('game_name') or ''),
            game_tag=str(data.get('game_tag') or ''),
            cid=str(data.get('cid') or ''),
        )

    @staticmethod
    def champion_select_payloads(payload: Mapping[str, Any]) -> List[Mapping[str, Any]]:
        """Raw participant objects whose ``cid`` belongs to champion select.

        Raises:
            KeyError, TypeError: if ``participants`` is missing or not a list.
        """
        return [
            p for p in payload['participants']
            if isinstance(p, Mapping) and CHAMP_SELECT_MARKER in str(p.get('cid') or '')
        ]

    @classmethod
    def champion_select_roster(cls, payload: Mapping[str, Any]) -> List['LobbyRosterEntry']:
        """Participants of the champion-select conversation, order preserved.

        A participant without a ``puuid`` is left out; the others still make
        the roster.
        """
        roster = []
        for data in cls.champion_select_payloads(payload):
            try:
                roster.append(cls.from_payload(data))
            except KeyError:
                continue
        return roster
