"""Chat conversation entity."""
from dataclasses import dataclass
from typing import Any, Mapping

CHAMPION_SELECT_TYPE = "championSelect"


@dataclass(frozen=True)
class ChatConversation:
    """A chat conversation known to the client."""

    id: str
    type: str

    @property
    def is_champion_select(self) -> bool:
        return self.type == CHAMPION_SELECT_TYPE

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> 'ChatConversation':
        return cls(id=str(data['id']), type=str(data.get('type') or ''))
