"""Chat repository implementation."""
import logging
from typing import List, Optional

from domain.entities import ChatConversation
from domain.interfaces import IChatRepository
from infrastructure.api import LCUClient

logger = logging.getLogger(__name__)


class ChatRepository(IChatRepository):
    """Chat conversations of the local client."""

    def __init__(self, api_client: LCUClient):
        self.api_client = api_client

    async def find_champion_select_conversation(self) -> Optional[ChatConversation]:
        conversations = await self.api_client.get_conversations()
        if not isinstance(conversations, list):
            return None
        for item in conversations:
            try:
                conversation = ChatConversation.from_payload(item)
            except (KeyError, TypeError, AttributeError):
                continue
            if conversation.is_champion_select:
                return conversation
        return None

    async def post_message(self, conversation_id: str, body: str) -> bool:
        result = await self.api_client.post_conversation_message(conversation_id, body)
        if result is None:
            logger.warning(f"Message to {conversation_id} was not accepted")
            return False
        return True

    async def get_message_bodies(self, conversation_id: str) -> List[str]:
        """Bodies of the messages currently in a conversation, oldest first."""
        messages = await self.api_client.get_conversation_messages(conversation_id)
        if not isinstance(messages, list):
            return []
        return [str(m.get('body', '')) for m in messages if isinstance(m, dict)]
