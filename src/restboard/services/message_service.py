"""Message service — business logic for creating and editing messages.

Learn: Service layer separates business logic from HTTP routing.
API routes call services, services call the store. The author of a
new message always comes from the acting identity, never from the
request body, so a client can't post on someone else's behalf.
"""

from typing import Optional

import structlog

from restboard.store.memory import InMemoryStore
from restboard.store.models import Message, User

logger = structlog.get_logger()


class MessageService:
    """Business logic for messages."""

    def __init__(self, store: InMemoryStore):
        self.store = store

    def list_messages(self) -> list[Message]:
        return self.store.list("messages")

    def get_message(self, message_id: str) -> Message:
        """Raises NotFoundError if the message doesn't exist."""
        return self.store.get("messages", message_id)

    def create_message(self, text: str, author: Optional[User]) -> Message:
        """Store a new message with a generated UUID id.

        Learn: author is None only when create_message has been removed
        from the protected operations; the message is then unowned.
        """
        message = self.store.create(
            "messages",
            Message(text=text, user_id=author.id if author else ""),
        )
        logger.info("message.created", message_id=message.id, user_id=message.user_id)
        return message

    def update_text(self, message_id: str, text: str) -> Message:
        message = self.store.update("messages", message_id, {"text": text})
        logger.info("message.updated", message_id=message_id)
        return message

    def delete_message(self, message_id: str) -> Message:
        """Remove a message and return what was removed."""
        message = self.store.delete("messages", message_id)
        logger.info("message.deleted", message_id=message_id)
        return message
