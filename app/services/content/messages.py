"""Direct message service."""

from loguru import logger

from app.errors import NotFoundError, ValidationError
from app.models.content import Actor, UserMessage
from app.repositories.content import UserMessageRepository, UserRepository
from app.services.moderation import ContentGuard, collect_texts


class UserMessageService:
    """Send and read direct messages between users."""

    def __init__(self, repo: UserMessageRepository, users: UserRepository, guard: ContentGuard):
        self._repo = repo
        self._users = users
        self._guard = guard

    def send(self, actor: Actor, receiver_id: int, content: str) -> UserMessage:
        if not self._users.exists(receiver_id):
            raise NotFoundError(f"Receiver {receiver_id} not found")
        if receiver_id == actor.id:
            raise ValidationError("You cannot send a message to yourself")
        if not content:
            raise ValidationError("Message content is required")

        message = self._guard.guarded(
            collect_texts(content),
            lambda: self._repo.create(actor.id, receiver_id, content),
            subject="Message",
        )
        logger.debug("Message {} sent {} -> {}", message.id, actor.id, receiver_id)
        return message

    def conversation(self, actor: Actor, other_id: int) -> list[UserMessage]:
        if not self._users.exists(other_id):
            raise NotFoundError(f"User {other_id} not found")
        return self._repo.list_between(actor.id, other_id)

    def mark_as_read(self, actor: Actor, other_id: int) -> int:
        return self._repo.mark_as_read(actor.id, other_id)

    def unread_count(self, actor: Actor) -> int:
        return self._repo.unread_count(actor.id)
