"""Creator profile service."""

from app.errors import ValidationError
from app.models.content import Actor, Creator
from app.repositories.content import CreatorRepository
from app.services.moderation import ContentGuard, collect_texts


class CreatorService:
    def __init__(self, repo: CreatorRepository, guard: ContentGuard):
        self._repo = repo
        self._guard = guard

    def create_or_update(
        self,
        actor: Actor,
        nickname: str,
        bio: str | None = None,
        expertise: str | None = None,
    ) -> Creator:
        """Upsert the caller's creator profile."""
        if not nickname:
            raise ValidationError("Nickname is required")

        return self._guard.guarded(
            collect_texts(nickname, bio, expertise),
            lambda: self._repo.upsert(actor.id, nickname, bio, expertise),
        )

    def get(self, user_id: int) -> Creator | None:
        return self._repo.get_by_user(user_id)
