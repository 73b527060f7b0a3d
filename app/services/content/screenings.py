"""Screening service - admin-uploaded showcase videos and member comments."""

from loguru import logger

from app.errors import ForbiddenError, NotFoundError, ValidationError
from app.models.content import Actor, Screening, ScreeningComment
from app.repositories.content import ScreeningRepository, UserRepository
from app.services.moderation import ContentGuard, collect_texts


class ScreeningService:
    """Publish screenings (admin only) and comment on them."""

    def __init__(self, repo: ScreeningRepository, users: UserRepository, guard: ContentGuard):
        self._repo = repo
        self._users = users
        self._guard = guard

    def create_screening(
        self,
        actor: Actor,
        title: str,
        video_url: str,
        description: str | None = None,
        creator_id: int | None = None,
        thumbnail_url: str | None = None,
    ) -> Screening:
        if not actor.is_admin:
            raise ForbiddenError("Only administrators can upload screenings")
        if not title:
            raise ValidationError("Title is required")
        if not video_url:
            raise ValidationError("Video is required")
        if creator_id is not None and not self._users.exists(creator_id):
            raise ValidationError(f"Creator {creator_id} does not exist")

        screening = self._guard.guarded(
            collect_texts(title, description),
            lambda: self._repo.create(actor.id, title, video_url, description, creator_id, thumbnail_url),
        )
        logger.info("Screening {} uploaded by admin {}", screening.id, actor.id)
        return screening

    def add_comment(self, actor: Actor, screening_id: int, content: str) -> ScreeningComment:
        if self._repo.get(screening_id) is None:
            raise NotFoundError(f"Screening {screening_id} not found")
        if not content:
            raise ValidationError("Comment content is required")

        return self._guard.guarded(
            collect_texts(content),
            lambda: self._repo.create_comment(screening_id, actor.id, content),
            subject="Comment",
        )

    def comments(self, screening_id: int) -> list[ScreeningComment]:
        if self._repo.get(screening_id) is None:
            raise NotFoundError(f"Screening {screening_id} not found")
        return self._repo.list_comments(screening_id)
