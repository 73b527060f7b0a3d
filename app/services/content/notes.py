"""Note service - categorized notes with plain or rich-text content."""

from typing import Any

from app.errors import ForbiddenError, NotFoundError, ValidationError
from app.models.content import Actor, Note
from app.repositories.content import NoteRepository
from app.services.content.fields import present, serialize_content
from app.services.moderation import ContentGuard, collect_texts

NOTE_STATUSES = ("VISIBLE", "HIDDEN")


class NoteService:
    """Create and edit notes."""

    def __init__(self, repo: NoteRepository, guard: ContentGuard):
        self._repo = repo
        self._guard = guard

    def _require_category(self, category_id: int) -> None:
        if self._repo.get_category(category_id) is None:
            raise ValidationError(f"Note category {category_id} does not exist")

    def create_note(
        self,
        actor: Actor,
        category_id: int,
        title: str,
        content: str | dict | list | None = None,
        cover_image_url: str | None = None,
        status: str = "VISIBLE",
    ) -> Note:
        if not title:
            raise ValidationError("Title is required")
        if status not in NOTE_STATUSES:
            raise ValidationError(f"Invalid note status: {status}")
        self._require_category(category_id)

        return self._guard.guarded(
            collect_texts(title, content),
            lambda: self._repo.create(
                actor.id, category_id, title, serialize_content(content), cover_image_url, status
            ),
        )

    def update_note(self, actor: Actor, note_id: int, **changes: Any) -> Note:
        """Partial update; accepts title, content, category_id, cover_image_url, status."""
        allowed = {"title", "content", "category_id", "cover_image_url", "status"}
        unknown = set(changes) - allowed
        if unknown:
            raise ValidationError(f"Unknown note fields: {', '.join(sorted(unknown))}")

        note = self._repo.get(note_id)
        if note is None:
            raise NotFoundError(f"Note {note_id} not found")
        if not actor.can_edit(note.user_id):
            raise ForbiddenError("You can only edit your own notes")

        changes = present(**changes)
        if "category_id" in changes:
            self._require_category(changes["category_id"])
        if changes.get("status", "VISIBLE") not in NOTE_STATUSES:
            raise ValidationError(f"Invalid note status: {changes['status']}")

        texts = collect_texts(changes.get("title"), changes.get("content"))
        if "content" in changes:
            changes["content"] = serialize_content(changes["content"])
        return self._guard.guarded(texts, lambda: self._repo.update(note_id, changes))
