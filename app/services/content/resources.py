"""Resource service - admin-curated learning material."""

from typing import Any

from app.errors import ForbiddenError, NotFoundError, ValidationError
from app.models.content import Actor, Resource
from app.repositories.content import ResourceRepository
from app.services.content.fields import serialize_content
from app.services.moderation import ContentGuard, collect_texts


class ResourceService:
    """Create (admin only) and edit resources."""

    def __init__(self, repo: ResourceRepository, guard: ContentGuard):
        self._repo = repo
        self._guard = guard

    def create_resource(
        self,
        actor: Actor,
        title: str,
        content: str | dict | list | None = None,
        category_id: int | None = None,
    ) -> Resource:
        if not actor.is_admin:
            raise ForbiddenError("Only administrators can create resources")
        if not title:
            raise ValidationError("Title is required")

        return self._guard.guarded(
            collect_texts(title, content),
            lambda: self._repo.create(actor.id, title, serialize_content(content), category_id),
        )

    def update_resource(
        self,
        actor: Actor,
        resource_id: int,
        title: str | None = None,
        content: Any = None,
        category_id: int | None = None,
    ) -> Resource:
        resource = self._repo.get(resource_id)
        if resource is None:
            raise NotFoundError(f"Resource {resource_id} not found")
        if not actor.can_edit(resource.user_id):
            raise ForbiddenError("You are not allowed to edit this resource")

        changes: dict[str, Any] = {}
        if title is not None:
            changes["title"] = title
        if content is not None:
            changes["content"] = serialize_content(content)
        if category_id is not None:
            changes["category_id"] = category_id

        return self._guard.guarded(collect_texts(title, content), lambda: self._repo.update(resource_id, changes))
