"""Post service - image/video works with prompt text."""

from loguru import logger

from app.errors import ForbiddenError, NotFoundError, ValidationError
from app.models.content import Actor, Post
from app.repositories.content import PostRepository
from app.services.content.fields import present
from app.services.moderation import ContentGuard, collect_texts

POST_TYPES = ("IMAGE", "VIDEO")


class PostService:
    """Create and edit posts."""

    def __init__(self, repo: PostRepository, guard: ContentGuard):
        self._repo = repo
        self._guard = guard

    def create_post(
        self,
        actor: Actor,
        prompt: str,
        type: str = "IMAGE",
        title: str | None = None,
        file_url: str | None = None,
    ) -> Post:
        if not prompt:
            raise ValidationError("Prompt is required")
        if type not in POST_TYPES:
            raise ValidationError(f"Invalid post type: {type}")

        post = self._guard.guarded(
            collect_texts(prompt, title),
            lambda: self._repo.create(actor.id, type, prompt, title, file_url),
        )
        logger.info("Post {} created by user {}", post.id, actor.id)
        return post

    def update_post(self, actor: Actor, post_id: int, title: str | None = None, prompt: str | None = None) -> Post:
        """Only fields passed (non-None) are changed and checked."""
        post = self._repo.get(post_id)
        if post is None:
            raise NotFoundError(f"Post {post_id} not found")
        if not actor.can_edit(post.user_id):
            raise ForbiddenError("You can only edit your own posts")

        changes = present(title=title, prompt=prompt)
        return self._guard.guarded(collect_texts(title, prompt), lambda: self._repo.update(post_id, changes))
