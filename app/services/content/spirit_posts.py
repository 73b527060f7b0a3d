"""Spirit post service - member requests that other members claim and discuss.

Flow: a member publishes a post, other members claim it, each claimer talks
to the poster through post messages, and the poster finally marks claimers
as completed once a two-way conversation exists.
"""

from loguru import logger

from app.errors import ConflictError, ForbiddenError, NotFoundError, ValidationError
from app.models.content import Actor, SpiritPost, SpiritPostClaim, SpiritPostMessage
from app.repositories.content import SpiritPostRepository
from app.services.content.fields import present
from app.services.moderation import ContentGuard, collect_texts

# Messages needed between poster and claimer before completion
MIN_CONVERSATION_MESSAGES = 2


class SpiritPostService:
    def __init__(self, repo: SpiritPostRepository, guard: ContentGuard):
        self._repo = repo
        self._guard = guard

    def _get_post(self, post_id: int) -> SpiritPost:
        post = self._repo.get(post_id)
        if post is None:
            raise NotFoundError(f"Spirit post {post_id} not found")
        return post

    def create(self, actor: Actor, title: str, content: str) -> SpiritPost:
        if not actor.is_member:
            raise ForbiddenError("Only premium and lifetime members can publish spirit posts")
        if not title or not content:
            raise ValidationError("Title and content are required")

        return self._guard.guarded(
            collect_texts(title, content),
            lambda: self._repo.create(actor.id, title, content),
        )

    def update(self, actor: Actor, post_id: int, title: str | None = None, content: str | None = None) -> SpiritPost:
        post = self._get_post(post_id)
        if not actor.can_edit(post.user_id):
            raise ForbiddenError("You can only edit your own spirit posts")

        changes = present(title=title, content=content)
        return self._guard.guarded(collect_texts(title, content), lambda: self._repo.update(post_id, changes))

    def claim(self, actor: Actor, post_id: int) -> SpiritPostClaim:
        if not actor.is_member:
            raise ForbiddenError("Only premium and lifetime members can claim spirit posts")
        post = self._get_post(post_id)
        if post.user_id == actor.id:
            raise ValidationError("You cannot claim your own spirit post")
        if self._repo.get_claim(post_id, actor.id) is not None:
            raise ConflictError("You have already claimed this spirit post")

        claim = self._repo.create_claim(post_id, actor.id)
        logger.info("Spirit post {} claimed by user {}", post_id, actor.id)
        return claim

    def send_message(self, actor: Actor, post_id: int, content: str) -> SpiritPostMessage:
        """Claimer writes to the poster."""
        post = self._get_post(post_id)
        if post.user_id == actor.id:
            raise ValidationError("Use reply to message a specific claimer")
        if self._repo.get_claim(post_id, actor.id) is None:
            raise ForbiddenError("You have not claimed this spirit post")

        return self._guard.guarded(
            collect_texts(content),
            lambda: self._repo.create_message(post_id, actor.id, post.user_id, content),
            subject="Message",
        )

    def reply(self, actor: Actor, post_id: int, receiver_id: int, content: str) -> SpiritPostMessage:
        """Poster writes to one of the claimers."""
        post = self._get_post(post_id)
        if post.user_id != actor.id:
            raise ForbiddenError("Only the poster can reply to claimers")
        if self._repo.get_claim(post_id, receiver_id) is None:
            raise ValidationError(f"User {receiver_id} has not claimed this spirit post")

        return self._guard.guarded(
            collect_texts(content),
            lambda: self._repo.create_message(post_id, actor.id, receiver_id, content),
            subject="Message",
        )

    def messages(self, actor: Actor, post_id: int) -> list[SpiritPostMessage]:
        post = self._get_post(post_id)
        if post.user_id != actor.id and self._repo.get_claim(post_id, actor.id) is None:
            raise ForbiddenError("You have not claimed this spirit post")
        return self._repo.list_messages(post_id, actor.id)

    def mark_completed(self, actor: Actor, post_id: int, claimer_ids: list[int]) -> dict:
        post = self._get_post(post_id)
        if post.user_id != actor.id:
            raise ForbiddenError("Only the poster can mark claims as completed")

        for claimer_id in claimer_ids:
            if self._repo.conversation_size(post_id, actor.id, claimer_id) < MIN_CONVERSATION_MESSAGES:
                raise ValidationError(f"User {claimer_id} has no two-way conversation with you yet")

        updated = self._repo.complete_claims(post_id, claimer_ids)
        logger.info("Spirit post {}: {} claims marked completed", post_id, updated)
        return {"success": True, "completed": updated}
