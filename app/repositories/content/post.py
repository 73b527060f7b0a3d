"""Post repository."""

from loguru import logger

from app.models.content import Post
from app.repositories.base import BaseRepository

_COLUMNS = ", ".join(Post.columns())


class PostRepository(BaseRepository):
    """Repository for image/video works."""

    def get(self, post_id: int) -> Post | None:
        row = self.fetchone(f"SELECT {_COLUMNS} FROM post WHERE id = ?", [post_id])
        return Post.from_row(row)

    def create(self, user_id: int, type: str, prompt: str, title: str | None, file_url: str | None) -> Post:
        row = self.fetchone(
            f"""
            INSERT INTO post (user_id, type, title, prompt, file_url)
            VALUES (?, ?, ?, ?, ?)
            RETURNING {_COLUMNS}
            """,
            [user_id, type, title, prompt, file_url],
        )
        logger.debug("Post {} created by user {}", row[0], user_id)
        return Post.from_row(row)

    def update(self, post_id: int, changes: dict) -> Post:
        self.update_fields("post", post_id, changes)
        return self.get(post_id)
