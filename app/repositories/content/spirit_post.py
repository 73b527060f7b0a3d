"""Spirit post repository - posts, claims and claim conversations."""

from app.models.content import SpiritPost, SpiritPostClaim, SpiritPostMessage
from app.repositories.base import BaseRepository

_POST_COLUMNS = ", ".join(SpiritPost.columns())
_CLAIM_COLUMNS = ", ".join(SpiritPostClaim.columns())
_MESSAGE_COLUMNS = ", ".join(SpiritPostMessage.columns())


class SpiritPostRepository(BaseRepository):
    """Repository for spirit posts and their claim workflow."""

    def get(self, post_id: int) -> SpiritPost | None:
        row = self.fetchone(f"SELECT {_POST_COLUMNS} FROM spirit_post WHERE id = ?", [post_id])
        return SpiritPost.from_row(row)

    def create(self, user_id: int, title: str, content: str) -> SpiritPost:
        row = self.fetchone(
            f"INSERT INTO spirit_post (user_id, title, content) VALUES (?, ?, ?) RETURNING {_POST_COLUMNS}",
            [user_id, title, content],
        )
        return SpiritPost.from_row(row)

    def update(self, post_id: int, changes: dict) -> SpiritPost:
        self.update_fields("spirit_post", post_id, changes)
        return self.get(post_id)

    # Claims

    def get_claim(self, post_id: int, user_id: int) -> SpiritPostClaim | None:
        row = self.fetchone(
            f"SELECT {_CLAIM_COLUMNS} FROM spirit_post_claim WHERE post_id = ? AND user_id = ?",
            [post_id, user_id],
        )
        return SpiritPostClaim.from_row(row)

    def create_claim(self, post_id: int, user_id: int) -> SpiritPostClaim:
        row = self.fetchone(
            f"INSERT INTO spirit_post_claim (post_id, user_id) VALUES (?, ?) RETURNING {_CLAIM_COLUMNS}",
            [post_id, user_id],
        )
        return SpiritPostClaim.from_row(row)

    def complete_claims(self, post_id: int, user_ids: list[int]) -> int:
        if not user_ids:
            return 0
        placeholders = ", ".join("?" for _ in user_ids)
        rows = self.fetchall(
            f"""
            UPDATE spirit_post_claim SET is_completed = TRUE
            WHERE post_id = ? AND user_id IN ({placeholders})
            RETURNING id
            """,
            [post_id, *user_ids],
        )
        return len(rows)

    # Messages

    def create_message(self, post_id: int, sender_id: int, receiver_id: int, content: str) -> SpiritPostMessage:
        row = self.fetchone(
            f"""
            INSERT INTO spirit_post_message (post_id, sender_id, receiver_id, content)
            VALUES (?, ?, ?, ?)
            RETURNING {_MESSAGE_COLUMNS}
            """,
            [post_id, sender_id, receiver_id, content],
        )
        return SpiritPostMessage.from_row(row)

    def conversation_size(self, post_id: int, user_a: int, user_b: int) -> int:
        """Number of messages exchanged between two users on a post (both directions)."""
        return self.scalar(
            """
            SELECT COUNT(*) FROM spirit_post_message
            WHERE post_id = ?
              AND ((sender_id = ? AND receiver_id = ?) OR (sender_id = ? AND receiver_id = ?))
            """,
            [post_id, user_a, user_b, user_b, user_a],
        )

    def list_messages(self, post_id: int, user_id: int) -> list[SpiritPostMessage]:
        rows = self.fetchall(
            f"""
            SELECT {_MESSAGE_COLUMNS} FROM spirit_post_message
            WHERE post_id = ? AND (sender_id = ? OR receiver_id = ?)
            ORDER BY created_at, id
            """,
            [post_id, user_id, user_id],
        )
        return [SpiritPostMessage.from_row(r) for r in rows]
