"""Direct message repository."""

from app.models.content import UserMessage
from app.repositories.base import BaseRepository

_COLUMNS = ", ".join(UserMessage.columns())


class UserMessageRepository(BaseRepository):
    """Repository for user-to-user messages."""

    def create(self, sender_id: int, receiver_id: int, content: str) -> UserMessage:
        row = self.fetchone(
            f"""
            INSERT INTO user_message (sender_id, receiver_id, content)
            VALUES (?, ?, ?)
            RETURNING {_COLUMNS}
            """,
            [sender_id, receiver_id, content],
        )
        return UserMessage.from_row(row)

    def list_between(self, user_id: int, other_id: int) -> list[UserMessage]:
        rows = self.fetchall(
            f"""
            SELECT {_COLUMNS} FROM user_message
            WHERE (sender_id = ? AND receiver_id = ?) OR (sender_id = ? AND receiver_id = ?)
            ORDER BY created_at, id
            """,
            [user_id, other_id, other_id, user_id],
        )
        return [UserMessage.from_row(r) for r in rows]

    def unread_count(self, user_id: int) -> int:
        return self.scalar(
            "SELECT COUNT(*) FROM user_message WHERE receiver_id = ? AND NOT is_read",
            [user_id],
        )

    def mark_as_read(self, user_id: int, other_id: int) -> int:
        """Mark messages from other_id to user_id as read, returns count."""
        rows = self.fetchall(
            """
            UPDATE user_message SET is_read = TRUE
            WHERE receiver_id = ? AND sender_id = ? AND NOT is_read
            RETURNING id
            """,
            [user_id, other_id],
        )
        return len(rows)
