"""Creator profile repository."""

from app.models.content import Creator
from app.repositories.base import BaseRepository

_COLUMNS = ", ".join(Creator.columns())


class CreatorRepository(BaseRepository):
    """Repository for creator profiles (one per user)."""

    def get_by_user(self, user_id: int) -> Creator | None:
        row = self.fetchone(f"SELECT {_COLUMNS} FROM creator WHERE user_id = ?", [user_id])
        return Creator.from_row(row)

    def upsert(self, user_id: int, nickname: str, bio: str | None, expertise: str | None) -> Creator:
        """Create the profile or overwrite its text fields."""
        existing = self.get_by_user(user_id)
        if existing is None:
            row = self.fetchone(
                f"""
                INSERT INTO creator (user_id, nickname, bio, expertise)
                VALUES (?, ?, ?, ?)
                RETURNING {_COLUMNS}
                """,
                [user_id, nickname, bio, expertise],
            )
            return Creator.from_row(row)

        self.update_fields("creator", existing.id, {"nickname": nickname, "bio": bio, "expertise": expertise})
        return self.get_by_user(user_id)
