"""User repository."""

from app.models.content import Role, User
from app.repositories.base import BaseRepository

_COLUMNS = ", ".join(User.columns())


class UserRepository(BaseRepository):
    """Repository for platform users."""

    def get(self, user_id: int) -> User | None:
        row = self.fetchone(f"SELECT {_COLUMNS} FROM app_user WHERE id = ?", [user_id])
        return User.from_row(row)

    def exists(self, user_id: int) -> bool:
        return self.scalar("SELECT COUNT(*) FROM app_user WHERE id = ?", [user_id]) > 0

    def create(self, username: str, nickname: str | None = None, role: Role = Role.NORMAL) -> User:
        row = self.fetchone(
            f"INSERT INTO app_user (username, nickname, role) VALUES (?, ?, ?) RETURNING {_COLUMNS}",
            [username, nickname, Role(role).value],
        )
        return User.from_row(row)
