"""Screening repository - screenings and their comment threads."""

from app.models.content import Screening, ScreeningComment
from app.repositories.base import BaseRepository

_SCREENING_COLUMNS = ", ".join(Screening.columns())
_COMMENT_COLUMNS = ", ".join(ScreeningComment.columns())


class ScreeningRepository(BaseRepository):
    """Repository for screenings and screening comments."""

    def get(self, screening_id: int) -> Screening | None:
        row = self.fetchone(f"SELECT {_SCREENING_COLUMNS} FROM screening WHERE id = ?", [screening_id])
        return Screening.from_row(row)

    def create(
        self,
        admin_uploader_id: int,
        title: str,
        video_url: str,
        description: str | None = None,
        creator_id: int | None = None,
        thumbnail_url: str | None = None,
    ) -> Screening:
        row = self.fetchone(
            f"""
            INSERT INTO screening (admin_uploader_id, creator_id, title, description, video_url, thumbnail_url)
            VALUES (?, ?, ?, ?, ?, ?)
            RETURNING {_SCREENING_COLUMNS}
            """,
            [admin_uploader_id, creator_id, title, description, video_url, thumbnail_url],
        )
        return Screening.from_row(row)

    # Comments

    def create_comment(self, screening_id: int, user_id: int, content: str) -> ScreeningComment:
        row = self.fetchone(
            f"""
            INSERT INTO screening_comment (screening_id, user_id, content)
            VALUES (?, ?, ?)
            RETURNING {_COMMENT_COLUMNS}
            """,
            [screening_id, user_id, content],
        )
        return ScreeningComment.from_row(row)

    def list_comments(self, screening_id: int) -> list[ScreeningComment]:
        rows = self.fetchall(
            f"SELECT {_COMMENT_COLUMNS} FROM screening_comment WHERE screening_id = ? ORDER BY created_at, id",
            [screening_id],
        )
        return [ScreeningComment.from_row(r) for r in rows]
