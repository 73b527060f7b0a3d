"""Note repository - notes and their categories."""

from app.models.content import Note, NoteCategory
from app.repositories.base import BaseRepository

_COLUMNS = ", ".join(Note.columns())


class NoteRepository(BaseRepository):
    """Repository for notes and note categories."""

    def get(self, note_id: int) -> Note | None:
        row = self.fetchone(f"SELECT {_COLUMNS} FROM note WHERE id = ?", [note_id])
        return Note.from_row(row)

    def create(
        self,
        user_id: int,
        category_id: int,
        title: str,
        content: str | None,
        cover_image_url: str | None,
        status: str,
    ) -> Note:
        row = self.fetchone(
            f"""
            INSERT INTO note (user_id, category_id, title, content, cover_image_url, status)
            VALUES (?, ?, ?, ?, ?, ?)
            RETURNING {_COLUMNS}
            """,
            [user_id, category_id, title, content, cover_image_url, status],
        )
        return Note.from_row(row)

    def update(self, note_id: int, changes: dict) -> Note:
        self.update_fields("note", note_id, changes)
        return self.get(note_id)

    def get_category(self, category_id: int) -> NoteCategory | None:
        row = self.fetchone("SELECT id, name FROM note_category WHERE id = ?", [category_id])
        return NoteCategory.from_row(row)

    def create_category(self, name: str) -> NoteCategory:
        row = self.fetchone("INSERT INTO note_category (name) VALUES (?) RETURNING id, name", [name])
        return NoteCategory.from_row(row)
