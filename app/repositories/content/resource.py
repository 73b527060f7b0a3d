"""Resource repository."""

from app.models.content import Resource
from app.repositories.base import BaseRepository

_COLUMNS = ", ".join(Resource.columns())


class ResourceRepository(BaseRepository):
    """Repository for curated resources."""

    def get(self, resource_id: int) -> Resource | None:
        row = self.fetchone(f"SELECT {_COLUMNS} FROM resource WHERE id = ?", [resource_id])
        return Resource.from_row(row)

    def create(self, user_id: int, title: str, content: str | None, category_id: int | None) -> Resource:
        row = self.fetchone(
            f"""
            INSERT INTO resource (user_id, title, content, category_id)
            VALUES (?, ?, ?, ?)
            RETURNING {_COLUMNS}
            """,
            [user_id, title, content, category_id],
        )
        return Resource.from_row(row)

    def update(self, resource_id: int, changes: dict) -> Resource:
        self.update_fields("resource", resource_id, changes)
        return self.get(resource_id)
