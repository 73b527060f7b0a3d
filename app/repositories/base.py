"""Base repository class."""

from typing import Any

import duckdb
from loguru import logger

from app.repositories.db import get_db


class BaseRepository:
    """Base repository with common functionality."""

    def __init__(self, conn: duckdb.DuckDBPyConnection | None = None):
        self._db = conn if conn is not None else get_db()
        logger.debug("{} initialized", self.__class__.__name__)

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query."""
        if params:
            return self._db.execute(query, params)
        return self._db.execute(query)

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()

    def scalar(self, query: str, params: list | None = None) -> Any:
        """Execute and return the first column of the first row."""
        row = self.fetchone(query, params)
        return row[0] if row else None

    def update_fields(self, table: str, row_id: int, changes: dict[str, Any], touch: bool = True) -> None:
        """UPDATE the given columns of one row. Column names must come from code, never from input."""
        if not changes:
            return
        assignments = [f"{col} = ?" for col in changes]
        if touch:
            assignments.append("updated_at = current_timestamp")
        self.execute(
            f"UPDATE {table} SET {', '.join(assignments)} WHERE id = ?",
            [*changes.values(), row_id],
        )
