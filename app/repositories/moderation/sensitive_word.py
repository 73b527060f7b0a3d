"""Sensitive word repository - the word store behind the moderation cache."""

import duckdb
from loguru import logger

from app.errors import StoreUnavailableError
from app.models.moderation import SensitiveWord
from app.repositories.base import BaseRepository


class SensitiveWordRepository(BaseRepository):
    """Repository for the banned word table."""

    def list_all(self) -> list[SensitiveWord]:
        """All words ordered by id. Driver failures surface as StoreUnavailableError."""
        try:
            rows = self.fetchall("SELECT id, word FROM sensitive_word ORDER BY id")
        except duckdb.Error as e:
            raise StoreUnavailableError(f"Failed to load sensitive words: {e}") from e
        return [SensitiveWord(id=r[0], word=r[1]) for r in rows]

    def get(self, word_id: int) -> SensitiveWord | None:
        row = self.fetchone("SELECT id, word FROM sensitive_word WHERE id = ?", [word_id])
        return SensitiveWord.from_row(row)

    def find_by_word(self, word: str) -> SensitiveWord | None:
        row = self.fetchone("SELECT id, word FROM sensitive_word WHERE word = ?", [word])
        return SensitiveWord.from_row(row)

    def create(self, word: str) -> SensitiveWord:
        """Insert a word. Raises duckdb.ConstraintException on duplicates."""
        row = self.fetchone("INSERT INTO sensitive_word (word) VALUES (?) RETURNING id, word", [word])
        logger.debug("Inserted sensitive word id={}", row[0])
        return SensitiveWord.from_row(row)

    def delete(self, word_id: int) -> bool:
        """Delete by id, returns False if nothing was deleted."""
        row = self.fetchone("DELETE FROM sensitive_word WHERE id = ? RETURNING id", [word_id])
        return row is not None
