"""Sensitive word administration - the only writer of the word store."""

import duckdb
from loguru import logger

from app.errors import ConflictError, NotFoundError, ValidationError
from app.models.moderation import SensitiveWord
from app.repositories.moderation import SensitiveWordRepository
from app.services.moderation.cache import SensitiveWordCache


class SensitiveWordAdmin:
    """Add/remove banned words and keep this process's cache coherent."""

    def __init__(self, repo: SensitiveWordRepository, cache: SensitiveWordCache):
        self._repo = repo
        self._cache = cache
        logger.debug("SensitiveWordAdmin initialized")

    def list_words(self) -> list[SensitiveWord]:
        """Words as seen by the checking path (same cache, same staleness)."""
        return self._cache.entries()

    def add_word(self, word: str) -> SensitiveWord:
        """Store the word exactly as given. Blank words are rejected."""
        if not word or not word.strip():
            raise ValidationError("Sensitive word must not be empty")

        created = self._create(word)
        logger.info("Sensitive word added: id={} word={!r}", created.id, created.word)
        self._cache.refresh_cache()
        return created

    def remove_word(self, word_id: int) -> dict:
        if self._repo.get(word_id) is None:
            raise NotFoundError(f"Sensitive word {word_id} not found")

        self._repo.delete(word_id)
        logger.info("Sensitive word removed: id={}", word_id)
        self._cache.refresh_cache()
        return {"id": word_id, "deleted": True}

    def import_words(self, words: list[str]) -> dict:
        """Bulk add, skipping blanks and words already stored. One cache refresh at the end."""
        added, skipped = [], []
        for word in dict.fromkeys(words):
            if not word or not word.strip():
                continue
            try:
                added.append(self._create(word))
            except ConflictError:
                skipped.append(word)

        logger.info("Imported {} sensitive words ({} already present)", len(added), len(skipped))
        if added:
            self._cache.refresh_cache()
        return {"added": added, "skipped": skipped}

    def _create(self, word: str) -> SensitiveWord:
        if self._repo.find_by_word(word) is not None:
            raise ConflictError(f'Sensitive word "{word}" already exists')
        try:
            return self._repo.create(word)
        except duckdb.ConstraintException as e:
            raise ConflictError(f'Sensitive word "{word}" already exists') from e
