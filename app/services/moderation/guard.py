"""Check-before-write guard shared by every service that persists user text."""

import json
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from loguru import logger

from app.errors import ContentRejectedError
from app.services.moderation.cache import SensitiveWordCache

T = TypeVar("T")


def collect_texts(*fields: Any) -> list[str]:
    """Candidate texts from request fields, skipping absent ones.

    Rich-text documents (dict/list) are scanned as their JSON form with
    non-ASCII characters kept as-is.
    """
    texts = []
    for value in fields:
        if value is None or value == "":
            continue
        if isinstance(value, dict | list):
            texts.append(json.dumps(value, ensure_ascii=False))
        else:
            texts.append(str(value))
    return texts


class ContentGuard:
    """Rejects a write when any of its texts contains a banned word."""

    def __init__(self, cache: SensitiveWordCache):
        self._cache = cache

    def ensure_clean(self, texts: Sequence[str], subject: str = "Content") -> None:
        if not texts:
            return
        result = self._cache.check_multiple_texts(texts)
        if result.is_sensitive:
            logger.info("{} rejected, sensitive words: {}", subject, result.matched_words)
            raise ContentRejectedError(result.matched_words, subject=subject)

    def guarded(self, texts: Sequence[str], write: Callable[[], T], subject: str = "Content") -> T:
        """Run write() only if texts pass the check."""
        self.ensure_clean(texts, subject=subject)
        return write()
