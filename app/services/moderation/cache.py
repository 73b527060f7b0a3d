"""Sensitive word cache - in-process copy of the word store used to screen text.

Entries are reloaded from the store when they are older than the TTL or when
the cache is empty, checked at the top of every call (no background timer).
A reload replaces the whole entry tuple in one assignment, so concurrent
readers see either the old or the new list, never a mix. A failed reload keeps
the previous entries.

Each process holds its own copy: a mutation handled by one instance refreshes
only that instance; peers catch up when their TTL expires.
"""

from collections.abc import Callable, Iterable
from datetime import datetime, timedelta, timezone
from typing import Protocol

from loguru import logger

from app.errors import StoreUnavailableError
from app.models.moderation import CheckResult, SensitiveWord
from settings import WORD_CACHE_TTL_SECONDS

Clock = Callable[[], datetime]


class WordStore(Protocol):
    def list_all(self) -> list[SensitiveWord]: ...


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def is_stale(refreshed_at: datetime | None, now: datetime, ttl: timedelta, empty: bool) -> bool:
    """True when entries must be reloaded before answering."""
    if empty or refreshed_at is None:
        return True
    return now - refreshed_at > ttl


def find_matches(text: str, entries: Iterable[SensitiveWord]) -> list[str]:
    """Case-sensitive substring scan, all matches in entry order."""
    return [e.word for e in entries if e.word in text]


class SensitiveWordCache:
    """Answers "does this text contain a banned word" without a DB round trip."""

    def __init__(
        self,
        store: WordStore,
        ttl: timedelta = timedelta(seconds=WORD_CACHE_TTL_SECONDS),
        clock: Clock = utcnow,
    ):
        self._store = store
        self._ttl = ttl
        self._clock = clock
        self._entries: tuple[SensitiveWord, ...] = ()
        self._refreshed_at: datetime | None = None
        logger.debug("SensitiveWordCache initialized (ttl={}s)", int(ttl.total_seconds()))

    @property
    def refreshed_at(self) -> datetime | None:
        return self._refreshed_at

    def refresh_cache(self) -> bool:
        """Reload from the store now. Returns False if the store failed and old entries were kept."""
        try:
            entries = tuple(self._store.list_all())
        except StoreUnavailableError as e:
            logger.warning("Sensitive word reload failed, keeping {} cached words: {}", len(self._entries), e)
            return False

        self._entries = entries
        self._refreshed_at = self._clock()
        logger.debug("Sensitive word cache loaded: {} words", len(entries))
        return True

    def _ensure_fresh(self) -> tuple[SensitiveWord, ...]:
        if is_stale(self._refreshed_at, self._clock(), self._ttl, empty=not self._entries):
            self.refresh_cache()
        return self._entries

    def entries(self) -> list[SensitiveWord]:
        """Current word list (reloaded first if stale)."""
        return list(self._ensure_fresh())

    def check_text(self, text: str | None) -> CheckResult:
        if not text:
            return CheckResult()
        return CheckResult.of(find_matches(text, self._ensure_fresh()))

    def check_multiple_texts(self, texts: Iterable[str | None]) -> CheckResult:
        """Union of matches over all texts, deduplicated in first-seen order."""
        matched: dict[str, None] = {}
        for text in texts:
            if text:
                matched.update(dict.fromkeys(self.check_text(text).matched_words))
        return CheckResult.of(list(matched))
