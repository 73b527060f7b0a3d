"""Moderation domain entities."""

from dataclasses import dataclass, field

from app.models.common import BaseEntity


@dataclass
class SensitiveWord(BaseEntity):
    """A banned word as stored in the word table."""

    id: int
    word: str


@dataclass
class CheckResult(BaseEntity):
    """Outcome of scanning one or more texts against the word list."""

    is_sensitive: bool = False
    matched_words: list[str] = field(default_factory=list)

    @classmethod
    def of(cls, matched_words: list[str]) -> "CheckResult":
        return cls(is_sensitive=bool(matched_words), matched_words=list(matched_words))
