"""Sensitive word API views - thin layer over moderation services."""

from app.container import container
from web.api.errors import validate_id

from .schemas import (
    CheckTextResponse,
    CreateWordRequest,
    DeleteWordResponse,
    RefreshResponse,
    SensitiveWordItem,
    SensitiveWordList,
)


def list_words() -> SensitiveWordList:
    """Get all banned words."""
    words = container.word_admin.list_words()
    items = [SensitiveWordItem(id=w.id, word=w.word) for w in words]
    return SensitiveWordList(items=items, total=len(items))


def add_word(request: CreateWordRequest) -> SensitiveWordItem:
    """Add a banned word."""
    word = container.word_admin.add_word(request.word)
    return SensitiveWordItem(id=word.id, word=word.word)


def remove_word(word_id: int) -> DeleteWordResponse:
    """Remove a banned word by id."""
    validate_id(word_id, "word_id")
    return DeleteWordResponse(**container.word_admin.remove_word(word_id))


def check_text(text: str) -> CheckTextResponse:
    """Screen a text against the word list."""
    result = container.word_cache.check_text(text)
    return CheckTextResponse(is_sensitive=result.is_sensitive, matched_words=result.matched_words)


def refresh_words() -> RefreshResponse:
    """Force a reload of this process's word cache."""
    refreshed = container.word_cache.refresh_cache()
    return RefreshResponse(refreshed=refreshed, total=len(container.word_cache.entries()))
