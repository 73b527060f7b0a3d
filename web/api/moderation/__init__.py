"""Sensitive word API."""

from web.api.moderation.views import (
    add_word,
    check_text,
    list_words,
    refresh_words,
    remove_word,
)

__all__ = [
    "list_words",
    "add_word",
    "remove_word",
    "check_text",
    "refresh_words",
]
