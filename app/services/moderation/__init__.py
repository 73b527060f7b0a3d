"""Moderation services - sensitive word cache, administration and write guard."""

from app.services.moderation.admin import SensitiveWordAdmin
from app.services.moderation.cache import SensitiveWordCache, is_stale
from app.services.moderation.guard import ContentGuard, collect_texts

__all__ = [
    "SensitiveWordCache",
    "SensitiveWordAdmin",
    "ContentGuard",
    "collect_texts",
    "is_stale",
]
