"""Moderation domain models - banned words and check results."""

from app.models.moderation.entities import CheckResult, SensitiveWord
from app.models.moderation.sensitive_word import SENSITIVE_WORD_DDL, SENSITIVE_WORD_SEQ

__all__ = [
    "SENSITIVE_WORD_SEQ",
    "SENSITIVE_WORD_DDL",
    "SensitiveWord",
    "CheckResult",
]
