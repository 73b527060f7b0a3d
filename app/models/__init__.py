"""Models package - DDL and entities for all domains."""

from app.models.common import BaseEntity
from app.models.content import (
    CONTENT_DDL,
    CONTENT_INDEXES,
    CONTENT_SEQUENCES,
    Actor,
    Creator,
    Note,
    NoteCategory,
    Post,
    Resource,
    Role,
    SpiritPost,
    SpiritPostClaim,
    SpiritPostMessage,
    User,
    UserMessage,
)
from app.models.moderation import (
    SENSITIVE_WORD_DDL,
    SENSITIVE_WORD_SEQ,
    CheckResult,
    SensitiveWord,
)

# Sequences first: table defaults call nextval() on them
ALL_DDL = [
    # Moderation
    SENSITIVE_WORD_SEQ,
    SENSITIVE_WORD_DDL,
    # Content
    *CONTENT_SEQUENCES,
    *CONTENT_DDL,
    *CONTENT_INDEXES,
]

__all__ = [
    # Common
    "BaseEntity",
    # Moderation
    "SENSITIVE_WORD_SEQ",
    "SENSITIVE_WORD_DDL",
    "SensitiveWord",
    "CheckResult",
    # Content
    "Role",
    "Actor",
    "User",
    "Post",
    "NoteCategory",
    "Note",
    "Resource",
    "Creator",
    "UserMessage",
    "SpiritPost",
    "SpiritPostClaim",
    "SpiritPostMessage",
    # All DDL
    "ALL_DDL",
]
