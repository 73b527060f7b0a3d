"""Content domain models - users, posts, notes, resources, creators, messages, spirit posts, screenings."""

from app.models.content.creator import CREATOR_DDL, CREATOR_SEQ
from app.models.content.entities import (
    MEMBER_ROLES,
    Actor,
    Creator,
    Note,
    NoteCategory,
    Post,
    Resource,
    Role,
    Screening,
    ScreeningComment,
    SpiritPost,
    SpiritPostClaim,
    SpiritPostMessage,
    User,
    UserMessage,
)
from app.models.content.message import USER_MESSAGE_DDL, USER_MESSAGE_INDEXES, USER_MESSAGE_SEQ
from app.models.content.note import NOTE_CATEGORY_DDL, NOTE_CATEGORY_SEQ, NOTE_DDL, NOTE_SEQ
from app.models.content.post import POST_DDL, POST_INDEXES, POST_SEQ
from app.models.content.resource import RESOURCE_DDL, RESOURCE_SEQ
from app.models.content.screening import (
    SCREENING_COMMENT_DDL,
    SCREENING_COMMENT_SEQ,
    SCREENING_DDL,
    SCREENING_INDEXES,
    SCREENING_SEQ,
)
from app.models.content.spirit_post import (
    SPIRIT_POST_CLAIM_DDL,
    SPIRIT_POST_CLAIM_SEQ,
    SPIRIT_POST_DDL,
    SPIRIT_POST_MESSAGE_DDL,
    SPIRIT_POST_MESSAGE_SEQ,
    SPIRIT_POST_SEQ,
)
from app.models.content.user import USER_DDL, USER_SEQ

CONTENT_SEQUENCES = [
    USER_SEQ,
    POST_SEQ,
    NOTE_CATEGORY_SEQ,
    NOTE_SEQ,
    RESOURCE_SEQ,
    CREATOR_SEQ,
    USER_MESSAGE_SEQ,
    SPIRIT_POST_SEQ,
    SPIRIT_POST_CLAIM_SEQ,
    SPIRIT_POST_MESSAGE_SEQ,
    SCREENING_SEQ,
    SCREENING_COMMENT_SEQ,
]

CONTENT_DDL = [
    USER_DDL,
    POST_DDL,
    NOTE_CATEGORY_DDL,
    NOTE_DDL,
    RESOURCE_DDL,
    CREATOR_DDL,
    USER_MESSAGE_DDL,
    SPIRIT_POST_DDL,
    SPIRIT_POST_CLAIM_DDL,
    SPIRIT_POST_MESSAGE_DDL,
    SCREENING_DDL,
    SCREENING_COMMENT_DDL,
]

CONTENT_INDEXES = POST_INDEXES + USER_MESSAGE_INDEXES + SCREENING_INDEXES

__all__ = [
    "CONTENT_SEQUENCES",
    "CONTENT_DDL",
    "CONTENT_INDEXES",
    "Role",
    "MEMBER_ROLES",
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
    "Screening",
    "ScreeningComment",
]
