"""Services package - service class exports."""

from app.services.content import (
    CreatorService,
    NoteService,
    PostService,
    ResourceService,
    ScreeningService,
    SpiritPostService,
    UserMessageService,
)
from app.services.moderation import ContentGuard, SensitiveWordAdmin, SensitiveWordCache

__all__ = [
    "SensitiveWordCache",
    "SensitiveWordAdmin",
    "ContentGuard",
    "PostService",
    "NoteService",
    "ResourceService",
    "CreatorService",
    "UserMessageService",
    "SpiritPostService",
    "ScreeningService",
]
