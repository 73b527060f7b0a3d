"""Content services - every write runs through the sensitive word guard."""

from app.services.content.creators import CreatorService
from app.services.content.messages import UserMessageService
from app.services.content.notes import NoteService
from app.services.content.posts import PostService
from app.services.content.resources import ResourceService
from app.services.content.screenings import ScreeningService
from app.services.content.spirit_posts import SpiritPostService

__all__ = [
    "PostService",
    "NoteService",
    "ResourceService",
    "CreatorService",
    "UserMessageService",
    "SpiritPostService",
    "ScreeningService",
]
