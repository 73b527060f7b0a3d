"""Content repositories."""

from app.repositories.content.creator import CreatorRepository
from app.repositories.content.message import UserMessageRepository
from app.repositories.content.note import NoteRepository
from app.repositories.content.post import PostRepository
from app.repositories.content.resource import ResourceRepository
from app.repositories.content.screening import ScreeningRepository
from app.repositories.content.spirit_post import SpiritPostRepository
from app.repositories.content.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "NoteRepository",
    "ResourceRepository",
    "CreatorRepository",
    "UserMessageRepository",
    "SpiritPostRepository",
    "ScreeningRepository",
]
