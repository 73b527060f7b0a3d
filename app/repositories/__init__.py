"""Repositories package - data access layer for our database."""

from app.repositories.base import BaseRepository
from app.repositories.content import (
    CreatorRepository,
    NoteRepository,
    PostRepository,
    ResourceRepository,
    ScreeningRepository,
    SpiritPostRepository,
    UserMessageRepository,
    UserRepository,
)
from app.repositories.db import (
    close_db,
    connect,
    get_db,
    init_tables,
)
from app.repositories.moderation import SensitiveWordRepository

__all__ = [
    # DB
    "connect",
    "get_db",
    "close_db",
    "init_tables",
    # Base
    "BaseRepository",
    # Moderation
    "SensitiveWordRepository",
    # Content
    "UserRepository",
    "PostRepository",
    "NoteRepository",
    "ResourceRepository",
    "CreatorRepository",
    "UserMessageRepository",
    "SpiritPostRepository",
    "ScreeningRepository",
]
