"""Dependency Injection container - initialized at app startup."""

from datetime import timedelta

import duckdb
from loguru import logger

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
from app.repositories.moderation import SensitiveWordRepository
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
from app.services.moderation.cache import Clock, utcnow
from settings import WORD_CACHE_TTL_SECONDS


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(
        self,
        conn: duckdb.DuckDBPyConnection | None = None,
        ttl_seconds: int = WORD_CACHE_TTL_SECONDS,
        clock: Clock = utcnow,
    ) -> None:
        """Initialize all dependencies. Call once at app startup.

        conn defaults to the thread-local connection on settings.DB_PATH.
        """
        if self._initialized:
            return

        # Repositories (singletons)
        self.users = UserRepository(conn)
        self._word_repo = SensitiveWordRepository(conn)
        self._post_repo = PostRepository(conn)
        self._note_repo = NoteRepository(conn)
        self._resource_repo = ResourceRepository(conn)
        self._creator_repo = CreatorRepository(conn)
        self._message_repo = UserMessageRepository(conn)
        self._spirit_repo = SpiritPostRepository(conn)
        self._screening_repo = ScreeningRepository(conn)

        # Moderation: one cache per process, shared by every consumer
        self.word_cache = SensitiveWordCache(self._word_repo, ttl=timedelta(seconds=ttl_seconds), clock=clock)
        self.word_admin = SensitiveWordAdmin(self._word_repo, self.word_cache)
        self.guard = ContentGuard(self.word_cache)
        self.word_cache.refresh_cache()

        # Content services (with injected repos and guard)
        self.posts = PostService(self._post_repo, self.guard)
        self.notes = NoteService(self._note_repo, self.guard)
        self.resources = ResourceService(self._resource_repo, self.guard)
        self.creators = CreatorService(self._creator_repo, self.guard)
        self.messages = UserMessageService(self._message_repo, self.users, self.guard)
        self.spirit_posts = SpiritPostService(self._spirit_repo, self.guard)
        self.screenings = ScreeningService(self._screening_repo, self.users, self.guard)

        self._initialized = True
        logger.info("Container initialized")

    def reset(self) -> None:
        """Drop all instances so the next init() rebuilds them."""
        self.__dict__.clear()
        self._initialized = False


# Global container instance
container = Container()
