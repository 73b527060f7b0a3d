"""Shared fixtures: in-memory database, controllable clock, wired services."""

from datetime import datetime, timedelta, timezone

import duckdb
import pytest

from app.errors import StoreUnavailableError
from app.models.content import Actor, Role
from app.models.moderation import SensitiveWord
from app.repositories import (
    CreatorRepository,
    NoteRepository,
    PostRepository,
    ResourceRepository,
    ScreeningRepository,
    SensitiveWordRepository,
    SpiritPostRepository,
    UserMessageRepository,
    UserRepository,
    init_tables,
)
from app.services import (
    ContentGuard,
    CreatorService,
    NoteService,
    PostService,
    ResourceService,
    ScreeningService,
    SensitiveWordAdmin,
    SensitiveWordCache,
    SpiritPostService,
    UserMessageService,
)


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2025, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


class FakeWordStore:
    """In-memory word store that can be switched into a failing state."""

    def __init__(self, words: list[str] | None = None):
        self.words = [SensitiveWord(id=i, word=w) for i, w in enumerate(words or [], start=1)]
        self.failing = False
        self.loads = 0

    def list_all(self) -> list[SensitiveWord]:
        self.loads += 1
        if self.failing:
            raise StoreUnavailableError("database unreachable")
        return list(self.words)

    def add(self, word: str) -> None:
        self.words.append(SensitiveWord(id=len(self.words) + 1, word=word))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def conn():
    conn = duckdb.connect(":memory:")
    init_tables(conn)
    yield conn
    conn.close()


@pytest.fixture
def word_repo(conn):
    return SensitiveWordRepository(conn)


@pytest.fixture
def word_cache(word_repo, clock):
    return SensitiveWordCache(word_repo, clock=clock)


@pytest.fixture
def word_admin(word_repo, word_cache):
    return SensitiveWordAdmin(word_repo, word_cache)


@pytest.fixture
def guard(word_cache):
    return ContentGuard(word_cache)


@pytest.fixture
def banned(word_admin):
    """Seed the standard banned words."""
    for word in ("badword", "另一个违禁词"):
        word_admin.add_word(word)


@pytest.fixture
def users(conn):
    return UserRepository(conn)


@pytest.fixture
def alice(users) -> Actor:
    return users.create("alice", "Alice", Role.PREMIUM).as_actor()


@pytest.fixture
def bob(users) -> Actor:
    return users.create("bob", "Bob", Role.LIFETIME).as_actor()


@pytest.fixture
def carol(users) -> Actor:
    return users.create("carol", "Carol", Role.NORMAL).as_actor()


@pytest.fixture
def admin(users) -> Actor:
    return users.create("admin", "Admin", Role.ADMIN).as_actor()


@pytest.fixture
def post_service(conn, guard):
    return PostService(PostRepository(conn), guard)


@pytest.fixture
def note_repo(conn):
    return NoteRepository(conn)


@pytest.fixture
def note_service(note_repo, guard):
    return NoteService(note_repo, guard)


@pytest.fixture
def resource_service(conn, guard):
    return ResourceService(ResourceRepository(conn), guard)


@pytest.fixture
def creator_service(conn, guard):
    return CreatorService(CreatorRepository(conn), guard)


@pytest.fixture
def message_service(conn, users, guard):
    return UserMessageService(UserMessageRepository(conn), users, guard)


@pytest.fixture
def spirit_service(conn, guard):
    return SpiritPostService(SpiritPostRepository(conn), guard)


@pytest.fixture
def screening_service(conn, users, guard):
    return ScreeningService(ScreeningRepository(conn), users, guard)


@pytest.fixture
def count_rows(conn):
    """Row count of a table."""
    return lambda table: conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]


@pytest.fixture
def make_store():
    return FakeWordStore


@pytest.fixture
def make_cache(clock):
    """Cache over a FakeWordStore seeded with the given words."""

    def build(words: list[str], ttl_seconds: int = 3600):
        store = FakeWordStore(words)
        return SensitiveWordCache(store, ttl=timedelta(seconds=ttl_seconds), clock=clock), store

    return build
