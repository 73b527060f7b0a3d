"""Content domain entities - users and the user-generated records they write."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from app.models.common import BaseEntity


class Role(str, Enum):
    NORMAL = "NORMAL"
    PREMIUM = "PREMIUM"
    LIFETIME = "LIFETIME"
    ADMIN = "ADMIN"


# Members allowed to publish and claim spirit posts
MEMBER_ROLES = frozenset({Role.PREMIUM, Role.LIFETIME, Role.ADMIN})


@dataclass(frozen=True)
class Actor:
    """The authenticated caller of a service operation."""

    id: int
    role: Role = Role.NORMAL

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def is_member(self) -> bool:
        return self.role in MEMBER_ROLES

    def can_edit(self, owner_id: int) -> bool:
        return self.is_admin or self.id == owner_id


@dataclass
class User(BaseEntity):
    id: int
    username: str
    nickname: str | None
    role: str
    created_at: datetime | None = None

    def as_actor(self) -> Actor:
        return Actor(id=self.id, role=Role(self.role))


@dataclass
class Post(BaseEntity):
    id: int
    user_id: int
    type: str
    title: str | None
    prompt: str
    file_url: str | None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class NoteCategory(BaseEntity):
    id: int
    name: str


@dataclass
class Note(BaseEntity):
    id: int
    user_id: int
    category_id: int
    title: str
    content: str | None
    cover_image_url: str | None
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Resource(BaseEntity):
    id: int
    user_id: int
    category_id: int | None
    title: str
    content: str | None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Creator(BaseEntity):
    id: int
    user_id: int
    nickname: str
    bio: str | None
    expertise: str | None
    updated_at: datetime | None = None


@dataclass
class UserMessage(BaseEntity):
    id: int
    sender_id: int
    receiver_id: int
    content: str
    is_read: bool
    created_at: datetime | None = None


@dataclass
class SpiritPost(BaseEntity):
    id: int
    user_id: int
    title: str
    content: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class SpiritPostClaim(BaseEntity):
    id: int
    post_id: int
    user_id: int
    is_completed: bool
    created_at: datetime | None = None


@dataclass
class SpiritPostMessage(BaseEntity):
    id: int
    post_id: int
    sender_id: int
    receiver_id: int
    content: str
    is_read: bool
    created_at: datetime | None = None


@dataclass
class Screening(BaseEntity):
    id: int
    admin_uploader_id: int
    creator_id: int | None
    title: str
    description: str | None
    video_url: str
    thumbnail_url: str | None
    created_at: datetime | None = None


@dataclass
class ScreeningComment(BaseEntity):
    id: int
    screening_id: int
    user_id: int
    content: str
    created_at: datetime | None = None
