"""Content API schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class PostCreate(BaseModel):
    prompt: str = Field(min_length=1)
    type: str = "IMAGE"
    title: str | None = None
    file_url: str | None = None


class PostUpdate(BaseModel):
    title: str | None = None
    prompt: str | None = None


class PostResponse(BaseModel):
    id: int
    user_id: int
    type: str
    title: str | None
    prompt: str
    file_url: str | None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class NoteCreate(BaseModel):
    category_id: int
    title: str = Field(min_length=1)
    content: str | dict[str, Any] | list[Any] | None = None
    cover_image_url: str | None = None
    status: str = "VISIBLE"


class NoteUpdate(BaseModel):
    category_id: int | None = None
    title: str | None = None
    content: str | dict[str, Any] | list[Any] | None = None
    cover_image_url: str | None = None
    status: str | None = None


class NoteResponse(BaseModel):
    id: int
    user_id: int
    category_id: int
    title: str
    content: str | None
    cover_image_url: str | None
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ResourceCreate(BaseModel):
    title: str = Field(min_length=1)
    content: str | dict[str, Any] | list[Any] | None = None
    category_id: int | None = None


class ResourceUpdate(BaseModel):
    title: str | None = None
    content: str | dict[str, Any] | list[Any] | None = None
    category_id: int | None = None


class ResourceResponse(BaseModel):
    id: int
    user_id: int
    category_id: int | None
    title: str
    content: str | None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CreatorUpsert(BaseModel):
    nickname: str = Field(min_length=1)
    bio: str | None = None
    expertise: str | None = None


class CreatorResponse(BaseModel):
    id: int
    user_id: int
    nickname: str
    bio: str | None
    expertise: str | None


class MessageCreate(BaseModel):
    content: str = Field(min_length=1)


class UserMessageCreate(MessageCreate):
    receiver_id: int


class MessageResponse(BaseModel):
    id: int
    sender_id: int
    receiver_id: int
    content: str
    is_read: bool
    post_id: int | None = None
    created_at: datetime | None = None


class SpiritPostCreate(BaseModel):
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)


class SpiritPostUpdate(BaseModel):
    title: str | None = None
    content: str | None = None


class SpiritPostResponse(BaseModel):
    id: int
    user_id: int
    title: str
    content: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ClaimResponse(BaseModel):
    id: int
    post_id: int
    user_id: int
    is_completed: bool


class MarkCompletedRequest(BaseModel):
    claimer_ids: list[int] = Field(min_length=1)


class MarkCompletedResponse(BaseModel):
    success: bool
    completed: int


class ScreeningCreate(BaseModel):
    title: str = Field(min_length=1)
    video_url: str = Field(min_length=1)
    description: str | None = None
    creator_id: int | None = None
    thumbnail_url: str | None = None


class ScreeningResponse(BaseModel):
    id: int
    admin_uploader_id: int
    creator_id: int | None
    title: str
    description: str | None
    video_url: str
    thumbnail_url: str | None
    created_at: datetime | None = None


class CommentResponse(BaseModel):
    id: int
    screening_id: int
    user_id: int
    content: str
    created_at: datetime | None = None
