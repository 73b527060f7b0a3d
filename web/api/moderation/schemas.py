"""Sensitive word API schemas."""

from pydantic import BaseModel, Field


class SensitiveWordItem(BaseModel):
    """A banned word."""

    id: int
    word: str


class SensitiveWordList(BaseModel):
    """All banned words."""

    items: list[SensitiveWordItem]
    total: int


class CreateWordRequest(BaseModel):
    """Admin request to add a word."""

    word: str = Field(min_length=1)


class DeleteWordResponse(BaseModel):
    id: int
    deleted: bool


class CheckTextResponse(BaseModel):
    """Result of screening text."""

    is_sensitive: bool
    matched_words: list[str]


class RefreshResponse(BaseModel):
    refreshed: bool
    total: int
