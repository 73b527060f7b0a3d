"""Moderation repositories."""

from app.repositories.moderation.sensitive_word import SensitiveWordRepository

__all__ = ["SensitiveWordRepository"]
