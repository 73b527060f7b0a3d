"""Helpers for request fields shared by content services."""

import json
from typing import Any


def serialize_content(content: Any) -> str | None:
    """Store rich-text documents (dict/list) as JSON, plain text unchanged."""
    if content is None or isinstance(content, str):
        return content
    return json.dumps(content, ensure_ascii=False)


def present(**fields: Any) -> dict[str, Any]:
    """Only the fields actually supplied (non-None) in a partial update."""
    return {k: v for k, v in fields.items() if v is not None}
