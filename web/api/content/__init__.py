"""Content API."""

from web.api.content.views import (
    add_screening_comment,
    claim_spirit_post,
    create_note,
    create_post,
    create_resource,
    create_screening,
    create_spirit_post,
    mark_spirit_post_completed,
    reply_spirit_message,
    send_message,
    send_spirit_message,
    update_note,
    update_post,
    update_resource,
    update_spirit_post,
    upsert_creator,
)

__all__ = [
    "create_post",
    "update_post",
    "create_note",
    "update_note",
    "create_resource",
    "update_resource",
    "upsert_creator",
    "send_message",
    "create_spirit_post",
    "update_spirit_post",
    "claim_spirit_post",
    "send_spirit_message",
    "reply_spirit_message",
    "mark_spirit_post_completed",
    "create_screening",
    "add_screening_comment",
]
