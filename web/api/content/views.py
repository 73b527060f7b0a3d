"""Content API views - thin layer over content services."""

from app.container import container
from app.models.content import Actor
from web.api.errors import validate_id

from .schemas import (
    ClaimResponse,
    CommentResponse,
    CreatorResponse,
    CreatorUpsert,
    MarkCompletedRequest,
    MarkCompletedResponse,
    MessageCreate,
    MessageResponse,
    NoteCreate,
    NoteResponse,
    NoteUpdate,
    PostCreate,
    PostResponse,
    PostUpdate,
    ResourceCreate,
    ResourceResponse,
    ResourceUpdate,
    ScreeningCreate,
    ScreeningResponse,
    SpiritPostCreate,
    SpiritPostResponse,
    SpiritPostUpdate,
    UserMessageCreate,
)

# Posts


def create_post(actor: Actor, request: PostCreate) -> PostResponse:
    post = container.posts.create_post(actor, **request.model_dump())
    return PostResponse(**post.to_dict())


def update_post(actor: Actor, post_id: int, request: PostUpdate) -> PostResponse:
    validate_id(post_id, "post_id")
    post = container.posts.update_post(actor, post_id, **request.model_dump(exclude_unset=True))
    return PostResponse(**post.to_dict())


# Notes


def create_note(actor: Actor, request: NoteCreate) -> NoteResponse:
    note = container.notes.create_note(actor, **request.model_dump())
    return NoteResponse(**note.to_dict())


def update_note(actor: Actor, note_id: int, request: NoteUpdate) -> NoteResponse:
    validate_id(note_id, "note_id")
    note = container.notes.update_note(actor, note_id, **request.model_dump(exclude_unset=True))
    return NoteResponse(**note.to_dict())


# Resources


def create_resource(actor: Actor, request: ResourceCreate) -> ResourceResponse:
    resource = container.resources.create_resource(actor, **request.model_dump())
    return ResourceResponse(**resource.to_dict())


def update_resource(actor: Actor, resource_id: int, request: ResourceUpdate) -> ResourceResponse:
    validate_id(resource_id, "resource_id")
    resource = container.resources.update_resource(actor, resource_id, **request.model_dump(exclude_unset=True))
    return ResourceResponse(**resource.to_dict())


# Creators


def upsert_creator(actor: Actor, request: CreatorUpsert) -> CreatorResponse:
    creator = container.creators.create_or_update(actor, **request.model_dump())
    return CreatorResponse(**creator.to_dict())


# Direct messages


def send_message(actor: Actor, request: UserMessageCreate) -> MessageResponse:
    validate_id(request.receiver_id, "receiver_id")
    message = container.messages.send(actor, request.receiver_id, request.content)
    return MessageResponse(**message.to_dict())


# Spirit posts


def create_spirit_post(actor: Actor, request: SpiritPostCreate) -> SpiritPostResponse:
    post = container.spirit_posts.create(actor, request.title, request.content)
    return SpiritPostResponse(**post.to_dict())


def update_spirit_post(actor: Actor, post_id: int, request: SpiritPostUpdate) -> SpiritPostResponse:
    validate_id(post_id, "post_id")
    post = container.spirit_posts.update(actor, post_id, **request.model_dump(exclude_unset=True))
    return SpiritPostResponse(**post.to_dict())


def claim_spirit_post(actor: Actor, post_id: int) -> ClaimResponse:
    validate_id(post_id, "post_id")
    claim = container.spirit_posts.claim(actor, post_id)
    return ClaimResponse(id=claim.id, post_id=claim.post_id, user_id=claim.user_id, is_completed=claim.is_completed)


def send_spirit_message(actor: Actor, post_id: int, request: MessageCreate) -> MessageResponse:
    validate_id(post_id, "post_id")
    message = container.spirit_posts.send_message(actor, post_id, request.content)
    return MessageResponse(**message.to_dict())


def reply_spirit_message(actor: Actor, post_id: int, receiver_id: int, request: MessageCreate) -> MessageResponse:
    validate_id(post_id, "post_id")
    validate_id(receiver_id, "receiver_id")
    message = container.spirit_posts.reply(actor, post_id, receiver_id, request.content)
    return MessageResponse(**message.to_dict())


def mark_spirit_post_completed(actor: Actor, post_id: int, request: MarkCompletedRequest) -> MarkCompletedResponse:
    validate_id(post_id, "post_id")
    return MarkCompletedResponse(**container.spirit_posts.mark_completed(actor, post_id, request.claimer_ids))


# Screenings


def create_screening(actor: Actor, request: ScreeningCreate) -> ScreeningResponse:
    if request.creator_id is not None:
        validate_id(request.creator_id, "creator_id")
    screening = container.screenings.create_screening(actor, **request.model_dump())
    return ScreeningResponse(**screening.to_dict())


def add_screening_comment(actor: Actor, screening_id: int, request: MessageCreate) -> CommentResponse:
    validate_id(screening_id, "screening_id")
    comment = container.screenings.add_comment(actor, screening_id, request.content)
    return CommentResponse(**comment.to_dict())
