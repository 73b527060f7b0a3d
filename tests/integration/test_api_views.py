"""Views over a container wired to an in-memory database."""

import pytest

from app.container import container
from app.errors import ContentRejectedError, NotFoundError, ValidationError
from app.models.content import Role
from web.api import content, moderation
from web.api.content.schemas import (
    MessageCreate,
    PostCreate,
    ScreeningCreate,
    SpiritPostCreate,
    UserMessageCreate,
)
from web.api.errors import error_payload, validate_id
from web.api.moderation.schemas import CreateWordRequest


@pytest.fixture
def app(conn, clock):
    container.reset()
    container.init(conn=conn, clock=clock)
    yield container
    container.reset()


@pytest.fixture
def member(app):
    return app.users.create("member", role=Role.PREMIUM).as_actor()


class TestModerationViews:
    def test_word_lifecycle(self, app):
        created = moderation.add_word(CreateWordRequest(word="badword"))
        assert moderation.list_words().total == 1

        check = moderation.check_text("this is a badword test")
        assert check.is_sensitive
        assert check.matched_words == ["badword"]

        deleted = moderation.remove_word(created.id)
        assert deleted.deleted
        assert not moderation.check_text("badword").is_sensitive

    def test_remove_invalid_id(self, app):
        with pytest.raises(ValidationError):
            moderation.remove_word(0)
        with pytest.raises(NotFoundError):
            moderation.remove_word(42)

    def test_refresh(self, app):
        moderation.add_word(CreateWordRequest(word="x"))
        result = moderation.refresh_words()
        assert result.refreshed
        assert result.total == 1

    def test_shared_cache(self, app):
        assert app.guard._cache is app.word_cache
        assert app.word_admin._cache is app.word_cache


class TestContentViews:
    def test_rejection_payload(self, app, member):
        moderation.add_word(CreateWordRequest(word="另一个违禁词"))
        with pytest.raises(ContentRejectedError) as exc:
            content.create_post(member, PostCreate(prompt="画一个另一个违禁词"))

        payload = error_payload(exc.value)
        assert payload["error"] == "ContentRejectedError"
        assert payload["matched_words"] == ["另一个违禁词"]

    def test_create_post(self, app, member):
        post = content.create_post(member, PostCreate(prompt="sunset", title="Sunset"))
        assert post.title == "Sunset"

    def test_spirit_flow(self, app, member):
        poster = app.users.create("poster", role=Role.LIFETIME).as_actor()
        post = content.create_spirit_post(poster, SpiritPostCreate(title="Help", content="Need prompts"))
        claim = content.claim_spirit_post(member, post.id)
        assert claim.post_id == post.id

        message = content.send_spirit_message(member, post.id, MessageCreate(content="Happy to help"))
        assert message.post_id == post.id
        assert message.receiver_id == poster.id

    def test_direct_message(self, app, member):
        other = app.users.create("other").as_actor()
        message = content.send_message(member, UserMessageCreate(receiver_id=other.id, content="hi"))
        assert message.post_id is None

    def test_screening_and_comment(self, app, member):
        admin = app.users.create("root", role=Role.ADMIN).as_actor()
        screening = content.create_screening(
            admin, ScreeningCreate(title="Showreel", video_url="https://cdn/v.mp4", creator_id=member.id)
        )
        assert screening.creator_id == member.id

        comment = content.add_screening_comment(member, screening.id, MessageCreate(content="love it"))
        assert comment.screening_id == screening.id

        moderation.add_word(CreateWordRequest(word="badword"))
        with pytest.raises(ContentRejectedError) as exc:
            content.add_screening_comment(member, screening.id, MessageCreate(content="badword"))
        assert error_payload(exc.value)["message"] == "Comment contains sensitive words: badword"


class TestValidateId:
    @pytest.mark.parametrize("value", [0, -1, True, "3"])
    def test_invalid(self, value):
        with pytest.raises(ValidationError):
            validate_id(value)

    def test_valid(self):
        validate_id(7)
