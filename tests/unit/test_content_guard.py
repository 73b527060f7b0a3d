"""Tests for the check-before-write guard."""

import pytest

from app.errors import ContentRejectedError, ValidationError
from app.services.moderation import ContentGuard, collect_texts


class TestCollectTexts:
    def test_skips_missing(self):
        assert collect_texts("title", None, "", "body") == ["title", "body"]

    def test_rich_text_keeps_unicode(self):
        doc = {"blocks": [{"text": "违禁词"}]}
        assert collect_texts(doc) == ['{"blocks": [{"text": "违禁词"}]}']

    def test_list_content(self):
        assert collect_texts(["a", "b"]) == ['["a", "b"]']


class TestContentGuard:
    @pytest.fixture
    def guard(self, make_cache):
        cache, _ = make_cache(["badword", "另一个违禁词"])
        return ContentGuard(cache)

    def test_clean_runs_write(self, guard):
        assert guard.guarded(["fine"], lambda: "written") == "written"

    def test_rejected_never_writes(self, guard):
        calls = []
        with pytest.raises(ContentRejectedError) as exc:
            guard.guarded(["ok", "a badword"], lambda: calls.append(1))
        assert calls == []
        assert exc.value.matched_words == ["badword"]
        assert "badword" in exc.value.message

    def test_rejection_is_validation_error(self, guard):
        with pytest.raises(ValidationError):
            guard.ensure_clean(["另一个违禁词"])

    def test_subject_in_message(self, guard):
        with pytest.raises(ContentRejectedError) as exc:
            guard.ensure_clean(["badword"], subject="Message")
        assert exc.value.subject == "Message"
        assert exc.value.message.startswith("Message contains sensitive words")

    def test_lists_every_match(self, guard):
        with pytest.raises(ContentRejectedError) as exc:
            guard.ensure_clean(["badword", "另一个违禁词 badword"])
        assert exc.value.matched_words == ["badword", "另一个违禁词"]

    def test_empty_texts_skip_check(self, make_cache):
        cache, store = make_cache(["x"])
        ContentGuard(cache).ensure_clean([])
        assert store.loads == 0
