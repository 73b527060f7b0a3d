"""Sensitive word administration against a real DuckDB word store."""

import pytest

from app.errors import ConflictError, NotFoundError, ValidationError


class TestAddWord:
    def test_add_then_check(self, word_admin, word_cache):
        created = word_admin.add_word("badword")
        assert created.id > 0
        assert created.word == "badword"

        result = word_cache.check_text("badword")
        assert result.is_sensitive
        assert result.matched_words == ["badword"]

    def test_visible_immediately_after_warm_cache(self, word_admin, word_cache):
        word_admin.add_word("first")
        word_cache.check_text("warm up")
        word_admin.add_word("second")
        assert word_cache.check_text("second").matched_words == ["second"]

    def test_duplicate_conflict(self, word_admin, count_rows):
        word_admin.add_word("dup")
        with pytest.raises(ConflictError):
            word_admin.add_word("dup")
        assert count_rows("sensitive_word") == 1

    def test_word_stored_exactly_as_given(self, word_admin, word_cache):
        created = word_admin.add_word(" bad")
        assert created.word == " bad"
        assert word_cache.check_text(" bad").matched_words == [" bad"]

    def test_padded_word_does_not_ban_bare_substring(self, word_admin, word_cache):
        word_admin.add_word(" ass ")
        assert not word_cache.check_text("class assignment").is_sensitive
        assert word_cache.check_text("what an ass here").matched_words == [" ass "]

    def test_padded_and_bare_words_are_distinct(self, word_admin, count_rows):
        word_admin.add_word("spam")
        word_admin.add_word(" spam ")
        assert count_rows("sensitive_word") == 2

    def test_constraint_race_reported_as_conflict(self, word_admin, word_repo, monkeypatch, count_rows):
        word_admin.add_word("raced")
        monkeypatch.setattr(word_repo, "find_by_word", lambda word: None)
        with pytest.raises(ConflictError):
            word_admin.add_word("raced")
        assert count_rows("sensitive_word") == 1

    @pytest.mark.parametrize("word", ["", "   ", None])
    def test_empty_rejected(self, word_admin, count_rows, word):
        with pytest.raises(ValidationError):
            word_admin.add_word(word)
        assert count_rows("sensitive_word") == 0

    def test_unicode_word(self, word_admin, word_cache):
        word_admin.add_word("另一个违禁词")
        assert word_cache.check_text("contains 另一个违禁词 here").is_sensitive


class TestRemoveWord:
    def test_remove_then_check(self, word_admin, word_cache):
        word = word_admin.add_word("gone")
        assert word_cache.check_text("gone").is_sensitive

        assert word_admin.remove_word(word.id) == {"id": word.id, "deleted": True}
        assert not word_cache.check_text("gone").is_sensitive

    def test_remove_keeps_others(self, word_admin, word_cache):
        a = word_admin.add_word("alpha")
        word_admin.add_word("beta")
        word_admin.remove_word(a.id)
        assert word_cache.check_text("alpha beta").matched_words == ["beta"]

    def test_missing_id(self, word_admin, count_rows):
        word_admin.add_word("stay")
        with pytest.raises(NotFoundError):
            word_admin.remove_word(9999)
        assert count_rows("sensitive_word") == 1


class TestListWords:
    def test_ordered_by_id(self, word_admin, banned):
        assert [w.word for w in word_admin.list_words()] == ["badword", "另一个违禁词"]

    def test_reads_through_cache(self, word_admin, conn, clock):
        word_admin.add_word("one")
        # Written behind the admin's back (e.g. by another instance)
        conn.execute("INSERT INTO sensitive_word (word) VALUES ('two')")
        assert [w.word for w in word_admin.list_words()] == ["one"]

        clock.advance(3601)
        assert [w.word for w in word_admin.list_words()] == ["one", "two"]


class TestImportWords:
    def test_skips_existing_and_blanks(self, word_admin, word_cache):
        word_admin.add_word("old")
        result = word_admin.import_words(["old", "new", "", "   ", "new", "another"])
        assert [w.word for w in result["added"]] == ["new", "another"]
        assert result["skipped"] == ["old"]
        assert word_cache.check_text("another new").matched_words == ["new", "another"]

    def test_words_kept_verbatim(self, word_admin):
        result = word_admin.import_words(["tab\t", " lead"])
        assert [w.word for w in result["added"]] == ["tab\t", " lead"]

    def test_constraint_race_skips_word(self, word_admin, word_repo, monkeypatch):
        word_admin.add_word("raced")
        monkeypatch.setattr(word_repo, "find_by_word", lambda word: None)
        result = word_admin.import_words(["raced", "fresh"])
        assert [w.word for w in result["added"]] == ["fresh"]
        assert result["skipped"] == ["raced"]


class TestStoreFailure:
    def test_broken_table_keeps_cached_words(self, word_admin, word_cache, conn):
        word_admin.add_word("x")
        conn.execute("DROP TABLE sensitive_word")

        assert word_cache.refresh_cache() is False
        assert word_cache.check_text("x").matched_words == ["x"]
