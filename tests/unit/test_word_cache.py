"""Tests for the sensitive word cache."""

from datetime import datetime, timedelta, timezone

from app.services.moderation.cache import find_matches, is_stale

T0 = datetime(2025, 1, 1, tzinfo=timezone.utc)
HOUR = timedelta(hours=1)


class TestIsStale:
    def test_never_loaded(self):
        assert is_stale(None, T0, HOUR, empty=False)

    def test_empty_always_stale(self):
        assert is_stale(T0, T0, HOUR, empty=True)

    def test_fresh(self):
        assert not is_stale(T0, T0 + timedelta(minutes=59), HOUR, empty=False)

    def test_exactly_ttl_is_fresh(self):
        assert not is_stale(T0, T0 + HOUR, HOUR, empty=False)

    def test_past_ttl(self):
        assert is_stale(T0, T0 + HOUR + timedelta(seconds=1), HOUR, empty=False)


class TestCheckText:
    def test_scenario_match(self, make_cache):
        cache, _ = make_cache(["badword", "另一个违禁词"])
        result = cache.check_text("this is a badword test")
        assert result.is_sensitive
        assert result.matched_words == ["badword"]

    def test_scenario_clean(self, make_cache):
        cache, _ = make_cache(["badword", "另一个违禁词"])
        result = cache.check_text("clean text")
        assert not result.is_sensitive
        assert result.matched_words == []

    def test_empty_and_none_skip_store(self, make_cache):
        cache, store = make_cache(["badword"])
        assert cache.check_text("").matched_words == []
        assert cache.check_text(None).matched_words == []
        assert store.loads == 0

    def test_all_matches_returned(self, make_cache):
        cache, _ = make_cache(["foo", "bar", "baz"])
        assert cache.check_text("bar and foo").matched_words == ["foo", "bar"]

    def test_case_sensitive(self, make_cache):
        cache, _ = make_cache(["Spam"])
        assert not cache.check_text("spam").is_sensitive
        assert cache.check_text("Spam!").is_sensitive

    def test_substring_without_tokenization(self, make_cache):
        cache, _ = make_cache(["违禁"])
        assert cache.check_text("这里有违禁内容").matched_words == ["违禁"]

    def test_find_matches_pure(self, make_cache):
        cache, _ = make_cache(["a", "b"])
        assert find_matches("xbx", cache.entries()) == ["b"]


class TestCheckMultipleTexts:
    def test_scenario(self, make_cache):
        cache, _ = make_cache(["badword", "另一个违禁词"])
        result = cache.check_multiple_texts(["clean", "contains 另一个违禁词 here"])
        assert result.is_sensitive
        assert result.matched_words == ["另一个违禁词"]

    def test_union_deduplicated(self, make_cache):
        cache, _ = make_cache(["x", "y", "z"])
        result = cache.check_multiple_texts(["x y", "y z", "x"])
        assert sorted(result.matched_words) == ["x", "y", "z"]
        assert len(result.matched_words) == 3

    def test_order_independent_set(self, make_cache):
        cache, _ = make_cache(["x", "y"])
        a = cache.check_multiple_texts(["has x", "has y"]).matched_words
        b = cache.check_multiple_texts(["has y", "has x"]).matched_words
        assert set(a) == set(b) == {"x", "y"}

    def test_skips_empty_entries(self, make_cache):
        cache, _ = make_cache(["x"])
        assert not cache.check_multiple_texts([None, "", "clean"]).is_sensitive

    def test_empty_list(self, make_cache):
        cache, _ = make_cache(["x"])
        result = cache.check_multiple_texts([])
        assert not result.is_sensitive
        assert result.matched_words == []


class TestRefreshPolicy:
    def test_first_check_loads(self, make_cache):
        cache, store = make_cache(["x"])
        cache.check_text("x")
        assert store.loads == 1

    def test_no_reload_within_ttl(self, make_cache, clock):
        cache, store = make_cache(["x"])
        cache.check_text("x")
        clock.advance(3599)
        cache.check_text("x")
        assert store.loads == 1

    def test_reload_after_ttl(self, make_cache, clock):
        cache, store = make_cache(["x"])
        cache.check_text("a")
        store.add("y")
        assert not cache.check_text("y").is_sensitive

        clock.advance(3601)
        assert cache.check_text("y").matched_words == ["y"]
        assert store.loads == 2

    def test_empty_cache_reloads_every_call(self, make_cache):
        cache, store = make_cache([])
        cache.check_text("a")
        cache.check_text("b")
        assert store.loads == 2

    def test_forced_refresh_resets_clock(self, make_cache, clock):
        cache, store = make_cache(["x"])
        cache.refresh_cache()
        assert cache.refreshed_at == clock.now
        clock.advance(1800)
        cache.refresh_cache()
        clock.advance(1800)
        cache.check_text("x")
        assert store.loads == 2


class TestStoreFailure:
    def test_stale_entries_kept_on_forced_reload(self, make_cache):
        cache, store = make_cache(["x"])
        cache.refresh_cache()
        store.failing = True

        assert cache.refresh_cache() is False
        result = cache.check_text("x")
        assert result.is_sensitive
        assert result.matched_words == ["x"]

    def test_stale_entries_kept_on_ttl_reload(self, make_cache, clock):
        cache, store = make_cache(["x"])
        cache.check_text("x")
        store.failing = True
        clock.advance(7200)

        assert cache.check_text("x").matched_words == ["x"]

    def test_failure_with_nothing_cached_is_clean(self, make_cache):
        cache, store = make_cache(["x"])
        store.failing = True
        assert not cache.check_text("x").is_sensitive

    def test_failed_reload_does_not_reset_clock(self, make_cache, clock):
        cache, store = make_cache(["x"])
        cache.refresh_cache()
        loaded_at = cache.refreshed_at
        clock.advance(10)
        store.failing = True
        cache.refresh_cache()
        assert cache.refreshed_at == loaded_at
