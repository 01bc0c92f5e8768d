"""Tests for the expiring in-process cache."""

import pytest

from storefront.infrastructure.cache.ttl_cache import TTLCache
from tests.fakes import FakeClock


class TestTTLCache:

    def test_fresh_entry_is_returned(self):
        clock = FakeClock()
        cache = TTLCache(300, clock=clock)
        cache.set("k", [1, 2])
        clock.advance(299)
        assert cache.get("k") == [1, 2]

    def test_entry_expires_at_ttl(self):
        clock = FakeClock()
        cache = TTLCache(300, clock=clock)
        cache.set("k", "v")
        clock.advance(300)
        assert cache.get("k") is None

    def test_stale_entry_is_evicted_on_read(self):
        clock = FakeClock()
        cache = TTLCache(10, clock=clock)
        cache.set("k", "v")
        clock.advance(11)
        assert len(cache) == 1
        cache.get("k")
        assert len(cache) == 0

    def test_set_refreshes_timestamp(self):
        clock = FakeClock()
        cache = TTLCache(10, clock=clock)
        cache.set("k", "old")
        clock.advance(8)
        cache.set("k", "new")
        clock.advance(8)
        assert cache.get("k") == "new"

    def test_missing_key(self):
        assert TTLCache(10).get("nope") is None

    def test_invalidate_and_clear(self):
        cache = TTLCache(10)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.invalidate("a")
        cache.invalidate("never-set")
        assert cache.get("a") is None
        assert cache.get("b") == 2
        cache.clear()
        assert len(cache) == 0

    @pytest.mark.parametrize("ttl", [0, -1])
    def test_non_positive_ttl_rejected(self, ttl):
        with pytest.raises(ValueError):
            TTLCache(ttl)
