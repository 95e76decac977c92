"""Tests for ReportCache."""

import pytest

from estate_reports.reports import ReportCache


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


class TestReportCache:
    """Entries expire purely by age."""

    def test_hit_within_ttl(self, clock: FakeClock) -> None:
        """Test a value is served until its TTL elapses."""
        cache = ReportCache(ttl_seconds=300, clock=clock)
        cache.set("k", "report")
        clock.now += 299

        assert cache.get("k") == "report"
        assert cache.hits == 1

    def test_expires_at_ttl(self, clock: FakeClock) -> None:
        """Test a value is dropped once its age reaches the TTL."""
        cache = ReportCache(ttl_seconds=300, clock=clock)
        cache.set("k", "report")
        clock.now += 300

        assert cache.get("k") is None
        assert len(cache) == 0
        assert cache.misses == 1

    def test_missing_key(self) -> None:
        """Test an unknown key misses."""
        assert ReportCache().get(("nope",)) is None

    def test_set_refreshes_age(self, clock: FakeClock) -> None:
        """Test storing again restarts the TTL."""
        cache = ReportCache(ttl_seconds=10, clock=clock)
        cache.set("k", 1)
        clock.now += 8
        cache.set("k", 2)
        clock.now += 8

        assert cache.get("k") == 2

    def test_evicts_oldest(self, clock: FakeClock) -> None:
        """Test the least recently used entry is dropped past capacity."""
        cache = ReportCache(max_entries=2, clock=clock)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.set("c", 3)

        assert cache.get("a") is None
        assert cache.get("b") == 2
        assert cache.get("c") == 3

    def test_read_keeps_entry(self, clock: FakeClock) -> None:
        """Test a recently read entry outlives an unread one at capacity."""
        cache = ReportCache(max_entries=2, clock=clock)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.get("a")
        cache.set("c", 3)

        assert cache.get("a") == 1
        assert cache.get("b") is None

    def test_len_skips_expired(self, clock: FakeClock) -> None:
        """Test expired entries are not counted."""
        cache = ReportCache(ttl_seconds=10, clock=clock)
        cache.set("a", 1)
        clock.now += 5
        cache.set("b", 2)
        clock.now += 6

        assert len(cache) == 1

    def test_clear(self) -> None:
        """Test clear drops every entry."""
        cache = ReportCache()
        cache.set("a", 1)
        cache.clear()

        assert len(cache) == 0
