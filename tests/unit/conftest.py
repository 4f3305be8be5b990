"""Shared fixtures: in-memory implementations of the DAO interfaces.

The in-memory DAOs honor the same contracts as the Redis ones (lexicographic
key listing with a cursor, atomic counting cells), so registry and handler
tests can run whole scenarios without Redis.
"""

import bisect

import pytest

from kvshortener.models import UrlRecord
from kvshortener.dao.base import UrlRecordBaseDAO, RedirectCounterBaseDAO, KeyPage, CounterStats
from kvshortener.dao.exceptions import ShortURLNotFoundError, CounterNotFoundError
from kvshortener.registry import UrlRegistry, EmbeddedCounting, CellCounting
from kvshortener.utils.helpers import now_ms


class InMemoryUrlRecordDAO(UrlRecordBaseDAO):
    def __init__(self):
        self.records: dict[str, UrlRecord] = {}
        self.put_calls = 0

    def get(self, shortcode, **kwargs):
        try:
            return self.records[shortcode]
        except KeyError:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.") from None

    def exists(self, shortcode, **kwargs):
        return shortcode in self.records

    def put(self, record, **kwargs):
        self.records[record.shortcode] = record
        self.put_calls += 1
        return self

    def delete(self, shortcode, **kwargs):
        return self.records.pop(shortcode, None) is not None

    def list(self, limit, cursor=None, **kwargs):
        keys = sorted(self.records)
        start = bisect.bisect_right(keys, cursor) if cursor else 0
        window = keys[start : start + limit + 1]
        if len(window) <= limit:
            return KeyPage(keys=window, cursor=None, list_complete=True)
        page = window[:limit]
        return KeyPage(keys=page, cursor=page[-1], list_complete=False)


class InMemoryRedirectCounterDAO(RedirectCounterBaseDAO):
    def __init__(self):
        self.cells: dict[str, CounterStats] = {}

    def increment(self, shortcode, expires_at=None, **kwargs):
        current = self.cells.get(shortcode, CounterStats(redirect_count=0))
        self.cells[shortcode] = CounterStats(redirect_count=current.redirect_count + 1, last_accessed=now_ms())
        return self.cells[shortcode]

    def stats(self, shortcode, **kwargs):
        try:
            return self.cells[shortcode]
        except KeyError:
            raise CounterNotFoundError(f"No redirects counted for short code '{shortcode}'.") from None

    def reset(self, shortcode, **kwargs):
        self.cells.pop(shortcode, None)


@pytest.fixture
def record_dao() -> InMemoryUrlRecordDAO:
    return InMemoryUrlRecordDAO()


@pytest.fixture
def counter_dao() -> InMemoryRedirectCounterDAO:
    return InMemoryRedirectCounterDAO()


@pytest.fixture
def registry(record_dao: InMemoryUrlRecordDAO) -> UrlRegistry:
    return UrlRegistry(record_dao, EmbeddedCounting(record_dao))


@pytest.fixture
def cell_registry(record_dao: InMemoryUrlRecordDAO, counter_dao: InMemoryRedirectCounterDAO) -> UrlRegistry:
    return UrlRegistry(record_dao, CellCounting(counter_dao))
