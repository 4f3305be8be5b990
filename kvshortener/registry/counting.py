"""Redirect counting strategies

The registry counts redirects through one of two interchangeable strategies:

    EmbeddedCounting:
        The count lives inside the UrlRecord. A redirect reads the record,
        bumps the count and writes the whole record back. Concurrent redirects
        of the same code can lose increments (last writer wins).

    CellCounting:
        The count lives in a dedicated counting cell per code
        (RedirectCounterBaseDAO). Increments are atomic; stats overlay the
        cell's values onto the record.

Both strategies expose the same three hooks:

    record_hit(record, now_ms) -> UrlRecord   count one redirect
    overlay(record) -> UrlRecord              record as reported by stats
    forget(shortcode) -> None                 drop counting state of a code
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import replace

from kvshortener.models import UrlRecord
from kvshortener.dao.base import UrlRecordBaseDAO, RedirectCounterBaseDAO
from kvshortener.dao.exceptions import CounterNotFoundError


logger = logging.getLogger(__name__)


class RedirectCounting(ABC):
    @abstractmethod
    def record_hit(self, record: UrlRecord, now_ms: int) -> UrlRecord:
        pass

    def overlay(self, record: UrlRecord) -> UrlRecord:
        return record

    def forget(self, shortcode: str) -> None:  # noqa: B027
        pass


class EmbeddedCounting(RedirectCounting):
    def __init__(self, dao: UrlRecordBaseDAO):
        self.dao = dao

    def record_hit(self, record: UrlRecord, now_ms: int) -> UrlRecord:
        # NOTE: read-modify-write; the TTL hint travels with the record
        updated = replace(record, redirect_count=record.redirect_count + 1, last_accessed=now_ms)
        self.dao.put(updated)
        return updated


class CellCounting(RedirectCounting):
    def __init__(self, counter_dao: RedirectCounterBaseDAO):
        self.counter_dao = counter_dao

    def record_hit(self, record: UrlRecord, now_ms: int) -> UrlRecord:
        counted = self.counter_dao.increment(record.shortcode, expires_at=record.expires_at)
        return replace(record, redirect_count=counted.redirect_count, last_accessed=counted.last_accessed)

    def overlay(self, record: UrlRecord) -> UrlRecord:
        try:
            counted = self.counter_dao.stats(record.shortcode)
        except CounterNotFoundError:
            logger.debug('No counting cell for short code %s. Reporting stored counter.', record.shortcode)
            return record
        return replace(record, redirect_count=counted.redirect_count, last_accessed=counted.last_accessed)

    def forget(self, shortcode: str) -> None:
        self.counter_dao.reset(shortcode)
