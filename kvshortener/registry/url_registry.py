"""URL registry: lifecycle rules for short URL records

UrlRegistry owns every rule that sits on top of the key-value store:

    - short code allocation with bounded collision retry;
    - lazy expiration (expired records are never returned, and are purged
      when read directly by redirect or stats);
    - the `locked` flag, which guards deletion and nothing else;
    - bulk pruning by explicit codes or by age;
    - redirect counting through a RedirectCounting strategy.

The registry knows nothing about HTTP. Request-level failures are raised as
RegistryError subclasses; DataStoreError propagates untouched.

Example:
    >>> from kvshortener.registry import UrlRegistry, EmbeddedCounting
    >>> registry = UrlRegistry(dao, EmbeddedCounting(dao))
    >>> record = registry.create('https://example.com', description='docs')
    >>> registry.redirect(record.shortcode).redirect_count
    1
    >>> registry.delete(record.shortcode)
"""

from __future__ import annotations

import math
import logging
from dataclasses import replace
from typing import Any

from kvshortener.constants import TTL, Paging, ExpirationType
from kvshortener.models import UrlRecord
from kvshortener.dao.base import UrlRecordBaseDAO
from kvshortener.dao.exceptions import ShortURLNotFoundError
from kvshortener.registry.counting import RedirectCounting
from kvshortener.registry.results import ListResult, SearchResult, LockResult, BulkDeleteResult
from kvshortener.registry.exceptions import (
    MissingUrlError,
    InvalidUrlError,
    MissingQueryError,
    MissingCodeError,
    InvalidLockFlagError,
    UrlNotFoundError,
    RecordExpiredError,
    RecordLockedError,
)
from kvshortener.utils.helpers import now_ms
from kvshortener.utils.shortener import allocate_shortcode
from kvshortener.utils.urls import normalize_url


logger = logging.getLogger(__name__)


def _by_newest(records: list[UrlRecord]) -> list[UrlRecord]:
    # sorted() is stable, so store order breaks ties
    return sorted(records, key=lambda record: record.created_at, reverse=True)


def _list_limit(limit: Any) -> int:
    if isinstance(limit, bool):
        return Paging.DEFAULT_LIST_LIMIT
    if isinstance(limit, str):
        try:
            limit = int(limit.strip())
        except ValueError:
            return Paging.DEFAULT_LIST_LIMIT
    if not isinstance(limit, int) or limit <= 0:
        return Paging.DEFAULT_LIST_LIMIT
    return min(limit, Paging.MAX_LIST_LIMIT)


def _required_code(shortcode: Any) -> str:
    code = shortcode.strip() if isinstance(shortcode, str) else ''
    if not code:
        raise MissingCodeError()
    return code


class UrlRegistry:
    """Create, resolve, list, search, lock and delete short URL records.

    Attributes:
        dao (UrlRecordBaseDAO):
            Key-value store holding the records.
        counting (RedirectCounting):
            Strategy used to count redirects (embedded or counting cell).
    """

    def __init__(self, dao: UrlRecordBaseDAO, counting: RedirectCounting):
        self.dao = dao
        self.counting = counting

    def _find(self, shortcode: str) -> UrlRecord | None:
        try:
            return self.dao.get(shortcode)
        except ShortURLNotFoundError:
            return None

    def _purge(self, shortcode: str) -> None:
        self.dao.delete(shortcode)
        self.counting.forget(shortcode)

    def create(self, url: Any, description: Any = None, expiration_type: Any = None) -> UrlRecord:
        """Register a new short URL.

        Args:
            url (str):
                Absolute URL to shorten. Normalized before storing.
            description (Optional[str]):
                Free text for search. Stored trimmed, defaults to ''.
            expiration_type (Optional[str]):
                '30days' for a record expiring 30 days from now.
                Anything else means the record never expires.

        Returns:
            UrlRecord: the stored record.

        Raises:
            MissingUrlError:
                If no URL was given.
            InvalidUrlError:
                If the URL is not absolute or not parseable.
            DataStoreError:
                If the store fails.
        """
        if url is None or (isinstance(url, str) and not url.strip()):
            raise MissingUrlError()
        if not isinstance(url, str):
            raise InvalidUrlError()

        try:
            original_url = normalize_url(url)
        except ValueError as e:
            raise InvalidUrlError() from e

        created_at = now_ms()
        expires_at = None
        if expiration_type == ExpirationType.THIRTY_DAYS:
            expires_at = created_at + TTL.THIRTY_DAYS_MS

        shortcode = allocate_shortcode(self.dao)
        # A recycled code must not inherit the previous owner's redirect count
        self.counting.forget(shortcode)

        record = UrlRecord(
            original_url=original_url,
            shortcode=shortcode,
            description='' if description is None else str(description).strip(),
            created_at=created_at,
            expires_at=expires_at,
        )
        self.dao.put(record)
        return record

    def list(self, limit: Any = None, cursor: str | None = None) -> ListResult:
        """Return one page of live records, newest first.

        Expired records and keys whose record vanished are skipped, so a page
        may hold fewer than `limit` records even when more remain.
        Redirect counters read the same as in stats() for either counting mode.
        """
        page = self.dao.list(limit=_list_limit(limit), cursor=cursor or None)

        records = []
        for shortcode in page.keys:
            record = self._find(shortcode)
            if record is None:
                continue
            if record.is_expired(now_ms()):
                continue
            records.append(self.counting.overlay(record))

        return ListResult(
            urls=_by_newest(records),
            cursor=None if page.list_complete else page.cursor,
            list_complete=page.list_complete,
        )

    def search(self, query: Any) -> SearchResult:
        """Case-insensitive substring search over record descriptions.

        Scans the store page by page and stops after MAX_SEARCH_SCAN keys.
        `scan_limit_hit` tells the caller that matches may be missing.

        Raises:
            MissingQueryError:
                If the query is missing or empty.
        """
        if not isinstance(query, str) or not query:
            raise MissingQueryError()

        needle = query.lower()
        matches = []
        scanned = 0
        cursor = None
        list_complete = False

        while not list_complete and scanned < Paging.MAX_SEARCH_SCAN:
            page_size = min(Paging.SCAN_PAGE_SIZE, Paging.MAX_SEARCH_SCAN - scanned)
            page = self.dao.list(limit=page_size, cursor=cursor)
            scanned += len(page.keys)

            for shortcode in page.keys:
                record = self._find(shortcode)
                if record is None or record.is_expired(now_ms()):
                    continue
                if needle in record.description.lower():
                    matches.append(self.counting.overlay(record))

            list_complete = page.list_complete or page.cursor is None
            cursor = page.cursor

        scan_limit_hit = not list_complete
        if scan_limit_hit:
            logger.info('Search stopped at the scan limit.', extra={'query': query, 'scanned': scanned})

        return SearchResult(urls=_by_newest(matches), query=query, scan_limit_hit=scan_limit_hit)

    def stats(self, shortcode: Any) -> UrlRecord:
        """Return a live record with its current redirect counter.

        Raises:
            MissingCodeError:
                If no short code was given.
            UrlNotFoundError:
                If the code is not stored, or its record has expired (purged on read).
        """
        code = _required_code(shortcode)

        record = self._find(code)
        if record is None:
            raise UrlNotFoundError()
        if record.is_expired(now_ms()):
            self._purge(code)
            raise UrlNotFoundError()

        return self.counting.overlay(record)

    def redirect(self, shortcode: Any) -> UrlRecord:
        """Resolve a short code and count the redirect.

        Returns:
            UrlRecord: the record after counting (its `original_url` is the target).

        Raises:
            MissingCodeError:
                If no short code was given.
            UrlNotFoundError:
                If the code is not stored.
            RecordExpiredError:
                If the record has expired. The record is purged.
        """
        code = _required_code(shortcode)

        record = self._find(code)
        if record is None:
            raise UrlNotFoundError()

        now = now_ms()
        if record.is_expired(now):
            self._purge(code)
            raise RecordExpiredError()

        return self.counting.record_hit(record, now)

    def set_lock(self, shortcode: Any, locked: Any) -> LockResult:
        code = _required_code(shortcode)
        if not isinstance(locked, bool):
            raise InvalidLockFlagError()

        record = self._find(code)
        if record is None:
            raise UrlNotFoundError()

        if record.locked != locked:
            self.dao.put(replace(record, locked=locked))

        return LockResult(shortcode=code, locked=locked)

    def delete(self, shortcode: Any) -> None:
        """Delete an unlocked record.

        Raises:
            MissingCodeError:
                If no short code was given.
            UrlNotFoundError:
                If the code is not stored.
            RecordLockedError:
                If the record is locked. Nothing is deleted.
        """
        code = _required_code(shortcode)

        record = self._find(code)
        if record is None:
            raise UrlNotFoundError()
        if record.locked:
            raise RecordLockedError()

        self._purge(code)

    def bulk_delete(self, codes: Any = None, older_than_days: Any = None) -> BulkDeleteResult:
        """Delete many records at once, never touching locked ones.

        Explicit mode:
            `codes` is a list holding at least one non-empty string. Codes are
            trimmed and de-duplicated (first occurrence wins).

        Age mode (otherwise):
            Every record created before now - `older_than_days` days is deleted.
            `older_than_days` must be a positive finite number, else 120 is used.

        The operation is not transactional: a failure midway leaves earlier
        deletions in place, and running it again is safe.

        Returns:
            BulkDeleteResult: how many codes were deleted, skipped because locked, or not found.
        """
        explicit_codes = self._explicit_codes(codes)
        if explicit_codes:
            return self._delete_codes(explicit_codes)
        return self._delete_older_than(older_than_days)

    @staticmethod
    def _explicit_codes(codes: Any) -> list[str]:
        if not isinstance(codes, list):
            return []
        trimmed = (code.strip() for code in codes if isinstance(code, str))
        return list(dict.fromkeys(code for code in trimmed if code))

    def _delete_codes(self, codes: list[str]) -> BulkDeleteResult:
        result = BulkDeleteResult()
        for code in codes:
            record = self._find(code)
            if record is None:
                result.not_found += 1
            elif record.locked:
                result.skipped_locked += 1
            else:
                self._purge(code)
                result.deleted += 1
        return result

    def _delete_older_than(self, older_than_days: Any) -> BulkDeleteResult:
        days = older_than_days
        if isinstance(days, bool) or not isinstance(days, (int, float)) or not days > 0:
            days = Paging.DEFAULT_BULK_DELETE_DAYS
        elif isinstance(days, float) and not math.isfinite(days):
            days = Paging.DEFAULT_BULK_DELETE_DAYS
        cutoff = now_ms() - days * TTL.ONE_DAY_MS

        result = BulkDeleteResult()
        cursor = None
        while True:
            page = self.dao.list(limit=Paging.SCAN_PAGE_SIZE, cursor=cursor)
            for code in page.keys:
                record = self._find(code)
                if record is None:
                    result.not_found += 1
                elif record.created_at >= cutoff:
                    continue
                elif record.locked:
                    result.skipped_locked += 1
                else:
                    self._purge(code)
                    result.deleted += 1

            if page.list_complete or page.cursor is None:
                break
            cursor = page.cursor

        logger.info(
            'Bulk deleted records older than %s days.',
            days,
            extra={'deleted': result.deleted, 'skippedLocked': result.skipped_locked, 'notFound': result.not_found},
        )
        return result
