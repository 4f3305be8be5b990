from dataclasses import dataclass, field
from typing import Any

from kvshortener.models import UrlRecord, record_payload


@dataclass(frozen=True)
class ListResult:
    urls: list[UrlRecord] = field(default_factory=list)
    cursor: str | None = None
    list_complete: bool = True

    def payload(self) -> dict[str, Any]:
        body = {
            'urls': [record_payload(record) for record in self.urls],
            'listComplete': self.list_complete,
        }
        if self.cursor is not None:
            body['cursor'] = self.cursor
        return body


@dataclass(frozen=True)
class SearchResult:
    urls: list[UrlRecord]
    query: str
    scan_limit_hit: bool = False

    @property
    def total(self) -> int:
        return len(self.urls)

    def payload(self) -> dict[str, Any]:
        return {
            'urls': [record_payload(record) for record in self.urls],
            'query': self.query,
            'total': self.total,
            'scanLimitHit': self.scan_limit_hit,
        }


@dataclass(frozen=True)
class LockResult:
    shortcode: str
    locked: bool

    def payload(self) -> dict[str, Any]:
        return {'shortCode': self.shortcode, 'locked': self.locked}


@dataclass
class BulkDeleteResult:
    """Outcome of a bulk deletion: how many codes landed in each bucket."""

    deleted: int = 0
    skipped_locked: int = 0
    not_found: int = 0

    def payload(self) -> dict[str, Any]:
        return {
            'deleted': self.deleted,
            'skippedLocked': self.skipped_locked,
            'notFound': self.not_found,
        }
