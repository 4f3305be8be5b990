"""Serialization of UrlRecord to and from the key-value store's string format

Records are stored as JSON objects with camelCase keys:

    {
        "originalUrl": "https://example.com/",
        "shortCode": "abc123",
        "description": "docs",
        "createdAt": 1760486400000,
        "redirectCount": 0,
        "locked": false
    }

Optional fields that are unset (`lastAccessed`, `expiresAt`) are left out of
the stored value. Missing fields decode to their defaults, so records written
before a field existed still load.

Functions:
    encode_record(record: UrlRecord) -> str
        Serialize a record into its stored string value.
    decode_record(value: str | bytes) -> UrlRecord
        Parse a stored string value back into a record.
    record_payload(record: UrlRecord) -> dict
        Return the JSON-serializable API representation of a record.
"""

import json
import math
from typing import Any

from kvshortener.models.url_record import UrlRecord
from kvshortener.dao.exceptions import MalformedRecordError


__all__ = ['encode_record', 'decode_record', 'record_payload']


def record_payload(record: UrlRecord) -> dict[str, Any]:
    payload = {
        'originalUrl': record.original_url,
        'shortCode': record.shortcode,
        'description': record.description,
        'createdAt': record.created_at,
        'redirectCount': record.redirect_count,
        'lastAccessed': record.last_accessed,
        'expiresAt': record.expires_at,
        'locked': bool(record.locked),
    }
    return {key: value for key, value in payload.items() if value is not None}


def encode_record(record: UrlRecord) -> str:
    return json.dumps(record_payload(record), separators=(',', ':'))


def _optional_int(value: Any) -> int | None:
    # bool is an int subclass, but never a valid timestamp
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return int(value)


def decode_record(value: str | bytes) -> UrlRecord:
    """Parse a stored string value into a UrlRecord

    Args:
        value (str | bytes):
            JSON document as stored in the key-value store.

    Returns:
        UrlRecord: decoded record with defaults applied to missing fields.

    Raises:
        MalformedRecordError:
            If the value is not a JSON object or lacks `originalUrl`/`shortCode`.

    Example:
        >>> decode_record('{"originalUrl": "https://example.com/", "shortCode": "abc123"}')
        UrlRecord(original_url='https://example.com/', shortcode='abc123', description='', created_at=0, ...)
    """
    try:
        data = json.loads(value)
    except (TypeError, ValueError) as e:
        raise MalformedRecordError(f'Stored record is not valid JSON: {value!r}') from e

    if not isinstance(data, dict):
        raise MalformedRecordError(f'Stored record is not a JSON object: {value!r}')

    original_url = data.get('originalUrl')
    shortcode = data.get('shortCode')
    if not isinstance(original_url, str) or not isinstance(shortcode, str):
        raise MalformedRecordError(f"Stored record is missing 'originalUrl' or 'shortCode': {value!r}")

    description = data.get('description')
    return UrlRecord(
        original_url=original_url,
        shortcode=shortcode,
        description=description if isinstance(description, str) else '',
        created_at=_optional_int(data.get('createdAt')) or 0,
        redirect_count=_optional_int(data.get('redirectCount')) or 0,
        last_accessed=_optional_int(data.get('lastAccessed')),
        expires_at=_optional_int(data.get('expiresAt')),
        locked=bool(data.get('locked')),
    )
