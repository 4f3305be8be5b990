"""Data Access Object (DAO) implementation for managing URL records in Redis

This module provides a Redis-based implementation of UrlRecordBaseDAO for
key-value operations on UrlRecord instances.

Responsibilities:
    - Store encoded records under their short code, with a native expiry;
    - Keep a lexicographic index of short codes for cursor-based listing;
    - Drop index entries whose record has expired in Redis;
    - Raise appropriate DAO exceptions on misses and connectivity issues.

Classes:
    UrlRecordRedisDAO:
        DAO for storing and retrieving UrlRecord in a Redis datastore.

Example:
    >>> from kvshortener.models import UrlRecord
    >>> from kvshortener.dao.redis import UrlRecordRedisDAO

    >>> dao = UrlRecordRedisDAO(prefix="kvshortener:dev")

    >>> record = UrlRecord(
    ...     original_url="https://example.com/page",
    ...     shortcode="abc123",
    ...     created_at=1760486400000,
    ... )
    >>> dao.put(record)
    <UrlRecordRedisDAO>

    >>> dao.get("abc123").original_url
    'https://example.com/page'

    >>> dao.list(limit=10)
    KeyPage(keys=['abc123'], cursor=None, list_complete=True)
"""

from beartype import beartype

from kvshortener.models import UrlRecord, encode_record, decode_record
from kvshortener.dao.base import UrlRecordBaseDAO, KeyPage
from kvshortener.dao.redis.mixins import RedisClientMixin
from kvshortener.dao.redis.helpers import handle_redis_connection_error
from kvshortener.dao.exceptions import ShortURLNotFoundError


class UrlRecordRedisDAO(RedisClientMixin, UrlRecordBaseDAO):
    """Redis-based Data Access Object (DAO) for managing URL records

    This class implements the UrlRecordBaseDAO interface using Redis as a data store.

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        get(shortcode: str, **kwargs) -> UrlRecord:
            Retrieve and decode a record.
            Raises ShortURLNotFoundError when the shortcode doesn't exist.

        exists(shortcode: str, **kwargs) -> bool:
            Check whether a record is stored under the shortcode.

        put(record: UrlRecord, **kwargs) -> UrlRecordRedisDAO:
            Store a record and index its shortcode in one transaction.

        delete(shortcode: str, **kwargs) -> bool:
            Remove a record and its index entry in one transaction.

        list(limit: int, cursor: str | None = None, **kwargs) -> KeyPage:
            Page through the shortcode index in lexicographic order.

    All methods raise DataStoreError on connectivity issues with Redis.
    """

    @handle_redis_connection_error
    @beartype
    def get(self, shortcode: str, **kwargs) -> UrlRecord:
        """Retrieve a stored URL record by shortcode

        When Redis has already evicted an expired record, the dangling index
        entry is removed on the way out.

        Args:
            shortcode (str):
                The shortcode identifier of the record.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            UrlRecord:
                The decoded record.

        Raises:
            ShortURLNotFoundError:
                If the record does not exist in Redis.
            MalformedRecordError:
                If the stored value can't be decoded.
            DataStoreError:
                If Redis connectivity issues occur.

        Example:
            >>> dao.get('abc123')
            UrlRecord(original_url='https://example.com', shortcode='abc123', ...)
        """
        value = self.redis.get(self.keys.record_key(shortcode))
        if value is None:
            self.redis.zrem(self.keys.index_key(), shortcode)
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")
        return decode_record(value)

    @handle_redis_connection_error
    @beartype
    def exists(self, shortcode: str, **kwargs) -> bool:
        return self.redis.exists(self.keys.record_key(shortcode)) > 0

    @handle_redis_connection_error
    @beartype
    def put(self, record: UrlRecord, **kwargs) -> 'UrlRecordRedisDAO':
        """Insert or overwrite a URL record in Redis

        The record and its index entry are written in one Redis transaction.
        Records with an expiry are stored with EXAT set to the record's TTL hint.

        Args:
            record (UrlRecord):
                UrlRecord instance to persist.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            UrlRecordRedisDAO: self (for method chaining)

        Raises:
            DataStoreError:
                If a Redis connection issue occurs during the transaction.

        Example:
            >>> dao.put(UrlRecord(original_url='https://example.com', shortcode='abc123'))
            <UrlRecordRedisDAO>
        """
        record_key = self.keys.record_key(record.shortcode)
        ttl_hint = record.ttl_hint()

        # NOTE: SET and ZADD run as one transaction so a listing never sees
        #       an indexed code without a record (except after a Redis-side expiry,
        #       which get() cleans up).
        with self.redis.pipeline(transaction=True) as pipe:
            if ttl_hint is None:
                pipe.set(record_key, encode_record(record))
            else:
                pipe.set(record_key, encode_record(record), exat=ttl_hint)
            pipe.zadd(self.keys.index_key(), {record.shortcode: 0})
            pipe.execute()
        return self

    @handle_redis_connection_error
    @beartype
    def delete(self, shortcode: str, **kwargs) -> bool:
        with self.redis.pipeline(transaction=True) as pipe:
            pipe.delete(self.keys.record_key(shortcode))
            pipe.zrem(self.keys.index_key(), shortcode)
            deleted, _ = pipe.execute()
        return deleted > 0

    @handle_redis_connection_error
    @beartype
    def list(self, limit: int, cursor: str | None = None, **kwargs) -> KeyPage:
        """List shortcodes from the index in lexicographic order

        One extra member is requested to tell whether more keys follow
        without a second round trip. The cursor is the last key of the page;
        the next page starts strictly after it.

        Args:
            limit (int):
                Maximum number of keys to return (must be positive).
            cursor (Optional[str]):
                Last key of the previous page, or None to start from the beginning.

        Returns:
            KeyPage: keys, continuation cursor and completion flag.

        Example:
            >>> dao.list(limit=2)
            KeyPage(keys=['abc123', 'def456'], cursor='def456', list_complete=False)
            >>> dao.list(limit=2, cursor='def456')
            KeyPage(keys=['xyz789'], cursor=None, list_complete=True)
        """
        if limit <= 0:
            raise ValueError(f'Listing limit must be positive (given: {limit}).')

        lower_bound = f'({cursor}' if cursor else '-'
        members = self.redis.zrangebylex(self.keys.index_key(), lower_bound, '+', start=0, num=limit + 1)

        if len(members) <= limit:
            return KeyPage(keys=list(members), cursor=None, list_complete=True)

        keys = list(members[:limit])
        return KeyPage(keys=keys, cursor=keys[-1], list_complete=False)
