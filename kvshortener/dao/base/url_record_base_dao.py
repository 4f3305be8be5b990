"""Abstract base class for UrlRecord data access objects (DAOs).

This class establishes the key-value contract the URL registry relies on,
regardless of the underlying storage mechanism (e.g., Redis, DynamoDB,
Cloudflare KV). A record is stored under its short code; listing returns
keys page by page with an opaque cursor.

Responsibilities:
    - Get, put and delete UrlRecord objects by short code.
    - Pass the record's expiry to the store as a native TTL.
    - List stored short codes with cursor-based pagination.
    - Standardize error handling across multiple data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from kvshortener.models import UrlRecord
        >>> from kvshortener.dao.redis import UrlRecordRedisDAO

        >>> dao = UrlRecordRedisDAO(...)

        >>> dao.put(UrlRecord(original_url='https://example.com/', shortcode='abc123'))
        <UrlRecordRedisDAO>

        >>> dao.get('abc123').original_url
        'https://example.com/'

        >>> page = dao.list(limit=50)
        >>> page.keys, page.cursor, page.list_complete
        (['abc123'], None, True)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from kvshortener.models import UrlRecord


@dataclass(frozen=True)
class KeyPage:
    """One page of a key listing.

    Attributes:
        keys (list[str]):
            Short codes in store iteration order.
        cursor (Optional[str]):
            Opaque cursor for the next page. None when the listing is complete.
        list_complete (bool):
            True if no keys remain after this page.
    """

    keys: list[str] = field(default_factory=list)
    cursor: str | None = None
    list_complete: bool = True


class UrlRecordBaseDAO(ABC):
    """Interface for UrlRecord data access objects (DAOs).

    Methods:
        get(shortcode: str, **kwargs) -> UrlRecord:
            Retrieve a record by short code.
            Raises ShortURLNotFoundError if the record does not exist.
            Raises DataStoreError on connection or read failure.

        exists(shortcode: str, **kwargs) -> bool:
            Check whether a record is stored under the short code.

        put(record: UrlRecord, **kwargs) -> UrlRecordBaseDAO:
            Insert or overwrite a record, using its expiry as the store TTL.
            Raises DataStoreError on connection or write failure.

        delete(shortcode: str, **kwargs) -> bool:
            Delete a record. Returns False if nothing was stored.

        list(limit: int, cursor: str | None, **kwargs) -> KeyPage:
            Return up to `limit` short codes starting after `cursor`.

    Subclassing:
        Datastore-specific implementations (e.g., UrlRecordRedisDAO) must
        extend this class and implement all abstract methods.

    NOTE:
        - The store TTL is a best-effort janitor. Callers must still check
          UrlRecord.is_expired() on every read.
    """

    @abstractmethod
    def get(self, shortcode: str, **kwargs) -> UrlRecord:
        """Retrieve a UrlRecord from the data store by its short code.

        Args:
            shortcode (str):
                The short code of the record to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            UrlRecord: The stored record.

        Raises:
            ShortURLNotFoundError:
                If no record with the given short code exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def exists(self, shortcode: str, **kwargs) -> bool:
        pass

    @abstractmethod
    def put(self, record: UrlRecord, **kwargs) -> 'UrlRecordBaseDAO':
        """Insert or overwrite a UrlRecord in the data store.

        Args:
            record (UrlRecord):
                The record to persist. `record.ttl_hint()` is passed to the
                store as its native expiry.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            UrlRecordBaseDAO: self (for method chaining)

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def delete(self, shortcode: str, **kwargs) -> bool:
        """Delete a UrlRecord from the data store.

        Deleting a short code that isn't stored is not an error.

        Returns:
            bool: True if a record was deleted, False otherwise.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def list(self, limit: int, cursor: str | None = None, **kwargs) -> KeyPage:
        """List stored short codes.

        Args:
            limit (int):
                Maximum number of keys in the returned page.

            cursor (Optional[str]):
                Cursor returned by the previous page. None starts from the beginning.

        Returns:
            KeyPage: keys, continuation cursor and completion flag.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass
