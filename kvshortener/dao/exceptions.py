"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortURLNotFoundError:
        Raised when a UrlRecord is not found in the data store.

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, timeouts, OOM, etc.).

    MalformedRecordError:
        Raised when a stored value can't be decoded into a UrlRecord.

    CounterNotFoundError:
        Raised when a redirect counting cell holds no state.

Example:
    >>> from kvshortener.dao.exceptions import ShortURLNotFoundError
    >>> raise ShortURLNotFoundError("Short URL with code 'abc123' not found.")
    Traceback (most recent call last):
        ...
    kvshortener.dao.exceptions.ShortURLNotFoundError: Short URL with code 'abc123' not found.
"""

from kvshortener.exceptions import KVShortenerError


class DAOError(KVShortenerError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class ShortURLNotFoundError(DAOError):
    """Raised when a UrlRecord is not found in the data store."""

    error_code = 'dao:short_url_not_found_error'


class DataStoreError(DAOError):
    """Raised when the data store encounters an error.

    Examples include connection issues, timeouts, and out-of-memory failures.
    """

    error_code = 'dao:data_store_error'


class MalformedRecordError(DataStoreError):
    """Raised when a stored value can't be decoded into a UrlRecord."""

    error_code = 'dao:malformed_record_error'


class CounterNotFoundError(DAOError):
    """Raised when a redirect counting cell has never been incremented."""

    error_code = 'dao:counter_not_found_error'
