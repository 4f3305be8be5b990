"""Exceptions raised by UrlRegistry operations.

Every RegistryError maps to one HTTP answer: `status_code`, a human readable
`message` and a machine readable `error_code`. Lambda handlers translate them
with `error_response(e.status_code, e.message, e.error_code)`.

Example:
    >>> from kvshortener.registry.exceptions import RecordLockedError
    >>> e = RecordLockedError()
    >>> e.status_code, e.message, e.error_code
    (423, 'Record is locked', 'RECORD_LOCKED')
"""

from kvshortener.exceptions import KVShortenerError


class RegistryError(KVShortenerError):
    """Base class for request-level failures of the URL registry."""

    status_code = 400
    message = 'Bad Request'
    error_code = 'BAD_REQUEST'

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidRequestBodyError(RegistryError):
    message = 'Invalid JSON body'
    error_code = 'INVALID_REQUEST_BODY'


class MissingUrlError(RegistryError):
    message = 'URL is required'
    error_code = 'MISSING_URL'


class InvalidUrlError(RegistryError):
    message = 'Invalid URL'
    error_code = 'INVALID_URL'


class MissingQueryError(RegistryError):
    message = 'Search query is required'
    error_code = 'MISSING_QUERY'


class MissingCodeError(RegistryError):
    message = 'Short code is required'
    error_code = 'MISSING_CODE'


class InvalidLockFlagError(RegistryError):
    message = 'Locked flag must be a boolean'
    error_code = 'INVALID_LOCK_FLAG'


class UrlNotFoundError(RegistryError):
    status_code = 404
    message = 'URL not found'
    error_code = 'SHORT_URL_NOT_FOUND'


class RecordExpiredError(RegistryError):
    status_code = 410
    message = 'URL has expired'
    error_code = 'URL_EXPIRED'


class RecordLockedError(RegistryError):
    status_code = 423
    message = 'Record is locked'
    error_code = 'RECORD_LOCKED'
