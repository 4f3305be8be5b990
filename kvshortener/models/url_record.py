from dataclasses import dataclass


@dataclass(frozen=True)
class UrlRecord:
    """Represent a shortened URL record.

    Attributes:
        original_url (str):
            The normalized absolute URL that the short code redirects to.
        shortcode (str):
            The unique short identifier, also the record's store key.
        description (str):
            Free text used for substring search. May be empty.
        created_at (int):
            Creation time in Unix milliseconds. Never changes.
        redirect_count (int):
            Number of successful redirects. Never decreases.
        last_accessed (Optional[int]):
            Time of the last redirect in Unix milliseconds.
            None until the first redirect.
        expires_at (Optional[int]):
            Expiration time in Unix milliseconds. None means the
            record never expires.
        locked (bool):
            When True, the record cannot be deleted.

    Example:
        >>> record = UrlRecord(
        ...     original_url='https://example.com/article/123',
        ...     shortcode='abc123',
        ...     created_at=1760486400000,
        ...     expires_at=1763078400000,
        ... )
        >>> record.is_expired(1760486400001)
        False
        >>> record.ttl_hint()
        1763078400
    """

    original_url: str
    shortcode: str
    description: str = ''
    created_at: int = 0
    redirect_count: int = 0
    last_accessed: int | None = None
    expires_at: int | None = None
    locked: bool = False

    def is_expired(self, now_ms: int) -> bool:
        return bool(self.expires_at) and now_ms > self.expires_at

    def ttl_hint(self) -> int | None:
        """Return the store-native expiry as Unix seconds, or None if the record is permanent."""
        if not self.expires_at:
            return None
        return self.expires_at // 1000
