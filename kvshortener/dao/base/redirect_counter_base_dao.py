"""Abstract base class for redirect counter data access objects (DAOs).

A redirect counter keeps one counting cell per short code. The cell owns the
redirect count and the last-access timestamp of its code and serializes every
operation against its own key, so concurrent redirects of the same code never
lose an increment. Codes are independent: no cross-code coordination exists.

Example:
    >>> from kvshortener.dao.redis import RedirectCounterRedisDAO

    >>> counter = RedirectCounterRedisDAO(...)
    >>> counter.increment('abc123')
    CounterStats(redirect_count=1, last_accessed=1760486400000)
    >>> counter.stats('abc123').redirect_count
    1
    >>> counter.reset('abc123')
    >>> counter.stats('abc123')
    Traceback (most recent call last):
        ...
    kvshortener.dao.exceptions.CounterNotFoundError: ...
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class CounterStats:
    redirect_count: int
    last_accessed: int | None = None


class RedirectCounterBaseDAO(ABC):
    """Interface for redirect counting cells.

    Methods:
        increment(shortcode: str, expires_at: int | None = None, **kwargs) -> CounterStats:
            Atomically bump the count and record a new last-access time.

        stats(shortcode: str, **kwargs) -> CounterStats:
            Return the current count and last-access time.
            Raises CounterNotFoundError if the cell holds no state.

        reset(shortcode: str, **kwargs) -> None:
            Clear all state of the cell (used when a code is deleted or recycled).
    """

    @abstractmethod
    def increment(self, shortcode: str, expires_at: int | None = None, **kwargs) -> CounterStats:
        """Atomically increment the redirect count of a short code.

        Args:
            shortcode (str):
                Short code owning the counting cell.

            expires_at (Optional[int]):
                Record expiry in Unix milliseconds. When set, the cell expires
                together with its record.

        Returns:
            CounterStats: count and last-access time after the increment.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def stats(self, shortcode: str, **kwargs) -> CounterStats:
        pass

    @abstractmethod
    def reset(self, shortcode: str, **kwargs) -> None:
        pass
