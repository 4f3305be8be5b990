"""Redis-backed redirect counting cells

Every short code owns one Redis hash, its counting cell:

    <prefix>:links:<shortcode>:counter
        count          -> number of redirects
        last_accessed  -> Unix ms of the latest redirect

Redis executes each MULTI/EXEC block against the hash serially, so concurrent
redirects of the same code never lose an increment, unlike the record's
embedded counter which is a read-modify-write.
"""

from beartype import beartype

from kvshortener.dao.base import RedirectCounterBaseDAO, CounterStats
from kvshortener.dao.redis.mixins import RedisClientMixin
from kvshortener.dao.redis.helpers import handle_redis_connection_error
from kvshortener.dao.exceptions import CounterNotFoundError
from kvshortener.utils.helpers import now_ms


class RedirectCounterRedisDAO(RedisClientMixin, RedirectCounterBaseDAO):
    """Redis implementation of RedirectCounterBaseDAO.

    Methods:
        increment(shortcode: str, expires_at: int | None = None, **kwargs) -> CounterStats:
            HINCRBY count, HSET last_accessed (and EXPIREAT) in one transaction.

        stats(shortcode: str, **kwargs) -> CounterStats:
            HGETALL the counting cell.
            Raises CounterNotFoundError if the cell doesn't exist.

        reset(shortcode: str, **kwargs) -> None:
            DEL the counting cell.

    Example:
        >>> counter = RedirectCounterRedisDAO(redis_client=client, prefix='kvshortener:dev')
        >>> counter.increment('abc123', expires_at=1763078400000)
        CounterStats(redirect_count=1, last_accessed=1760486400000)
    """

    @handle_redis_connection_error
    @beartype
    def increment(self, shortcode: str, expires_at: int | None = None, **kwargs) -> CounterStats:
        counter_key = self.keys.counter_key(shortcode)
        accessed_at = now_ms()

        with self.redis.pipeline(transaction=True) as pipe:
            pipe.hincrby(counter_key, 'count', 1)
            pipe.hset(counter_key, 'last_accessed', accessed_at)
            if expires_at:
                # The cell lives exactly as long as its record
                pipe.expireat(counter_key, expires_at // 1000)
            results = pipe.execute()

        return CounterStats(redirect_count=int(results[0]), last_accessed=accessed_at)

    @handle_redis_connection_error
    @beartype
    def stats(self, shortcode: str, **kwargs) -> CounterStats:
        cell = self.redis.hgetall(self.keys.counter_key(shortcode))
        if not cell:
            raise CounterNotFoundError(f"No redirects counted for short code '{shortcode}'.")

        last_accessed = cell.get('last_accessed')
        return CounterStats(
            redirect_count=int(cell.get('count', 0)),
            last_accessed=int(last_accessed) if last_accessed is not None else None,
        )

    @handle_redis_connection_error
    @beartype
    def reset(self, shortcode: str, **kwargs) -> None:
        self.redis.delete(self.keys.counter_key(shortcode))
