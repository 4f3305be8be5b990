from kvshortener.dao.redis.redis_key_schema import RedisKeySchema
from kvshortener.dao.redis.mixins import RedisClientMixin
from kvshortener.dao.redis.url_record_redis_dao import UrlRecordRedisDAO
from kvshortener.dao.redis.redirect_counter_redis_dao import RedirectCounterRedisDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'UrlRecordRedisDAO',
    'RedirectCounterRedisDAO',
]
