"""Wire a UrlRegistry to its data store from a Lambda's AppConfig section

Example:
    >>> from kvshortener.utils import load_config
    >>> from kvshortener.registry.factory import build_registry
    >>> registry = build_registry(load_config('redirect_url'))
    >>> registry.counting
    <kvshortener.registry.counting.EmbeddedCounting object at ...>
"""

import logging

from kvshortener.types import LambdaConfiguration
from kvshortener.constants import RedirectCountingMode
from kvshortener.exceptions import BadConfigurationError
from kvshortener.dao.redis import UrlRecordRedisDAO, RedirectCounterRedisDAO
from kvshortener.registry.counting import RedirectCounting, EmbeddedCounting, CellCounting
from kvshortener.registry.url_registry import UrlRegistry
from kvshortener.utils.config import app_prefix


logger = logging.getLogger(__name__)


def redis_options(app_config: LambdaConfiguration) -> dict:
    """Turn the 'redis' section into RedisClientMixin keyword arguments.

    Example:
        >>> redis_options({'redis': {'host': 'localhost', 'port': 6379, 'db': 0}})
        {'redis_host': 'localhost', 'redis_port': 6379, 'redis_db': 0}
    """
    try:
        section = app_config['redis']
    except KeyError as e:
        raise BadConfigurationError("Only the 'redis' backend is supported.") from e
    return {f'redis_{k}': v for k, v in section.items()}


def build_registry(app_config: LambdaConfiguration) -> UrlRegistry:
    """Build a Redis-backed UrlRegistry with the configured counting strategy.

    Both DAOs share one Redis client.

    Raises:
        BadConfigurationError:
            If the backend isn't Redis or the counting mode is unknown.
        DataStoreError:
            If Redis is unreachable.
    """
    logger.debug('Assuming Redis as the backend database for short URLs')
    dao = UrlRecordRedisDAO(**redis_options(app_config), prefix=app_prefix())

    mode = app_config.get('redirect_counting', RedirectCountingMode.EMBEDDED)
    counting: RedirectCounting
    if mode == RedirectCountingMode.EMBEDDED:
        counting = EmbeddedCounting(dao)
    elif mode == RedirectCountingMode.CELL:
        counting = CellCounting(RedirectCounterRedisDAO(redis_client=dao.redis, prefix=app_prefix()))
    else:
        raise BadConfigurationError(f"Unknown redirect counting mode '{mode}'.")

    return UrlRegistry(dao, counting)
