"""Unit tests for handle_redis_connection_error decorator.

Test coverage includes:
    1. Normal function execution
    2. Connection and timeout error handling
    3. Function metadata preservation
"""

from unittest.mock import MagicMock

import pytest
import redis

from kvshortener.dao.redis.helpers import handle_redis_connection_error
from kvshortener.dao.exceptions import DataStoreError


class DummyDAO:
    def __init__(self, error: Exception | None = None):
        self.redis = MagicMock()
        self.redis.connection_pool.connection_kwargs = {'host': 'redis.test', 'port': 6379, 'db': 2}
        self.error = error

    @handle_redis_connection_error
    def ping(self):
        """Ping Redis."""
        if self.error is not None:
            raise self.error
        return 'OK'


def test_decorator_allows_normal_execution():
    assert DummyDAO().ping() == 'OK'


@pytest.mark.parametrize('error', [redis.exceptions.ConnectionError('down'), redis.exceptions.TimeoutError('slow')])
def test_decorator_converts_connectivity_errors(error):
    with pytest.raises(DataStoreError, match="Can't connect to Redis at redis.test:6379/2.") as excinfo:
        DummyDAO(error).ping()
    assert excinfo.value.__cause__ is error


def test_decorator_lets_other_errors_through():
    with pytest.raises(redis.exceptions.ResponseError):
        DummyDAO(redis.exceptions.ResponseError('WRONGTYPE')).ping()


def test_decorator_preserves_metadata():
    assert DummyDAO.ping.__name__ == 'ping'
    assert DummyDAO.ping.__doc__ == 'Ping Redis.'
