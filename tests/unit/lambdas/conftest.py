"""Fixtures shared by the Lambda handler tests.

Handlers are exercised against a real UrlRegistry backed by the in-memory
DAOs of tests/unit/conftest.py. Each test module patches its `app` module's
`load_config` and `build_registry` in an autouse setup fixture.
"""

from typing import cast
from unittest.mock import MagicMock

import pytest

from kvshortener.types import LambdaContext, LambdaConfiguration, LambdaResponse
from kvshortener.registry import UrlRegistry
from kvshortener.dao.exceptions import DataStoreError
from kvshortener.utils.responses import CORS_HEADERS


@pytest.fixture
def context() -> LambdaContext:
    return cast(LambdaContext, {'function_name': 'kvshortener-test'})


@pytest.fixture
def config() -> LambdaConfiguration:
    return cast(LambdaConfiguration, {'redis': {'host': 'redis.test', 'port': 6379, 'db': 0}, 'redirect_counting': 'embedded'})


@pytest.fixture
def failing_registry() -> MagicMock:
    """Registry whose every operation fails like an unreachable store."""
    registry = MagicMock(spec=UrlRegistry)
    error = DataStoreError("Can't connect to Redis at redis.test:6379/0.")
    for name in ('create', 'list', 'search', 'stats', 'redirect', 'set_lock', 'delete', 'bulk_delete'):
        getattr(registry, name).side_effect = error
    return registry


@pytest.fixture
def assert_has_cors_headers():
    def check(response: LambdaResponse) -> None:
        for header, value in CORS_HEADERS.items():
            assert response['headers'][header] == value

    return check
