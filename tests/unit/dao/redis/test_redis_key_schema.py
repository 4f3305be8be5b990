import pytest

from kvshortener.dao.redis import RedisKeySchema


@pytest.mark.parametrize(
    'prefix, expected',
    [
        ('kvshortener:prod', 'kvshortener:prod:links:abc123:record'),
        (None, 'links:abc123:record'),
    ],
)
def test_record_key(prefix, expected):
    assert RedisKeySchema(prefix=prefix).record_key('abc123') == expected


def test_index_key():
    assert RedisKeySchema(prefix='kvshortener:dev').index_key() == 'kvshortener:dev:links:index'


def test_counter_key():
    assert RedisKeySchema(prefix='kvshortener:dev').counter_key('abc123') == 'kvshortener:dev:links:abc123:counter'


def test_invalid_prefix():
    with pytest.raises(TypeError, match='Prefix must be of type string'):
        RedisKeySchema(prefix=42)
