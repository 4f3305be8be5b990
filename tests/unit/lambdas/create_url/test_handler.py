"""Unit tests for the create_url AWS Lambda handler.

Test coverage includes:

1. Successful creation
   - 201 with the short URL built from the request's origin.
2. Thirty day expiration
   - expiresAt is 30 days after createdAt.
3. Bad requests
   - Malformed JSON, missing URL and invalid URL return 400.
4. Store failures
   - DataStoreError returns 500 with a generic message.
"""

import json
from typing import cast

import pytest
from pytest import MonkeyPatch
from freezegun import freeze_time

from kvshortener.types import LambdaEvent, LambdaConfiguration
from kvshortener.lambdas.create_url import app


NOW = 1760486400000  # 2025-10-15T00:00:00Z


def create_event(body: str | None, domain: str = 'sho.rt') -> LambdaEvent:
    return cast(LambdaEvent, {
        'resource': '/api/urls',
        'httpMethod': 'POST',
        'path': '/api/urls',
        'body': body,
        'requestContext': {'domainName': domain, 'stage': 'Prod'},
    })


class TestCreateUrlHandler:
    @pytest.fixture(autouse=True)
    def setup(self, monkeypatch: MonkeyPatch, context, config: LambdaConfiguration, registry, record_dao) -> None:
        monkeypatch.setattr(app, 'load_config', lambda *a, **kw: config)
        monkeypatch.setattr(app, 'build_registry', lambda *a, **kw: registry)

        self.context = context
        self.record_dao = record_dao

    @freeze_time('2025-10-15')
    def test_lambda_handler(self, assert_has_cors_headers) -> None:
        event = create_event(json.dumps({'url': 'https://Example.com', 'description': ' Docs '}))

        response = app.lambda_handler(event, self.context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 201
        assert response['headers']['Content-Type'] == 'application/json'
        assert_has_cors_headers(response)

        shortcode = body['shortCode']
        assert body == {
            'shortUrl': f'https://sho.rt/{shortcode}',
            'originalUrl': 'https://example.com/',
            'shortCode': shortcode,
            'description': 'Docs',
            'createdAt': NOW,
            'expiresAt': None,
        }
        assert shortcode in self.record_dao.records

    @freeze_time('2025-10-15')
    def test_lambda_handler_with_thirty_day_expiration(self) -> None:
        event = create_event(json.dumps({'url': 'https://example.com', 'expirationType': '30days'}))

        body = json.loads(app.lambda_handler(event, self.context)['body'])

        assert body['expiresAt'] == body['createdAt'] + 30 * 24 * 60 * 60 * 1000

    def test_short_url_on_execute_api_domain(self) -> None:
        event = create_event(json.dumps({'url': 'https://example.com'}), 'abc.execute-api.us-east-1.amazonaws.com')

        body = json.loads(app.lambda_handler(event, self.context)['body'])

        assert body['shortUrl'] == f'https://abc.execute-api.us-east-1.amazonaws.com/Prod/{body["shortCode"]}'

    def test_short_url_on_sam_local(self) -> None:
        event = create_event(json.dumps({'url': 'https://example.com'}), '127.0.0.1:3000')

        body = json.loads(app.lambda_handler(event, self.context)['body'])

        assert body['shortUrl'] == f'http://127.0.0.1:3000/{body["shortCode"]}'

    @pytest.mark.parametrize(
        'raw_body, message, error_code',
        [
            ('{"url": ', 'Invalid JSON body', 'INVALID_REQUEST_BODY'),
            ('["https://example.com"]', 'Invalid JSON body', 'INVALID_REQUEST_BODY'),
            (None, 'URL is required', 'MISSING_URL'),
            ('{"description": "docs"}', 'URL is required', 'MISSING_URL'),
            ('{"url": "not a valid url"}', 'Invalid URL', 'INVALID_URL'),
        ],
    )
    def test_lambda_handler_with_bad_request(self, assert_has_cors_headers, raw_body, message, error_code) -> None:
        response = app.lambda_handler(create_event(raw_body), self.context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 400
        assert body == {'error': message, 'errorCode': error_code}
        assert_has_cors_headers(response)
        assert self.record_dao.records == {}

    def test_lambda_handler_with_store_failure(self, monkeypatch: MonkeyPatch, failing_registry) -> None:
        monkeypatch.setattr(app, 'build_registry', lambda *a, **kw: failing_registry)

        response = app.lambda_handler(create_event('{"url": "https://example.com"}'), self.context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 500
        assert body == {'error': 'Failed to create short URL', 'errorCode': 'STORAGE_FAILURE'}
