"""API Gateway (Lambda proxy) response builders

Every response carries the CORS headers of the public API. Error bodies share
one shape:

    {"error": "<human readable message>", "errorCode": "<MACHINE_CODE>"}
"""

import json
from typing import Any

from kvshortener.types import LambdaResponse, HttpHeaders


CORS_HEADERS: HttpHeaders = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Methods': 'GET, POST, PUT, DELETE, OPTIONS',
    'Access-Control-Allow-Headers': 'Content-Type',
}

NO_CACHE = 'no-cache, no-store, must-revalidate'


def json_response(status_code: int, body: Any) -> LambdaResponse:
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': 'application/json', **CORS_HEADERS},
        'body': json.dumps(body),
    }


def error_response(status_code: int, message: str, error_code: str) -> LambdaResponse:
    return json_response(status_code, {'error': message, 'errorCode': error_code})


def response_204() -> LambdaResponse:
    return {
        'statusCode': 204,
        'headers': dict(CORS_HEADERS),
        'body': '',
    }


def response_302(*, location: str) -> LambdaResponse:
    return {
        'statusCode': 302,
        'headers': {
            'Location': location,
            'Cache-Control': NO_CACHE,
            **CORS_HEADERS,
        },
        'body': '',  # no body needed for redirects
    }


def preflight_response() -> LambdaResponse:
    return {
        'statusCode': 200,
        'headers': dict(CORS_HEADERS),
        'body': '',
    }
