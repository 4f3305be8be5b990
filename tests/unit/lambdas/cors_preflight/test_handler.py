from typing import cast

from kvshortener.types import LambdaEvent
from kvshortener.lambdas.cors_preflight import app


def test_lambda_handler(context, assert_has_cors_headers) -> None:
    event = cast(LambdaEvent, {'resource': '/api/{proxy+}', 'httpMethod': 'OPTIONS', 'path': '/api/urls'})

    response = app.lambda_handler(event, context)

    assert response['statusCode'] == 200
    assert response['body'] == ''
    assert_has_cors_headers(response)
