"""Helper utilities for AWS lambda functions.

Functions:
    base_url() -> str
        Extract correct public base URL from API Gateway event
    get_short_url() -> str
        Get string representation of short URL for a given shortcode
    now_ms() -> int
        Current Unix time in milliseconds
    json_body() -> JsonBody | None
        Parse the JSON object sent in the request body
    query_param() -> str | None
        Read a single query string parameter
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present
    guarantee_500_response(handler: Callable) -> Callable
        Decorator: Turn any escaped exception into a 500 response

Example:
    Typical usage inside a Lambda handler:

        >>> from kvshortener.utils.helpers import base_url
        >>> event = {
        ...     "requestContext": {
        ...         "domainName": "abc123.execute-api.us-east-1.amazonaws.com",
        ...         "stage": "Prod"
        ...     }
        ... }
        >>> base_url(event)
        'https://abc123.execute-api.us-east-1.amazonaws.com/Prod'

        >>> event = {
        ...     "requestContext": {
        ...         "domainName": "sho.rt",
        ...         "stage": "Prod"
        ...     }
        ... }
        >>> base_url(event)
        'https://sho.rt'

        >>> base_url({})
        'http://localhost:3000'
"""

import os
import json
import base64
import logging
import functools
from datetime import datetime, UTC
from collections.abc import Callable

from kvshortener.types import LambdaEvent, LambdaContext, LambdaResponse, JsonBody
from kvshortener.constants import UNKNOWN_INTERNAL_SERVER_ERROR
from kvshortener.exceptions import MissingEnvironmentVariableError
from kvshortener.utils.runtime import running_locally
from kvshortener.utils.responses import error_response


logger = logging.getLogger(__name__)

LOCAL_HOSTS = frozenset({'localhost', '127.0.0.1'})


def base_url(event: LambdaEvent) -> str:
    """Extract public base URL from API Gateway event

    Return the public base URL for the current Lambda invocation.

    Works seamlessly with both custom and default AWS API Gateway domains.
    If a custom domain is configured, the stage name is omitted.
    If using the default AWS execute-api domain, the stage name is included.

    Args:
        event (dict): API Gateway event object passed to Lambda handler

    Returns:
        str: Base URL, e.g.:
             - "https://sho.rt"
             - "https://abc123.execute-api.us-east-1.amazonaws.com/Prod"
    """
    request_context = event.get('requestContext') or {}
    domain = request_context.get('domainName', '')
    stage = request_context.get('stage', '')

    if domain and domain.split(':')[0] in LOCAL_HOSTS:
        # SAM local api serves plain HTTP
        return f'http://{domain}'
    elif domain and 'execute-api' not in domain:
        # If the domain is a custom domain (no execute-api), skip stage
        return f'https://{domain}'
    elif domain:
        # Otherwise include the stage (for AWS default domains)
        return f'https://{domain}/{stage}'
    else:
        # Fallback: local invocation (SAM CLI, tests, etc.)
        return 'http://localhost:3000'


def get_short_url(shortcode: str, event: LambdaEvent) -> str:
    """Get string representation of shortened URL

    Args:
        shortcode (str): shortcode
        event (dict): API Gateway event object passed to Lambda handler

    Returns:
        str: short url string representation
    """
    return f'{base_url(event).rstrip("/")}/{shortcode}'


def now_ms() -> int:
    """Current Unix time in milliseconds (UTC)."""
    return int(datetime.now(UTC).timestamp() * 1000)


def json_body(event: LambdaEvent) -> JsonBody | None:
    """Parse the request body as a JSON object

    Args:
        event (dict): API Gateway event object passed to Lambda handler

    Returns:
        dict | None:
            The decoded JSON object. An absent body decodes as {}.
            None if the body is not valid JSON or not a JSON object.

    Example:
        >>> json_body({'body': '{"url": "https://example.com"}'})
        {'url': 'https://example.com'}
        >>> json_body({'body': 'not json'}) is None
        True
    """
    raw = event.get('body')
    if raw is None or raw == '':
        return {}

    try:
        if event.get('isBase64Encoded'):
            raw = base64.b64decode(raw).decode('utf-8')
        body = json.loads(raw)
    except (ValueError, TypeError):
        return None

    return body if isinstance(body, dict) else None


def query_param(event: LambdaEvent, name: str) -> str | None:
    params = event.get('queryStringParameters') or {}
    return params.get(name)


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: Missing required environment variables: 'APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID'
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator


def guarantee_500_response(handler: Callable[[LambdaEvent, LambdaContext], LambdaResponse]) -> Callable:
    """Decorator: answer 500 Internal Server Error on any unhandled exception

    When running locally the exception is re-raised so SAM prints the traceback.

    Example:
        >>> @guarantee_500_response
        ... def lambda_handler(event, context):
        ...     raise RuntimeError('boom')
        >>> lambda_handler({}, None)['statusCode']
        500
    """

    @functools.wraps(handler)
    def wrapper(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
        try:
            return handler(event, context)
        except Exception:
            if running_locally():
                raise
            logger.exception(
                'Unhandled exception in lambda handler. Responding with 500.',
                extra={'event': UNKNOWN_INTERNAL_SERVER_ERROR},
            )
            return error_response(500, 'Internal Server Error', UNKNOWN_INTERNAL_SERVER_ERROR)

    return wrapper
