import logging

from kvshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from kvshortener.constants import STORAGE_FAILURE
from kvshortener.dao.exceptions import DataStoreError
from kvshortener.registry.factory import build_registry
from kvshortener.registry.exceptions import RegistryError, InvalidRequestBodyError
from kvshortener.utils.config import load_config
from kvshortener.utils.helpers import get_short_url, json_body, guarantee_500_response
from kvshortener.utils.responses import json_response, error_response
from kvshortener.lambdas.create_url.constants import URL_CREATED, CREATE_FAILED


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to shorten URLs

    This Lambda handler follows this procedure to shorten URLs:
    - Step 1: Parse the JSON request body
    - Step 2: Validate the URL, allocate a short code and store the record
    - Step 3: Respond with the new record and its short URL

    HTTP responses:
        201: Short URL created
            shortUrl: absolute short URL built from the request's origin
            originalUrl: normalized target URL
            shortCode: newly allocated short code
            description: trimmed description ('' if omitted)
            createdAt: creation time (Unix ms)
            expiresAt: expiry time (Unix ms) or null
        400: Bad client request
            error: 'Invalid JSON body', 'URL is required' or 'Invalid URL'
        500: Internal server error
            error: 'Failed to create short URL'

    Args:
        event (LambdaEvent):
            API Gateway event payload in Lambda Proxy format.
            Body: {"url": str, "description"?: str, "expirationType"?: "permanent" | "30days"}
        context (LambdaContext):
            AWS Lambda context object (not used directly).

    Returns:
        LambdaResponse:
            API Gateway-compatible response including statusCode, headers, and body.

    Example:
        >>> event = {'body': '{"url": "https://example.com", "expirationType": "30days"}'}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        201
        >>> json.loads(response['body'])['shortUrl']
        'http://localhost:3000/k3x9qa'
    """
    app_config = load_config('create_url')

    try:
        # 1- Parse the JSON request body
        body = json_body(event)
        if body is None:
            raise InvalidRequestBodyError()

        # 2- Validate the URL, allocate a short code and store the record
        registry = build_registry(app_config)
        record = registry.create(
            url=body.get('url'),
            description=body.get('description'),
            expiration_type=body.get('expirationType'),
        )
    except RegistryError as e:
        logger.info('Rejected short URL creation. Responding with %s.', e.status_code, extra={'event': e.error_code})
        return error_response(e.status_code, e.message, e.error_code)
    except DataStoreError:
        logger.exception('Failed to store short URL. Responding with 500.', extra={'event': CREATE_FAILED})
        return error_response(500, 'Failed to create short URL', STORAGE_FAILURE)

    # 3- Respond with the new record and its short URL
    logger.info(
        'Short URL created. Responding with 201.',
        extra={'shortcode': record.shortcode, 'event': URL_CREATED},
    )
    return json_response(
        201,
        {
            'shortUrl': get_short_url(record.shortcode, event),
            'originalUrl': record.original_url,
            'shortCode': record.shortcode,
            'description': record.description,
            'createdAt': record.created_at,
            'expiresAt': record.expires_at,
        },
    )
