import logging

from kvshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from kvshortener.constants import STORAGE_FAILURE
from kvshortener.dao.exceptions import DataStoreError
from kvshortener.registry.factory import build_registry
from kvshortener.registry.exceptions import RegistryError
from kvshortener.utils.config import load_config
from kvshortener.utils.helpers import get_short_url, guarantee_500_response
from kvshortener.utils.responses import response_302, error_response
from kvshortener.lambdas.redirect_url.constants import REDIRECT_SUCCESS, REDIRECT_FAILED


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to redirect URLs

    This Lambda handler follows this procedure to redirect URLs:
    - Step 1: Extract shortcode from request path
    - Step 2: Resolve the record and count the redirect
    - Step 3: Redirect client to target URL

    HTTP responses:
        302: Successful redirect
            headers:
                Location: target URL destination
                Cache-Control: no-cache, no-store, must-revalidate
        400: Bad client request
            error: missing shortcode in path parameters
        404: Short URL doesn't exist
        410: Short URL has expired (the record is purged)
        500: Internal server error

    Args:
        event (LambdaEvent):
            API Gateway event payload containing the shortcode path parameter.
        context (LambdaContext):
            AWS Lambda runtime context object (not used directly).

    Returns:
        LambdaResponse:
            API Gateway-compatible response including statusCode, headers, and body.

    Example:
        >>> event = {'pathParameters': {'shortcode': 'k3x9qa'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        302
        >>> response['headers']['Location']
        'https://example.com/my-page'
    """
    app_config = load_config('redirect_url')

    # 1- Extract shortcode from request's path
    shortcode = (event.get('pathParameters') or {}).get('shortcode')
    if shortcode:
        logger.debug('Client requested short URL %s.', get_short_url(shortcode, event))

    # 2- Resolve the record and count the redirect
    try:
        registry = build_registry(app_config)
        record = registry.redirect(shortcode)
    except RegistryError as e:
        logger.info(
            'Short URL not redirectable. Responding with %s.',
            e.status_code,
            extra={'shortcode': shortcode, 'event': e.error_code},
        )
        return error_response(e.status_code, e.message, e.error_code)
    except DataStoreError:
        logger.exception(
            'Failed to resolve short URL. Responding with 500.',
            extra={'shortcode': shortcode, 'event': REDIRECT_FAILED},
        )
        return error_response(500, 'Failed to redirect', STORAGE_FAILURE)

    # 3- Redirect client to target URL
    logger.info(
        'Redirecting client to target URL. Responding with 302.',
        extra={'shortcode': record.shortcode, 'redirectCount': record.redirect_count, 'event': REDIRECT_SUCCESS},
    )
    return response_302(location=record.original_url)
