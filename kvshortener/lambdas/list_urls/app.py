import logging

from kvshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from kvshortener.constants import STORAGE_FAILURE
from kvshortener.dao.exceptions import DataStoreError
from kvshortener.registry.factory import build_registry
from kvshortener.utils.config import load_config
from kvshortener.utils.helpers import query_param, guarantee_500_response
from kvshortener.utils.responses import json_response, error_response
from kvshortener.lambdas.list_urls.constants import URLS_LISTED, LIST_FAILED


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """List one page of live short URLs, newest first

    Query parameters:
        limit (optional): page size, defaults to 50, capped at 1000
        cursor (optional): cursor returned by the previous page

    HTTP responses:
        200: {urls: [...], cursor?: str, listComplete: bool}
        500: {error: 'Failed to list URLs'}
    """
    app_config = load_config('list_urls')

    try:
        registry = build_registry(app_config)
        result = registry.list(limit=query_param(event, 'limit'), cursor=query_param(event, 'cursor'))
    except DataStoreError:
        logger.exception('Failed to list short URLs. Responding with 500.', extra={'event': LIST_FAILED})
        return error_response(500, 'Failed to list URLs', STORAGE_FAILURE)

    logger.info(
        'Listed %d short URLs. Responding with 200.',
        len(result.urls),
        extra={'listComplete': result.list_complete, 'event': URLS_LISTED},
    )
    return json_response(200, result.payload())
