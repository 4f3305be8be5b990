import logging

from kvshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from kvshortener.constants import STORAGE_FAILURE
from kvshortener.dao.exceptions import DataStoreError
from kvshortener.registry.factory import build_registry
from kvshortener.registry.exceptions import RegistryError
from kvshortener.utils.config import load_config
from kvshortener.utils.helpers import query_param, guarantee_500_response
from kvshortener.utils.responses import json_response, error_response
from kvshortener.lambdas.search_urls.constants import URLS_SEARCHED, SEARCH_FAILED


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Search live short URLs by description (?q=<term>)

    HTTP responses:
        200: {urls: [...], query: str, total: int, scanLimitHit: bool}
        400: {error: 'Search query is required'}
        500: {error: 'Failed to search URLs'}
    """
    app_config = load_config('search_urls')

    try:
        registry = build_registry(app_config)
        result = registry.search(query_param(event, 'q'))
    except RegistryError as e:
        logger.info('Rejected search request. Responding with %s.', e.status_code, extra={'event': e.error_code})
        return error_response(e.status_code, e.message, e.error_code)
    except DataStoreError:
        logger.exception('Failed to search short URLs. Responding with 500.', extra={'event': SEARCH_FAILED})
        return error_response(500, 'Failed to search URLs', STORAGE_FAILURE)

    logger.info(
        'Found %d matching short URLs. Responding with 200.',
        result.total,
        extra={'scanLimitHit': result.scan_limit_hit, 'event': URLS_SEARCHED},
    )
    return json_response(200, result.payload())
