import logging

from kvshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from kvshortener.constants import STORAGE_FAILURE
from kvshortener.dao.exceptions import DataStoreError
from kvshortener.models import UrlRecord
from kvshortener.registry.factory import build_registry
from kvshortener.registry.exceptions import RegistryError
from kvshortener.utils.config import load_config
from kvshortener.utils.helpers import query_param, guarantee_500_response
from kvshortener.utils.responses import json_response, error_response
from kvshortener.lambdas.url_stats.constants import STATS_RETRIEVED, STATS_FAILED


logger = logging.getLogger(__name__)


def stats_payload(record: UrlRecord) -> dict:
    return {
        'shortCode': record.shortcode,
        'originalUrl': record.original_url,
        'redirectCount': record.redirect_count,
        'createdAt': record.created_at,
        'lastAccessed': record.last_accessed,
        'expiresAt': record.expires_at,
        'locked': bool(record.locked),
    }


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Report redirect statistics of one short URL (?code=<shortcode>)

    HTTP responses:
        200: {shortCode, originalUrl, redirectCount, createdAt, lastAccessed, expiresAt, locked}
        400: {error: 'Short code is required'}
        404: {error: 'URL not found'} (also for expired records, which are purged)
        500: {error: 'Failed to get URL stats'}
    """
    app_config = load_config('url_stats')
    shortcode = query_param(event, 'code')

    try:
        registry = build_registry(app_config)
        record = registry.stats(shortcode)
    except RegistryError as e:
        logger.info(
            'Stats unavailable. Responding with %s.',
            e.status_code,
            extra={'shortcode': shortcode, 'event': e.error_code},
        )
        return error_response(e.status_code, e.message, e.error_code)
    except DataStoreError:
        logger.exception('Failed to read short URL stats. Responding with 500.', extra={'event': STATS_FAILED})
        return error_response(500, 'Failed to get URL stats', STORAGE_FAILURE)

    logger.info('Stats retrieved. Responding with 200.', extra={'shortcode': record.shortcode, 'event': STATS_RETRIEVED})
    return json_response(200, stats_payload(record))
