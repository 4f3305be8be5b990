import logging

from kvshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from kvshortener.constants import STORAGE_FAILURE
from kvshortener.dao.exceptions import DataStoreError
from kvshortener.registry.factory import build_registry
from kvshortener.registry.exceptions import RegistryError
from kvshortener.utils.config import load_config
from kvshortener.utils.helpers import json_body, guarantee_500_response
from kvshortener.utils.responses import json_response, error_response
from kvshortener.lambdas.lock_url.constants import LOCK_UPDATED, LOCK_FAILED


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Lock or unlock a short URL

    Body: {"code": str, "locked": bool}. A malformed body is treated as {}.
    Setting the state a record already has is a no-op.

    HTTP responses:
        200: {shortCode, locked}
        400: {error: 'Short code is required' | 'Locked flag must be a boolean'}
        404: {error: 'URL not found'}
        500: {error: 'Failed to update lock state'}
    """
    app_config = load_config('lock_url')
    body = json_body(event) or {}

    try:
        registry = build_registry(app_config)
        result = registry.set_lock(body.get('code'), body.get('locked'))
    except RegistryError as e:
        logger.info('Rejected lock update. Responding with %s.', e.status_code, extra={'event': e.error_code})
        return error_response(e.status_code, e.message, e.error_code)
    except DataStoreError:
        logger.exception('Failed to update lock state. Responding with 500.', extra={'event': LOCK_FAILED})
        return error_response(500, 'Failed to update lock state', STORAGE_FAILURE)

    logger.info(
        'Lock state updated. Responding with 200.',
        extra={'shortcode': result.shortcode, 'locked': result.locked, 'event': LOCK_UPDATED},
    )
    return json_response(200, result.payload())
