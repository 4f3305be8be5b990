import logging

from kvshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from kvshortener.constants import STORAGE_FAILURE
from kvshortener.dao.exceptions import DataStoreError
from kvshortener.registry.factory import build_registry
from kvshortener.registry.exceptions import RegistryError
from kvshortener.utils.config import load_config
from kvshortener.utils.helpers import query_param, guarantee_500_response
from kvshortener.utils.responses import response_204, error_response
from kvshortener.lambdas.delete_url.constants import URL_DELETED, DELETE_FAILED


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Delete an unlocked short URL (?code=<shortcode>)

    HTTP responses:
        204: deleted (empty body)
        400: {error: 'Short code is required'}
        404: {error: 'URL not found'}
        423: {error: 'Record is locked'}
        500: {error: 'Failed to delete URL'}
    """
    app_config = load_config('delete_url')
    shortcode = query_param(event, 'code')

    try:
        registry = build_registry(app_config)
        registry.delete(shortcode)
    except RegistryError as e:
        logger.info(
            'Rejected deletion. Responding with %s.',
            e.status_code,
            extra={'shortcode': shortcode, 'event': e.error_code},
        )
        return error_response(e.status_code, e.message, e.error_code)
    except DataStoreError:
        logger.exception('Failed to delete short URL. Responding with 500.', extra={'event': DELETE_FAILED})
        return error_response(500, 'Failed to delete URL', STORAGE_FAILURE)

    logger.info('Short URL deleted. Responding with 204.', extra={'shortcode': shortcode, 'event': URL_DELETED})
    return response_204()
