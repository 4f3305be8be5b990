import logging

from kvshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from kvshortener.constants import STORAGE_FAILURE
from kvshortener.dao.exceptions import DataStoreError
from kvshortener.registry.factory import build_registry
from kvshortener.utils.config import load_config
from kvshortener.utils.helpers import json_body, guarantee_500_response
from kvshortener.utils.responses import json_response, error_response
from kvshortener.lambdas.bulk_delete_urls.constants import URLS_BULK_DELETED, BULK_DELETE_FAILED


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Delete many short URLs at once, skipping locked ones

    This Lambda handler follows this procedure:
    - Step 1: Parse the JSON body (a malformed body is treated as {})
    - Step 2: Delete the listed codes, or every record older than N days
    - Step 3: Report how many codes were deleted, skipped or missing

    Body (either mode):
        {"codes": ["abc123", "def456"]}   explicit mode
        {"olderThanDays": 30}             age mode (default 120 days)

    HTTP responses:
        200: {deleted: int, skippedLocked: int, notFound: int}
        500: {error: 'Failed to bulk delete URLs'}
    """
    app_config = load_config('bulk_delete_urls')

    # 1- Parse the JSON body
    body = json_body(event) or {}

    # 2- Delete the listed codes, or every record older than N days
    try:
        registry = build_registry(app_config)
        result = registry.bulk_delete(codes=body.get('codes'), older_than_days=body.get('olderThanDays'))
    except DataStoreError:
        logger.exception('Failed to bulk delete short URLs. Responding with 500.', extra={'event': BULK_DELETE_FAILED})
        return error_response(500, 'Failed to bulk delete URLs', STORAGE_FAILURE)

    # 3- Report how many codes were deleted, skipped or missing
    logger.info(
        'Bulk deletion finished. Responding with 200.',
        extra={
            'deleted': result.deleted,
            'skippedLocked': result.skipped_locked,
            'notFound': result.not_found,
            'event': URLS_BULK_DELETED,
        },
    )
    return json_response(200, result.payload())
