from kvshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from kvshortener.utils.responses import preflight_response


def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Answer CORS preflight (OPTIONS) requests for every /api/* route."""
    return preflight_response()
