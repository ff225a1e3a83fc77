import logging
from collections.abc import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from personal_accounts_mcp.clients import use_api_token

logger = logging.getLogger(__name__)

API_TOKEN_HEADER = "X-Accounts-Token"


class APITokenMiddleware(BaseHTTPMiddleware):
    """
    Middleware to extract the X-Accounts-Token header and use it as the
    bearer token for searches made while handling the request.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        api_token = request.headers.get(API_TOKEN_HEADER)
        if api_token:
            logger.info("Received %s header, applying override.", API_TOKEN_HEADER)
            with use_api_token(api_token):
                return await call_next(request)
        return await call_next(request)
