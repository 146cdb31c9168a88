"""
Last-resort error middleware.

Errors no exception handler claims are turned into the generic 500
JSON here, inside the CORS and security-header middleware, instead of
escaping to Starlette's outermost server-error layer.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from beneficiaries_api.shared.errors.handlers import unexpected_error_response


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Middleware that answers unhandled errors with a 500 JSON body."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return unexpected_error_response(request, exc)
