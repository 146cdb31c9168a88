"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client rate limit on every
endpoint. The limiter is built per application from settings so
tests can run with limits off or tightened.
"""

from fastapi import FastAPI
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from beneficiaries_api.core.config import Settings


def rate_limit_exceeded_handler(_request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    return JSONResponse(
        status_code=429,
        content={"error": "Rate limit exceeded", "detail": str(exc.detail)},
    )


def install_rate_limiting(app: FastAPI, settings: Settings) -> Limiter:
    """Attach a limiter keyed by client address to the application.

    Args:
        app: The FastAPI application instance.
        settings: Source of the default limit and the on/off switch.

    Returns:
        The limiter, also stored on ``app.state.limiter``.
    """
    limiter = Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)
    return limiter
