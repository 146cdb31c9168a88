"""
Health check router.

Liveness plus a database round trip, for load balancers and
orchestrators. Answers 503 while the registry database is unreachable.
"""

from fastapi import APIRouter, Depends, Request, Response, status

from beneficiaries_api.infrastructure.database import ConnectionProvider
from beneficiaries_api.interfaces.registry.dependencies import get_connection_provider
from beneficiaries_api.interfaces.registry.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
    summary="Health check",
    description="Returns application version and whether the database is reachable.",
)
def health_check(
    request: Request,
    response: Response,
    provider: ConnectionProvider = Depends(get_connection_provider),
) -> HealthResponse:
    database_ok = provider.ping()
    if not database_ok:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HealthResponse(
        status="ok" if database_ok else "degraded",
        version=request.app.version,
        database="ok" if database_ok else "unavailable",
    )
