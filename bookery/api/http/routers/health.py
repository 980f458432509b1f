"""Health check endpoint."""

from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from bookery.api.http.deps import get_database_service
from bookery.core.services import DbSessionService
from bookery.runtime.context import get_config

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=None)
def health(
    database: DbSessionService = Depends(get_database_service),
) -> dict[str, Any] | JSONResponse:
    """Report database connectivity and connection pool usage.

    Returns 200 when the database answers, 503 otherwise.
    """
    healthy = database.health_check()
    body = {
        "status": "healthy" if healthy else "unhealthy",
        "environment": get_config().app.environment,
        "database": {
            "status": "healthy" if healthy else "unhealthy",
            "pool": database.get_pool_status(),
        },
    }
    if not healthy:
        return JSONResponse(status_code=503, content=body)
    return body
