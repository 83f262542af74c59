"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

from src.bookstore.api.http.app_data import ApplicationDependencies
from src.bookstore.runtime.context import get_config

router = APIRouter(prefix="/health", tags=["health"])


def _database_type() -> str:
    return "sqlite" if get_config().database.is_sqlite else "postgresql"


@router.get("")
def health() -> dict[str, str]:
    """Liveness probe: 200 OK as long as the process is running."""
    return {"status": "healthy", "service": "bookstore-api"}


@router.get("/ready", response_model=None)
def readiness(request: Request) -> dict[str, Any] | JSONResponse:
    """Readiness probe: 503 while the database is unreachable."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies

    try:
        db_healthy = app_deps.database_service.health_check()
        database = {
            "status": "healthy" if db_healthy else "unhealthy",
            "type": _database_type(),
        }
    except Exception as e:
        db_healthy = False
        database = {"status": "unhealthy", "error": str(e)}

    response = {
        "status": "ready" if db_healthy else "not_ready",
        "environment": get_config().app.environment,
        "checks": {"database": database},
    }
    if not db_healthy:
        return JSONResponse(status_code=503, content=response)
    return response


@router.get("/database", response_model=None)
def health_database(request: Request) -> dict[str, Any] | JSONResponse:
    """Database-specific health check with connection pool status."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies

    try:
        healthy = app_deps.database_service.health_check()
        return {
            "status": "healthy" if healthy else "unhealthy",
            "type": _database_type(),
            "pool": app_deps.database_service.get_pool_status(),
        }
    except Exception as e:
        return JSONResponse(
            status_code=503,
            content={
                "status": "unhealthy",
                "error": str(e),
                "error_type": type(e).__name__,
            },
        )
