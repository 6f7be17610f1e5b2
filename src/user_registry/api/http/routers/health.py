"""Health check endpoints."""

from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from user_registry.api.http.app_data import ApplicationDependencies
from user_registry.api.http.deps import get_app_dependencies

router = APIRouter(prefix="/health", tags=["health"])


def _timestamp() -> str:
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("")
async def health() -> dict[str, str]:
    """Liveness check: 200 as long as the process is up."""
    return {"status": "ok", "timestamp": _timestamp()}


@router.get("/ready", response_model=None)
async def readiness(
    deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> dict[str, Any] | JSONResponse:
    """Readiness check: 503 when the database is unreachable."""
    db_healthy = deps.database_service.health_check()
    content = {
        "status": "ready" if db_healthy else "not_ready",
        "environment": deps.config.app.environment,
        "checks": {"database": "healthy" if db_healthy else "unhealthy"},
        "timestamp": _timestamp(),
    }
    if not db_healthy:
        return JSONResponse(status_code=503, content=content)
    return content
