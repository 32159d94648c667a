"""System router for non-prefixed application endpoints.

Lightweight, side-effect free endpoints for load balancers and basic
diagnostics.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.core.container import Container, get_container

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    return {"message": "LeadNex Auth API", "status": "operational"}


@system_router.get("/health")
async def health(container: Container = Depends(get_container)) -> JSONResponse:
    """Health check: 200 when the database answers, 503 otherwise."""
    if await container.database.check_connection():
        return JSONResponse(content={"status": "healthy"})
    container.logger.warning("health_check_failed", component="database")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "unhealthy"},
    )
