"""HTTP API routers."""

from fastapi import APIRouter

from src.presentation.routers.api.admin_sessions import router as admin_sessions_router
from src.presentation.routers.api.auth import router as auth_router

api_router = APIRouter()
api_router.include_router(auth_router)
api_router.include_router(admin_sessions_router)

__all__ = ["api_router"]
