"""FastAPI dependencies exposing container members to request handlers.

Usage:
    @router.post("/login")
    async def login(auth: AuthService = Depends(get_auth_service)): ...
"""

from fastapi import Request

from src.application.services import AdminSessionService, AuthService
from src.core.config import Settings
from src.core.container.services import Container
from src.domain.protocols import LoggerProtocol


def get_container(request: Request) -> Container:
    container: Container = request.app.state.container
    return container


def get_settings_dependency(request: Request) -> Settings:
    return get_container(request).settings


def get_logger(request: Request) -> LoggerProtocol:
    return get_container(request).logger


def get_auth_service(request: Request) -> AuthService:
    return get_container(request).auth_service


def get_admin_session_service(request: Request) -> AdminSessionService:
    return get_container(request).admin_session_service
