"""Route-level dependencies (authentication)."""

from src.presentation.routers.api.middleware.auth_dependencies import (
    AuthenticatedUser,
    RequestClient,
    get_client_info,
    get_current_user,
)

__all__ = [
    "AuthenticatedUser",
    "RequestClient",
    "get_client_info",
    "get_current_user",
]
