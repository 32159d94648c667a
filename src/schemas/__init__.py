"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import LoginRequest, LoginResponse
"""

from src.schemas.auth_schemas import (
    ChangePasswordRequest,
    CurrentUserResponse,
    LoginRequest,
    LoginResponse,
    PublicUserResponse,
    RefreshRequest,
    RefreshResponse,
    UserProfileResponse,
)
from src.schemas.common_schemas import CamelModel, MessageResponse
from src.schemas.session_schemas import (
    RevokeSessionResponse,
    RevokeUserSessionsResponse,
    SessionListResponse,
    SessionResponse,
    SessionStatsResponse,
    SessionUserResponse,
    TopUserResponse,
)

__all__ = [
    "CamelModel",
    "ChangePasswordRequest",
    "CurrentUserResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "PublicUserResponse",
    "RefreshRequest",
    "RefreshResponse",
    "RevokeSessionResponse",
    "RevokeUserSessionsResponse",
    "SessionListResponse",
    "SessionResponse",
    "SessionStatsResponse",
    "SessionUserResponse",
    "TopUserResponse",
    "UserProfileResponse",
]
