"""Data Transfer Objects (DTOs) for application layer.

DTOs are result dataclasses returned by application services. They are
NOT API schemas (pydantic models live in src/schemas).

Usage:
    from src.application.dtos import LoginResult, TokenPair, SessionStats
"""

from src.application.dtos.auth_dtos import (
    ClientInfo,
    CurrentUser,
    LoginResult,
    PublicUser,
    SessionIdentity,
    TokenPair,
    UserProfile,
)
from src.application.dtos.session_dtos import (
    RevokedSession,
    RevokedUserSessions,
    SessionOwnerView,
    SessionStats,
    SessionView,
    TopSessionUser,
)

__all__ = [
    "ClientInfo",
    "CurrentUser",
    "LoginResult",
    "PublicUser",
    "RevokedSession",
    "RevokedUserSessions",
    "SessionIdentity",
    "SessionOwnerView",
    "SessionStats",
    "SessionView",
    "TokenPair",
    "TopSessionUser",
    "UserProfile",
]
