"""Authentication request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Endpoints:
    POST /api/auth/login            - Login (creates session)
    POST /api/auth/refresh          - Rotate refresh token
    POST /api/auth/logout           - Logout (deletes session)
    GET  /api/auth/me               - Current user
    POST /api/auth/change-password  - Change password (revokes all sessions)
"""

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict, EmailStr, Field, field_validator

from src.application.dtos import LoginResult, PublicUser, TokenPair, UserProfile
from src.domain.enums import UserRole, UserStatus
from src.schemas.common_schemas import CamelModel

MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_BYTES = 72


# =============================================================================
# Login
# =============================================================================


class LoginRequest(CamelModel):
    """Request schema for login.

    POST /api/auth/login
    Returns: 200 OK
    """

    email: EmailStr = Field(
        ...,
        description="User's email address (case-insensitive)",
        examples=["a@leadnex.io"],
    )
    password: str = Field(
        ...,
        min_length=1,
        max_length=128,
        description="User's password",
        examples=["Secret123!"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "a@leadnex.io",
                "password": "Secret123!",
            }
        }
    )


class PublicUserResponse(CamelModel):
    """User projection returned on login (never includes the hash)."""

    id: UUID = Field(..., description="User ID")
    email: str = Field(..., description="Email address")
    first_name: str | None = Field(default=None, description="First name")
    last_name: str | None = Field(default=None, description="Last name")
    role: UserRole = Field(..., description="User role")

    @classmethod
    def from_dto(cls, user: PublicUser) -> "PublicUserResponse":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role,
        )


class LoginResponse(CamelModel):
    """Response schema for a successful login.

    The access token is also set as an HTTP-only cookie.
    """

    success: bool = Field(default=True)
    token: str = Field(..., description="Access token (24h)")
    refresh_token: str = Field(..., description="Refresh token (7 days)")
    expires_at: datetime = Field(..., description="Session expiry")
    user: PublicUserResponse

    @classmethod
    def from_result(cls, result: LoginResult) -> "LoginResponse":
        return cls(
            token=result.tokens.access_token,
            refresh_token=result.tokens.refresh_token,
            expires_at=result.tokens.expires_at,
            user=PublicUserResponse.from_dto(result.user),
        )


# =============================================================================
# Token refresh
# =============================================================================


class RefreshRequest(CamelModel):
    """Request schema for token refresh.

    POST /api/auth/refresh
    """

    refresh_token: str = Field(
        ...,
        min_length=1,
        description="Refresh token issued at login or by a previous refresh",
    )


class RefreshResponse(CamelModel):
    """Response schema for token refresh (new pair, same session)."""

    success: bool = Field(default=True)
    token: str = Field(..., description="New access token")
    refresh_token: str = Field(..., description="New refresh token")
    expires_at: datetime = Field(..., description="Session expiry")

    @classmethod
    def from_tokens(cls, tokens: TokenPair) -> "RefreshResponse":
        return cls(
            token=tokens.access_token,
            refresh_token=tokens.refresh_token,
            expires_at=tokens.expires_at,
        )


# =============================================================================
# Current user
# =============================================================================


class UserProfileResponse(CamelModel):
    """Current user's profile."""

    id: UUID
    email: str
    first_name: str | None = None
    last_name: str | None = None
    role: UserRole
    status: UserStatus
    last_login_at: datetime | None = None
    created_at: datetime

    @classmethod
    def from_dto(cls, profile: UserProfile) -> "UserProfileResponse":
        return cls(
            id=profile.id,
            email=profile.email,
            first_name=profile.first_name,
            last_name=profile.last_name,
            role=profile.role,
            status=profile.status,
            last_login_at=profile.last_login_at,
            created_at=profile.created_at,
        )


class CurrentUserResponse(CamelModel):
    """Response schema for GET /api/auth/me."""

    success: bool = Field(default=True)
    user: UserProfileResponse


# =============================================================================
# Password change
# =============================================================================


class ChangePasswordRequest(CamelModel):
    """Request schema for password change.

    POST /api/auth/change-password
    All of the user's sessions are revoked on success.
    """

    current_password: str = Field(
        ...,
        min_length=1,
        max_length=128,
        description="Current password",
    )
    new_password: str = Field(
        ...,
        description=f"New password (at least {MIN_PASSWORD_LENGTH} characters)",
        examples=["NewSecret456!"],
    )

    @field_validator("new_password")
    @classmethod
    def validate_new_password(cls, v: str) -> str:
        """Enforce the password length policy.

        Raises:
            ValueError: If shorter than 8 characters or longer than 72 bytes.
        """
        if len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(
                f"New password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"New password must be at most {MAX_PASSWORD_BYTES} bytes")
        return v
