"""Authentication DTOs (Data Transfer Objects).

Result dataclasses returned by AuthService. They carry data from the
application layer to the presentation layer and never include the
credential hash.

DTOs:
    - ClientInfo: Request metadata captured for sessions and audit entries
    - TokenPair: Issued access/refresh pair with the session expiry
    - PublicUser: Login response projection
    - LoginResult: Result of a successful login
    - UserProfile: Current-user projection
    - CurrentUser: Authenticated caller of a protected endpoint
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.entities.user import User
from src.domain.enums import UserRole, UserStatus


@dataclass(frozen=True, kw_only=True)
class ClientInfo:
    """Client metadata of the inbound request (advisory only)."""

    ip_address: str | None = None
    user_agent: str | None = None


@dataclass(frozen=True, kw_only=True)
class TokenPair:
    """Issued token pair.

    Attributes:
        access_token: Signed access token (24h claim).
        refresh_token: Signed refresh token (7d claim).
        expires_at: Session row expiry (7 days from issuance).
    """

    access_token: str
    refresh_token: str
    expires_at: datetime


@dataclass(frozen=True, kw_only=True)
class PublicUser:
    """Public projection returned on login."""

    id: UUID
    email: str
    first_name: str | None
    last_name: str | None
    role: UserRole

    @classmethod
    def from_user(cls, user: User) -> "PublicUser":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role,
        )


@dataclass(frozen=True, kw_only=True)
class LoginResult:
    """Response from a successful login.

    Attributes:
        session_id: Session row created for this login.
        tokens: Issued token pair.
        user: Public user projection.
    """

    session_id: UUID
    tokens: TokenPair
    user: PublicUser


@dataclass(frozen=True, kw_only=True)
class UserProfile:
    """Current-user projection (GET /auth/me)."""

    id: UUID
    email: str
    first_name: str | None
    last_name: str | None
    role: UserRole
    status: UserStatus
    last_login_at: datetime | None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role,
            status=user.status,
            last_login_at=user.last_login_at,
            created_at=user.created_at,
        )


@dataclass(frozen=True, kw_only=True)
class SessionIdentity:
    """Identity proven by a validated access token and its session row."""

    session_id: UUID
    user_id: UUID
    email: str
    role: UserRole


@dataclass(frozen=True, kw_only=True)
class CurrentUser:
    """Authenticated caller of a protected endpoint.

    Attributes:
        user_id: Authenticated user.
        email: Current email from the user row.
        role: Current role from the user row.
        session_id: Session the request was authenticated with.
        access_token: Token presented (needed for logout).
    """

    user_id: UUID
    email: str
    role: UserRole
    session_id: UUID
    access_token: str

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
