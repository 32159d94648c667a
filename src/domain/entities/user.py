"""User domain entity for authentication.

Pure business logic, no framework dependencies.

Lockout state (failed_login_attempts, locked_until) is owned by the
LockoutPolicy and only changes on the login path.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from src.domain.enums.user_role import UserRole
from src.domain.enums.user_status import UserStatus


@dataclass(slots=True, kw_only=True)
class User:
    """User domain entity with authentication state.

    Business Rules:
        - Email is unique and compared case-insensitively (stored lowercase)
        - Only ACTIVE users may authenticate or refresh tokens
        - Account locks after 5 failed login attempts for 30 minutes
        - A successful login resets the failure counter and the lock
        - password_hash is never logged or returned to clients

    Attributes:
        id: Unique user identifier.
        email: Lowercased email address.
        password_hash: Bcrypt hash (never plaintext).
        first_name: Optional given name.
        last_name: Optional family name.
        role: USER or ADMIN.
        status: ACTIVE, INACTIVE or SUSPENDED.
        failed_login_attempts: Consecutive failed password checks.
        locked_until: Lock expiry (None if never locked or reset).
        last_login_at: Last successful login (telemetry only).
        last_active_at: Last authenticated request (telemetry only).
        created_at: When the user was created.
        updated_at: When the user was last updated.

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     email="a@x.com",
        ...     password_hash="$2b$12$...",
        ... )
        >>> user.is_active
        True
    """

    id: UUID
    email: str
    password_hash: str
    first_name: str | None = None
    last_name: str | None = None
    role: UserRole = UserRole.USER
    status: UserStatus = UserStatus.ACTIVE
    failed_login_attempts: int = 0
    locked_until: datetime | None = None
    last_login_at: datetime | None = None
    last_active_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def is_active(self) -> bool:
        """Whether the account status allows authentication."""
        return self.status == UserStatus.ACTIVE

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def full_name(self) -> str | None:
        """First and last name joined, or None when neither is set."""
        parts = [p for p in (self.first_name, self.last_name) if p]
        return " ".join(parts) if parts else None
