"""Authentication domain errors.

AuthError carries one of the closed ErrorCode kinds; callers switch on
``error.code``, never on the message. The message constants below are the
user-facing texts for each kind.

Usage:
    from src.domain.errors import AuthError, AuthErrorMessage

    return Failure(AuthError(
        code=ErrorCode.INVALID_CREDENTIALS,
        message=AuthErrorMessage.INVALID_CREDENTIALS,
    ))
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode
from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthError(DomainError):
    """Authentication, session or authorization failure."""


class AuthErrorMessage:
    """User-facing messages, one per error kind.

    INVALID_CREDENTIALS is shared by "no such user" and "wrong password"
    so responses never reveal whether an email is registered.
    """

    INVALID_CREDENTIALS = "Invalid email or password"
    ACCOUNT_LOCKED = "Account locked. Try again in {minutes} minutes"
    ACCOUNT_INACTIVE = "Account is inactive or suspended"
    INVALID_REFRESH_TOKEN = "Invalid or expired refresh token"
    INVALID_TOKEN = "Invalid or expired token"
    AUTHENTICATION_REQUIRED = "Authentication required"
    SESSION_INVALID = "Session expired or invalid"
    USER_INACTIVE = "User not found or inactive"
    INVALID_CURRENT_PASSWORD = "Current password is incorrect"
    ADMIN_REQUIRED = "Admin access required"
    SELF_REVOKE_FORBIDDEN = "Cannot revoke your own sessions"
    SESSION_NOT_FOUND = "Session not found"
    USER_NOT_FOUND = "User not found"
