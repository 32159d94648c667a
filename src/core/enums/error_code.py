"""Machine-readable error codes.

Callers switch on these codes, never on message text. The presentation
layer maps each code to an HTTP status.

Categories:
- Authentication errors (INVALID_CREDENTIALS, ACCOUNT_*, *_TOKEN, SESSION_*)
- Authorization errors (UNAUTHORIZED, SELF_REVOKE_FORBIDDEN)
- Resource errors (NOT_FOUND)
- Infrastructure errors (AUDIT_RECORD_FAILED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Closed set of error kinds produced by the auth core."""

    # Login outcomes
    INVALID_CREDENTIALS = "invalid_credentials"
    ACCOUNT_LOCKED = "account_locked"
    ACCOUNT_INACTIVE = "account_inactive"

    # Token / session errors
    INVALID_OR_EXPIRED_TOKEN = "invalid_or_expired_token"
    AUTHENTICATION_REQUIRED = "authentication_required"
    SESSION_INVALID = "session_invalid"
    USER_INACTIVE = "user_inactive"

    # Password change
    INVALID_CURRENT_PASSWORD = "invalid_current_password"

    # Authorization errors
    UNAUTHORIZED = "unauthorized"
    SELF_REVOKE_FORBIDDEN = "self_revoke_forbidden"

    # Resource errors
    NOT_FOUND = "not_found"

    # Infrastructure errors
    AUDIT_RECORD_FAILED = "audit_record_failed"
