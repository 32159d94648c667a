"""Audit action types for the security audit trail.

Usage:
    from src.domain.enums import AuditAction

    await audit.record(
        action=AuditAction.LOGIN,
        entity="user",
        user_id=user.id,
        entity_id=str(user.id),
    )
"""

from enum import Enum


class AuditAction(str, Enum):
    """Auditable authentication and session events.

    String Enum:
        Values are stored verbatim in audit_logs.action.
    """

    LOGIN = "login"
    """User authenticated successfully and a session was created."""

    LOGOUT = "logout"
    """User ended their own session."""

    PASSWORD_CHANGE = "password_change"
    """User changed their password; all of their sessions were deleted."""

    SESSION_REVOKED = "session_revoked"
    """Admin deleted a single session."""

    USER_SESSIONS_REVOKED = "user_sessions_revoked"
    """Admin deleted every session of one user."""
