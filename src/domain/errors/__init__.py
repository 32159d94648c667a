"""Domain errors.

Usage:
    from src.domain.errors import AuditError, AuthError, AuthErrorMessage
"""

from src.domain.errors.audit_error import AuditError
from src.domain.errors.authentication_error import AuthError, AuthErrorMessage

__all__ = ["AuditError", "AuthError", "AuthErrorMessage"]
