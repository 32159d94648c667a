"""User roles for authorization.

Usage:
    from src.domain.enums import UserRole

    if user.role == UserRole.ADMIN:
        # Admin-only logic
"""

from enum import Enum


class UserRole(str, Enum):
    """User roles.

    String Enum:
        Inherits from str for easy serialization and token claims.
    """

    ADMIN = "admin"
    """Administrator: may list and revoke other users' sessions."""

    USER = "user"
    """Standard user: manages only their own session."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings."""
        return [role.value for role in cls]
