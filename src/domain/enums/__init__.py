"""Domain enums.

Usage:
    from src.domain.enums import AuditAction, UserRole, UserStatus
"""

from src.domain.enums.audit_action import AuditAction
from src.domain.enums.user_role import UserRole
from src.domain.enums.user_status import UserStatus

__all__ = ["AuditAction", "UserRole", "UserStatus"]
