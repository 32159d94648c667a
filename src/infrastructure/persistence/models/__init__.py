"""Database models.

Importing this package registers every table on BaseModel.metadata.
"""

from src.infrastructure.persistence.models.audit_log import AuditLog
from src.infrastructure.persistence.models.session import Session
from src.infrastructure.persistence.models.user import User

__all__ = ["AuditLog", "Session", "User"]
