"""Application services."""

from src.application.services.admin_session_service import AdminSessionService
from src.application.services.audit_trail import AuditTrail
from src.application.services.auth_service import AuthService
from src.application.services.session_manager import SessionManager

__all__ = ["AdminSessionService", "AuditTrail", "AuthService", "SessionManager"]
