"""Audit trail adapters."""

from src.infrastructure.audit.database_adapter import DatabaseAuditAdapter

__all__ = ["DatabaseAuditAdapter"]
