"""Audit log database model.

Append-only security audit trail. Never read back by the auth services;
no foreign key to users so entries outlive the accounts they mention.
"""

from typing import Any
from uuid import UUID

from sqlalchemy import JSON, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class AuditLog(BaseModel):
    """Audit log model (append-only, no updated_at).

    Fields:
        id, created_at: From BaseModel.
        user_id: Who performed the action (None for anonymous).
        action: What happened (login, logout, password_change, ...).
        entity: Kind of thing affected (user, session).
        entity_id: Identifier of the affected thing.
        changes: Extra event context (JSON).
        ip_address: Client IP address.
        user_agent: Client user agent.
    """

    __tablename__ = "audit_logs"

    user_id: Mapped[UUID | None] = mapped_column(
        nullable=True,
        comment="User who performed the action",
    )
    action: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
        comment="Audit action (login, logout, password_change, ...)",
    )
    entity: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Kind of entity affected (user, session)",
    )
    entity_id: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
        comment="Identifier of the affected entity",
    )
    changes: Mapped[dict[str, Any] | None] = mapped_column(
        JSON,
        nullable=True,
        default=None,
        comment="Additional event context",
    )
    ip_address: Mapped[str | None] = mapped_column(String(45), nullable=True)
    user_agent: Mapped[str | None] = mapped_column(String(500), nullable=True)

    __table_args__ = (Index("idx_audit_user_action", "user_id", "action"),)

    def __repr__(self) -> str:
        return (
            f"<AuditLog(id={self.id}, action={self.action!r}, "
            f"user_id={self.user_id}, created_at={self.created_at})>"
        )
