"""SQLAlchemy implementation of AuditProtocol.

Appends one row to audit_logs per event, in its own session so an audit
write never shares a transaction with the operation being audited.

Usage:
    adapter = DatabaseAuditAdapter(database)
    result = await adapter.record(
        action=AuditAction.LOGIN,
        entity="user",
        user_id=user_id,
        entity_id=str(user_id),
        ip_address="192.168.1.1",
    )
"""

from typing import Any
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.enums import AuditAction
from src.domain.errors import AuditError
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.models.audit_log import AuditLog as AuditLogModel


class DatabaseAuditAdapter:
    """Append-only audit recorder backed by the audit_logs table.

    Stateless: all state lives in the database.
    """

    def __init__(self, database: Database) -> None:
        self._database = database

    async def record(
        self,
        *,
        action: AuditAction,
        entity: str,
        user_id: UUID | None = None,
        entity_id: str | None = None,
        changes: dict[str, Any] | str | None = None,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> Result[None, AuditError]:
        """Append one audit entry.

        Returns:
            Success(None) if recorded, Failure(AuditError) on database errors.

        Note:
            created_at is set on insert; a string ``changes`` is wrapped as
            ``{"description": changes}``.
        """
        if isinstance(changes, str):
            changes = {"description": changes}
        try:
            async with self._database.get_session() as session:
                session.add(
                    AuditLogModel(
                        action=action.value,
                        entity=entity,
                        user_id=user_id,
                        entity_id=entity_id,
                        changes=changes,
                        ip_address=ip_address,
                        user_agent=user_agent,
                    )
                )
            return Success(value=None)
        except SQLAlchemyError as e:
            return Failure(
                error=AuditError(
                    code=ErrorCode.AUDIT_RECORD_FAILED,
                    message=f"Failed to record audit entry: {e}",
                    details={"action": action.value, "entity": entity},
                )
            )
