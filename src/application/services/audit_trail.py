"""Best-effort audit recording.

Wraps an AuditProtocol so that a failed audit write (returned Failure or
raised exception) is logged and never reaches the caller. Authentication
operations must still succeed when the audit store is down.
"""

from typing import Any
from uuid import UUID

from src.application.dtos import ClientInfo
from src.core.result import Failure
from src.domain.enums import AuditAction
from src.domain.protocols import AuditProtocol, LoggerProtocol


class AuditTrail:
    """Fire-and-forget facade over the audit recorder.

    Usage:
        await audit_trail.record(
            AuditAction.LOGOUT,
            entity="user",
            user_id=user_id,
            entity_id=str(user_id),
            client=client,
        )
    """

    def __init__(self, audit: AuditProtocol, logger: LoggerProtocol) -> None:
        self._audit = audit
        self._logger = logger

    async def record(
        self,
        action: AuditAction,
        *,
        entity: str,
        user_id: UUID | None = None,
        entity_id: str | None = None,
        changes: dict[str, Any] | str | None = None,
        client: ClientInfo | None = None,
    ) -> None:
        client = client or ClientInfo()
        try:
            result = await self._audit.record(
                action=action,
                entity=entity,
                user_id=user_id,
                entity_id=entity_id,
                changes=changes,
                ip_address=client.ip_address,
                user_agent=client.user_agent,
            )
        except Exception as e:
            self._logger.error(
                "audit_record_failed",
                error=e,
                action=action.value,
                user_id=str(user_id) if user_id else None,
            )
            return

        if isinstance(result, Failure):
            self._logger.error(
                "audit_record_failed",
                action=action.value,
                user_id=str(user_id) if user_id else None,
                error_code=result.error.code.value,
                error_message=result.error.message,
            )
