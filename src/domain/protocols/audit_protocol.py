"""Audit trail protocol (port).

Infrastructure adapters implement this protocol (database adapter in
production, mocks in unit tests).

Usage:
    result = await audit.record(
        action=AuditAction.LOGIN,
        entity="user",
        user_id=user.id,
        entity_id=str(user.id),
        ip_address=request.client.host,
        user_agent=request.headers.get("User-Agent"),
    )
"""

from typing import Any, Protocol
from uuid import UUID

from src.core.result import Result
from src.domain.enums import AuditAction
from src.domain.errors import AuditError


class AuditProtocol(Protocol):
    """Append-only audit recorder.

    Error Handling:
        Implementations return Failure(AuditError(...)) instead of raising
        for storage errors. Callers must still treat any failure (returned
        or raised) as non-fatal to the operation being audited.
    """

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

        Args:
            action: What happened.
            entity: Kind of thing affected ("user", "session").
            user_id: Who performed the action (None for anonymous).
            entity_id: Identifier of the affected thing.
            changes: Extra context; a plain string is stored as
                ``{"description": changes}``.
            ip_address: Client IP address.
            user_agent: Client user agent.

        Returns:
            Success(None) when stored, Failure(AuditError) otherwise.
        """
        ...
