"""Admin session-management DTOs.

Views never include token values; admins see metadata only.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.entities.session import Session
from src.domain.enums import UserRole
from src.domain.protocols.session_repository import SessionOwner


@dataclass(frozen=True, kw_only=True)
class SessionOwnerView:
    """Owning user of a listed session."""

    user_id: UUID
    email: str
    first_name: str | None
    last_name: str | None
    role: UserRole

    @classmethod
    def from_owner(cls, owner: SessionOwner) -> "SessionOwnerView":
        return cls(
            user_id=owner.user_id,
            email=owner.email,
            first_name=owner.first_name,
            last_name=owner.last_name,
            role=owner.role,
        )


@dataclass(frozen=True, kw_only=True)
class SessionView:
    """Session metadata.

    Attributes:
        is_active: Storage-level expiry not yet passed.
        user: Owning user (only set on cross-user listings).
    """

    id: UUID
    user_id: UUID
    ip_address: str | None
    user_agent: str | None
    created_at: datetime
    last_used_at: datetime
    expires_at: datetime
    is_active: bool
    user: SessionOwnerView | None = None

    @classmethod
    def from_session(
        cls,
        session: Session,
        now: datetime,
        owner: SessionOwner | None = None,
    ) -> "SessionView":
        return cls(
            id=session.id,
            user_id=session.user_id,
            ip_address=session.ip_address,
            user_agent=session.user_agent,
            created_at=session.created_at,
            last_used_at=session.last_used_at,
            expires_at=session.expires_at,
            is_active=not session.is_expired(now),
            user=SessionOwnerView.from_owner(owner) if owner else None,
        )


@dataclass(frozen=True, kw_only=True)
class TopSessionUser:
    """A user ranked by active-session count."""

    user: SessionOwnerView
    session_count: int


@dataclass(frozen=True, kw_only=True)
class SessionStats:
    """Platform-wide session statistics.

    Attributes:
        total_active: Sessions whose expiry has not passed.
        total_sessions: All stored sessions.
        recent_activity: Active sessions used in the last 24 hours.
        top_users: Top users by active-session count.
    """

    total_active: int
    total_sessions: int
    recent_activity: int
    top_users: list[TopSessionUser]


@dataclass(frozen=True, kw_only=True)
class RevokedSession:
    session_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class RevokedUserSessions:
    user_id: UUID
    sessions_revoked: int
