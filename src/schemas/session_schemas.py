"""Admin session-management response schemas.

Endpoints:
    GET    /api/admin/sessions                          - Active sessions
    GET    /api/admin/sessions/stats                    - Statistics
    GET    /api/admin/sessions/users/{user_id}          - One user's sessions
    DELETE /api/admin/sessions/{session_id}             - Revoke one session
    DELETE /api/admin/sessions/users/{user_id}/revoke-all - Revoke a user's sessions

Token values are never included.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from src.application.dtos import SessionOwnerView, SessionStats, SessionView
from src.domain.enums import UserRole
from src.schemas.common_schemas import CamelModel


class SessionUserResponse(CamelModel):
    """Owner of a listed session."""

    id: UUID
    email: str
    first_name: str | None = None
    last_name: str | None = None
    role: UserRole

    @classmethod
    def from_dto(cls, owner: SessionOwnerView) -> "SessionUserResponse":
        return cls(
            id=owner.user_id,
            email=owner.email,
            first_name=owner.first_name,
            last_name=owner.last_name,
            role=owner.role,
        )


class SessionResponse(CamelModel):
    """Session metadata."""

    id: UUID = Field(..., description="Session ID")
    user_id: UUID = Field(..., description="Owning user ID")
    ip_address: str | None = Field(default=None, description="Client IP at creation/rotation")
    user_agent: str | None = Field(default=None, description="Client user agent")
    created_at: datetime
    last_used_at: datetime
    expires_at: datetime
    is_active: bool = Field(..., description="Whether the session has not expired")
    user: SessionUserResponse | None = None

    @classmethod
    def from_dto(cls, view: SessionView) -> "SessionResponse":
        return cls(
            id=view.id,
            user_id=view.user_id,
            ip_address=view.ip_address,
            user_agent=view.user_agent,
            created_at=view.created_at,
            last_used_at=view.last_used_at,
            expires_at=view.expires_at,
            is_active=view.is_active,
            user=SessionUserResponse.from_dto(view.user) if view.user else None,
        )


class SessionListResponse(CamelModel):
    success: bool = Field(default=True)
    sessions: list[SessionResponse]
    count: int

    @classmethod
    def from_views(cls, views: list[SessionView]) -> "SessionListResponse":
        return cls(
            sessions=[SessionResponse.from_dto(v) for v in views],
            count=len(views),
        )


class TopUserResponse(CamelModel):
    user_id: UUID
    email: str
    first_name: str | None = None
    last_name: str | None = None
    session_count: int


class SessionStatsResponse(CamelModel):
    """Platform-wide session statistics."""

    success: bool = Field(default=True)
    total_active: int = Field(..., description="Unexpired sessions")
    total_sessions: int = Field(..., description="All stored sessions")
    recent_activity: int = Field(
        ..., description="Active sessions used in the last 24 hours"
    )
    top_users: list[TopUserResponse] = Field(
        ..., description="Top 10 users by active-session count"
    )

    @classmethod
    def from_dto(cls, stats: SessionStats) -> "SessionStatsResponse":
        return cls(
            total_active=stats.total_active,
            total_sessions=stats.total_sessions,
            recent_activity=stats.recent_activity,
            top_users=[
                TopUserResponse(
                    user_id=entry.user.user_id,
                    email=entry.user.email,
                    first_name=entry.user.first_name,
                    last_name=entry.user.last_name,
                    session_count=entry.session_count,
                )
                for entry in stats.top_users
            ],
        )


class RevokeSessionResponse(CamelModel):
    success: bool = Field(default=True)
    message: str = Field(default="Session revoked successfully")
    session_id: UUID
    user_id: UUID


class RevokeUserSessionsResponse(CamelModel):
    success: bool = Field(default=True)
    message: str
    user_id: UUID
    sessions_revoked: int
