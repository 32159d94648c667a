"""Admin session management.

Lets administrators inspect and revoke sessions across all users:
listing active sessions, platform statistics, per-user listings,
single-session revoke and bulk revoke of one user's sessions.

Authorization:
    Every operation requires the caller's role to be ADMIN
    (UNAUTHORIZED otherwise). Bulk revoke of the caller's own sessions
    is refused (SELF_REVOKE_FORBIDDEN); admins log out instead.
"""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from uuid import UUID

from src.application.dtos import (
    ClientInfo,
    CurrentUser,
    RevokedSession,
    RevokedUserSessions,
    SessionOwnerView,
    SessionStats,
    SessionView,
    TopSessionUser,
)
from src.application.services.audit_trail import AuditTrail
from src.application.services.session_manager import SessionManager
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.enums import AuditAction
from src.domain.errors import AuthError, AuthErrorMessage
from src.domain.protocols import LoggerProtocol, SessionRepository

RECENT_ACTIVITY_WINDOW = timedelta(hours=24)
TOP_USERS_LIMIT = 10


def utc_now() -> datetime:
    return datetime.now(UTC)


class AdminSessionService:
    """Cross-user session inspection and revocation for administrators."""

    def __init__(
        self,
        *,
        session_repo: SessionRepository,
        session_manager: SessionManager,
        audit_trail: AuditTrail,
        logger: LoggerProtocol,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._session_repo = session_repo
        self._session_manager = session_manager
        self._audit_trail = audit_trail
        self._logger = logger
        self._clock = clock

    async def list_active_sessions(
        self, actor: CurrentUser
    ) -> Result[list[SessionView], AuthError]:
        """Unexpired sessions of all users, most recently used first."""
        if (denied := self._require_admin(actor)) is not None:
            return denied
        now = self._clock()
        rows = await self._session_repo.list_active(now)
        return Success(
            value=[
                SessionView.from_session(row.session, now, owner=row.owner)
                for row in rows
            ]
        )

    async def get_session_stats(self, actor: CurrentUser) -> Result[SessionStats, AuthError]:
        if (denied := self._require_admin(actor)) is not None:
            return denied
        now = self._clock()
        top_users = await self._session_repo.top_users_by_active_sessions(
            now, TOP_USERS_LIMIT
        )
        return Success(
            value=SessionStats(
                total_active=await self._session_repo.count_active(now),
                total_sessions=await self._session_repo.count_all(),
                recent_activity=await self._session_repo.count_recently_used(
                    now, now - RECENT_ACTIVITY_WINDOW
                ),
                top_users=[
                    TopSessionUser(
                        user=SessionOwnerView.from_owner(entry.owner),
                        session_count=entry.session_count,
                    )
                    for entry in top_users
                ],
            )
        )

    async def list_user_sessions(
        self, actor: CurrentUser, user_id: UUID
    ) -> Result[list[SessionView], AuthError]:
        """All sessions of one user, expired ones flagged inactive."""
        if (denied := self._require_admin(actor)) is not None:
            return denied
        now = self._clock()
        sessions = await self._session_repo.list_for_user(user_id)
        return Success(value=[SessionView.from_session(s, now) for s in sessions])

    async def revoke_session(
        self,
        actor: CurrentUser,
        session_id: UUID,
        client: ClientInfo | None = None,
    ) -> Result[RevokedSession, AuthError]:
        """Revoke one session by ID.

        Returns:
            Success(RevokedSession) or Failure with UNAUTHORIZED / NOT_FOUND.
        """
        if (denied := self._require_admin(actor)) is not None:
            return denied

        match await self._session_manager.revoke_by_id(session_id):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=owner_id):
                pass

        await self._audit_trail.record(
            AuditAction.SESSION_REVOKED,
            entity="session",
            user_id=actor.user_id,
            entity_id=str(session_id),
            changes={"revoked_user_id": str(owner_id)},
            client=client,
        )
        self._logger.info(
            "session_revoked",
            admin_id=str(actor.user_id),
            session_id=str(session_id),
            user_id=str(owner_id),
        )
        return Success(value=RevokedSession(session_id=session_id, user_id=owner_id))

    async def revoke_user_sessions(
        self,
        actor: CurrentUser,
        user_id: UUID,
        client: ClientInfo | None = None,
    ) -> Result[RevokedUserSessions, AuthError]:
        """Revoke every session of another user.

        Returns:
            Success(RevokedUserSessions) or Failure with UNAUTHORIZED /
            SELF_REVOKE_FORBIDDEN.
        """
        if (denied := self._require_admin(actor)) is not None:
            return denied
        if user_id == actor.user_id:
            return Failure(
                error=AuthError(
                    code=ErrorCode.SELF_REVOKE_FORBIDDEN,
                    message=AuthErrorMessage.SELF_REVOKE_FORBIDDEN,
                )
            )

        count = await self._session_manager.revoke_all_for_user(user_id)
        await self._audit_trail.record(
            AuditAction.USER_SESSIONS_REVOKED,
            entity="user",
            user_id=actor.user_id,
            entity_id=str(user_id),
            changes={"sessions_revoked": count},
            client=client,
        )
        self._logger.info(
            "user_sessions_revoked",
            admin_id=str(actor.user_id),
            user_id=str(user_id),
            sessions_revoked=count,
        )
        return Success(value=RevokedUserSessions(user_id=user_id, sessions_revoked=count))

    def _require_admin(self, actor: CurrentUser) -> Failure[AuthError] | None:
        if actor.is_admin:
            return None
        self._logger.warning("admin_access_denied", user_id=str(actor.user_id))
        return Failure(
            error=AuthError(
                code=ErrorCode.UNAUTHORIZED,
                message=AuthErrorMessage.ADMIN_REQUIRED,
            )
        )
