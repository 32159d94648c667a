"""SessionRepository protocol for session persistence.

Port (interface) for hexagonal architecture. Session rows are the
authority for token validity; repositories never interpret token contents.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.entities.session import Session
from src.domain.enums.user_role import UserRole


@dataclass(frozen=True, slots=True, kw_only=True)
class SessionOwner:
    """Owning-user projection joined onto session listings."""

    user_id: UUID
    email: str
    first_name: str | None
    last_name: str | None
    role: UserRole


@dataclass(frozen=True, slots=True, kw_only=True)
class SessionWithOwner:
    """A session row plus its owner's public fields."""

    session: Session
    owner: SessionOwner


@dataclass(frozen=True, slots=True, kw_only=True)
class UserSessionCount:
    """Active-session count for one user (admin statistics)."""

    owner: SessionOwner
    session_count: int


class SessionRepository(Protocol):
    """Session repository protocol (port).

    Deletions are single statements, so a revoke racing a validate is
    observed either before or after, never partially.
    """

    async def create(self, session: Session) -> None:
        """Persist a new session row."""
        ...

    async def find_by_id(self, session_id: UUID) -> Session | None:
        ...

    async def find_by_access_token(self, access_token: str) -> Session | None:
        ...

    async def find_by_refresh_token(self, refresh_token: str) -> Session | None:
        ...

    async def replace_tokens(
        self,
        *,
        session_id: UUID,
        expected_refresh_token: str,
        access_token: str,
        refresh_token: str,
        expires_at: datetime,
        last_used_at: datetime,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> bool:
        """Overwrite a row's token pair (compare-and-swap).

        The update only applies while the row still holds
        ``expected_refresh_token``, so two rotations of the same refresh
        token cannot both succeed. ip_address/user_agent are only
        overwritten when provided.

        Returns:
            True if the row was updated, False if it was gone or already rotated.
        """
        ...

    async def touch(self, session_id: UUID, now: datetime) -> None:
        """Set last_used_at."""
        ...

    async def delete_by_access_token(self, access_token: str) -> bool:
        """Delete the row holding this access token.

        Returns:
            True if a row was deleted, False if none matched.
        """
        ...

    async def delete_by_id(self, session_id: UUID) -> UUID | None:
        """Delete one row.

        Returns:
            The owning user ID, or None if the row did not exist.
        """
        ...

    async def delete_all_for_user(self, user_id: UUID) -> int:
        """Delete every row of a user.

        Returns:
            Number of rows deleted.
        """
        ...

    async def list_active(self, now: datetime) -> list[SessionWithOwner]:
        """Unexpired sessions of all users, most recently used first."""
        ...

    async def list_for_user(self, user_id: UUID) -> list[Session]:
        """All sessions of one user (expired included), newest first."""
        ...

    async def count_active(self, now: datetime) -> int:
        ...

    async def count_all(self) -> int:
        ...

    async def count_recently_used(self, now: datetime, since: datetime) -> int:
        """Unexpired sessions with last_used_at at or after ``since``."""
        ...

    async def top_users_by_active_sessions(
        self, now: datetime, limit: int
    ) -> list[UserSessionCount]:
        """Users with the most unexpired sessions, descending."""
        ...
