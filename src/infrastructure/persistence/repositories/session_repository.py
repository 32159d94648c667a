"""SessionRepository - SQLAlchemy implementation of SessionRepository protocol.

Adapter for hexagonal architecture. Every mutation is a single UPDATE or
DELETE statement, so a revoke racing a validate or a rotation is seen
either entirely before or entirely after.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import delete, func, select, update

from src.domain.entities.session import Session
from src.domain.enums import UserRole
from src.domain.protocols.session_repository import (
    SessionOwner,
    SessionWithOwner,
    UserSessionCount,
)
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.models.session import Session as SessionModel
from src.infrastructure.persistence.models.user import User as UserModel


class SessionRepository:
    """SQLAlchemy implementation of SessionRepository protocol.

    Example:
        >>> repo = SessionRepository(database)
        >>> session = await repo.find_by_access_token(token)
    """

    def __init__(self, database: Database) -> None:
        self._database = database

    async def create(self, session: Session) -> None:
        async with self._database.get_session() as db_session:
            db_session.add(self._to_model(session))

    async def find_by_id(self, session_id: UUID) -> Session | None:
        async with self._database.get_session() as db_session:
            model = await db_session.get(SessionModel, session_id)
            return self._to_domain(model) if model else None

    async def find_by_access_token(self, access_token: str) -> Session | None:
        return await self._find_one(SessionModel.access_token == access_token)

    async def find_by_refresh_token(self, refresh_token: str) -> Session | None:
        return await self._find_one(SessionModel.refresh_token == refresh_token)

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
        """Overwrite a row's token pair if it still holds the old refresh token."""
        values: dict[str, Any] = {
            "access_token": access_token,
            "refresh_token": refresh_token,
            "expires_at": expires_at,
            "last_used_at": last_used_at,
        }
        if ip_address is not None:
            values["ip_address"] = ip_address
        if user_agent is not None:
            values["user_agent"] = user_agent

        stmt = (
            update(SessionModel)
            .where(
                SessionModel.id == session_id,
                SessionModel.refresh_token == expected_refresh_token,
            )
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        async with self._database.get_session() as db_session:
            result = await db_session.execute(stmt)
            return result.rowcount == 1

    async def touch(self, session_id: UUID, now: datetime) -> None:
        stmt = (
            update(SessionModel)
            .where(SessionModel.id == session_id)
            .values(last_used_at=now)
            .execution_options(synchronize_session=False)
        )
        async with self._database.get_session() as db_session:
            await db_session.execute(stmt)

    async def delete_by_access_token(self, access_token: str) -> bool:
        stmt = delete(SessionModel).where(SessionModel.access_token == access_token)
        async with self._database.get_session() as db_session:
            result = await db_session.execute(stmt)
            return result.rowcount > 0

    async def delete_by_id(self, session_id: UUID) -> UUID | None:
        """Delete one row and return its owner.

        The owner is read and the row deleted in one transaction; if a
        concurrent delete wins, None is returned.
        """
        async with self._database.get_session() as db_session:
            user_id = (
                await db_session.execute(
                    select(SessionModel.user_id).where(SessionModel.id == session_id)
                )
            ).scalar_one_or_none()
            if user_id is None:
                return None
            result = await db_session.execute(
                delete(SessionModel).where(SessionModel.id == session_id)
            )
            return user_id if result.rowcount > 0 else None

    async def delete_all_for_user(self, user_id: UUID) -> int:
        stmt = delete(SessionModel).where(SessionModel.user_id == user_id)
        async with self._database.get_session() as db_session:
            result = await db_session.execute(stmt)
            return result.rowcount

    async def list_active(self, now: datetime) -> list[SessionWithOwner]:
        stmt = (
            select(SessionModel, UserModel)
            .join(UserModel, UserModel.id == SessionModel.user_id)
            .where(SessionModel.expires_at >= now)
            .order_by(SessionModel.last_used_at.desc())
        )
        async with self._database.get_session() as db_session:
            rows = (await db_session.execute(stmt)).all()
            return [
                SessionWithOwner(
                    session=self._to_domain(session_model),
                    owner=self._to_owner(user_model),
                )
                for session_model, user_model in rows
            ]

    async def list_for_user(self, user_id: UUID) -> list[Session]:
        stmt = (
            select(SessionModel)
            .where(SessionModel.user_id == user_id)
            .order_by(SessionModel.created_at.desc())
        )
        async with self._database.get_session() as db_session:
            models = (await db_session.execute(stmt)).scalars().all()
            return [self._to_domain(model) for model in models]

    async def count_active(self, now: datetime) -> int:
        return await self._count(SessionModel.expires_at >= now)

    async def count_all(self) -> int:
        return await self._count()

    async def count_recently_used(self, now: datetime, since: datetime) -> int:
        return await self._count(
            SessionModel.expires_at >= now,
            SessionModel.last_used_at >= since,
        )

    async def top_users_by_active_sessions(
        self, now: datetime, limit: int
    ) -> list[UserSessionCount]:
        session_count = func.count(SessionModel.id).label("session_count")
        stmt = (
            select(UserModel, session_count)
            .join(SessionModel, SessionModel.user_id == UserModel.id)
            .where(SessionModel.expires_at >= now)
            .group_by(UserModel.id)
            .order_by(session_count.desc())
            .limit(limit)
        )
        async with self._database.get_session() as db_session:
            rows = (await db_session.execute(stmt)).all()
            return [
                UserSessionCount(owner=self._to_owner(user_model), session_count=count)
                for user_model, count in rows
            ]

    async def _find_one(self, *criteria: Any) -> Session | None:
        async with self._database.get_session() as db_session:
            result = await db_session.execute(select(SessionModel).where(*criteria))
            model = result.scalar_one_or_none()
            return self._to_domain(model) if model else None

    async def _count(self, *criteria: Any) -> int:
        stmt = select(func.count(SessionModel.id)).where(*criteria)
        async with self._database.get_session() as db_session:
            return (await db_session.execute(stmt)).scalar_one()

    def _to_domain(self, model: SessionModel) -> Session:
        """Convert database model to domain entity."""
        return Session(
            id=model.id,
            user_id=model.user_id,
            access_token=model.access_token,
            refresh_token=model.refresh_token,
            expires_at=as_utc(model.expires_at),
            ip_address=model.ip_address,
            user_agent=model.user_agent,
            created_at=as_utc(model.created_at),
            last_used_at=as_utc(model.last_used_at),
        )

    def _to_model(self, session: Session) -> SessionModel:
        """Convert domain entity to database model."""
        return SessionModel(
            id=session.id,
            user_id=session.user_id,
            access_token=session.access_token,
            refresh_token=session.refresh_token,
            expires_at=session.expires_at,
            ip_address=session.ip_address,
            user_agent=session.user_agent,
            created_at=session.created_at,
            last_used_at=session.last_used_at,
        )

    @staticmethod
    def _to_owner(user_model: UserModel) -> SessionOwner:
        return SessionOwner(
            user_id=user_model.id,
            email=user_model.email,
            first_name=user_model.first_name,
            last_name=user_model.last_name,
            role=UserRole(user_model.role),
        )
