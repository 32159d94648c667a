"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture. Maps between domain User entities and
the users table. Each method runs in its own short-lived session, so one
repository instance is safe to share across concurrent requests.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, bindparam, case, func, select, update

from src.domain.entities.user import User
from src.domain.enums import UserRole, UserStatus
from src.domain.policies.lockout_policy import LockoutPolicy, LockoutState
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.models.user import User as UserModel


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    This class does NOT inherit from the protocol (structural typing).

    Example:
        >>> repo = UserRepository(database)
        >>> user = await repo.find_by_email("A@X.com")
    """

    def __init__(self, database: Database) -> None:
        self._database = database

    async def find_by_id(self, user_id: UUID) -> User | None:
        async with self._database.get_session() as session:
            user_model = await session.get(UserModel, user_id)
            return self._to_domain(user_model) if user_model else None

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address.

        Emails are stored lowercase; the lookup lowercases both sides so
        rows written outside this repository still match.
        """
        stmt = select(UserModel).where(
            func.lower(UserModel.email) == email.strip().lower()
        )
        async with self._database.get_session() as session:
            result = await session.execute(stmt)
            user_model = result.scalar_one_or_none()
            return self._to_domain(user_model) if user_model else None

    async def save(self, user: User) -> None:
        """Create new user in database.

        Raises:
            IntegrityError: If email already exists.
        """
        async with self._database.get_session() as session:
            session.add(self._to_model(user))

    async def increment_failure_count_and_maybe_lock(
        self,
        user_id: UUID,
        policy: LockoutPolicy,
        now: datetime,
    ) -> LockoutState | None:
        """Atomically record one failed password check.

        The increment and the lock decision happen in one UPDATE evaluated
        by the database, so concurrent failures serialize on the row and
        none is lost. The new state is read back in the same transaction.
        """
        new_count = UserModel.failed_login_attempts + 1
        lock_until = bindparam(
            "lock_until", policy.lock_expiry(now), type_=DateTime(timezone=True)
        )
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(
                failed_login_attempts=new_count,
                locked_until=case(
                    (new_count >= policy.max_attempts, lock_until),
                    else_=UserModel.locked_until,
                ),
                updated_at=now,
            )
            .execution_options(synchronize_session=False)
        )
        state_stmt = select(
            UserModel.failed_login_attempts, UserModel.locked_until
        ).where(UserModel.id == user_id)

        async with self._database.get_session() as session:
            result = await session.execute(stmt)
            if result.rowcount == 0:
                return None
            row = (await session.execute(state_stmt)).one()
            return LockoutState(
                failed_login_attempts=row.failed_login_attempts,
                locked_until=as_utc(row.locked_until),
            )

    async def record_successful_login(self, user_id: UUID, now: datetime) -> None:
        await self._update(
            user_id,
            failed_login_attempts=0,
            locked_until=None,
            last_login_at=now,
            updated_at=now,
        )

    async def update_password_hash(
        self, user_id: UUID, password_hash: str, now: datetime
    ) -> None:
        await self._update(user_id, password_hash=password_hash, updated_at=now)

    async def touch_last_active(self, user_id: UUID, now: datetime) -> None:
        await self._update(user_id, last_active_at=now)

    async def _update(self, user_id: UUID, **values: object) -> None:
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        async with self._database.get_session() as session:
            await session.execute(stmt)

    def _to_domain(self, user_model: UserModel) -> User:
        """Convert database model to domain entity."""
        return User(
            id=user_model.id,
            email=user_model.email,
            password_hash=user_model.password_hash,
            first_name=user_model.first_name,
            last_name=user_model.last_name,
            role=UserRole(user_model.role),
            status=UserStatus(user_model.status),
            failed_login_attempts=user_model.failed_login_attempts,
            locked_until=as_utc(user_model.locked_until),
            last_login_at=as_utc(user_model.last_login_at),
            last_active_at=as_utc(user_model.last_active_at),
            created_at=as_utc(user_model.created_at),
            updated_at=as_utc(user_model.updated_at),
        )

    def _to_model(self, user: User) -> UserModel:
        """Convert domain entity to database model."""
        return UserModel(
            id=user.id,
            email=user.email.strip().lower(),
            password_hash=user.password_hash,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role.value,
            status=user.status.value,
            failed_login_attempts=user.failed_login_attempts,
            locked_until=user.locked_until,
            last_login_at=user.last_login_at,
            last_active_at=user.last_active_at,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
