"""Integration tests for the SQLAlchemy UserRepository.

Runs against a temporary sqlite+aiosqlite database.
"""

import asyncio
from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy.exc import IntegrityError
from uuid_extensions import uuid7

from src.domain.enums import UserRole, UserStatus
from src.domain.policies import LockoutPolicy
from tests.factories import make_user


@pytest.mark.integration
class TestUserRepositoryLookup:
    async def test_save_and_find_by_id(self, user_repo):
        """Test a saved user round-trips with its role and status."""
        user = make_user(role=UserRole.ADMIN, status=UserStatus.SUSPENDED)
        await user_repo.save(user)

        found = await user_repo.find_by_id(user.id)

        assert found is not None
        assert found.email == "a@leadnex.io"
        assert found.role == UserRole.ADMIN
        assert found.status == UserStatus.SUSPENDED
        assert found.failed_login_attempts == 0
        assert found.locked_until is None

    async def test_find_by_email_is_case_insensitive(self, user_repo):
        await user_repo.save(make_user(email="Mixed.Case@LeadNex.io"))

        found = await user_repo.find_by_email("  MIXED.case@leadnex.IO ")

        assert found is not None
        assert found.email == "mixed.case@leadnex.io"

    async def test_find_unknown_returns_none(self, user_repo):
        assert await user_repo.find_by_id(uuid7()) is None
        assert await user_repo.find_by_email("nobody@leadnex.io") is None

    async def test_duplicate_email_differing_in_case_is_rejected(self, user_repo):
        """Test the unique index covers case variants (stored lowercase)."""
        await user_repo.save(make_user(email="dup@leadnex.io"))

        with pytest.raises(IntegrityError):
            await user_repo.save(make_user(email="DUP@leadnex.io"))


@pytest.mark.integration
class TestUserRepositoryLockout:
    async def test_increment_below_threshold_does_not_lock(self, user_repo):
        user = make_user()
        await user_repo.save(user)
        now = datetime.now(UTC)

        state = await user_repo.increment_failure_count_and_maybe_lock(
            user.id, LockoutPolicy(), now
        )

        assert state is not None
        assert state.failed_login_attempts == 1
        assert state.locked_until is None

    async def test_fifth_failure_locks_for_30_minutes(self, user_repo):
        user = make_user(failed_login_attempts=4)
        await user_repo.save(user)
        now = datetime.now(UTC)

        state = await user_repo.increment_failure_count_and_maybe_lock(
            user.id, LockoutPolicy(), now
        )

        assert state is not None
        assert state.failed_login_attempts == 5
        assert state.locked_until is not None
        assert abs(state.locked_until - (now + timedelta(minutes=30))) < timedelta(seconds=1)

    async def test_increment_unknown_user_returns_none(self, user_repo):
        state = await user_repo.increment_failure_count_and_maybe_lock(
            uuid7(), LockoutPolicy(), datetime.now(UTC)
        )

        assert state is None

    async def test_concurrent_increments_are_not_lost(self, user_repo):
        """Test ten simultaneous failures are all counted."""
        user = make_user()
        await user_repo.save(user)
        now = datetime.now(UTC)
        policy = LockoutPolicy()

        await asyncio.gather(
            *(
                user_repo.increment_failure_count_and_maybe_lock(user.id, policy, now)
                for _ in range(10)
            )
        )

        found = await user_repo.find_by_id(user.id)
        assert found is not None
        assert found.failed_login_attempts == 10
        assert found.locked_until is not None

    async def test_successful_login_resets_counter_and_lock(self, user_repo):
        now = datetime.now(UTC)
        user = make_user(failed_login_attempts=5, locked_until=now - timedelta(minutes=1))
        await user_repo.save(user)

        await user_repo.record_successful_login(user.id, now)

        found = await user_repo.find_by_id(user.id)
        assert found is not None
        assert found.failed_login_attempts == 0
        assert found.locked_until is None
        assert found.last_login_at is not None


@pytest.mark.integration
class TestUserRepositoryUpdates:
    async def test_update_password_hash(self, user_repo):
        user = make_user()
        await user_repo.save(user)

        await user_repo.update_password_hash(user.id, "$2b$04$new", datetime.now(UTC))

        found = await user_repo.find_by_id(user.id)
        assert found is not None
        assert found.password_hash == "$2b$04$new"

    async def test_touch_last_active(self, user_repo):
        user = make_user()
        await user_repo.save(user)
        now = datetime.now(UTC)

        await user_repo.touch_last_active(user.id, now)

        found = await user_repo.find_by_id(user.id)
        assert found is not None
        assert found.last_active_at is not None
        assert abs(found.last_active_at - now) < timedelta(seconds=1)
