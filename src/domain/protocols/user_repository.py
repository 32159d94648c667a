"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.entities.user import User
from src.domain.policies.lockout_policy import LockoutPolicy, LockoutState


class UserRepository(Protocol):
    """User repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Lockout state is only written through
    ``increment_failure_count_and_maybe_lock`` and
    ``record_successful_login``, both single-statement updates, so
    concurrent login attempts never lose a failure.
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive).

        Args:
            email: User's email address, any casing.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def save(self, user: User) -> None:
        """Create a new user.

        Args:
            user: User entity to persist (email is stored lowercase).
        """
        ...

    async def increment_failure_count_and_maybe_lock(
        self,
        user_id: UUID,
        policy: LockoutPolicy,
        now: datetime,
    ) -> LockoutState | None:
        """Atomically record one failed password check.

        Must be a single storage-level read-modify-write: the counter is
        incremented in the database, and locked_until is set to
        ``policy.lock_expiry(now)`` when the new count reaches
        ``policy.max_attempts`` (otherwise left unchanged).

        Args:
            user_id: User whose counter to increment.
            policy: Lockout thresholds.
            now: Time of the failure.

        Returns:
            Lockout state after the increment, None if the user is gone.
        """
        ...

    async def record_successful_login(self, user_id: UUID, now: datetime) -> None:
        """Reset the counter and lock, and set last_login_at to ``now``."""
        ...

    async def update_password_hash(
        self, user_id: UUID, password_hash: str, now: datetime
    ) -> None:
        """Replace the stored credential hash."""
        ...

    async def touch_last_active(self, user_id: UUID, now: datetime) -> None:
        """Set last_active_at (telemetry only)."""
        ...
