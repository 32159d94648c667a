"""Brute-force lockout policy.

Pure state transitions over a user's failed-attempt counter and lock
expiry. No I/O: the user repository applies the same transition inside a
single atomic UPDATE (see ``increment_failure_count_and_maybe_lock``).

Rules:
    - Locked iff locked_until is set and still in the future
    - Each failure increments the counter; reaching 5 sets a fresh
      30 minute lock, otherwise the existing locked_until is left as is
    - Success resets the counter to 0 and clears the lock
    - No exponential backoff and no permanent lock
"""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta

MAX_FAILED_LOGIN_ATTEMPTS = 5
LOCKOUT_DURATION = timedelta(minutes=30)


@dataclass(frozen=True, slots=True, kw_only=True)
class LockoutState:
    """Counter and lock expiry after a transition."""

    failed_login_attempts: int
    locked_until: datetime | None


@dataclass(frozen=True, slots=True, kw_only=True)
class LockoutPolicy:
    """Lockout thresholds and transitions.

    Attributes:
        max_attempts: Failures that trigger a lock.
        lock_duration: How long a lock lasts from the triggering failure.

    Example:
        >>> policy = LockoutPolicy()
        >>> state = policy.record_failure(attempts=4, locked_until=None, now=now)
        >>> state.failed_login_attempts
        5
        >>> policy.is_locked(state.locked_until, now)
        True
    """

    max_attempts: int = MAX_FAILED_LOGIN_ATTEMPTS
    lock_duration: timedelta = LOCKOUT_DURATION

    def is_locked(self, locked_until: datetime | None, now: datetime) -> bool:
        return locked_until is not None and locked_until > now

    def lock_expiry(self, now: datetime) -> datetime:
        """Lock expiry for a failure that reaches the threshold at ``now``."""
        return now + self.lock_duration

    def record_failure(
        self,
        attempts: int,
        locked_until: datetime | None,
        now: datetime,
    ) -> LockoutState:
        """Apply one failed password check.

        Args:
            attempts: Counter before this failure.
            locked_until: Current lock expiry (kept unless the threshold is hit).
            now: Time of the failure.

        Returns:
            LockoutState with the incremented counter.
        """
        new_attempts = attempts + 1
        if new_attempts >= self.max_attempts:
            locked_until = self.lock_expiry(now)
        return LockoutState(failed_login_attempts=new_attempts, locked_until=locked_until)

    def record_success(self) -> LockoutState:
        return LockoutState(failed_login_attempts=0, locked_until=None)

    def remaining_lock_minutes(self, locked_until: datetime, now: datetime) -> int:
        """Whole minutes left on a lock, rounded up (minimum 1)."""
        seconds = (locked_until - now).total_seconds()
        return max(1, math.ceil(seconds / 60))
