"""Domain policies (pure decision logic, no I/O)."""

from src.domain.policies.lockout_policy import (
    LOCKOUT_DURATION,
    MAX_FAILED_LOGIN_ATTEMPTS,
    LockoutPolicy,
    LockoutState,
)

__all__ = [
    "LOCKOUT_DURATION",
    "MAX_FAILED_LOGIN_ATTEMPTS",
    "LockoutPolicy",
    "LockoutState",
]
