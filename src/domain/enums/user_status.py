"""Account status values.

Only ACTIVE users may log in, refresh tokens or call protected endpoints.
Status is independent of lockout: a locked account is still ACTIVE.
"""

from enum import Enum


class UserStatus(str, Enum):
    """Administrative account status."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"
