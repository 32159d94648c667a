"""Session domain entity.

Pure business logic, no framework dependencies.

A session row is the authority for whether an issued access token is still
valid: deleting the row revokes the token even when its signature and
expiry claim would still verify.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass(slots=True, kw_only=True)
class Session:
    """One issued access/refresh token pair.

    Business Rules:
        - Created on login, one row per login (no device limit)
        - Refresh overwrites tokens, expiry and last_used_at on the same row
        - Deleted on logout, admin revoke, bulk revoke and password change
        - expires_at covers both tokens as a unit (storage-level expiry)

    Attributes:
        id: Unique session identifier.
        user_id: Owning user.
        access_token: Signed access token issued for this session.
        refresh_token: Signed refresh token issued for this session.
        expires_at: Storage-level expiry of the token pair.
        ip_address: Client IP at creation/rotation (advisory).
        user_agent: Client user agent at creation/rotation (advisory).
        created_at: When the session was created.
        last_used_at: Last validation or rotation.
    """

    id: UUID
    user_id: UUID
    access_token: str
    refresh_token: str
    expires_at: datetime
    ip_address: str | None = None
    user_agent: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    last_used_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def is_expired(self, now: datetime) -> bool:
        """Check the storage-level expiry.

        Args:
            now: Current time (timezone-aware).

        Returns:
            True if expires_at has passed.
        """
        return self.expires_at < now
