"""Token issuer protocol for domain layer.

Access and refresh tokens are independently signed and carry a ``type``
claim, so a refresh token is never accepted where an access token is
required (and vice versa).

Dual expiry:
    The access token's own expiry claim (24h) is shorter than the session
    row's storage-level expiry (7 days). Both are checked; neither
    replaces the other.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Protocol
from uuid import UUID

from src.core.result import Result
from src.domain.enums.user_role import UserRole
from src.domain.errors import AuthError


class TokenType(str, Enum):
    """Value of the ``type`` claim."""

    ACCESS = "access"
    REFRESH = "refresh"


@dataclass(frozen=True, slots=True, kw_only=True)
class IssuedTokens:
    """A freshly signed token pair.

    Attributes:
        access_token: Signed access token.
        refresh_token: Signed refresh token.
        expires_at: Storage-level expiry for the session row.
    """

    access_token: str
    refresh_token: str
    expires_at: datetime


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenClaims:
    """Verified claims of a token."""

    user_id: UUID
    email: str
    role: UserRole
    token_type: TokenType
    expires_at: datetime


class TokenGenerationProtocol(Protocol):
    """Token issuer interface."""

    def issue(
        self,
        *,
        user_id: UUID,
        email: str,
        role: UserRole,
        now: datetime | None = None,
    ) -> IssuedTokens:
        """Sign a new access/refresh pair for one identity."""
        ...

    def verify_access_token(self, token: str) -> Result[TokenClaims, AuthError]:
        """Verify signature, expiry claim and ``type == access``."""
        ...

    def verify_refresh_token(self, token: str) -> Result[TokenClaims, AuthError]:
        """Verify signature, expiry claim and ``type == refresh``."""
        ...
