"""JWT token service (adapter).

Implements TokenGenerationProtocol using PyJWT with HMAC-SHA256.

Tokens:
    - Access token: claims sub, email, role, type="access", iat, exp, jti.
      Lifetime 24 hours by default.
    - Refresh token: same claims with type="refresh". Lifetime 7 days.
    - Session expiry: issue() also returns the storage-level expiry for the
      session row, equal to the refresh lifetime.

Every token carries a unique jti (UUIDv7), so two pairs issued for the
same user in the same second never collide.
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt
from jwt.exceptions import InvalidTokenError
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.enums import UserRole
from src.domain.errors import AuthError, AuthErrorMessage
from src.domain.protocols.token_generation_protocol import (
    IssuedTokens,
    TokenClaims,
    TokenType,
)

_REQUIRED_CLAIMS = ["sub", "email", "role", "type", "exp", "iat"]


class JWTService:
    """Signs and verifies access/refresh token pairs.

    Usage:
        token_service = JWTService(secret_key=settings.jwt_secret)
        tokens = token_service.issue(user_id=user.id, email=user.email, role=user.role)
        result = token_service.verify_access_token(tokens.access_token)
    """

    def __init__(
        self,
        secret_key: str,
        *,
        algorithm: str = "HS256",
        access_token_lifetime: timedelta = timedelta(hours=24),
        refresh_token_lifetime: timedelta = timedelta(days=7),
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: HMAC signing secret, at least 32 characters.
            algorithm: JWT algorithm (HS256).
            access_token_lifetime: Expiry claim of access tokens.
            refresh_token_lifetime: Expiry claim of refresh tokens and of
                the session row.

        Raises:
            ValueError: If secret_key is shorter than 32 characters.
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._access_lifetime = access_token_lifetime
        self._refresh_lifetime = refresh_token_lifetime

    @property
    def session_lifetime(self) -> timedelta:
        return self._refresh_lifetime

    def issue(
        self,
        *,
        user_id: UUID,
        email: str,
        role: UserRole,
        now: datetime | None = None,
    ) -> IssuedTokens:
        """Sign a new access/refresh pair.

        Args:
            user_id: Subject of both tokens.
            email: Email claim.
            role: Role claim.
            now: Issue time (defaults to the current UTC time).

        Returns:
            IssuedTokens with the session row's expiry.
        """
        now = now or datetime.now(UTC)
        access_token = self._encode(
            user_id, email, role, TokenType.ACCESS, now, now + self._access_lifetime
        )
        refresh_token = self._encode(
            user_id, email, role, TokenType.REFRESH, now, now + self._refresh_lifetime
        )
        return IssuedTokens(
            access_token=access_token,
            refresh_token=refresh_token,
            expires_at=now + self._refresh_lifetime,
        )

    def verify_access_token(self, token: str) -> Result[TokenClaims, AuthError]:
        return self._verify(token, TokenType.ACCESS, AuthErrorMessage.INVALID_TOKEN)

    def verify_refresh_token(self, token: str) -> Result[TokenClaims, AuthError]:
        return self._verify(
            token, TokenType.REFRESH, AuthErrorMessage.INVALID_REFRESH_TOKEN
        )

    def _encode(
        self,
        user_id: UUID,
        email: str,
        role: UserRole,
        token_type: TokenType,
        issued_at: datetime,
        expires_at: datetime,
    ) -> str:
        payload = {
            "sub": str(user_id),
            "email": email,
            "role": role.value,
            "type": token_type.value,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid7()),
        }
        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def _verify(
        self, token: str, expected_type: TokenType, message: str
    ) -> Result[TokenClaims, AuthError]:
        failure = Failure(
            error=AuthError(code=ErrorCode.INVALID_OR_EXPIRED_TOKEN, message=message)
        )
        try:
            # PyJWT validates the signature and the exp claim
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": _REQUIRED_CLAIMS},
            )
        except InvalidTokenError:
            return failure

        if payload.get("type") != expected_type.value:
            return failure
        try:
            claims = TokenClaims(
                user_id=UUID(str(payload["sub"])),
                email=str(payload["email"]),
                role=UserRole(payload["role"]),
                token_type=expected_type,
                expires_at=datetime.fromtimestamp(int(payload["exp"]), tz=UTC),
            )
        except ValueError:
            # Signed by us but not with claims we understand
            return failure
        return Success(value=claims)
