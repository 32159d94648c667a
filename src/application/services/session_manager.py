"""Session manager.

Single source of truth for "is this bearer token currently valid". Issues
token pairs through the token service and keeps session rows in step:

- create: new row per login
- validate: signature + expiry claim + matching unexpired row
- resolve_refresh_token / rotate: overwrite the same row with a new pair
- revoke_by_token / revoke_by_id / revoke_all_for_user: delete rows

Two independent expiries are enforced: the token's signed exp claim
(24h for access tokens) and the row's expires_at (7 days). Passing one
never excuses failing the other.
"""

from collections.abc import Callable
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from src.application.dtos import ClientInfo, SessionIdentity, TokenPair
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.session import Session
from src.domain.enums import UserRole
from src.domain.errors import AuthError, AuthErrorMessage
from src.domain.protocols import (
    LoggerProtocol,
    SessionRepository,
    TokenGenerationProtocol,
)


def utc_now() -> datetime:
    return datetime.now(UTC)


class SessionManager:
    """Creates, validates, rotates and revokes sessions.

    Stateless apart from its collaborators; safe to share across
    concurrent requests.
    """

    def __init__(
        self,
        *,
        session_repo: SessionRepository,
        token_service: TokenGenerationProtocol,
        logger: LoggerProtocol,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._session_repo = session_repo
        self._token_service = token_service
        self._logger = logger
        self._clock = clock

    async def create(
        self,
        *,
        user_id: UUID,
        email: str,
        role: UserRole,
        client: ClientInfo | None = None,
    ) -> Session:
        """Issue a token pair and persist it as a new session row."""
        client = client or ClientInfo()
        now = self._clock()
        tokens = self._token_service.issue(
            user_id=user_id, email=email, role=role, now=now
        )
        session = Session(
            id=uuid7(),
            user_id=user_id,
            access_token=tokens.access_token,
            refresh_token=tokens.refresh_token,
            expires_at=tokens.expires_at,
            ip_address=client.ip_address,
            user_agent=client.user_agent,
            created_at=now,
            last_used_at=now,
        )
        await self._session_repo.create(session)
        return session

    async def validate(self, access_token: str) -> Result[SessionIdentity, AuthError]:
        """Validate an access token against its signature and its session row.

        Returns:
            Success(SessionIdentity) if the token verifies and a matching,
            unexpired row exists for the same user.
            Failure(INVALID_OR_EXPIRED_TOKEN) on signature/claim failure.
            Failure(SESSION_INVALID) if the row is gone, expired or mismatched.
        """
        match self._token_service.verify_access_token(access_token):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=claims):
                pass

        now = self._clock()
        session = await self._session_repo.find_by_access_token(access_token)
        if session is None or session.user_id != claims.user_id or session.is_expired(now):
            return Failure(
                error=AuthError(
                    code=ErrorCode.SESSION_INVALID,
                    message=AuthErrorMessage.SESSION_INVALID,
                )
            )

        try:
            await self._session_repo.touch(session.id, now)
        except Exception as e:
            # last_used_at is telemetry; the request is still authenticated
            self._logger.warning(
                "session_touch_failed",
                session_id=str(session.id),
                error_type=type(e).__name__,
            )

        return Success(
            value=SessionIdentity(
                session_id=session.id,
                user_id=claims.user_id,
                email=claims.email,
                role=claims.role,
            )
        )

    async def resolve_refresh_token(
        self, refresh_token: str
    ) -> Result[Session, AuthError]:
        """Find the live session row a refresh token belongs to.

        Checks the refresh token's signature, expiry claim and type, then
        requires a row holding exactly this token whose expires_at has not
        passed.
        """
        invalid = Failure(
            error=AuthError(
                code=ErrorCode.INVALID_OR_EXPIRED_TOKEN,
                message=AuthErrorMessage.INVALID_REFRESH_TOKEN,
            )
        )
        match self._token_service.verify_refresh_token(refresh_token):
            case Failure():
                return invalid
            case Success(value=claims):
                pass

        session = await self._session_repo.find_by_refresh_token(refresh_token)
        if (
            session is None
            or session.user_id != claims.user_id
            or session.is_expired(self._clock())
        ):
            return invalid
        return Success(value=session)

    async def rotate(
        self,
        session: Session,
        *,
        email: str,
        role: UserRole,
        client: ClientInfo | None = None,
    ) -> Result[TokenPair, AuthError]:
        """Issue a new pair for a resolved session, overwriting the same row.

        The overwrite is conditional on the row still holding the refresh
        token it was resolved with, so of two concurrent rotations only one
        succeeds. Old token values stop validating immediately.
        """
        client = client or ClientInfo()
        now = self._clock()
        tokens = self._token_service.issue(
            user_id=session.user_id, email=email, role=role, now=now
        )
        replaced = await self._session_repo.replace_tokens(
            session_id=session.id,
            expected_refresh_token=session.refresh_token,
            access_token=tokens.access_token,
            refresh_token=tokens.refresh_token,
            expires_at=tokens.expires_at,
            last_used_at=now,
            ip_address=client.ip_address,
            user_agent=client.user_agent,
        )
        if not replaced:
            return Failure(
                error=AuthError(
                    code=ErrorCode.INVALID_OR_EXPIRED_TOKEN,
                    message=AuthErrorMessage.INVALID_REFRESH_TOKEN,
                )
            )
        return Success(
            value=TokenPair(
                access_token=tokens.access_token,
                refresh_token=tokens.refresh_token,
                expires_at=tokens.expires_at,
            )
        )

    async def revoke_by_token(self, access_token: str) -> bool:
        """Delete the row holding this access token (idempotent).

        Returns:
            True if a row was deleted, False if it was already gone.
        """
        return await self._session_repo.delete_by_access_token(access_token)

    async def revoke_by_id(self, session_id: UUID) -> Result[UUID, AuthError]:
        """Delete one session.

        Returns:
            Success(owning user_id) or Failure(NOT_FOUND).
        """
        user_id = await self._session_repo.delete_by_id(session_id)
        if user_id is None:
            return Failure(
                error=AuthError(
                    code=ErrorCode.NOT_FOUND,
                    message=AuthErrorMessage.SESSION_NOT_FOUND,
                    details={"session_id": str(session_id)},
                )
            )
        return Success(value=user_id)

    async def revoke_all_for_user(self, user_id: UUID) -> int:
        """Delete every session of a user; returns the number deleted."""
        return await self._session_repo.delete_all_for_user(user_id)
