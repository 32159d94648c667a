"""Authentication service.

Orchestrates login, logout, refresh, password change, current-user lookup
and per-request authentication on top of the user repository, lockout
policy, password hasher, session manager and audit trail.

Login state machine (per attempt):
1. Find user by case-insensitive email (missing -> INVALID_CREDENTIALS)
2. Locked now -> ACCOUNT_LOCKED (with remaining minutes)
3. Status not active -> ACCOUNT_INACTIVE
4. Wrong password -> atomic failure increment, INVALID_CREDENTIALS
5. Correct password -> reset lockout, create session, audit, Success

Architecture:
- Application layer ONLY imports from domain layer and application DTOs
- Every operation returns Result; callers match on ``error.code``
- Bcrypt runs in a worker thread (asyncio.to_thread)
"""

import asyncio
from collections.abc import Callable
from datetime import UTC, datetime
from uuid import UUID

from src.application.dtos import (
    ClientInfo,
    CurrentUser,
    LoginResult,
    PublicUser,
    TokenPair,
    UserProfile,
)
from src.application.services.audit_trail import AuditTrail
from src.application.services.session_manager import SessionManager
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.enums import AuditAction
from src.domain.errors import AuthError, AuthErrorMessage
from src.domain.policies import LockoutPolicy
from src.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)


def utc_now() -> datetime:
    return datetime.now(UTC)


class AuthService:
    """Authentication use cases.

    Stateless: all mutable state lives in the repositories, so a single
    instance serves all concurrent requests.
    """

    def __init__(
        self,
        *,
        user_repo: UserRepository,
        session_manager: SessionManager,
        password_service: PasswordHashingProtocol,
        audit_trail: AuditTrail,
        logger: LoggerProtocol,
        lockout_policy: LockoutPolicy | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._user_repo = user_repo
        self._session_manager = session_manager
        self._password_service = password_service
        self._audit_trail = audit_trail
        self._logger = logger
        self._lockout_policy = lockout_policy or LockoutPolicy()
        self._clock = clock

    async def login(
        self,
        *,
        email: str,
        password: str,
        client: ClientInfo | None = None,
    ) -> Result[LoginResult, AuthError]:
        """Authenticate credentials and open a new session.

        Returns:
            Success(LoginResult) with the token pair and public user.
            Failure(AuthError) with INVALID_CREDENTIALS, ACCOUNT_LOCKED or
            ACCOUNT_INACTIVE.
        """
        client = client or ClientInfo()
        invalid_credentials = Failure(
            error=AuthError(
                code=ErrorCode.INVALID_CREDENTIALS,
                message=AuthErrorMessage.INVALID_CREDENTIALS,
            )
        )

        # Step 1: Find user (same failure as a wrong password)
        user = await self._user_repo.find_by_email(email)
        if user is None:
            self._logger.info("login_failed", reason="unknown_email")
            return invalid_credentials

        # Step 2: Refuse while locked, regardless of the password
        now = self._clock()
        if user.locked_until is not None and self._lockout_policy.is_locked(
            user.locked_until, now
        ):
            minutes = self._lockout_policy.remaining_lock_minutes(user.locked_until, now)
            self._logger.info("login_failed", reason="account_locked", user_id=str(user.id))
            return Failure(
                error=AuthError(
                    code=ErrorCode.ACCOUNT_LOCKED,
                    message=AuthErrorMessage.ACCOUNT_LOCKED.format(minutes=minutes),
                    details={"retry_after_minutes": str(minutes)},
                )
            )

        # Step 3: Only active accounts may authenticate
        if not user.is_active:
            self._logger.info(
                "login_failed", reason="account_inactive", user_id=str(user.id)
            )
            return Failure(
                error=AuthError(
                    code=ErrorCode.ACCOUNT_INACTIVE,
                    message=AuthErrorMessage.ACCOUNT_INACTIVE,
                )
            )

        # Step 4: Verify password; count the failure atomically in storage
        if not await self._verify_password(password, user.password_hash):
            state = await self._user_repo.increment_failure_count_and_maybe_lock(
                user.id, self._lockout_policy, now
            )
            self._logger.info(
                "login_failed",
                reason="invalid_password",
                user_id=str(user.id),
                failed_login_attempts=state.failed_login_attempts if state else None,
            )
            if state and self._lockout_policy.is_locked(state.locked_until, now):
                self._logger.warning(
                    "account_locked",
                    user_id=str(user.id),
                    failed_login_attempts=state.failed_login_attempts,
                )
            return invalid_credentials

        # Step 5: Reset lockout, open session, audit
        await self._user_repo.record_successful_login(user.id, now)
        session = await self._session_manager.create(
            user_id=user.id, email=user.email, role=user.role, client=client
        )
        await self._audit_trail.record(
            AuditAction.LOGIN,
            entity="user",
            user_id=user.id,
            entity_id=str(user.id),
            changes={"session_id": str(session.id)},
            client=client,
        )
        self._logger.info(
            "login_succeeded", user_id=str(user.id), session_id=str(session.id)
        )

        return Success(
            value=LoginResult(
                session_id=session.id,
                tokens=TokenPair(
                    access_token=session.access_token,
                    refresh_token=session.refresh_token,
                    expires_at=session.expires_at,
                ),
                user=PublicUser.from_user(user),
            )
        )

    async def logout(
        self,
        *,
        access_token: str,
        user_id: UUID,
        client: ClientInfo | None = None,
    ) -> Result[None, AuthError]:
        """Delete the caller's session. Idempotent: a missing row is fine."""
        deleted = await self._session_manager.revoke_by_token(access_token)
        await self._audit_trail.record(
            AuditAction.LOGOUT,
            entity="user",
            user_id=user_id,
            entity_id=str(user_id),
            client=client,
        )
        self._logger.info("logout", user_id=str(user_id), session_deleted=deleted)
        return Success(value=None)

    async def refresh_token(
        self,
        *,
        refresh_token: str,
        client: ClientInfo | None = None,
    ) -> Result[TokenPair, AuthError]:
        """Rotate a refresh token into a new pair on the same session row.

        Returns:
            Success(TokenPair), or Failure with INVALID_OR_EXPIRED_TOKEN
            (bad/expired/unknown/already-rotated token) or USER_INACTIVE
            (owner deleted or no longer active).
        """
        match await self._session_manager.resolve_refresh_token(refresh_token):
            case Failure(error=error):
                self._logger.info("token_refresh_failed", reason=error.code.value)
                return Failure(error=error)
            case Success(value=session):
                pass

        # Status is re-checked on every refresh so suspension takes effect
        user = await self._user_repo.find_by_id(session.user_id)
        if user is None or not user.is_active:
            self._logger.info(
                "token_refresh_failed",
                reason=ErrorCode.USER_INACTIVE.value,
                user_id=str(session.user_id),
            )
            return Failure(
                error=AuthError(
                    code=ErrorCode.USER_INACTIVE,
                    message=AuthErrorMessage.USER_INACTIVE,
                )
            )

        result = await self._session_manager.rotate(
            session, email=user.email, role=user.role, client=client
        )
        if isinstance(result, Success):
            self._logger.info(
                "token_refreshed", user_id=str(user.id), session_id=str(session.id)
            )
        return result

    async def change_password(
        self,
        *,
        user_id: UUID,
        current_password: str,
        new_password: str,
        client: ClientInfo | None = None,
    ) -> Result[int, AuthError]:
        """Replace the password and revoke every session of the user.

        The session used for this request is revoked too, forcing
        re-authentication everywhere. New-password length is validated at
        the HTTP boundary.

        Returns:
            Success(number of sessions revoked), or Failure with
            INVALID_CURRENT_PASSWORD or NOT_FOUND.
        """
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            return Failure(
                error=AuthError(
                    code=ErrorCode.NOT_FOUND, message=AuthErrorMessage.USER_NOT_FOUND
                )
            )

        if not await self._verify_password(current_password, user.password_hash):
            self._logger.info(
                "password_change_failed",
                reason="invalid_current_password",
                user_id=str(user_id),
            )
            return Failure(
                error=AuthError(
                    code=ErrorCode.INVALID_CURRENT_PASSWORD,
                    message=AuthErrorMessage.INVALID_CURRENT_PASSWORD,
                )
            )

        new_hash = await asyncio.to_thread(
            self._password_service.hash_password, new_password
        )
        await self._user_repo.update_password_hash(user_id, new_hash, self._clock())
        revoked = await self._session_manager.revoke_all_for_user(user_id)

        await self._audit_trail.record(
            AuditAction.PASSWORD_CHANGE,
            entity="user",
            user_id=user_id,
            entity_id=str(user_id),
            changes={"sessions_revoked": revoked},
            client=client,
        )
        self._logger.info("password_changed", user_id=str(user_id), sessions_revoked=revoked)
        return Success(value=revoked)

    async def get_current_user(self, user_id: UUID) -> Result[UserProfile, AuthError]:
        """Read the caller's profile (never includes the credential hash)."""
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            return Failure(
                error=AuthError(
                    code=ErrorCode.NOT_FOUND, message=AuthErrorMessage.USER_NOT_FOUND
                )
            )
        return Success(value=UserProfile.from_user(user))

    async def authenticate_request(
        self, access_token: str | None
    ) -> Result[CurrentUser, AuthError]:
        """Authenticate the bearer of an access token for a protected endpoint.

        Returns:
            Success(CurrentUser) carrying the role from the user row.
            Failure with AUTHENTICATION_REQUIRED (no token),
            INVALID_OR_EXPIRED_TOKEN, SESSION_INVALID or USER_INACTIVE.
        """
        if not access_token:
            return Failure(
                error=AuthError(
                    code=ErrorCode.AUTHENTICATION_REQUIRED,
                    message=AuthErrorMessage.AUTHENTICATION_REQUIRED,
                )
            )

        match await self._session_manager.validate(access_token):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=identity):
                pass

        user = await self._user_repo.find_by_id(identity.user_id)
        if user is None or not user.is_active:
            return Failure(
                error=AuthError(
                    code=ErrorCode.USER_INACTIVE,
                    message=AuthErrorMessage.USER_INACTIVE,
                )
            )

        try:
            await self._user_repo.touch_last_active(user.id, self._clock())
        except Exception as e:
            self._logger.warning(
                "user_touch_failed", user_id=str(user.id), error_type=type(e).__name__
            )

        return Success(
            value=CurrentUser(
                user_id=user.id,
                email=user.email,
                role=user.role,
                session_id=identity.session_id,
                access_token=access_token,
            )
        )

    async def _verify_password(self, password: str, password_hash: str) -> bool:
        return await asyncio.to_thread(
            self._password_service.verify_password, password, password_hash
        )
