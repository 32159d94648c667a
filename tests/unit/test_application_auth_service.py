"""Unit tests for AuthService.

Repositories, session manager and password hasher are mocked; the
lockout policy and audit trail are real.

Tests cover:
- Login state machine (unknown email, locked, inactive, wrong password, success)
- Logout, refresh, password change
- Current user lookup and per-request authentication
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.dtos import ClientInfo, SessionIdentity, TokenPair
from src.application.services import AuditTrail, AuthService
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import AuditAction, UserRole, UserStatus
from src.domain.errors import AuthError
from src.domain.policies import LockoutState
from tests.factories import make_session, make_user

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)
CLIENT = ClientInfo(ip_address="203.0.113.7", user_agent="pytest")


@pytest.fixture
def user_repo():
    repo = AsyncMock()
    repo.increment_failure_count_and_maybe_lock.return_value = LockoutState(
        failed_login_attempts=1, locked_until=None
    )
    return repo


@pytest.fixture
def session_manager():
    return AsyncMock()


@pytest.fixture
def password_service():
    service = Mock()
    service.verify_password.return_value = True
    service.hash_password.return_value = "new-hash"
    return service


@pytest.fixture
def service(user_repo, session_manager, password_service, mock_audit, mock_logger):
    return AuthService(
        user_repo=user_repo,
        session_manager=session_manager,
        password_service=password_service,
        audit_trail=AuditTrail(mock_audit, mock_logger),
        logger=mock_logger,
        clock=lambda: NOW,
    )


@pytest.mark.unit
class TestLogin:
    async def test_unknown_email_is_invalid_credentials(self, service, user_repo):
        user_repo.find_by_email.return_value = None

        result = await service.login(email="x@leadnex.io", password="pw", client=CLIENT)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_CREDENTIALS
        assert result.error.message == "Invalid email or password"
        user_repo.increment_failure_count_and_maybe_lock.assert_not_called()

    async def test_locked_account_refused_even_with_correct_password(
        self, service, user_repo, password_service, session_manager
    ):
        user_repo.find_by_email.return_value = make_user(
            failed_login_attempts=5, locked_until=NOW + timedelta(minutes=30)
        )

        result = await service.login(email="a@leadnex.io", password="right", client=CLIENT)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ACCOUNT_LOCKED
        assert result.error.message == "Account locked. Try again in 30 minutes"
        password_service.verify_password.assert_not_called()
        session_manager.create.assert_not_called()

    async def test_lock_minutes_round_up(self, service, user_repo):
        user_repo.find_by_email.return_value = make_user(
            locked_until=NOW + timedelta(minutes=12, seconds=5)
        )

        result = await service.login(email="a@leadnex.io", password="pw", client=CLIENT)

        assert isinstance(result, Failure)
        assert result.error.message == "Account locked. Try again in 13 minutes"

    async def test_lock_checked_before_status(self, service, user_repo):
        user_repo.find_by_email.return_value = make_user(
            status=UserStatus.SUSPENDED, locked_until=NOW + timedelta(minutes=1)
        )

        result = await service.login(email="a@leadnex.io", password="pw", client=CLIENT)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ACCOUNT_LOCKED

    async def test_expired_lock_allows_login(self, service, user_repo, session_manager):
        user = make_user(failed_login_attempts=5, locked_until=NOW - timedelta(seconds=1))
        user_repo.find_by_email.return_value = user
        session_manager.create.return_value = make_session(
            user, expires_at=NOW + timedelta(days=7), now=NOW
        )

        result = await service.login(email="a@leadnex.io", password="right", client=CLIENT)

        assert isinstance(result, Success)
        user_repo.record_successful_login.assert_awaited_once_with(user.id, NOW)

    @pytest.mark.parametrize("status", [UserStatus.INACTIVE, UserStatus.SUSPENDED])
    async def test_inactive_account_refused(self, service, user_repo, password_service, status):
        user_repo.find_by_email.return_value = make_user(status=status)

        result = await service.login(email="a@leadnex.io", password="right", client=CLIENT)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ACCOUNT_INACTIVE
        assert result.error.message == "Account is inactive or suspended"
        password_service.verify_password.assert_not_called()

    async def test_wrong_password_counts_failure(self, service, user_repo, password_service):
        user = make_user()
        user_repo.find_by_email.return_value = user
        password_service.verify_password.return_value = False

        result = await service.login(email="a@leadnex.io", password="wrong", client=CLIENT)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_CREDENTIALS
        assert result.error.message == "Invalid email or password"
        user_repo.increment_failure_count_and_maybe_lock.assert_awaited_once()
        args = user_repo.increment_failure_count_and_maybe_lock.await_args.args
        assert args[0] == user.id
        assert args[2] == NOW
        user_repo.record_successful_login.assert_not_called()

    async def test_fifth_failure_logs_account_locked(
        self, service, user_repo, password_service, mock_logger
    ):
        user_repo.find_by_email.return_value = make_user(failed_login_attempts=4)
        password_service.verify_password.return_value = False
        user_repo.increment_failure_count_and_maybe_lock.return_value = LockoutState(
            failed_login_attempts=5, locked_until=NOW + timedelta(minutes=30)
        )

        await service.login(email="a@leadnex.io", password="wrong", client=CLIENT)

        events = [c.args[0] for c in mock_logger.warning.call_args_list]
        assert "account_locked" in events

    async def test_success_opens_session_and_audits(
        self, service, user_repo, session_manager, mock_audit
    ):
        user = make_user(role=UserRole.ADMIN)
        user_repo.find_by_email.return_value = user
        session = make_session(user, expires_at=NOW + timedelta(days=7), now=NOW)
        session_manager.create.return_value = session

        result = await service.login(email="A@leadnex.io", password="right", client=CLIENT)

        assert isinstance(result, Success)
        assert result.value.session_id == session.id
        assert result.value.tokens.access_token == session.access_token
        assert result.value.tokens.refresh_token == session.refresh_token
        assert result.value.tokens.expires_at == NOW + timedelta(days=7)
        assert result.value.user.id == user.id
        assert result.value.user.role == UserRole.ADMIN
        assert not hasattr(result.value.user, "password_hash")
        session_manager.create.assert_awaited_once_with(
            user_id=user.id, email=user.email, role=UserRole.ADMIN, client=CLIENT
        )
        mock_audit.record.assert_awaited_once()
        audit_kwargs = mock_audit.record.await_args.kwargs
        assert audit_kwargs["action"] == AuditAction.LOGIN
        assert audit_kwargs["user_id"] == user.id
        assert audit_kwargs["ip_address"] == "203.0.113.7"
        assert audit_kwargs["user_agent"] == "pytest"

    async def test_success_survives_audit_failure(
        self, service, user_repo, session_manager, mock_audit, mock_logger
    ):
        user = make_user()
        user_repo.find_by_email.return_value = user
        session_manager.create.return_value = make_session(
            user, expires_at=NOW + timedelta(days=7), now=NOW
        )
        mock_audit.record.side_effect = RuntimeError("audit store down")

        result = await service.login(email="a@leadnex.io", password="right", client=CLIENT)

        assert isinstance(result, Success)
        events = [c.args[0] for c in mock_logger.error.call_args_list]
        assert "audit_record_failed" in events

    async def test_password_never_logged(
        self, service, user_repo, password_service, mock_logger
    ):
        user_repo.find_by_email.return_value = make_user()
        password_service.verify_password.return_value = False

        await service.login(email="a@leadnex.io", password="hunter2-secret", client=CLIENT)

        for method in (mock_logger.info, mock_logger.warning, mock_logger.error):
            for call in method.call_args_list:
                assert "hunter2-secret" not in repr(call)


@pytest.mark.unit
class TestLogout:
    async def test_logout_revokes_token_and_audits(self, service, session_manager, mock_audit):
        user_id = uuid7()
        session_manager.revoke_by_token.return_value = True

        result = await service.logout(access_token="tok", user_id=user_id, client=CLIENT)

        assert isinstance(result, Success)
        session_manager.revoke_by_token.assert_awaited_once_with("tok")
        assert mock_audit.record.await_args.kwargs["action"] == AuditAction.LOGOUT

    async def test_logout_of_missing_session_still_succeeds(self, service, session_manager):
        session_manager.revoke_by_token.return_value = False

        result = await service.logout(access_token="gone", user_id=uuid7(), client=CLIENT)

        assert isinstance(result, Success)


@pytest.mark.unit
class TestRefreshToken:
    async def test_invalid_refresh_token_passes_through(self, service, session_manager):
        error = AuthError(
            code=ErrorCode.INVALID_OR_EXPIRED_TOKEN,
            message="Invalid or expired refresh token",
        )
        session_manager.resolve_refresh_token.return_value = Failure(error=error)

        result = await service.refresh_token(refresh_token="bad", client=CLIENT)

        assert isinstance(result, Failure)
        assert result.error is error
        session_manager.rotate.assert_not_called()

    @pytest.mark.parametrize("found", [None, "suspended"])
    async def test_missing_or_inactive_owner_is_refused(
        self, service, user_repo, session_manager, found
    ):
        user = make_user(status=UserStatus.SUSPENDED)
        session_manager.resolve_refresh_token.return_value = Success(
            value=make_session(user, expires_at=NOW + timedelta(days=7))
        )
        user_repo.find_by_id.return_value = None if found is None else user

        result = await service.refresh_token(refresh_token="r", client=CLIENT)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.USER_INACTIVE
        assert result.error.message == "User not found or inactive"
        session_manager.rotate.assert_not_called()

    async def test_rotation_uses_current_email_and_role(
        self, service, user_repo, session_manager
    ):
        user = make_user(email="renamed@leadnex.io", role=UserRole.ADMIN)
        session = make_session(user, expires_at=NOW + timedelta(days=7))
        session_manager.resolve_refresh_token.return_value = Success(value=session)
        user_repo.find_by_id.return_value = user
        pair = TokenPair(access_token="a2", refresh_token="r2", expires_at=NOW)
        session_manager.rotate.return_value = Success(value=pair)

        result = await service.refresh_token(refresh_token="r", client=CLIENT)

        assert isinstance(result, Success)
        assert result.value is pair
        session_manager.rotate.assert_awaited_once_with(
            session, email="renamed@leadnex.io", role=UserRole.ADMIN, client=CLIENT
        )


@pytest.mark.unit
class TestChangePassword:
    async def test_wrong_current_password(
        self, service, user_repo, password_service, session_manager
    ):
        user_repo.find_by_id.return_value = make_user()
        password_service.verify_password.return_value = False

        result = await service.change_password(
            user_id=uuid7(), current_password="wrong", new_password="NewSecret1!"
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_CURRENT_PASSWORD
        assert result.error.message == "Current password is incorrect"
        user_repo.update_password_hash.assert_not_called()
        session_manager.revoke_all_for_user.assert_not_called()

    async def test_unknown_user(self, service, user_repo):
        user_repo.find_by_id.return_value = None

        result = await service.change_password(
            user_id=uuid7(), current_password="pw", new_password="NewSecret1!"
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.NOT_FOUND

    async def test_success_updates_hash_and_revokes_all(
        self, service, user_repo, password_service, session_manager, mock_audit
    ):
        user = make_user()
        user_repo.find_by_id.return_value = user
        session_manager.revoke_all_for_user.return_value = 3

        result = await service.change_password(
            user_id=user.id,
            current_password="right",
            new_password="NewSecret1!",
            client=CLIENT,
        )

        assert result == Success(value=3)
        password_service.hash_password.assert_called_once_with("NewSecret1!")
        user_repo.update_password_hash.assert_awaited_once_with(user.id, "new-hash", NOW)
        session_manager.revoke_all_for_user.assert_awaited_once_with(user.id)
        audit_kwargs = mock_audit.record.await_args.kwargs
        assert audit_kwargs["action"] == AuditAction.PASSWORD_CHANGE
        assert audit_kwargs["changes"] == {"sessions_revoked": 3}


@pytest.mark.unit
class TestAuthenticateRequest:
    async def test_missing_token(self, service, session_manager):
        result = await service.authenticate_request(None)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.AUTHENTICATION_REQUIRED
        assert result.error.message == "Authentication required"
        session_manager.validate.assert_not_called()

    async def test_invalid_session_passes_through(self, service, session_manager):
        session_manager.validate.return_value = Failure(
            error=AuthError(
                code=ErrorCode.SESSION_INVALID, message="Session expired or invalid"
            )
        )

        result = await service.authenticate_request("tok")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.SESSION_INVALID

    async def test_inactive_user_refused(self, service, session_manager, user_repo):
        user = make_user(status=UserStatus.INACTIVE)
        session_manager.validate.return_value = Success(
            value=SessionIdentity(
                session_id=uuid7(), user_id=user.id, email=user.email, role=user.role
            )
        )
        user_repo.find_by_id.return_value = user

        result = await service.authenticate_request("tok")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.USER_INACTIVE

    async def test_role_comes_from_user_row(self, service, session_manager, user_repo):
        """Test a promotion takes effect without waiting for a new token."""
        user = make_user(role=UserRole.ADMIN)
        session_id = uuid7()
        session_manager.validate.return_value = Success(
            value=SessionIdentity(
                session_id=session_id, user_id=user.id, email=user.email, role=UserRole.USER
            )
        )
        user_repo.find_by_id.return_value = user

        result = await service.authenticate_request("tok")

        assert isinstance(result, Success)
        assert result.value.role == UserRole.ADMIN
        assert result.value.is_admin is True
        assert result.value.session_id == session_id
        assert result.value.access_token == "tok"
        user_repo.touch_last_active.assert_awaited_once_with(user.id, NOW)

    async def test_touch_failure_is_ignored(
        self, service, session_manager, user_repo, mock_logger
    ):
        user = make_user()
        session_manager.validate.return_value = Success(
            value=SessionIdentity(
                session_id=uuid7(), user_id=user.id, email=user.email, role=user.role
            )
        )
        user_repo.find_by_id.return_value = user
        user_repo.touch_last_active.side_effect = RuntimeError("db hiccup")

        result = await service.authenticate_request("tok")

        assert isinstance(result, Success)
        mock_logger.warning.assert_called_once()


@pytest.mark.unit
class TestGetCurrentUser:
    async def test_profile_excludes_hash(self, service, user_repo):
        user = make_user()
        user_repo.find_by_id.return_value = user

        result = await service.get_current_user(user.id)

        assert isinstance(result, Success)
        assert result.value.email == user.email
        assert result.value.status == UserStatus.ACTIVE
        assert not hasattr(result.value, "password_hash")

    async def test_unknown_user(self, service, user_repo):
        user_repo.find_by_id.return_value = None

        result = await service.get_current_user(uuid7())

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.NOT_FOUND
