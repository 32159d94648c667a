"""Integration tests for JWTService.

Real PyJWT signing and verification (no mocking); freezegun drives the
clock for expiry checks.
"""

from datetime import UTC, datetime, timedelta

import jwt
import pytest
from freezegun import freeze_time
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import UserRole
from src.domain.protocols.token_generation_protocol import TokenType
from src.infrastructure.security.jwt_service import JWTService
from tests.factories import TEST_JWT_SECRET


@pytest.fixture
def service() -> JWTService:
    return JWTService(secret_key=TEST_JWT_SECRET)


@pytest.mark.integration
class TestJWTServiceIssue:
    """Token pair issuance."""

    def test_issue_returns_distinct_signed_tokens(self, service):
        """Test access and refresh tokens are separate three-part JWTs."""
        tokens = service.issue(user_id=uuid7(), email="a@leadnex.io", role=UserRole.USER)

        assert tokens.access_token != tokens.refresh_token
        assert len(tokens.access_token.split(".")) == 3
        assert len(tokens.refresh_token.split(".")) == 3

    def test_issue_includes_identity_and_type_claims(self, service):
        """Test payload carries sub, email, role, type and jti."""
        user_id = uuid7()
        tokens = service.issue(user_id=user_id, email="a@leadnex.io", role=UserRole.ADMIN)

        access = jwt.decode(tokens.access_token, TEST_JWT_SECRET, algorithms=["HS256"])
        refresh = jwt.decode(tokens.refresh_token, TEST_JWT_SECRET, algorithms=["HS256"])

        assert access["sub"] == str(user_id)
        assert access["email"] == "a@leadnex.io"
        assert access["role"] == "admin"
        assert access["type"] == "access"
        assert refresh["type"] == "refresh"
        assert access["jti"] != refresh["jti"]

    def test_access_claim_lasts_24_hours_and_refresh_7_days(self, service):
        """Test signed expiry claims use the two lifetimes."""
        now = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)
        tokens = service.issue(
            user_id=uuid7(), email="a@leadnex.io", role=UserRole.USER, now=now
        )

        access = jwt.decode(
            tokens.access_token,
            TEST_JWT_SECRET,
            algorithms=["HS256"],
            options={"verify_exp": False, "verify_iat": False},
        )
        refresh = jwt.decode(
            tokens.refresh_token,
            TEST_JWT_SECRET,
            algorithms=["HS256"],
            options={"verify_exp": False, "verify_iat": False},
        )

        assert access["exp"] - access["iat"] == 24 * 3600
        assert refresh["exp"] - refresh["iat"] == 7 * 24 * 3600

    def test_session_expiry_equals_refresh_lifetime(self, service):
        """Test the storage-level expiry is 7 days after issuance."""
        now = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)
        tokens = service.issue(
            user_id=uuid7(), email="a@leadnex.io", role=UserRole.USER, now=now
        )

        assert tokens.expires_at == now + timedelta(days=7)
        assert service.session_lifetime == timedelta(days=7)

    def test_same_second_issuance_never_collides(self, service):
        """Test two pairs for one user in the same instant differ (jti)."""
        user_id = uuid7()
        now = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)

        first = service.issue(user_id=user_id, email="a@leadnex.io", role=UserRole.USER, now=now)
        second = service.issue(user_id=user_id, email="a@leadnex.io", role=UserRole.USER, now=now)

        assert first.access_token != second.access_token
        assert first.refresh_token != second.refresh_token

    def test_short_secret_is_rejected(self):
        """Test secrets under 32 characters raise ValueError."""
        with pytest.raises(ValueError, match="at least 32"):
            JWTService(secret_key="too-short")


@pytest.mark.integration
class TestJWTServiceVerify:
    """Signature, expiry and type checks."""

    def test_verify_access_token_returns_claims(self, service):
        """Test a fresh access token verifies to its claims."""
        user_id = uuid7()
        tokens = service.issue(user_id=user_id, email="a@leadnex.io", role=UserRole.USER)

        result = service.verify_access_token(tokens.access_token)

        assert isinstance(result, Success)
        assert result.value.user_id == user_id
        assert result.value.email == "a@leadnex.io"
        assert result.value.role == UserRole.USER
        assert result.value.token_type == TokenType.ACCESS

    def test_refresh_token_rejected_as_access_token(self, service):
        """Test token type confusion is refused."""
        tokens = service.issue(user_id=uuid7(), email="a@leadnex.io", role=UserRole.USER)

        result = service.verify_access_token(tokens.refresh_token)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_OR_EXPIRED_TOKEN
        assert result.error.message == "Invalid or expired token"

    def test_access_token_rejected_as_refresh_token(self, service):
        tokens = service.issue(user_id=uuid7(), email="a@leadnex.io", role=UserRole.USER)

        result = service.verify_refresh_token(tokens.access_token)

        assert isinstance(result, Failure)
        assert result.error.message == "Invalid or expired refresh token"

    def test_wrong_secret_fails_verification(self, service):
        """Test tokens signed with another key are rejected."""
        other = JWTService(secret_key="another-secret-key-that-is-32-chars-long")
        tokens = other.issue(user_id=uuid7(), email="a@leadnex.io", role=UserRole.USER)

        result = service.verify_access_token(tokens.access_token)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_OR_EXPIRED_TOKEN

    def test_tampered_token_fails_verification(self, service):
        tokens = service.issue(user_id=uuid7(), email="a@leadnex.io", role=UserRole.USER)
        header, payload, signature = tokens.access_token.split(".")
        tampered = f"{header}.{payload}.{'A' * len(signature)}"

        result = service.verify_access_token(tampered)

        assert isinstance(result, Failure)

    def test_garbage_token_fails_verification(self, service):
        result = service.verify_access_token("not-a-jwt")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_OR_EXPIRED_TOKEN

    def test_access_token_expires_after_24_hours(self, service):
        """Test access claim expiry is enforced independently of any row."""
        with freeze_time("2026-03-01 12:00:00") as frozen:
            tokens = service.issue(
                user_id=uuid7(), email="a@leadnex.io", role=UserRole.USER
            )

            frozen.tick(timedelta(hours=23, minutes=59))
            assert isinstance(service.verify_access_token(tokens.access_token), Success)

            frozen.tick(timedelta(minutes=2))
            result = service.verify_access_token(tokens.access_token)
            assert isinstance(result, Failure)
            assert result.error.code == ErrorCode.INVALID_OR_EXPIRED_TOKEN

            # Refresh token of the same pair is still inside its 7 days
            assert isinstance(service.verify_refresh_token(tokens.refresh_token), Success)

    def test_refresh_token_expires_after_7_days(self, service):
        with freeze_time("2026-03-01 12:00:00") as frozen:
            tokens = service.issue(
                user_id=uuid7(), email="a@leadnex.io", role=UserRole.USER
            )

            frozen.tick(timedelta(days=7, seconds=1))
            result = service.verify_refresh_token(tokens.refresh_token)

            assert isinstance(result, Failure)
            assert result.error.code == ErrorCode.INVALID_OR_EXPIRED_TOKEN
