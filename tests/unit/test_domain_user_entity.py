"""Unit tests for User domain entity."""

import pytest
from uuid_extensions import uuid7

from src.domain.entities.user import User
from src.domain.enums import UserRole, UserStatus


def build_user(**kwargs) -> User:
    return User(id=uuid7(), email="a@leadnex.io", password_hash="hash", **kwargs)


@pytest.mark.unit
class TestUserDefaults:
    def test_defaults(self):
        user = build_user()

        assert user.role == UserRole.USER
        assert user.status == UserStatus.ACTIVE
        assert user.failed_login_attempts == 0
        assert user.locked_until is None
        assert user.last_login_at is None


@pytest.mark.unit
class TestUserProperties:
    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            (UserStatus.ACTIVE, True),
            (UserStatus.INACTIVE, False),
            (UserStatus.SUSPENDED, False),
        ],
    )
    def test_is_active(self, status, expected):
        assert build_user(status=status).is_active is expected

    def test_is_admin(self):
        assert build_user(role=UserRole.ADMIN).is_admin is True
        assert build_user().is_admin is False

    def test_full_name(self):
        assert build_user(first_name="Ada", last_name="Lovelace").full_name == (
            "Ada Lovelace"
        )
        assert build_user(first_name="Ada").full_name == "Ada"
        assert build_user().full_name is None
