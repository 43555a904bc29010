"""
Tests for the User model and UserManager.

These tests verify:
- Email-based creation and normalization
- Default role assignment
- Role checks used by the access gate
"""

import pytest

from authentication.models import User
from authentication.tests.factories import AdminUserFactory, UserFactory


@pytest.mark.django_db
class TestUserManager:
    """Tests for UserManager.create_user() and create_superuser()."""

    def test_creates_user_with_default_role(self):
        user = User.objects.create_user(email="someone@example.com", password="Pass123!")

        assert user.pk is not None
        assert user.role == User.Role.USER
        assert user.check_password("Pass123!") is True

    def test_normalizes_email_domain(self):
        user = User.objects.create_user(email="Someone@EXAMPLE.COM", password="x")

        assert user.email == "Someone@example.com"

    def test_requires_email(self):
        with pytest.raises(ValueError, match="Email"):
            User.objects.create_user(email="", password="x")

    def test_user_without_password_has_unusable_password(self):
        user = User.objects.create_user(email="nopass@example.com")

        assert user.has_usable_password() is False

    def test_superuser_defaults_to_admin_role(self):
        user = User.objects.create_superuser(email="root@example.com", password="x")

        assert user.is_staff is True
        assert user.is_superuser is True
        assert user.role == User.Role.ADMIN

    def test_superuser_requires_staff_flag(self):
        with pytest.raises(ValueError, match="is_staff"):
            User.objects.create_superuser(
                email="bad@example.com", password="x", is_staff=False
            )


@pytest.mark.django_db
class TestUserRoles:
    """Tests for role helpers."""

    def test_regular_user_lacks_admin_role(self):
        user = UserFactory()

        assert user.has_role(User.Role.ADMIN) is False

    def test_admin_user_holds_admin_role(self):
        user = AdminUserFactory()

        assert user.has_role(User.Role.ADMIN) is True

    def test_superuser_holds_every_role(self):
        user = UserFactory(is_superuser=True)

        assert user.has_role(User.Role.ADMIN) is True

    def test_str_is_email(self):
        assert str(UserFactory(email="shown@example.com")) == "shown@example.com"
