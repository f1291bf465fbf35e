# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the payload models to ensure:
# - Valid data is accepted and parsed correctly
# - Invalid data raises ValidationError
# - Default values work as expected
# =============================================================================

import pytest
from pydantic import ValidationError

from core.fixtures import rest_users, view_users
from core.models import ParamDto, User, UserDto


class TestParamDto:
    """Tests for ParamDto model."""

    def test_defaults_are_null(self):
        """Test that both fields default to None."""
        param = ParamDto()

        assert param.message is None
        assert param.code is None

    def test_code_parses_numeric_string(self):
        """Test that a numeric string is coerced to int."""
        param = ParamDto(message="hola", code="42")

        assert param.code == 42

    def test_code_rejects_text(self):
        """Test that a non-numeric code is rejected."""
        with pytest.raises(ValidationError):
            ParamDto(message="hola", code="abc")


class TestUser:
    """Tests for User model."""

    def test_email_is_optional(self):
        """Test creating a user without email."""
        user = User(name="Jose", lastname="Carrillo")

        assert user.email is None

    def test_name_and_lastname_required(self):
        """Test that name and lastname must be given."""
        with pytest.raises(ValidationError):
            User(name="Jose")

        with pytest.raises(ValidationError):
            User(lastname="Carrillo")

    def test_equality_by_fields(self):
        """Test that users with the same fields are equal."""
        assert User(name="a", lastname="b") == User(name="a", lastname="b")
        assert User(name="a", lastname="b") != User(name="a", lastname="b", email="x@y.z")

    def test_is_immutable(self):
        """Test that fields cannot be reassigned."""
        user = User(name="Jose", lastname="Carrillo")

        with pytest.raises(ValidationError):
            user.name = "Otro"

    def test_with_upper_names(self):
        """Test that only name and lastname are upper-cased."""
        user = User(name="ana", lastname="lopez", email="ana@email.com")

        upper = user.with_upper_names()

        assert upper.name == "ANA"
        assert upper.lastname == "LOPEZ"
        assert upper.email == "ana@email.com"
        # Original untouched
        assert user.name == "ana"


class TestUserDto:
    """Tests for UserDto model."""

    def test_serializes_nested_user(self):
        """Test that the user is nested in the dumped dict."""
        dto = UserDto(title="Hola", user=User(name="Jose", lastname="Carrillo"))

        assert dto.model_dump() == {
            "title": "Hola",
            "user": {"name": "Jose", "lastname": "Carrillo", "email": None},
        }


class TestFixtures:
    """Tests for the fixed demo users."""

    def test_rest_users_order(self):
        """Test the three REST users in order."""
        names = [(u.name, u.lastname) for u in rest_users()]

        assert names == [("Jose", "Carrillo"), ("Manolo", "Jimenez"), ("Maria", "Cabello")]

    def test_view_users_first_has_email(self):
        """Test that only the first view user has an email."""
        users = view_users()

        assert len(users) == 3
        assert users[0].email == "carrillo@email.com"
        assert all(u.email is None for u in users[1:])
