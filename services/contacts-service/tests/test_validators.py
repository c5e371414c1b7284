"""
Unit tests for validators module
"""

import pytest
from pydantic import ValidationError

from contacts_service.domain.entities import (
    EMAIL_MAX_LENGTH,
    GENDER_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PHONE_MAX_LENGTH,
    ULID_MAX_LENGTH,
)
from contacts_service.models import ContactRecord
from contacts_service.validators import (
    ContactPayload,
    find_contact_violations,
    is_blank,
    is_valid_contact,
)


class TestContactValidation:
    """Test all-or-nothing contact validation"""

    def test_valid_contact(self, make_contact):
        """Test a fully populated contact"""
        contact = make_contact()
        assert is_valid_contact(contact) is True
        assert find_contact_violations(contact) == set()

    def test_none_contact(self):
        """Test that None is invalid"""
        assert is_valid_contact(None) is False
        assert find_contact_violations(None) == {"contact"}

    @pytest.mark.parametrize(
        "field", ["ulid", "first_name", "last_name", "address", "email", "gender", "phone"]
    )
    def test_missing_field(self, make_contact, field):
        """Test that every field is required"""
        contact = make_contact(**{field: None})
        assert is_valid_contact(contact) is False
        assert find_contact_violations(contact) == {field}

    @pytest.mark.parametrize("field", ["first_name", "last_name", "address", "gender", "phone"])
    def test_blank_field(self, make_contact, field):
        """Test that empty and whitespace-only values are rejected"""
        assert is_valid_contact(make_contact(**{field: ""})) is False
        assert is_valid_contact(make_contact(**{field: "   "})) is False

    def test_id_is_not_validated(self, make_contact):
        """Test that the storage id plays no part in validation"""
        contact = make_contact()
        contact.id = 52
        assert is_valid_contact(contact) is True


class TestUlidValidation:
    """Test ULID rules"""

    def test_valid_ulids(self, make_contact):
        """Test digits and uppercase letters of length 10 or more"""
        assert is_valid_contact(make_contact(ulid="1ABC23456HH")) is True  # 11 chars
        assert is_valid_contact(make_contact(ulid="1234ABCD12")) is True  # 10 chars
        assert is_valid_contact(make_contact(ulid="0123456789")) is True  # Digits only

    def test_invalid_ulids(self, make_contact):
        """Test ULIDs that break length or alphabet rules"""
        assert is_valid_contact(make_contact(ulid="short")) is False  # Too short
        assert is_valid_contact(make_contact(ulid="ABCDEFGH1")) is False  # 9 chars
        assert is_valid_contact(make_contact(ulid="1abc23456hh")) is False  # Lowercase
        assert is_valid_contact(make_contact(ulid="1ABC-23456HH")) is False  # Hyphen
        assert is_valid_contact(make_contact(ulid="1ABC 23456H")) is False  # Space
        assert is_valid_contact(make_contact(ulid="")) is False  # Empty


class TestEmailValidation:
    """Test email rules"""

    def test_valid_emails(self, make_contact):
        """Test standard addresses"""
        assert is_valid_contact(make_contact(email="test@gmail.com")) is True
        assert is_valid_contact(make_contact(email="first.last@mail.company.org")) is True

    def test_invalid_emails(self, make_contact):
        """Test malformed addresses"""
        assert is_valid_contact(make_contact(email="invalid_Mail")) is False  # No @
        assert is_valid_contact(make_contact(email="@gmail.com")) is False  # No local part
        assert is_valid_contact(make_contact(email="test@")) is False  # No domain
        assert is_valid_contact(make_contact(email="a@@b.com")) is False  # Double @
        assert is_valid_contact(make_contact(email=" test@gmail.com ")) is False  # Padded
        assert is_valid_contact(make_contact(email="Peter Petrov <peter@gmail.com>")) is False  # Display name
        assert is_valid_contact(make_contact(email="a" * 315 + "@b.com")) is False  # Over 320 chars


class TestNameLength:
    """Test name length bounds"""

    def test_name_at_limit(self, make_contact):
        """Test 100-character names"""
        assert is_valid_contact(make_contact(first_name="a" * 100)) is True
        assert is_valid_contact(make_contact(last_name="b" * 100)) is True

    def test_name_over_limit(self, make_contact):
        """Test 101-character names"""
        contact = make_contact(first_name="a" * 101, last_name="b" * 101)
        assert find_contact_violations(contact) == {"first_name", "last_name"}


class TestFieldLengthLimits:
    """Test upper bounds shared with the storage columns"""

    def test_ulid_bounds(self, make_contact):
        """Test 64-character ULID limit"""
        assert is_valid_contact(make_contact(ulid="A" * 64)) is True
        assert find_contact_violations(make_contact(ulid="A" * 65)) == {"ulid"}

    def test_gender_bounds(self, make_contact):
        """Test 50-character gender limit"""
        assert is_valid_contact(make_contact(gender="g" * 50)) is True
        assert find_contact_violations(make_contact(gender="g" * 51)) == {"gender"}

    def test_phone_bounds(self, make_contact):
        """Test 50-character phone limit"""
        assert is_valid_contact(make_contact(phone="1" * 50)) is True
        assert find_contact_violations(make_contact(phone="1" * 51)) == {"phone"}

    def test_limits_match_columns(self):
        """Test that validation limits equal the column lengths"""
        columns = ContactRecord.__table__.columns
        assert columns["ulid"].type.length == ULID_MAX_LENGTH
        assert columns["first_name"].type.length == NAME_MAX_LENGTH
        assert columns["last_name"].type.length == NAME_MAX_LENGTH
        assert columns["email"].type.length == EMAIL_MAX_LENGTH
        assert columns["gender"].type.length == GENDER_MAX_LENGTH
        assert columns["phone"].type.length == PHONE_MAX_LENGTH


class TestContactPayloadModel:
    """Test ContactPayload Pydantic model"""

    def test_ignores_unknown_fields(self):
        """Test that extra keys such as id are ignored"""
        payload = ContactPayload(
            id=1,
            ulid="1ABC23456HH",
            first_name="Peter",
            last_name="Petrov",
            address="Crimson Str.",
            email="test@email.com",
            gender="Male",
            phone="0999123123",
        )
        assert payload.ulid == "1ABC23456HH"

    def test_invalid_payload_raises(self):
        """Test that the model raises on invalid input"""
        with pytest.raises(ValidationError):
            ContactPayload(ulid="short")


class TestIsBlank:
    """Test blank argument detection"""

    def test_blank_values(self):
        assert is_blank(None) is True
        assert is_blank("") is True
        assert is_blank("   ") is True
        assert is_blank("\t\n") is True

    def test_non_blank_values(self):
        assert is_blank("1ABC23456HH") is False
        assert is_blank(" Peter ") is False
