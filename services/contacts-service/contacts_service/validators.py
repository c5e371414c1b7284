"""
Input validation for contact records.

Validation is all-or-nothing: a contact either satisfies every field rule
or is rejected as a whole. The set of violated fields is available for
diagnostics but never changes the pass/fail outcome.
"""

from typing import Any, Optional, Set

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError, field_validator

from .domain.entities import (
    EMAIL_MAX_LENGTH,
    GENDER_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PHONE_MAX_LENGTH,
    ULID_MAX_LENGTH,
    Contact,
)

# Validation patterns
ULID_PATTERN = r"^[0-9A-Z]+$"

# Field constraints
ULID_MIN_LENGTH = 10

# Display-name delimiters, accepted by EmailStr but never part of a bare address
EMAIL_DISPLAY_CHARS = ("<", ">")

CONTACT_FIELD = "contact"


class ContactPayload(BaseModel):
    """
    Validation model for a contact payload.

    Attributes:
        ulid: 10-64 characters, digits and uppercase letters only
        first_name: Non-blank, at most 100 characters
        last_name: Non-blank, at most 100 characters
        address: Non-blank
        email: Bare email address, at most 320 characters
        gender: Non-blank, at most 50 characters
        phone: Non-blank, at most 50 characters
    """

    model_config = ConfigDict(extra="ignore")

    ulid: str = Field(
        ..., min_length=ULID_MIN_LENGTH, max_length=ULID_MAX_LENGTH, pattern=ULID_PATTERN
    )
    first_name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    last_name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    address: str = Field(..., min_length=1)
    email: EmailStr
    gender: str = Field(..., min_length=1, max_length=GENDER_MAX_LENGTH)
    phone: str = Field(..., min_length=1, max_length=PHONE_MAX_LENGTH)

    @field_validator("email", mode="before")
    @classmethod
    def require_bare_address(cls, v: Any) -> Any:
        """
        Reject email forms that EmailStr would normalize away.

        The stored value is the raw input, so surrounding whitespace and
        "Name <addr>" display forms must fail instead of being stripped.

        Raises:
            ValueError: If value is not a bare address within the length limit
        """
        if not isinstance(v, str):
            return v
        if v != v.strip():
            raise ValueError("Email cannot have surrounding whitespace")
        if any(char in v for char in EMAIL_DISPLAY_CHARS):
            raise ValueError("Email must be a bare address without a display name")
        if len(v) > EMAIL_MAX_LENGTH:
            raise ValueError(f"Email cannot exceed {EMAIL_MAX_LENGTH} characters")
        return v

    @field_validator("first_name", "last_name", "address", "gender", "phone")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        """
        Reject whitespace-only values.

        Raises:
            ValueError: If value contains only whitespace
        """
        if not v.strip():
            raise ValueError("Value cannot be empty or only whitespace")
        return v


def find_contact_violations(contact: Optional[Contact]) -> Set[str]:
    """
    Collect the names of the fields a contact violates.

    Args:
        contact: Contact to validate (None is itself a violation)

    Returns:
        Set of violated field names, empty when the contact is valid
    """
    if contact is None:
        return {CONTACT_FIELD}

    try:
        ContactPayload.model_validate(contact.to_dict())
    except ValidationError as e:
        return {str(error["loc"][0]) for error in e.errors() if error["loc"]}

    return set()


def is_valid_contact(contact: Optional[Contact]) -> bool:
    """
    Check whether a contact satisfies every field rule.

    Args:
        contact: Contact to validate

    Returns:
        True if valid, False otherwise
    """
    return not find_contact_violations(contact)


def is_blank(value: Optional[str]) -> bool:
    """Whether a key or search term is None, empty, or whitespace-only."""
    return value is None or not value.strip()
