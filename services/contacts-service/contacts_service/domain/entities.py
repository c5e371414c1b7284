"""
Domain entities for contact data.

Core business object representing a single contact record.
The entity is framework-agnostic; validation lives in the validators module
so that invalid payloads can still be represented and rejected.
"""

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Optional

# Fields an update may overwrite; id and ulid are immutable after creation
MUTABLE_FIELDS = ("first_name", "last_name", "address", "email", "gender", "phone")

# Field length limits shared by validation and the storage schema
ULID_MAX_LENGTH = 64
NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 320
GENDER_MAX_LENGTH = 50
PHONE_MAX_LENGTH = 50


@dataclass
class Contact:
    """
    Contact record.

    Attributes:
        ulid: External identifier, public lookup key
        first_name: Given name
        last_name: Family name
        address: Postal address
        email: Email address
        gender: Free-form gender category
        phone: Phone number
        id: Storage-assigned surrogate key (None until persisted)
    """

    ulid: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    address: Optional[str] = None
    email: Optional[str] = None
    gender: Optional[str] = None
    phone: Optional[str] = None
    id: Optional[int] = None

    @property
    def is_persisted(self) -> bool:
        """Whether storage has assigned an id to this contact."""
        return self.id is not None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize contact to a plain dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Contact":
        """
        Build a contact from a mapping.

        Unknown keys are ignored.

        Args:
            data: Mapping with contact field values

        Returns:
            New Contact instance
        """
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})
