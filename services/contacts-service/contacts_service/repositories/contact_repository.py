"""
Contact repository interface (Abstract Base Class).

Defines the contract for contact persistence and retrieval
independent of the underlying storage mechanism.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..domain.entities import Contact


class IContactRepository(ABC):
    """
    Abstract repository interface for contact data operations.

    Implementations perform raw persistence only: no validation and no
    domain errors. Absence is reported as None or an empty list.
    """

    @abstractmethod
    async def add(self, contact: Contact) -> Contact:
        """
        Persist a new contact.

        Args:
            contact: Contact entity to insert

        Returns:
            The persisted contact with its storage id assigned
        """
        pass

    @abstractmethod
    async def delete_by_ulid(self, ulid: str) -> Optional[Contact]:
        """
        Remove the contact with the given ULID, if present.

        Args:
            ulid: External identifier of the contact

        Returns:
            The removed contact, or None if nothing matched
        """
        pass

    @abstractmethod
    async def get_all(self) -> List[Contact]:
        """
        Get every stored contact.

        Returns:
            List of contacts in no guaranteed order
        """
        pass

    @abstractmethod
    async def get_by_ulid(self, ulid: str) -> Optional[Contact]:
        """
        Find a contact by ULID.

        Args:
            ulid: External identifier of the contact

        Returns:
            Contact if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_first_name(self, first_name: str) -> List[Contact]:
        """
        Find contacts whose first name equals the given value exactly.

        Args:
            first_name: Case-sensitive first name

        Returns:
            List of matching contacts
        """
        pass

    @abstractmethod
    async def find_by_last_name(self, last_name: str) -> List[Contact]:
        """
        Find contacts whose last name equals the given value exactly.

        Args:
            last_name: Case-sensitive last name

        Returns:
            List of matching contacts
        """
        pass

    @abstractmethod
    async def update(self, contact: Contact) -> Optional[Contact]:
        """
        Replace the stored contact sharing the same key.

        Records are matched by id, or by ULID when the id is unset.

        Args:
            contact: Contact carrying the new field values

        Returns:
            The updated contact, or None if nothing matched
        """
        pass
