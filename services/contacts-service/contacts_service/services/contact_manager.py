"""
Business logic service layer.

Validates contact input, applies business rules, and turns empty
repository results into typed domain errors.
"""

from typing import List, Optional

from ..domain.entities import Contact
from ..domain.exceptions import ArgumentError, InvalidDataError, NotFoundError
from ..logging_config import get_logger
from ..repositories.contact_repository import IContactRepository
from ..validators import find_contact_violations, is_blank

logger = get_logger(__name__)

ULID_EMPTY_MESSAGE = "ULID cannot be empty."
FIRST_NAME_EMPTY_MESSAGE = "First name cannot be empty."
LAST_NAME_EMPTY_MESSAGE = "Last name cannot be empty."

NO_CONTACTS_MESSAGE = "No contact found."
ULID_NOT_FOUND_MESSAGE = "No contact found with ULID: {ulid}"
FIRST_NAME_NOT_FOUND_MESSAGE = "No contact found with the given first name."
LAST_NAME_NOT_FOUND_MESSAGE = "No contact found with the given last name."


class ContactManager:
    """
    Contact management service.

    Single entry point for contact operations. Every call performs at most
    one validation pass followed by at most one repository call. Absence
    is always reported as NotFoundError, never as None or an empty list.
    Storage errors propagate unchanged.
    """

    def __init__(self, repository: IContactRepository):
        """
        Initialize contact manager.

        Args:
            repository: Contact repository used for persistence
        """
        self.repository = repository

    async def add(self, contact: Optional[Contact]) -> Contact:
        """
        Validate and persist a new contact.

        Duplicate ULIDs are not checked here; the store's unique
        constraint rejects them with RepositoryException.

        Args:
            contact: Contact to add

        Returns:
            The persisted contact with its id assigned

        Raises:
            InvalidDataError: If contact is None or fails validation
        """
        self._ensure_valid(contact, operation="add")

        persisted = await self.repository.add(contact)
        logger.info("contact_added", ulid=persisted.ulid, contact_id=persisted.id)
        return persisted

    async def delete(self, ulid: Optional[str]) -> None:
        """
        Delete a contact by ULID.

        A ULID with no stored contact is not an error.

        Raises:
            ArgumentError: If ulid is None, empty, or whitespace
        """
        if is_blank(ulid):
            raise ArgumentError("ulid", ULID_EMPTY_MESSAGE)

        removed = await self.repository.delete_by_ulid(ulid)
        logger.info("contact_deleted", ulid=ulid, removed=removed is not None)

    async def get_all(self) -> List[Contact]:
        """
        Get all contacts.

        Raises:
            NotFoundError: If the store holds no contacts
        """
        contacts = await self.repository.get_all()
        if not contacts:
            logger.info("contact_not_found", operation="get_all")
            raise NotFoundError(NO_CONTACTS_MESSAGE)

        return contacts

    async def get_specific(self, ulid: Optional[str]) -> Contact:
        """
        Get a single contact by ULID.

        Args:
            ulid: External identifier of the contact

        Returns:
            The matching contact

        Raises:
            ArgumentError: If ulid is None, empty, or whitespace
            NotFoundError: If no contact has this ULID
        """
        if is_blank(ulid):
            raise ArgumentError("ulid", ULID_EMPTY_MESSAGE)

        contact = await self.repository.get_by_ulid(ulid)
        if contact is None:
            logger.info("contact_not_found", operation="get_specific", ulid=ulid)
            raise NotFoundError(ULID_NOT_FOUND_MESSAGE.format(ulid=ulid), query=ulid)

        return contact

    async def search_by_first_name(self, first_name: Optional[str]) -> List[Contact]:
        """
        Find contacts with exactly this first name.

        Raises:
            ArgumentError: If first_name is None, empty, or whitespace
            NotFoundError: If no contact matches
        """
        if is_blank(first_name):
            raise ArgumentError("first_name", FIRST_NAME_EMPTY_MESSAGE)

        contacts = await self.repository.find_by_first_name(first_name)
        if not contacts:
            logger.info("contact_not_found", operation="search_by_first_name")
            raise NotFoundError(FIRST_NAME_NOT_FOUND_MESSAGE, query=first_name)

        return contacts

    async def search_by_last_name(self, last_name: Optional[str]) -> List[Contact]:
        """
        Find contacts with exactly this last name.

        Over-long names are not rejected; they simply match nothing.

        Raises:
            ArgumentError: If last_name is None, empty, or whitespace
            NotFoundError: If no contact matches
        """
        if is_blank(last_name):
            raise ArgumentError("last_name", LAST_NAME_EMPTY_MESSAGE)

        contacts = await self.repository.find_by_last_name(last_name)
        if not contacts:
            logger.info("contact_not_found", operation="search_by_last_name")
            raise NotFoundError(LAST_NAME_NOT_FOUND_MESSAGE, query=last_name)

        return contacts

    async def update(self, contact: Optional[Contact]) -> Optional[Contact]:
        """
        Re-validate a full contact and replace the stored record.

        Args:
            contact: Contact carrying the new field values

        Returns:
            The updated contact, or None if storage matched no record

        Raises:
            InvalidDataError: If contact is None or fails validation
        """
        self._ensure_valid(contact, operation="update")

        updated = await self.repository.update(contact)
        logger.info("contact_updated", ulid=contact.ulid, matched=updated is not None)
        return updated

    def _ensure_valid(self, contact: Optional[Contact], operation: str) -> None:
        violations = find_contact_violations(contact)
        if violations:
            logger.warning(
                "contact_invalid", operation=operation, violations=sorted(violations)
            )
            raise InvalidDataError(violations)
