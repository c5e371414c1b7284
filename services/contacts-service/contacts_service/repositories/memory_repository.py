"""
In-memory implementation of contact repository.

Keeps contacts in a dict keyed by id. Stored contacts are copies, so
callers mutating their own instances never change the store. The ULID
uniqueness constraint mirrors the SQL table.
"""

import logging
from dataclasses import replace
from typing import Dict, List, Optional

from ..domain.entities import MUTABLE_FIELDS, Contact
from ..domain.exceptions import RepositoryException
from .contact_repository import IContactRepository

logger = logging.getLogger(__name__)


class InMemoryContactRepository(IContactRepository):
    """Process-local contact store."""

    def __init__(self):
        self._contacts: Dict[int, Contact] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._contacts)

    async def add(self, contact: Contact) -> Contact:
        if self._find_by_ulid(contact.ulid) is not None:
            logger.error(f"Duplicate ULID rejected: {contact.ulid}")
            raise RepositoryException("add", "UNIQUE constraint failed: contacts.ulid")

        contact.id = self._next_id
        self._next_id += 1
        self._contacts[contact.id] = replace(contact)
        return contact

    async def delete_by_ulid(self, ulid: str) -> Optional[Contact]:
        stored = self._find_by_ulid(ulid)
        if stored is None:
            return None
        del self._contacts[stored.id]
        return replace(stored)

    async def get_all(self) -> List[Contact]:
        return [replace(contact) for contact in self._contacts.values()]

    async def get_by_ulid(self, ulid: str) -> Optional[Contact]:
        stored = self._find_by_ulid(ulid)
        return replace(stored) if stored else None

    async def find_by_first_name(self, first_name: str) -> List[Contact]:
        return [
            replace(contact)
            for contact in self._contacts.values()
            if contact.first_name == first_name
        ]

    async def find_by_last_name(self, last_name: str) -> List[Contact]:
        return [
            replace(contact)
            for contact in self._contacts.values()
            if contact.last_name == last_name
        ]

    async def update(self, contact: Contact) -> Optional[Contact]:
        if contact.id is not None:
            stored = self._contacts.get(contact.id)
        else:
            stored = self._find_by_ulid(contact.ulid)

        if stored is None:
            return None

        for field in MUTABLE_FIELDS:
            setattr(stored, field, getattr(contact, field))
        return replace(stored)

    def _find_by_ulid(self, ulid: Optional[str]) -> Optional[Contact]:
        for contact in self._contacts.values():
            if contact.ulid == ulid:
                return contact
        return None
