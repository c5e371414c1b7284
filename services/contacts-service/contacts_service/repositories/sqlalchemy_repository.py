"""
SQLAlchemy implementation of contact repository.

Implements persistent storage for contacts on any SQLAlchemy-supported
database (PostgreSQL in production, SQLite for local use and tests).
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..domain.entities import MUTABLE_FIELDS, Contact
from ..domain.exceptions import RepositoryException
from ..models import ContactRecord
from .contact_repository import IContactRepository

logger = logging.getLogger(__name__)


class SqlAlchemyContactRepository(IContactRepository):
    """SQLAlchemy implementation for contact persistence."""

    def __init__(self, db: Session):
        """
        Initialize repository.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    async def add(self, contact: Contact) -> Contact:
        """Insert a contact and write the assigned id back onto it."""
        try:
            record = self._create_record(contact)
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)

            contact.id = record.id
            logger.debug(f"Inserted contact {contact.ulid} with id {contact.id}")
            return contact

        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error adding contact {contact.ulid}: {e}")
            raise RepositoryException("add", str(e)) from e

    async def delete_by_ulid(self, ulid: str) -> Optional[Contact]:
        """Delete the contact with the given ULID, if any."""
        try:
            record = (
                self.db.query(ContactRecord).filter(ContactRecord.ulid == ulid).first()
            )
            if record is None:
                return None

            contact = self._map_to_entity(record)
            self.db.delete(record)
            self.db.commit()
            return contact

        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error deleting contact {ulid}: {e}")
            raise RepositoryException("delete", str(e)) from e

    async def get_all(self) -> List[Contact]:
        try:
            records = self.db.query(ContactRecord).all()
            return [self._map_to_entity(record) for record in records]
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error listing contacts: {e}")
            raise RepositoryException("get_all", str(e)) from e

    async def get_by_ulid(self, ulid: str) -> Optional[Contact]:
        try:
            record = (
                self.db.query(ContactRecord).filter(ContactRecord.ulid == ulid).first()
            )
            return self._map_to_entity(record) if record else None
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error finding contact {ulid}: {e}")
            raise RepositoryException("get_by_ulid", str(e)) from e

    async def find_by_first_name(self, first_name: str) -> List[Contact]:
        try:
            records = (
                self.db.query(ContactRecord)
                .filter(ContactRecord.first_name == first_name)
                .all()
            )
            return [self._map_to_entity(record) for record in records]
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error searching by first name: {e}")
            raise RepositoryException("find_by_first_name", str(e)) from e

    async def find_by_last_name(self, last_name: str) -> List[Contact]:
        try:
            records = (
                self.db.query(ContactRecord)
                .filter(ContactRecord.last_name == last_name)
                .all()
            )
            return [self._map_to_entity(record) for record in records]
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error searching by last name: {e}")
            raise RepositoryException("find_by_last_name", str(e)) from e

    async def update(self, contact: Contact) -> Optional[Contact]:
        """Copy mutable fields onto the row matched by id (or ULID)."""
        try:
            query = self.db.query(ContactRecord)
            if contact.id is not None:
                record = query.filter(ContactRecord.id == contact.id).first()
            else:
                record = query.filter(ContactRecord.ulid == contact.ulid).first()

            if record is None:
                logger.debug(f"No stored contact to update for {contact.ulid}")
                return None

            for field in MUTABLE_FIELDS:
                setattr(record, field, getattr(contact, field))

            self.db.commit()
            self.db.refresh(record)
            return self._map_to_entity(record)

        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error updating contact {contact.ulid}: {e}")
            raise RepositoryException("update", str(e)) from e

    def _create_record(self, contact: Contact) -> ContactRecord:
        """Map domain entity to a new database row."""
        return ContactRecord(
            ulid=contact.ulid,
            first_name=contact.first_name,
            last_name=contact.last_name,
            address=contact.address,
            email=contact.email,
            gender=contact.gender,
            phone=contact.phone,
        )

    def _map_to_entity(self, record: ContactRecord) -> Contact:
        """Map database row to domain entity."""
        return Contact(
            id=record.id,
            ulid=record.ulid,
            first_name=record.first_name,
            last_name=record.last_name,
            address=record.address,
            email=record.email,
            gender=record.gender,
            phone=record.phone,
        )
