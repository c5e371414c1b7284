"""
Database models for contacts service.

This module defines the SQLAlchemy ORM model backing the contact store.
"""

from typing import Any

from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import declarative_base

from .domain.entities import (
    EMAIL_MAX_LENGTH,
    GENDER_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PHONE_MAX_LENGTH,
    ULID_MAX_LENGTH,
)

Base: Any = declarative_base()


class ContactRecord(Base):
    """
    Contact storage model.

    Attributes:
        id: Primary key identifier, assigned on insert
        ulid: External identifier, unique across all contacts
        first_name: Given name
        last_name: Family name
        address: Postal address
        email: Email address
        gender: Free-form gender category
        phone: Phone number
    """

    __tablename__ = "contacts"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    ulid = Column(String(ULID_MAX_LENGTH), unique=True, index=True, nullable=False)

    first_name = Column(String(NAME_MAX_LENGTH), nullable=False, index=True)
    last_name = Column(String(NAME_MAX_LENGTH), nullable=False, index=True)
    address = Column(Text, nullable=False)
    email = Column(String(EMAIL_MAX_LENGTH), nullable=False)
    gender = Column(String(GENDER_MAX_LENGTH), nullable=False)
    phone = Column(String(PHONE_MAX_LENGTH), nullable=False)

    def __repr__(self) -> str:
        return f"<ContactRecord(id={self.id}, ulid={self.ulid!r})>"
