"""
Repository layer - Data access abstractions.

This layer provides the contact persistence interface and its
implementations, hiding storage details from the business logic.
"""

from .contact_repository import IContactRepository
from .memory_repository import InMemoryContactRepository
from .sqlalchemy_repository import SqlAlchemyContactRepository

__all__ = [
    "IContactRepository",
    "InMemoryContactRepository",
    "SqlAlchemyContactRepository",
]
