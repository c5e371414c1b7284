"""
Shared dependencies for the application.

Provides factory and injection helpers for the contact manager.
"""

from typing import Optional

from sqlalchemy.orm import Session

from .repositories.sqlalchemy_repository import SqlAlchemyContactRepository
from .services.contact_manager import ContactManager

# Global manager instance (set during start-up)
_contact_manager: Optional[ContactManager] = None


def get_contact_manager(db: Session) -> ContactManager:
    """
    Build a contact manager backed by the given database session.

    Args:
        db: SQLAlchemy database session

    Returns:
        ContactManager using a SQLAlchemy repository
    """
    return ContactManager(SqlAlchemyContactRepository(db))


def set_contact_manager(manager: Optional[ContactManager]) -> None:
    """
    Set the global contact manager instance.

    Passing None clears it.
    """
    global _contact_manager
    _contact_manager = manager


def get_current_contact_manager() -> ContactManager:
    """
    Get the global contact manager instance.

    Raises:
        RuntimeError: If no manager has been set
    """
    if _contact_manager is None:
        raise RuntimeError("Contact manager not initialized")
    return _contact_manager
