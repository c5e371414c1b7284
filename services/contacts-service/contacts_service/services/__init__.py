"""
Service layer - Business logic orchestration.
"""

from .contact_manager import ContactManager

__all__ = ["ContactManager"]
