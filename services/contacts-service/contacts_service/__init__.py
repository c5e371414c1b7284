"""
Contacts service.

Validation and orchestration layer for managing contact records
on top of a pluggable repository.
"""

__version__ = "1.0.0"
