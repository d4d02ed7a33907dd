"""
Application exceptions module.

This module provides a clean separation of concerns for error handling:
- Base exceptions define the hierarchy
- Validation exceptions cover rejected caller input
- HTTP mapping is handled separately in eventhub/core/error_handlers.py
"""

from eventhub.exceptions.base import AppException
from eventhub.exceptions.validation import ValidationError

__all__ = [
    # Base
    "AppException",
    # Validation
    "ValidationError",
]
