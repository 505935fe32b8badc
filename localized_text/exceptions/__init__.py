"""
Domain exceptions for localized text
"""

from .base import DomainException, LocalizedTextError
from .parsing import InvalidLocalizedStringError

__all__ = [
    "DomainException",
    "LocalizedTextError",
    "InvalidLocalizedStringError",
]
