"""
Base domain exceptions
"""

from typing import Any, Dict, Optional


class DomainException(Exception):
    """Base domain exception"""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR",
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class LocalizedTextError(DomainException):
    """Base exception for localized text handling"""

    def __init__(self, message: str, code: str = "LOCALIZED_TEXT_ERROR",
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, code=code, details=details)
