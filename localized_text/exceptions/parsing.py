"""
Exceptions raised while parsing localized strings from JSON
"""

from typing import Any, Optional

from .base import LocalizedTextError


class InvalidLocalizedStringError(LocalizedTextError, ValueError):
    """The JSON node is neither null, a string, nor an object of strings"""

    def __init__(self, json_value: Any = None, field: Optional[str] = None,
                 json_type: Optional[str] = None):
        json_type = json_type or type(json_value).__name__
        message = f"Invalid localized string: expected a string or an object of strings, got {json_type}"
        if field:
            message += f" for field '{field}'"

        details = {"json_type": json_type}
        if field:
            details["field"] = field

        super().__init__(
            message=message,
            code="INVALID_LOCALIZED_STRING",
            details=details
        )
        self.field = field
        self.json_type = json_type

    def with_field(self, field: str) -> "InvalidLocalizedStringError":
        """Return a copy of this error naming the field that failed."""
        return InvalidLocalizedStringError(field=field, json_type=self.json_type)
