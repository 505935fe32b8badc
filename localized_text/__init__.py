"""
localized_text: strings given either as one literal or as a map of
language tag -> translation, with JSON parsing and locale resolution.
"""

from .exceptions import DomainException, InvalidLocalizedStringError, LocalizedTextError
from .i18n import (
    LanguageNegotiator,
    SystemLanguageNegotiator,
    get_default_negotiator,
    negotiate,
    preferred_languages,
    set_default_negotiator,
    set_preferred_languages,
)
from .models import Locale
from .value_objects import LocalizedText, PlainText, TranslatedText

__version__ = "0.1.0"

__all__ = [
    "LocalizedText",
    "PlainText",
    "TranslatedText",
    "Locale",
    "LanguageNegotiator",
    "SystemLanguageNegotiator",
    "get_default_negotiator",
    "set_default_negotiator",
    "negotiate",
    "preferred_languages",
    "set_preferred_languages",
    "DomainException",
    "LocalizedTextError",
    "InvalidLocalizedStringError",
]
