"""
Ambient language preferences and negotiation.

Design goals:
- No platform translation APIs (deterministic, injectable)
- Request-scoped preferences via ContextVar
- Process-wide default negotiator that tests can swap
"""

from .context import (
    get_preferred_languages,
    preferred_languages,
    reset_preferred_languages,
    set_preferred_languages,
)
from .negotiation import (
    LanguageNegotiator,
    SystemLanguageNegotiator,
    get_default_negotiator,
    negotiate,
    set_default_negotiator,
)

__all__ = [
    "LanguageNegotiator",
    "SystemLanguageNegotiator",
    "get_default_negotiator",
    "set_default_negotiator",
    "negotiate",
    "get_preferred_languages",
    "set_preferred_languages",
    "reset_preferred_languages",
    "preferred_languages",
]
