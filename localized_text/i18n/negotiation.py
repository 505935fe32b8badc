"""
Preferred-language negotiation.

A negotiator receives the language tags a value is available in and returns
them ranked by the caller's preferences (possibly empty). Resolution treats it
as a synchronous, side-effect free query.
"""

from __future__ import annotations

from typing import List, Mapping, Optional, Protocol, Sequence, runtime_checkable

from localized_text.config.settings import get_settings
from localized_text.i18n.context import get_preferred_languages
from localized_text.utils.app_logger import get_logger
from localized_text.utils.language import normalize_tag, system_preferred_languages

logger = get_logger(__name__)


@runtime_checkable
class LanguageNegotiator(Protocol):
    def __call__(self, available: Sequence[str]) -> Sequence[str]:
        ...


def negotiate(available: Sequence[str], preferred: Sequence[str]) -> List[str]:
    """
    Rank ``available`` tags against an ordered ``preferred`` list.

    For each preferred tag, in order:
    - exact matches (case-insensitive, "_" equals "-")
    - available tags the preferred tag truncates to ("fr-CA" -> "fr")
    - available tags that extend the preferred tag ("en" -> "en-US"), sorted

    Returns the matching available tags in their original spelling,
    without duplicates.
    """
    if not available or not preferred:
        return []

    candidates = [(tag, normalize_tag(tag)) for tag in available]
    extensions_order = sorted(candidates, key=lambda item: item[1])
    ranked: List[str] = []

    def _take(tag: str) -> None:
        if tag not in ranked:
            ranked.append(tag)

    for wanted in preferred:
        key = normalize_tag(wanted)
        if not key:
            continue

        for tag, norm in candidates:
            if norm == key:
                _take(tag)

        subtags = key.split("-")
        for size in range(len(subtags) - 1, 0, -1):
            prefix = "-".join(subtags[:size])
            for tag, norm in candidates:
                if norm == prefix:
                    _take(tag)

        for tag, norm in extensions_order:
            if norm.startswith(key + "-"):
                _take(tag)

    return ranked


class SystemLanguageNegotiator:
    """
    Negotiates against the ambient preferred languages.

    Unless an explicit preference list is given, preferences are looked up
    on every call from:
    1. the context-local override (``set_preferred_languages``)
    2. ``LOCALIZED_TEXT_PREFERRED_LANGUAGES``
    3. the POSIX locale environment, then ``locale.getlocale()``
    """

    def __init__(
        self,
        preferred_languages: Optional[Sequence[str]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self._preferred = list(preferred_languages) if preferred_languages is not None else None
        self._environ = environ

    def preferred_languages(self) -> List[str]:
        if self._preferred is not None:
            return list(self._preferred)

        override = get_preferred_languages()
        if override is not None:
            return list(override)

        configured = get_settings().preferred_language_list
        if configured:
            return configured

        return system_preferred_languages(self._environ)

    def __call__(self, available: Sequence[str]) -> List[str]:
        preferred = self.preferred_languages()
        ranked = negotiate(available, preferred)
        logger.debug("Negotiated %s against preferences %s: %s", list(available), preferred, ranked)
        return ranked

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(preferred_languages={self._preferred!r})"


_default_negotiator: LanguageNegotiator = SystemLanguageNegotiator()


def get_default_negotiator() -> LanguageNegotiator:
    return _default_negotiator


def set_default_negotiator(negotiator: Optional[LanguageNegotiator]) -> LanguageNegotiator:
    """
    Replace the process-wide negotiator used when none is passed explicitly.

    Passing ``None`` restores the system negotiator. Returns the previous one.
    """
    global _default_negotiator
    previous = _default_negotiator
    _default_negotiator = negotiator if negotiator is not None else SystemLanguageNegotiator()
    return previous
