"""
Localized text value object
Implemented as an immutable tagged union: a plain string or a language map
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import dataclasses
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence

from pydantic_core import core_schema

from localized_text.config.settings import get_settings
from localized_text.exceptions import InvalidLocalizedStringError
from localized_text.i18n.negotiation import LanguageNegotiator, get_default_negotiator
from localized_text.models.i18n import JsonValue, LocalizedTextJson
from localized_text.utils.app_logger import get_logger
from localized_text.utils.language import primary_subtag

logger = get_logger(__name__)

_BCP47_NOTE = "The language in a language map must be a valid BCP 47 tag."


class LocalizedText(ABC):
    """
    A string given either as one unlocalized literal or as translations
    keyed by language tag.

    JSON shape:

        "anyOf": [
          {"type": "string"},
          {
            "description": "The language in a language map must be a valid BCP 47 tag.",
            "type": "object",
            "additionalProperties": {"type": "string"},
            "minProperties": 1
          }
        ]

    Tags are not validated and an empty map is tolerated; it resolves to "".
    """

    @classmethod
    def parse(cls, json: JsonValue, *, field: Optional[str] = None) -> Optional["LocalizedText"]:
        """
        Parse a decoded JSON node.

        Args:
            json: None, a string, or an object whose values are all strings
            field: Name of the field being parsed, attached to errors

        Returns:
            None when the node is absent, otherwise the parsed value

        Raises:
            InvalidLocalizedStringError: For any other JSON shape
        """
        if json is None:
            return None
        if isinstance(json, LocalizedText):
            return json
        if isinstance(json, str):
            return PlainText(json)
        if isinstance(json, Mapping) and all(
            isinstance(key, str) and isinstance(value, str) for key, value in json.items()
        ):
            return TranslatedText(json)

        logger.debug("Rejected localized string of type %s (field=%s)", type(json).__name__, field)
        raise InvalidLocalizedStringError(json, field=field)

    @staticmethod
    def from_string(text: str) -> "PlainText":
        """Build an unlocalized value, e.g. ``from_string("bonjour")``."""
        return PlainText(text)

    @staticmethod
    def from_translations(
        translations: Optional[Mapping[str, str]] = None, **kwargs: str
    ) -> "TranslatedText":
        """
        Build a language map, e.g. ``from_translations(en="hello", fr="bonjour")``.

        Tags that are not identifiers go through the mapping argument:
        ``from_translations({"fr-CA": "allo"})``.
        """
        merged: Dict[str, str] = dict(translations or {})
        merged.update(kwargs)
        return TranslatedText(merged)

    @abstractmethod
    def to_json(self) -> LocalizedTextJson:
        """JSON representation: a string or an object of strings"""

    @abstractmethod
    def resolve(
        self,
        language_code: Optional[str] = None,
        *,
        negotiator: Optional[LanguageNegotiator] = None,
    ) -> str:
        """Best string for the requested language, falling back on the user's preferences"""

    def resolve_for_locale(
        self, locale: Any, *, negotiator: Optional[LanguageNegotiator] = None
    ) -> str:
        """
        Resolve using the primary language subtag of a structured locale.

        Any object with a ``language`` attribute works (``Locale``,
        ``babel.Locale``); a bare tag string is accepted too.
        """
        if isinstance(locale, str):
            language = primary_subtag(locale)
        else:
            language = getattr(locale, "language", None) or None
        return self.resolve(language, negotiator=negotiator)

    def __str__(self) -> str:
        return self.resolve()

    # Pydantic integration

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.to_json(), when_used="always"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: core_schema.CoreSchema, handler: Any) -> Dict[str, Any]:
        plain = {"type": "string"}
        translated = {
            "description": _BCP47_NOTE,
            "type": "object",
            "additionalProperties": {"type": "string"},
            "minProperties": 1,
        }
        if cls is PlainText:
            return plain
        if cls is TranslatedText:
            return translated
        return {"anyOf": [plain, translated]}

    @classmethod
    def _validate(cls, value: Any) -> "LocalizedText":
        parsed = LocalizedText.parse(value)
        if parsed is None:
            raise ValueError("Localized text is required")
        if not isinstance(parsed, cls):
            raise ValueError(f"Expected {cls.__name__}, got {type(parsed).__name__}")
        return parsed


@dataclass(frozen=True)
class PlainText(LocalizedText):
    """Unlocalized string; every language resolves to it"""

    text: str

    def to_json(self) -> str:
        return self.text

    def resolve(
        self,
        language_code: Optional[str] = None,
        *,
        negotiator: Optional[LanguageNegotiator] = None,
    ) -> str:
        return self.text


@dataclass(frozen=True)
class TranslatedText(LocalizedText):
    """Translations keyed by language tag"""

    translations: Mapping[str, str] = dataclasses.field(default_factory=dict)

    def __post_init__(self):
        # Copy so later changes to the caller's dict cannot leak in
        object.__setattr__(self, "translations", MappingProxyType(dict(self.translations)))

    def __hash__(self) -> int:
        return hash(frozenset(self.translations.items()))

    def __reduce__(self):
        # mappingproxy cannot be pickled; rebuild from a plain dict
        return (self.__class__, (dict(self.translations),))

    def __repr__(self) -> str:
        return f"TranslatedText({dict(self.translations)!r})"

    @property
    def languages(self) -> List[str]:
        """Available language tags, sorted"""
        return sorted(self.translations)

    def to_json(self) -> Dict[str, str]:
        return dict(self.translations)

    def resolve(
        self,
        language_code: Optional[str] = None,
        *,
        negotiator: Optional[LanguageNegotiator] = None,
    ) -> str:
        """
        Fallback chain:
        1. exact match on the requested tag
        2. first negotiated tag (ambient preferences)
        3. the fallback language entry ("en" by default)
        4. the entry with the smallest tag
        5. "" when there are no translations
        """
        translations = self.translations
        if language_code is not None and language_code in translations:
            return translations[language_code]

        available = self.languages
        if not available:
            logger.debug("Resolving empty translations to an empty string")
            return ""

        for code in self._negotiate(available, negotiator):
            if code in translations:
                return translations[code]

        fallback = get_settings().fallback_language
        if fallback in translations:
            logger.debug("No preferred language among %s, using '%s'", available, fallback)
            return translations[fallback]

        logger.debug("No preferred or fallback language among %s, using '%s'", available, available[0])
        return translations[available[0]]

    @staticmethod
    def _negotiate(
        available: Sequence[str], negotiator: Optional[LanguageNegotiator]
    ) -> List[str]:
        negotiator = negotiator if negotiator is not None else get_default_negotiator()
        try:
            ranked = negotiator(available)
        except Exception:
            logger.warning("Language negotiator %r failed, ignoring its result", negotiator, exc_info=True)
            return []
        return list(ranked or [])
