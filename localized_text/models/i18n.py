"""
I18N model primitives.

This module is intentionally dependency-light (pydantic only) so document
models of a hosting system can import it freely.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from localized_text.utils.language import parse_posix_locale

# Wire shape of a localized string:
# - a plain string
# - or a language map like {"en": "...", "fr": "..."}
LocalizedTextJson = Union[str, Dict[str, str]]

# Generic decoded-JSON node accepted by LocalizedText.parse
JsonValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]


class Locale(BaseModel):
    """
    Structured locale.

    Only ``language`` (the primary language subtag) is read when resolving
    localized text; script and region are kept for display.
    """

    model_config = ConfigDict(frozen=True)

    language: str = Field(..., min_length=1, description="Primary language subtag, e.g. 'fr'")
    script: Optional[str] = Field(default=None, description="Script subtag, e.g. 'Hant'")
    region: Optional[str] = Field(default=None, description="Region subtag, e.g. 'CA' or '419'")

    @classmethod
    def from_tag(cls, tag: str) -> "Locale":
        """
        Build a locale from a language tag or POSIX locale name.

        Accepts "fr", "fr-CA", "fr_CA", "zh-Hant-TW" and "en_US.UTF-8".
        """
        raw = parse_posix_locale(tag)
        if not raw:
            raise ValueError(f"Not a language tag: {tag!r}")

        subtags = [sub for sub in raw.split("-") if sub]
        language = subtags[0].lower()
        script = None
        region = None
        for sub in subtags[1:]:
            if script is None and region is None and len(sub) == 4 and sub.isalpha():
                script = sub.title()
            elif region is None and (
                (len(sub) == 2 and sub.isalpha()) or (len(sub) == 3 and sub.isdigit())
            ):
                region = sub.upper()
        return cls(language=language, script=script, region=region)

    @property
    def tag(self) -> str:
        return "-".join(part for part in (self.language, self.script, self.region) if part)

    def __str__(self) -> str:
        return self.tag
