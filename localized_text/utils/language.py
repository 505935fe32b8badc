"""
Language tag utilities for localized_text

Tags are treated as opaque strings; these helpers only compare and split
them, they never validate BCP-47 syntax.
"""

from __future__ import annotations

import locale
import os
from typing import List, Mapping, Optional

# POSIX locale names that carry no language preference
_NEUTRAL_LOCALES = {"c", "posix"}

# Environment variables consulted for the process language, in priority order
LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")


def normalize_tag(tag: Optional[str]) -> str:
    """
    Comparison key for a language tag.

    "en_US" / "EN-us" -> "en-us"
    """
    if not tag:
        return ""
    return str(tag).strip().replace("_", "-").lower()


def primary_subtag(tag: Optional[str]) -> Optional[str]:
    """
    Primary language subtag of a tag, in its original case.

    "fr-CA" -> "fr", "zh_Hant_TW" -> "zh", "" -> None
    """
    if not tag:
        return None
    raw = str(tag).strip().replace("_", "-")
    primary = raw.split("-", 1)[0].strip()
    return primary or None


def parse_posix_locale(value: Optional[str]) -> Optional[str]:
    """
    Convert a POSIX locale name into a hyphenated language tag.

    "fr_CA.UTF-8@euro" -> "fr-CA", "C" / "POSIX" -> None
    """
    if not value:
        return None
    raw = value.strip()
    for separator in (".", "@"):
        if separator in raw:
            raw = raw.split(separator, 1)[0]
    raw = raw.strip()
    if not raw or raw.lower() in _NEUTRAL_LOCALES:
        return None
    return raw.replace("_", "-")


def parse_accept_language(value: Optional[str]) -> List[str]:
    """
    Parse an Accept-Language header into language tags ordered by preference.

    Very small parser; we don't implement full RFC behavior, but we respect q=.
    Wildcards and q=0 entries are dropped, tags keep their original spelling.
    """
    if not value:
        return []

    parts = [p.strip() for p in value.split(",") if p.strip()]
    weighted: List[tuple[float, str]] = []
    for part in parts:
        tag = part
        q = 1.0
        if ";" in part:
            tag, params = part.split(";", 1)
            tag = tag.strip()
            for param in params.split(";"):
                param = param.strip()
                if param.startswith("q="):
                    try:
                        q = float(param[2:])
                    except ValueError:
                        q = 1.0
        if not tag or tag == "*" or q <= 0:
            continue
        weighted.append((q, tag))

    # Sort by q desc, stable otherwise
    weighted.sort(key=lambda item: item[0], reverse=True)

    out: List[str] = []
    for _, tag in weighted:
        if tag not in out:
            out.append(tag)
    return out


def system_preferred_languages(environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """
    Preferred languages of the running process, most preferred first.

    Reads the GNU ``LANGUAGE`` list, then the first of LC_ALL / LC_MESSAGES /
    LANG that is set, then falls back to ``locale.getlocale()``.
    """
    env = os.environ if environ is None else environ
    out: List[str] = []

    def _add(tag: Optional[str]) -> None:
        if tag and tag not in out:
            out.append(tag)

    for item in (env.get("LANGUAGE") or "").split(":"):
        _add(parse_posix_locale(item))

    for name in LOCALE_ENV_VARS:
        value = env.get(name)
        if value:
            _add(parse_posix_locale(value))
            break

    if not out:
        try:
            current = locale.getlocale()[0]
        except ValueError:
            current = None
        _add(parse_posix_locale(current))

    return out
