from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Iterable, Iterator, Optional, Tuple

_PREFERRED_LANGUAGES: ContextVar[Optional[Tuple[str, ...]]] = ContextVar(
    "localized_text_preferred_languages", default=None
)


def set_preferred_languages(languages: Optional[Iterable[str]]) -> Token:
    """
    Override the ambient preferred languages for the current context.

    ``None`` clears the override so the system preference applies again.
    """
    if languages is None:
        return _PREFERRED_LANGUAGES.set(None)
    if isinstance(languages, str):
        languages = [languages]
    cleaned = tuple(tag.strip() for tag in languages if tag and tag.strip())
    return _PREFERRED_LANGUAGES.set(cleaned)


def reset_preferred_languages(token: Token) -> None:
    _PREFERRED_LANGUAGES.reset(token)


def get_preferred_languages() -> Optional[Tuple[str, ...]]:
    return _PREFERRED_LANGUAGES.get()


@contextmanager
def preferred_languages(languages: Optional[Iterable[str]]) -> Iterator[None]:
    token = set_preferred_languages(languages)
    try:
        yield
    finally:
        reset_preferred_languages(token)
