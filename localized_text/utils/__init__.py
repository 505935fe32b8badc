from .app_logger import configure_logging, get_logger
from .language import (
    normalize_tag,
    parse_accept_language,
    parse_posix_locale,
    primary_subtag,
    system_preferred_languages,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "normalize_tag",
    "parse_accept_language",
    "parse_posix_locale",
    "primary_subtag",
    "system_preferred_languages",
]
