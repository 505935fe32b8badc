from __future__ import annotations

import pytest

from localized_text.config.settings import reload_settings
from localized_text.i18n.negotiation import set_default_negotiator

_LOCALE_ENV_VARS = (
    "LANGUAGE",
    "LC_ALL",
    "LC_MESSAGES",
    "LANG",
    "LOCALIZED_TEXT_PREFERRED_LANGUAGES",
    "LOCALIZED_TEXT_FALLBACK_LANGUAGE",
    "LOCALIZED_TEXT_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_locale(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """
    Every test starts without ambient language preferences.

    Locale env vars are cleared, settings are reloaded from the clean
    environment, and the default negotiator is the system one.
    """
    for name in _LOCALE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("locale.getlocale", lambda *args: (None, None))
    monkeypatch.chdir(tmp_path)
    reload_settings()
    previous = set_default_negotiator(None)
    yield
    set_default_negotiator(previous)
    reload_settings()
