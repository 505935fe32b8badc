"""
Unit tests for LocalizedTextSettings
"""

import pytest

from localized_text.config.settings import LocalizedTextSettings, get_settings, reload_settings


class TestLocalizedTextSettings:
    """Test environment-driven configuration"""

    def test_defaults(self):
        settings = LocalizedTextSettings()
        assert settings.preferred_languages is None
        assert settings.preferred_language_list == []
        assert settings.fallback_language == "en"
        assert settings.log_level == "INFO"

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("LOCALIZED_TEXT_PREFERRED_LANGUAGES", "fr-CA, fr ,,en")
        monkeypatch.setenv("LOCALIZED_TEXT_FALLBACK_LANGUAGE", "fr")
        monkeypatch.setenv("localized_text_log_level", "DEBUG")

        settings = LocalizedTextSettings()
        assert settings.preferred_language_list == ["fr-CA", "fr", "en"]
        assert settings.fallback_language == "fr"
        assert settings.log_level == "DEBUG"

    def test_blank_preferences_are_none(self, monkeypatch):
        monkeypatch.setenv("LOCALIZED_TEXT_PREFERRED_LANGUAGES", "   ")
        assert LocalizedTextSettings().preferred_languages is None

    def test_reads_dotenv_file(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("LOCALIZED_TEXT_PREFERRED_LANGUAGES=ja\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        settings = LocalizedTextSettings(_env_file=".env")
        assert settings.preferred_language_list == ["ja"]

    def test_unprefixed_variables_are_ignored(self, monkeypatch):
        monkeypatch.setenv("FALLBACK_LANGUAGE", "de")
        assert LocalizedTextSettings().fallback_language == "en"

    def test_reload_settings(self, monkeypatch):
        before = get_settings()
        monkeypatch.setenv("LOCALIZED_TEXT_FALLBACK_LANGUAGE", "ko")

        after = reload_settings()
        assert after is get_settings()
        assert after is not before
        assert get_settings().fallback_language == "ko"


if __name__ == "__main__":
    pytest.main([__file__])
