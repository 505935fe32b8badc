"""
Centralized configuration for localized text resolution

Settings are read from the environment (prefix ``LOCALIZED_TEXT_``) or from a
``.env`` file through Pydantic Settings.
"""

import os
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LocalizedTextSettings(BaseSettings):
    """Localized text resolution settings"""

    model_config = SettingsConfigDict(
        env_prefix="LOCALIZED_TEXT_",
        env_file=".env" if not os.getenv("DOCKER_CONTAINER") else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    preferred_languages: Optional[str] = Field(
        default=None,
        description="Comma separated language tags overriding the system preference"
    )
    fallback_language: str = Field(
        default="en",
        description="Language used when negotiation finds no match"
    )
    log_level: str = Field(
        default="INFO",
        description="Log level for the localized_text loggers"
    )

    @field_validator("preferred_languages", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def preferred_language_list(self) -> List[str]:
        """Configured preferred languages, in order"""
        if not self.preferred_languages:
            return []
        return [tag.strip() for tag in self.preferred_languages.split(",") if tag.strip()]


settings = LocalizedTextSettings()


def get_settings() -> LocalizedTextSettings:
    """
    Get the global settings instance

    Returns:
        LocalizedTextSettings: The global settings instance
    """
    return settings


def reload_settings() -> LocalizedTextSettings:
    """
    Reload settings from environment (useful for testing)

    Returns:
        LocalizedTextSettings: New settings instance with reloaded values
    """
    global settings
    settings = LocalizedTextSettings()
    return settings
