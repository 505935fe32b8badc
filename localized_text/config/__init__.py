from .settings import LocalizedTextSettings, get_settings, reload_settings

__all__ = ["LocalizedTextSettings", "get_settings", "reload_settings"]
