from .i18n import JsonValue, Locale, LocalizedTextJson

__all__ = ["JsonValue", "Locale", "LocalizedTextJson"]
