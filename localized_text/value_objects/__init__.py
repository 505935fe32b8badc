from .localized_text import LocalizedText, PlainText, TranslatedText

__all__ = ["LocalizedText", "PlainText", "TranslatedText"]
