"""
Lexicon Internationalization (i18n) System.

Provides a translation registry with runtime language switching.
"""

from lexicon.i18n.context import (
    DEFAULT_SUPPORTED_LANGUAGES,
    TranslationContext,
    get_context,
    provide_translation,
    use_translation,
)
from lexicon.i18n.exceptions import (
    ConfigurationError,
    I18nError,
    I18nErrorCode,
    UnsupportedLanguageError,
)
from lexicon.i18n.registry import TranslationRegistry, TranslationTable

__all__ = [
    "DEFAULT_SUPPORTED_LANGUAGES",
    "ConfigurationError",
    "I18nError",
    "I18nErrorCode",
    "TranslationContext",
    "TranslationRegistry",
    "TranslationTable",
    "UnsupportedLanguageError",
    "get_context",
    "provide_translation",
    "use_translation",
]
