"""Lexicon - runtime translation registry for component-based UIs."""

from lexicon.i18n import (
    ConfigurationError,
    TranslationContext,
    TranslationRegistry,
    UnsupportedLanguageError,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "TranslationContext",
    "TranslationRegistry",
    "UnsupportedLanguageError",
    "__version__",
]
