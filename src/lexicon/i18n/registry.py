"""
Translation registry for Lexicon.

Holds the supported languages, the translation table and the
current language, and resolves translation keys against them.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

from lexicon.i18n.exceptions import ConfigurationError, UnsupportedLanguageError

logger = logging.getLogger(__name__)

# Language code -> translation key -> value (string or JSON-like value)
TranslationTable = Mapping[str, Mapping[str, Any]]

MISSING_KEY_MESSAGE = "Unable to find the key '{key}' in the language '{language}'"


def render_value(value: Any) -> str:
    """Render a translation value as text; strings are returned verbatim."""
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"), sort_keys=True)
    except (TypeError, ValueError):
        return str(value)


class TranslationRegistry:
    """
    Registry of translations for a set of supported languages.

    The first supported language is the initial current language.
    Lookups never raise: a missing key resolves to a diagnostic string
    that can be displayed in place of the translation.

    Example:
        registry = TranslationRegistry(
            ["en", "fr"],
            {"en": {"greeting": "Hello"}, "fr": {"greeting": "Bonjour"}},
        )
        registry.t("greeting")       # "Hello"
        registry.set_language("fr")
        registry.t("greeting")       # "Bonjour"
    """

    def __init__(
        self,
        supported_languages: Sequence[str],
        translations: TranslationTable | None = None,
    ) -> None:
        """
        Initialize the registry.

        Args:
            supported_languages: Language codes, the first one is the default
            translations: Mapping of language code -> key -> value

        Raises:
            ConfigurationError: If no supported language is given
        """
        self._supported_languages: tuple[str, ...] = tuple(supported_languages)
        if not self._supported_languages:
            raise ConfigurationError()

        # Per-language shallow copy; values themselves are not copied
        self._translations: TranslationTable = {
            language: dict(table) if isinstance(table, Mapping) else table
            for language, table in (translations or {}).items()
        }
        self._current_language = self._supported_languages[0]

        logger.debug(
            f"Registry created for {list(self._supported_languages)}, "
            f"{len(self._translations)} language tables loaded"
        )

    @property
    def supported_languages(self) -> tuple[str, ...]:
        """Supported language codes, in declaration order."""
        return self._supported_languages

    @property
    def current_language(self) -> str:
        """Current language code."""
        return self._current_language

    @property
    def translations(self) -> Mapping[str, Mapping[str, Any]]:
        """Read-only view of the translation table."""
        return MappingProxyType(dict(self._translations))

    def is_supported(self, language: str) -> bool:
        """Check if a language code is in the supported set."""
        return language in self._supported_languages

    def set_language(self, language: str) -> None:
        """
        Change the current language.

        Args:
            language: Language code to switch to

        Raises:
            UnsupportedLanguageError: If the language is not supported;
                the current language is left unchanged
        """
        if not self.is_supported(language):
            raise UnsupportedLanguageError(language, self._supported_languages)

        if language == self._current_language:
            return

        old_language = self._current_language
        self._current_language = language
        logger.info(f"Language changed from {old_language} to {language}")

    def with_language(self, language: str) -> TranslationRegistry:
        """
        Return a registry using ``language``, leaving this one untouched.

        Translation values are shared with the new registry.

        Raises:
            UnsupportedLanguageError: If the language is not supported
        """
        if not self.is_supported(language):
            raise UnsupportedLanguageError(language, self._supported_languages)
        if language == self._current_language:
            return self

        registry = self.copy()
        registry._current_language = language
        return registry

    def copy(self) -> TranslationRegistry:
        """Copy with the same current language; translation values are shared."""
        registry = TranslationRegistry(self._supported_languages, self._translations)
        registry._current_language = self._current_language
        return registry

    def _lookup(self, key: str, language: str) -> tuple[bool, Any]:
        table = self._translations.get(language)
        if not isinstance(table, Mapping) or key not in table:
            return False, None
        return True, table[key]

    def has_key(self, key: str, language: str | None = None) -> bool:
        """Check if a key resolves in ``language`` (default: current language)."""
        found, _ = self._lookup(key, language if language is not None else self._current_language)
        return found

    def translate(self, key: str) -> str:
        """
        Get the translation of ``key`` in the current language.

        Args:
            key: Translation key

        Returns:
            The translated string, the textual rendering of a structured
            value, or a diagnostic message if the key cannot be found
        """
        found, value = self._lookup(key, self._current_language)
        if not found:
            logger.debug(f"Missing translation: [{self._current_language}].{key}")
            return MISSING_KEY_MESSAGE.format(key=key, language=self._current_language)
        return render_value(value)

    def t(self, key: str) -> str:
        """Shorthand for translate()."""
        return self.translate(key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TranslationRegistry):
            return NotImplemented
        return (
            self._supported_languages == other._supported_languages
            and self._current_language == other._current_language
            and dict(self._translations) == dict(other._translations)
        )

    # Mutable (current language), so not hashable
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"TranslationRegistry(supported_languages={list(self._supported_languages)!r}, "
            f"current_language={self._current_language!r})"
        )
