"""
TranslatorProxy - Bridge between a TranslationContext and QML.

Enables live language switching in a QML interface by:
1. Exposing the supported languages and current language as properties
2. Forwarding language switches to the shared TranslationContext
3. Emitting signals so bindings re-evaluate their translations
"""

from __future__ import annotations

import logging

from PySide6.QtCore import Property, QObject, Signal, Slot

from lexicon.i18n.context import TranslationContext
from lexicon.i18n.exceptions import UnsupportedLanguageError
from lexicon.i18n.registry import TranslationRegistry

logger = logging.getLogger(__name__)


class TranslatorProxy(QObject):
    """
    Qt-facing wrapper around a TranslationContext.

    QML bindings that call ``translator.tr(key)`` should also depend on
    ``translator.currentLanguage`` so they re-evaluate on languageChanged.
    """

    # Signal emitted when language changes - QML should refresh
    languageChanged = Signal()

    # Signal with language code for debugging/logging
    localeChanged = Signal(str)

    def __init__(
        self,
        context: TranslationContext,
        parent: QObject | None = None,
    ) -> None:
        """
        Initialize the translator proxy.

        Args:
            context: Shared translation context
            parent: Qt parent object
        """
        super().__init__(parent)
        self._context = context
        self._unsubscribe = context.subscribe(self._on_registry_changed)

        logger.debug(
            f"TranslatorProxy initialized, languages: {list(context.supported_languages)}"
        )

    @property
    def context(self) -> TranslationContext:
        return self._context

    def detach(self) -> None:
        """Stop following the context's language changes."""
        self._unsubscribe()

    def _on_registry_changed(self, registry: TranslationRegistry) -> None:
        self.languageChanged.emit()
        self.localeChanged.emit(registry.current_language)

    @Property(str, notify=languageChanged)
    def currentLanguage(self) -> str:
        """Get current language code."""
        return self._context.current_language

    @Property(list, constant=True)
    def supportedLanguages(self) -> list[str]:
        """Get list of supported language codes."""
        return list(self._context.supported_languages)

    @Slot(str, result=bool)
    def setLanguage(self, language: str) -> bool:
        """
        Change the current language and trigger retranslation.

        Args:
            language: Language code (e.g., "fr")

        Returns:
            True if the language is now current
        """
        if language == self._context.current_language:
            logger.debug(f"Language already set to {language}")
            return True

        try:
            self._context.set_language(language)
        except UnsupportedLanguageError as e:
            logger.warning(f"Failed to change language: {e}")
            return False

        return True

    @Slot(str, result=bool)
    def isSupported(self, language: str) -> bool:
        """Check if a language code can be selected."""
        return self._context.registry.is_supported(language)

    @Slot(str, result=str)
    def tr(self, key: str) -> str:
        """
        Get translated string for the current language.

        Args:
            key: Translation key

        Returns:
            Translated string, or a diagnostic message for unknown keys
        """
        return self._context.translate(key)


def create_translator_proxy(context: TranslationContext) -> TranslatorProxy:
    """
    Factory function to create a TranslatorProxy instance.

    Args:
        context: Shared translation context

    Returns:
        Configured TranslatorProxy instance
    """
    return TranslatorProxy(context=context)
