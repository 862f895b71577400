"""
Shared translation context.

A TranslationContext is the observable slot holding the live registry
for a UI scope. Language switches replace the registry value and notify
subscribers, so widgets can re-render with the new language.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from contextvars import ContextVar

from lexicon.i18n.exceptions import UnsupportedLanguageError
from lexicon.i18n.registry import TranslationRegistry, TranslationTable

logger = logging.getLogger(__name__)

DEFAULT_SUPPORTED_LANGUAGES = ("en", "fr")

Subscriber = Callable[[TranslationRegistry], None]

_active_context: ContextVar[TranslationContext | None] = ContextVar(
    "lexicon_translation_context", default=None
)


class TranslationContext:
    """
    Observable holder of a TranslationRegistry.

    The held registry is never mutated: switching language swaps in a new
    registry value under a lock, then notifies subscribers outside the lock.
    """

    def __init__(
        self,
        supported_languages: Sequence[str] = DEFAULT_SUPPORTED_LANGUAGES,
        translations: TranslationTable | None = None,
    ) -> None:
        """
        Initialize the context.

        Args:
            supported_languages: Language codes, the first one is the default
            translations: Mapping of language code -> key -> value

        Raises:
            ConfigurationError: If no supported language is given
        """
        self._hold(TranslationRegistry(supported_languages, translations or {}))

    def _hold(self, registry: TranslationRegistry) -> None:
        self._registry = registry
        self._lock = threading.Lock()
        self._subscribers: list[Subscriber] = []

    @classmethod
    def from_registry(cls, registry: TranslationRegistry) -> TranslationContext:
        """Create a context holding a copy of an existing registry."""
        context = cls.__new__(cls)
        context._hold(registry.copy())
        return context

    @property
    def registry(self) -> TranslationRegistry:
        """Current registry value."""
        return self._registry

    @property
    def current_language(self) -> str:
        return self._registry.current_language

    @property
    def supported_languages(self) -> tuple[str, ...]:
        return self._registry.supported_languages

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback invoked with the new registry after each switch.

        Returns:
            A function that removes the callback
        """
        with self._lock:
            self._subscribers.append(callback)

        def _unsubscribe() -> None:
            self.unsubscribe(callback)

        return _unsubscribe

    def unsubscribe(self, callback: Subscriber) -> None:
        """Remove a previously registered callback."""
        with self._lock:
            try:
                self._subscribers.remove(callback)
            except ValueError:
                pass

    def set_language(self, language: str) -> TranslationRegistry:
        """
        Switch the context to ``language`` and notify subscribers.

        Args:
            language: Language code to switch to

        Returns:
            The registry now held by the context

        Raises:
            UnsupportedLanguageError: If the language is not supported
        """
        with self._lock:
            current = self._registry
            try:
                registry = current.with_language(language)
            except UnsupportedLanguageError as e:
                logger.warning(f"Ignoring language switch: {e}")
                raise
            changed = registry is not current
            self._registry = registry
            subscribers = tuple(self._subscribers)

        if changed:
            first_error: Exception | None = None
            for callback in subscribers:
                try:
                    callback(registry)
                except Exception as e:
                    logger.error(f"Translation subscriber {callback!r} failed: {e}")
                    if first_error is None:
                        first_error = e
            if first_error is not None:
                raise first_error
        return registry

    def translate(self, key: str) -> str:
        """Translate ``key`` with the current registry."""
        return self._registry.translate(key)

    def t(self, key: str) -> str:
        """Shorthand for translate()."""
        return self.translate(key)


@contextmanager
def provide_translation(context: TranslationContext) -> Iterator[TranslationContext]:
    """
    Make ``context`` the active translation context for the enclosed scope.

    Example:
        with provide_translation(TranslationContext(["en", "fr"], tables)):
            render()  # components call use_translation()
    """
    token = _active_context.set(context)
    try:
        yield context
    finally:
        _active_context.reset(token)


def get_context() -> TranslationContext:
    """
    Get the active translation context.

    Raises:
        LookupError: If no context is provided
    """
    context = _active_context.get()
    if context is None:
        raise LookupError("No I18n context provided")
    return context


def use_translation() -> TranslationRegistry:
    """Get the registry of the active translation context."""
    return get_context().registry
