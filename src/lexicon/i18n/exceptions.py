"""
i18n Exception Hierarchy.

Defines the errors raised while building a translation registry
or switching its current language.
"""

from collections.abc import Sequence
from enum import Enum


class I18nErrorCode(str, Enum):
    """Error codes for i18n operations."""

    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    INVALID_CONFIG_FILE = "INVALID_CONFIG_FILE"
    UNSUPPORTED_LANGUAGE = "UNSUPPORTED_LANGUAGE"


class I18nError(Exception):
    """Base exception for all i18n-related errors."""

    def __init__(
        self,
        message: str,
        code: I18nErrorCode = I18nErrorCode.CONFIGURATION_ERROR,
        details: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert exception to dictionary for serialization."""
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(I18nError):
    """Raised when a registry cannot be built from the given configuration."""

    def __init__(
        self,
        message: str = "You must add at least one supported language",
        code: I18nErrorCode = I18nErrorCode.CONFIGURATION_ERROR,
        details: dict | None = None,
    ) -> None:
        super().__init__(message, code, details)


class UnsupportedLanguageError(I18nError):
    """Raised when switching to a language outside the supported set."""

    def __init__(self, language: str, supported: Sequence[str] = ()) -> None:
        self.language = language
        self.supported = tuple(supported)
        super().__init__(
            f"Language '{language}' is not supported",
            I18nErrorCode.UNSUPPORTED_LANGUAGE,
            {"language": language, "supported": list(self.supported)},
        )
