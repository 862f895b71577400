"""
Lexicon configuration loading.

Reads supported languages and translation tables from a YAML or
JSON file and builds registries from them.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from lexicon.i18n.context import TranslationContext
from lexicon.i18n.exceptions import ConfigurationError, I18nErrorCode
from lexicon.i18n.registry import TranslationRegistry

logger = logging.getLogger(__name__)

CONFIG_CANDIDATES = (
    Path("lexicon.yaml"),
    Path("lexicon.json"),
)


def _invalid_file(message: str, path: Path) -> ConfigurationError:
    return ConfigurationError(
        message, code=I18nErrorCode.INVALID_CONFIG_FILE, details={"path": str(path)}
    )


class LexiconConfig(BaseModel):
    """
    Root configuration model.

    Example (YAML):

        supported_languages: [en, fr]
        translations:
          en:
            greeting: Hello
          fr:
            greeting: Bonjour
    """

    supported_languages: list[str] = Field(min_length=1)
    translations: dict[str, dict[str, Any]] = Field(default_factory=dict)

    @classmethod
    def from_file(cls, path: str | Path) -> LexiconConfig:
        """
        Load configuration from a YAML or JSON file.

        Files ending in ``.json`` are parsed as JSON, anything else as YAML.

        Args:
            path: Path to the configuration file

        Returns:
            Validated configuration

        Raises:
            ConfigurationError: If the file is missing, unparsable, empty or invalid
        """
        config_path = Path(path)

        if not config_path.exists():
            raise _invalid_file(f"Configuration file not found: {config_path}", config_path)

        try:
            with config_path.open("r", encoding="utf-8") as f:
                if config_path.suffix.lower() == ".json":
                    raw_config = json.load(f)
                else:
                    raw_config = yaml.safe_load(f)
        except json.JSONDecodeError as e:
            raise _invalid_file(f"Invalid JSON syntax: {e}", config_path) from e
        except yaml.YAMLError as e:
            raise _invalid_file(f"Invalid YAML syntax: {e}", config_path) from e

        if raw_config is None:
            raise _invalid_file("Configuration file is empty", config_path)

        try:
            config = cls.model_validate(raw_config)
        except ValidationError as e:
            raise _invalid_file(f"Configuration validation failed: {e}", config_path) from e

        logger.debug(
            f"Loaded {len(config.translations)} language tables from {config_path}"
        )
        return config

    def build_registry(self) -> TranslationRegistry:
        """Create a registry from this configuration."""
        return TranslationRegistry(self.supported_languages, self.translations)

    def build_context(self) -> TranslationContext:
        """Create a translation context from this configuration."""
        return TranslationContext(self.supported_languages, self.translations)


def find_config_file(explicit_path: Path | None = None) -> Path:
    """
    Locate configuration file.

    Search order:
    1. Explicit path from --config
    2. lexicon.yaml in current directory
    3. lexicon.json in current directory
    """
    if explicit_path is not None:
        if explicit_path.exists():
            return explicit_path
        raise _invalid_file(f"Configuration file not found: {explicit_path}", explicit_path)

    for candidate in CONFIG_CANDIDATES:
        if candidate.exists():
            return candidate

    raise ConfigurationError(
        "No configuration file found.\n"
        "Create lexicon.yaml or specify: lexicon --config path/to/translations.yaml",
        code=I18nErrorCode.INVALID_CONFIG_FILE,
    )
