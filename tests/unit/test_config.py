"""Unit tests for configuration loading."""

import json
from pathlib import Path

import pytest

from lexicon.core.config import LexiconConfig, find_config_file
from lexicon.i18n.exceptions import ConfigurationError, I18nErrorCode


class TestLexiconConfig:
    """Tests for LexiconConfig."""

    def test_requires_a_language(self) -> None:
        """An empty language list should fail validation."""
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            LexiconConfig(supported_languages=[])

    def test_translations_default_empty(self) -> None:
        """Translations should default to an empty table."""
        config = LexiconConfig(supported_languages=["en"])
        assert config.translations == {}

    def test_build_registry(self) -> None:
        """build_registry should honor the declared languages."""
        config = LexiconConfig(
            supported_languages=["fr", "en"],
            translations={"fr": {"greeting": "Bonjour"}},
        )
        registry = config.build_registry()

        assert registry.current_language == "fr"
        assert registry.t("greeting") == "Bonjour"

    def test_build_context(self) -> None:
        """build_context should create a switchable context."""
        config = LexiconConfig(
            supported_languages=["en", "fr"],
            translations={"en": {"greeting": "Hello"}, "fr": {"greeting": "Bonjour"}},
        )
        context = config.build_context()
        context.set_language("fr")
        assert context.t("greeting") == "Bonjour"


class TestFromFile:
    """Tests for LexiconConfig.from_file."""

    def test_yaml_file(self, tmp_path: Path) -> None:
        """YAML files should load with nested values."""
        config_file = tmp_path / "lexicon.yaml"
        config_file.write_text("""
supported_languages: ["en", "fr"]
translations:
  en:
    greeting: Hello
    menu:
      file: File
  fr:
    greeting: Bonjour
""", encoding="utf-8")

        registry = LexiconConfig.from_file(config_file).build_registry()

        assert registry.supported_languages == ("en", "fr")
        assert registry.t("greeting") == "Hello"
        assert registry.t("menu") == '{"file":"File"}'

    def test_json_file(self, tmp_path: Path) -> None:
        """JSON files should be parsed as JSON."""
        config_file = tmp_path / "lexicon.json"
        config_file.write_text(json.dumps({
            "supported_languages": ["fr"],
            "translations": {"fr": {"greeting": "Bonjour"}},
        }), encoding="utf-8")

        config = LexiconConfig.from_file(str(config_file))

        assert config.supported_languages == ["fr"]
        assert config.build_registry().t("greeting") == "Bonjour"

    def test_file_not_found(self, tmp_path: Path) -> None:
        """A missing file should raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match="not found") as exc:
            LexiconConfig.from_file(tmp_path / "missing.yaml")
        assert exc.value.code == I18nErrorCode.INVALID_CONFIG_FILE

    def test_empty_file(self, tmp_path: Path) -> None:
        """An empty file should raise ConfigurationError."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="empty"):
            LexiconConfig.from_file(config_file)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Broken YAML should raise ConfigurationError."""
        config_file = tmp_path / "broken.yaml"
        config_file.write_text("supported_languages: [en, fr\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            LexiconConfig.from_file(config_file)

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Broken JSON should raise ConfigurationError."""
        config_file = tmp_path / "broken.json"
        config_file.write_text('{"supported_languages": ', encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            LexiconConfig.from_file(config_file)

    def test_no_languages(self, tmp_path: Path) -> None:
        """An empty language list should fail validation."""
        config_file = tmp_path / "lexicon.yaml"
        config_file.write_text("supported_languages: []\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="validation failed") as exc:
            LexiconConfig.from_file(config_file)
        assert exc.value.details == {"path": str(config_file)}


class TestFindConfigFile:
    """Tests for find_config_file."""

    def test_explicit_path(self, tmp_path: Path) -> None:
        """An existing explicit path should be returned as is."""
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("supported_languages: [en]\n", encoding="utf-8")
        assert find_config_file(config_file) == config_file

    def test_explicit_path_missing(self, tmp_path: Path) -> None:
        """A missing explicit path should raise."""
        with pytest.raises(ConfigurationError, match="not found"):
            find_config_file(tmp_path / "missing.yaml")

    def test_search_working_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """lexicon.json should be found when no YAML file exists."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "lexicon.json").write_text('{"supported_languages": ["en"]}')

        assert find_config_file() == Path("lexicon.json")

    def test_nothing_found(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """No candidate files should raise ConfigurationError."""
        monkeypatch.chdir(tmp_path)
        with pytest.raises(ConfigurationError, match="No configuration file found"):
            find_config_file()
