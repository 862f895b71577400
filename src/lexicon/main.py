"""
Lexicon - Entry point.

Loads a translation configuration and resolves keys from the command line.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from lexicon import __version__
from lexicon.core.config import LexiconConfig, find_config_file
from lexicon.i18n.exceptions import ConfigurationError, UnsupportedLanguageError
from lexicon.i18n.registry import TranslationRegistry

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="lexicon",
        description="Lexicon - resolve translation keys from a translation file",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Lexicon {__version__}",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to translation file (default: lexicon.yaml or lexicon.json)",
    )

    parser.add_argument(
        "-l",
        "--language",
        default=None,
        help="Language to translate into (default: first supported language)",
    )

    parser.add_argument(
        "--list-languages",
        action="store_true",
        help="Print supported languages, marking the current one with '*'",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "keys",
        nargs="*",
        metavar="KEY",
        help="Translation keys to resolve",
    )

    return parser.parse_args(argv)


def print_languages(registry: TranslationRegistry) -> None:
    """Print supported languages, one per line."""
    for language in registry.supported_languages:
        marker = "*" if language == registry.current_language else " "
        print(f"{marker} {language}")


def main(argv: Sequence[str] | None = None) -> int:
    """
    Application entry point.

    Returns:
        Exit code (0 = success)
    """
    args = parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s]: %(message)s",
    )

    try:
        config_path = find_config_file(args.config)
        if args.debug:
            print(f"Using config: {config_path}")
        registry = LexiconConfig.from_file(config_path).build_registry()
        if args.language is not None:
            registry.set_language(args.language)
    except (ConfigurationError, UnsupportedLanguageError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.list_languages:
        print_languages(registry)

    for key in args.keys:
        print(registry.translate(key))

    return 0


if __name__ == "__main__":
    sys.exit(main())
