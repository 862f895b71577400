"""Qt integration for Lexicon."""
