"""Lexicon configuration layer."""
