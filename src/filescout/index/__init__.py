"""Corpus index, duplicate detection, search and mutations."""
