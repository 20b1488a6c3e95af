"""Concurrent word-frequency analysis."""
