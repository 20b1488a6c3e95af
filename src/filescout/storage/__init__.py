"""Filesystem collaborators."""
