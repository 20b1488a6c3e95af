"""Utility helpers for working with files."""

from __future__ import annotations

import hashlib

from filescout.errors import ValidationError

FINGERPRINT_SIZE = hashlib.sha256().digest_size


def compute_fingerprint(data: bytes) -> bytes:
    """Compute the SHA256 digest of file content."""
    sha = hashlib.sha256()
    view = memoryview(data)
    for start in range(0, len(view), 1 << 20):
        sha.update(view[start : start + (1 << 20)])
    return sha.digest()


def fingerprint_hex(fingerprint: bytes) -> str:
    return fingerprint.hex()


def validate_name(name: str) -> str:
    """Return ``name`` if it is a single file name inside the corpus directory."""
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("File name must not be empty")
    if "\0" in name:
        raise ValidationError("Invalid file name: contains null byte")
    if "/" in name or "\\" in name or name in (".", ".."):
        raise ValidationError(f"Invalid file name: {name!r} must not contain path components")
    return name
