"""Base exception for casktoken."""

from __future__ import annotations


class CaskTokenError(Exception):
    """Root of all casktoken errors."""
