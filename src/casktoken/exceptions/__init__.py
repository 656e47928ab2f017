"""Shared exception hierarchy for casktoken."""

from __future__ import annotations

from .base import CaskTokenError
from .config import ConfigError
from .naming import EmptyResultError

__all__ = ["CaskTokenError", "ConfigError", "EmptyResultError"]
