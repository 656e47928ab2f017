"""Token-building exceptions."""

from __future__ import annotations

from casktoken.exceptions.base import CaskTokenError


class EmptyResultError(CaskTokenError, ValueError):
    """Raised when sanitizing a simplified app name leaves nothing behind."""
