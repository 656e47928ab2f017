"""casktoken: propose cask tokens and file names from application names."""

from __future__ import annotations

__version__ = "0.1.0"
