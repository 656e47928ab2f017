"""Renderers for token proposals."""

from __future__ import annotations

from casktoken.reporting.json_report import render_json
from casktoken.reporting.stdout import render_text, render_warnings

__all__ = ["render_json", "render_text", "render_warnings"]
