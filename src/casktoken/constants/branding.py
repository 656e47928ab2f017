"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "casktoken"
CLI_DESCRIPTION: str = (
    "Given an application name or a path to an application bundle, propose a\n"
    "cask token, file name and header line.\n"
    "\n"
    "With --debug, also show the internal simplified app name."
)
