"""Constants for name normalization and token sanitization."""

from __future__ import annotations

import re
from re import Pattern

CASK_FILE_EXTENSION: str = ".rb"
APP_BUNDLE_EXTENSION: str = ".app"

# Inserted at camelCase and snake_case transitions, removed before output.
WORD_BOUNDARY_MARKER: str = "\v"

APP_EXTENSION_PATTERN: Pattern[str] = re.compile(rf"{re.escape(APP_BUNDLE_EXTENSION)}\Z", re.IGNORECASE)
CASK_EXTENSION_PATTERN: Pattern[str] = re.compile(rf"{re.escape(CASK_FILE_EXTENSION)}\Z", re.IGNORECASE)
OPTIONAL_CASK_EXTENSION_PATTERN: Pattern[str] = re.compile(
    rf"(?:{re.escape(CASK_FILE_EXTENSION)})?\Z", re.IGNORECASE
)
CAMEL_CASE_PATTERN: Pattern[str] = re.compile(r"([^A-Z])([A-Z])")
SNAKE_CASE_PATTERN: Pattern[str] = re.compile(r"_")

TRAILING_SPACES_PATTERN: Pattern[str] = re.compile(r" +\Z")
SPACE_RUN_PATTERN: Pattern[str] = re.compile(r" +")
NON_TOKEN_CHAR_PATTERN: Pattern[str] = re.compile(r"[^a-z0-9-]+")
COLLAPSE_DASH_PATTERN: Pattern[str] = re.compile(r"-{2,}")
LEADING_DASH_PATTERN: Pattern[str] = re.compile(r"\A-+")
DASH_BEFORE_DIGIT_PATTERN: Pattern[str] = re.compile(r"-+(?=\d)")

TOKEN_PATTERN: Pattern[str] = re.compile(r"[a-z0-9][a-z0-9-]*")
DIGIT_PATTERN: Pattern[str] = re.compile(r"\d")
