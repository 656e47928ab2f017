"""Constants for proposal output and warnings."""

from __future__ import annotations

VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({"text", "json"})
DEFAULT_OUTPUT_FORMAT: str = "text"

SCHEMA_VERSION: str = "1.0.0"

LABEL_SIMPLIFIED: str = "Proposed Simplified App name:"
LABEL_TOKEN: str = "Proposed token:"
LABEL_FILE_NAME: str = "Proposed file name:"
LABEL_HEADER: str = "Cask Header Line:"
LABEL_WIDTH: int = 30

HEADER_LINE_TEMPLATE: str = 'cask "{token}" do'

WARNING_TOKEN_HAS_DIGITS: str = "TOKEN_HAS_DIGITS"
WARNING_DUPLICATE_FILE: str = "DUPLICATE_FILE"

ANSI_YELLOW: str = "\033[33m"
ANSI_RESET: str = "\033[0m"
