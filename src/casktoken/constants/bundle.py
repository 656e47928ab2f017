"""Constants for reading application bundle metadata."""

from __future__ import annotations

import re
from re import Pattern

INFO_PLIST_PARTS: tuple[str, ...] = ("Contents", "Info.plist")
LOCALIZED_STRINGS_CANDIDATES: tuple[tuple[str, ...], ...] = (
    ("Contents", "Resources", "en.lproj", "InfoPlist.strings"),
    ("Contents", "Resources", "English.lproj", "InfoPlist.strings"),
)
LOCALIZED_STRINGS_ENCODING: str = "utf-16-le"

DISPLAY_NAME_FIELD: str = "CFBundleDisplayName"
BUNDLE_NAME_FIELD: str = "CFBundleName"
EXECUTABLE_FIELD: str = "CFBundleExecutable"

# Key may be quoted; anything after the terminating ";" is ignored.
BUNDLE_NAME_PATTERN: Pattern[str] = re.compile(r'\s*("?)CFBundle(?:Display)?Name\1\s*=\s*"((?:[^"\\]|\\.)*)"\s*;')
