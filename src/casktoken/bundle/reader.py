"""Readers for ``Info.plist`` fields and localized bundle names.

Every failure (missing file, missing key, undecodable data) is reported as
``None``; callers fall through to their next candidate.
"""

from __future__ import annotations

import logging
import plistlib
from pathlib import Path
from typing import Protocol
from xml.parsers.expat import ExpatError

from casktoken.constants.bundle import (
    BUNDLE_NAME_PATTERN,
    INFO_PLIST_PARTS,
    LOCALIZED_STRINGS_CANDIDATES,
    LOCALIZED_STRINGS_ENCODING,
)

logger = logging.getLogger(__name__)


class BundleMetadataReader(Protocol):
    """Capability for reading names out of an application bundle."""

    def read_field(self, bundle: Path, field: str) -> str | None:
        """Return a string field of the bundle's ``Info.plist``."""
        ...

    def read_localized_name(self, bundle: Path) -> str | None:
        """Return the English ``CFBundle(Display)Name`` from ``InfoPlist.strings``."""
        ...


class NullBundleReader:
    """Reader that never finds anything."""

    def read_field(self, bundle: Path, field: str) -> str | None:
        return None

    def read_localized_name(self, bundle: Path) -> str | None:
        return None


class PlistBundleReader:
    """Read bundle metadata straight from the files inside the bundle."""

    def read_field(self, bundle: Path, field: str) -> str | None:
        plist_path = bundle.joinpath(*INFO_PLIST_PARTS)
        try:
            with plist_path.open("rb") as handle:
                data = plistlib.load(handle)
        except (OSError, plistlib.InvalidFileException, ExpatError, ValueError) as exc:
            logger.debug("Cannot read %s: %s", plist_path, exc)
            return None
        if not isinstance(data, dict):
            return None
        value = data.get(field)
        return value if isinstance(value, str) and value else None

    def read_localized_name(self, bundle: Path) -> str | None:
        strings_path = _localized_strings_path(bundle)
        if strings_path is None:
            return None
        try:
            text = strings_path.read_bytes().decode(LOCALIZED_STRINGS_ENCODING)
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Cannot read %s: %s", strings_path, exc)
            return None
        return parse_localized_name(text)


def parse_localized_name(text: str) -> str | None:
    """Extract the first ``CFBundle(Display)Name = "...";`` value from strings text."""
    for line in text.lstrip("\ufeff").splitlines():
        match = BUNDLE_NAME_PATTERN.match(line)
        if match:
            return match.group(2)
    return None


def _localized_strings_path(bundle: Path) -> Path | None:
    for parts in LOCALIZED_STRINGS_CANDIDATES:
        candidate = bundle.joinpath(*parts)
        if candidate.exists():
            return candidate
    return None
