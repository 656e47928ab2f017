"""Resolve an ASCII display name for a non-ASCII bundle path."""

from __future__ import annotations

import logging
from pathlib import Path

from casktoken.bundle.reader import BundleMetadataReader
from casktoken.constants.bundle import BUNDLE_NAME_FIELD, DISPLAY_NAME_FIELD, EXECUTABLE_FIELD

logger = logging.getLogger(__name__)


def english_name_from_bundle(name: str, reader: BundleMetadataReader) -> str:
    """Return the first ASCII name found in the bundle at ``name``.

    Candidates, in order: display name, bundle name, localized name,
    executable name. ASCII input and paths that do not exist are returned
    unchanged, as is a bundle with no ASCII candidate.
    """
    if name.isascii():
        return name
    bundle = Path(name)
    try:
        if not bundle.exists():
            return name
    except (OSError, ValueError):
        return name

    candidates = (
        lambda: reader.read_field(bundle, DISPLAY_NAME_FIELD),
        lambda: reader.read_field(bundle, BUNDLE_NAME_FIELD),
        lambda: reader.read_localized_name(bundle),
        lambda: reader.read_field(bundle, EXECUTABLE_FIELD),
    )
    for read in candidates:
        value = read()
        if value and value.isascii():
            logger.debug("Resolved bundle name %r for %s", value, bundle)
            return value
    return name
