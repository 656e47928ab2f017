"""Application bundle metadata access."""

from __future__ import annotations

from casktoken.bundle.reader import BundleMetadataReader, NullBundleReader, PlistBundleReader
from casktoken.bundle.resolve import english_name_from_bundle

__all__ = [
    "BundleMetadataReader",
    "NullBundleReader",
    "PlistBundleReader",
    "english_name_from_bundle",
]
