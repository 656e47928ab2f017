"""Simplify a raw application name into a canonical English product name.

The pipeline runs in a fixed order::

    bundle name -> basename -> ascii -> extension -> exception
        -> word boundaries -> trailing noise -> interior versions -> markers

A matching exception ends the pipeline early. Each step is a pure
``str -> str`` function; ``trace_normalization`` records every
intermediate value.
"""

from __future__ import annotations

import logging
import unicodedata
from pathlib import Path

from casktoken.bundle.reader import BundleMetadataReader, PlistBundleReader
from casktoken.bundle.resolve import english_name_from_bundle
from casktoken.constants.naming import (
    APP_EXTENSION_PATTERN,
    CAMEL_CASE_PATTERN,
    SNAKE_CASE_PATTERN,
    WORD_BOUNDARY_MARKER,
)
from casktoken.model import NormalizationTrace
from casktoken.rules import DEFAULT_RULE_TABLE, RuleTable

logger = logging.getLogger(__name__)

STEP_BUNDLE_NAME = "bundle_name"
STEP_BASENAME = "basename"
STEP_ASCII = "ascii"
STEP_EXTENSION = "extension"
STEP_EXCEPTION = "exception"
STEP_WORD_BOUNDARIES = "word_boundaries"
STEP_TRAILING_NOISE = "trailing_noise"
STEP_INTERIOR_VERSIONS = "interior_versions"
STEP_MARKERS = "markers"


def coerce_raw_name(raw: str | bytes) -> str:
    """Bring raw input to text; undecodable bytes are replaced."""
    if isinstance(raw, bytes):
        return raw.decode("utf-8", errors="replace")
    return raw


def basename(name: str) -> str:
    """Reduce an existing path to its last component."""
    if name and _path_exists(name):
        return Path(name).name
    return name


def decompose_to_ascii(name: str) -> str:
    """Crudely decompose extended Latin characters to ASCII, dropping the rest."""
    if name.isascii():
        return name
    return "".join(char for char in unicodedata.normalize("NFKD", name) if char.isascii())


def remove_app_extension(name: str) -> str:
    return APP_EXTENSION_PATTERN.sub("", name, count=1)


def insert_word_boundaries(name: str, rules: RuleTable = DEFAULT_RULE_TABLE) -> str:
    """Mark camelCase and snake_case transitions.

    A preserved suffix is split off first and re-attached verbatim so that
    names like ``...3D`` are not torn apart.
    """
    trailing = ""
    match = rules.preserve_trailing.search(name)
    if match is not None:
        name, trailing = name[: match.start()], match.group(0)
    name = CAMEL_CASE_PATTERN.sub(lambda m: f"{m.group(1)}{WORD_BOUNDARY_MARKER}{m.group(2)}", name)
    return SNAKE_CASE_PATTERN.sub(WORD_BOUNDARY_MARKER, name + trailing)


def strip_trailing_noise(name: str, rules: RuleTable = DEFAULT_RULE_TABLE) -> str:
    """Cut trailing noise until none is left or a preserved suffix is exposed.

    Every cut removes at least one character and never the first one, so
    the loop runs at most ``len(name) - 1`` times.
    """
    while not rules.has_preserved_suffix(name):
        start = rules.trailing_noise_start(name)
        if start is None:
            break
        logger.debug("Stripping trailing %r from %r", name[start:], name)
        name = name[:start]
    return name


def remove_interior_versions(name: str, rules: RuleTable = DEFAULT_RULE_TABLE) -> str:
    """Drop a version number sitting before an allowed trailing word.

    ``Foo2Pro`` keeps just the word; a longer run such as ``Foo 2019 Pro``
    becomes ``Foo-Pro``.
    """
    name = rules.interior_short.sub(r"\1", name, count=1)
    return rules.interior_long.sub(r"-\1", name, count=1)


def remove_word_boundaries(name: str) -> str:
    return name.replace(WORD_BOUNDARY_MARKER, "").strip()


def trace_normalization(
    raw: str | bytes,
    rules: RuleTable = DEFAULT_RULE_TABLE,
    reader: BundleMetadataReader | None = None,
) -> NormalizationTrace:
    """Run the full pipeline, keeping every intermediate value."""
    name = coerce_raw_name(raw)
    reader = reader if reader is not None else PlistBundleReader()
    trace = NormalizationTrace(raw_name=name)

    trace = _record(trace, STEP_BUNDLE_NAME, english_name_from_bundle(name, reader))
    trace = _record(trace, STEP_BASENAME, basename(trace.simplified))
    trace = _record(trace, STEP_ASCII, decompose_to_ascii(trace.simplified))
    trace = _record(trace, STEP_EXTENSION, remove_app_extension(trace.simplified))

    exception = rules.match_exception(trace.simplified)
    if exception is not None:
        return _record(trace, STEP_EXCEPTION, exception, from_exception=True)

    trace = _record(trace, STEP_WORD_BOUNDARIES, insert_word_boundaries(trace.simplified, rules))
    trace = _record(trace, STEP_TRAILING_NOISE, strip_trailing_noise(trace.simplified, rules))
    trace = _record(trace, STEP_INTERIOR_VERSIONS, remove_interior_versions(trace.simplified, rules))
    return _record(trace, STEP_MARKERS, remove_word_boundaries(trace.simplified))


def normalize(
    raw: str | bytes,
    rules: RuleTable = DEFAULT_RULE_TABLE,
    reader: BundleMetadataReader | None = None,
) -> str:
    """Return the simplified app name for ``raw``. Never raises."""
    return trace_normalization(raw, rules, reader).simplified


def _record(trace: NormalizationTrace, step: str, value: str, *, from_exception: bool = False) -> NormalizationTrace:
    logger.debug("%s: %r", step, value)
    return trace.with_step(step, value, from_exception=from_exception)


def _path_exists(name: str) -> bool:
    try:
        return Path(name).exists()
    except (OSError, ValueError):
        return False
