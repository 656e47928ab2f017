"""Tests for bundle metadata readers and bundle name resolution."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from casktoken.bundle import NullBundleReader, PlistBundleReader, english_name_from_bundle
from casktoken.bundle.reader import parse_localized_name
from casktoken.naming import normalize

NON_ASCII_BUNDLE = "Ünïcödé.app"


class RecordingReader:
    """Fake reader returning canned values and recording lookups."""

    def __init__(self, fields: dict[str, str] | None = None, localized: str | None = None) -> None:
        self.fields = fields or {}
        self.localized = localized
        self.calls: list[str] = []

    def read_field(self, bundle: Path, field: str) -> str | None:
        self.calls.append(field)
        return self.fields.get(field)

    def read_localized_name(self, bundle: Path) -> str | None:
        self.calls.append("localized")
        return self.localized


def test_plist_reader_reads_fields(make_bundle: Callable[..., Path]) -> None:
    bundle = make_bundle(NON_ASCII_BUNDLE, info={"CFBundleName": "Unicode", "CFBundleVersion": 3})
    reader = PlistBundleReader()

    assert reader.read_field(bundle, "CFBundleName") == "Unicode"
    assert reader.read_field(bundle, "CFBundleDisplayName") is None
    assert reader.read_field(bundle, "CFBundleVersion") is None


def test_plist_reader_tolerates_missing_and_corrupt_plist(make_bundle: Callable[..., Path]) -> None:
    missing = make_bundle("Missing.app")
    corrupt = make_bundle("Corrupt.app")
    (corrupt / "Contents" / "Info.plist").write_bytes(b"not a plist")
    reader = PlistBundleReader()

    assert reader.read_field(missing, "CFBundleName") is None
    assert reader.read_field(corrupt, "CFBundleName") is None


@pytest.mark.parametrize(
    "content",
    [
        b'<?xml version="1.0"?><plist><dict><key>x</dict>',
        b'<?xml version="1.0"?><plist version="1.0"><dict><key>CFBundleName</key>',
    ],
    ids=["mismatched-tag", "truncated"],
)
def test_malformed_xml_plist_falls_back_to_basename(make_bundle: Callable[..., Path], content: bytes) -> None:
    bundle = make_bundle("Café.app")
    (bundle / "Contents" / "Info.plist").write_bytes(content)

    assert PlistBundleReader().read_field(bundle, "CFBundleName") is None
    assert normalize(str(bundle)) == "Cafe"


@pytest.mark.parametrize("lproj", ["en.lproj", "English.lproj"])
def test_plist_reader_reads_localized_name(make_bundle: Callable[..., Path], lproj: str) -> None:
    bundle = make_bundle(
        NON_ASCII_BUNDLE,
        localized='/* Localized */\nCFBundleDisplayName = "Localized Name";\nCFBundleName = "Other";\n',
        lproj=lproj,
    )

    assert PlistBundleReader().read_localized_name(bundle) == "Localized Name"


def test_plist_reader_localized_name_missing(make_bundle: Callable[..., Path]) -> None:
    assert PlistBundleReader().read_localized_name(make_bundle("Plain.app")) is None


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ('CFBundleName = "Foo";', "Foo"),
        ('\ufeffCFBundleDisplayName="Foo Bar";\r\n', "Foo Bar"),
        ('NSHumanReadableCopyright = "x";\nCFBundleName = "Second";', "Second"),
        ("CFBundleName = Foo;", None),
        ('NSHumanReadableCopyright = "x";', None),
        ('"CFBundleName" = "Quoted";', "Quoted"),
        ('CFBundleName = "Foo"; /* shown in Finder */', "Foo"),
        ('CFBundleName = Broken;\nCFBundleDisplayName = "Next";', "Next"),
    ],
    ids=[
        "plain",
        "bom-crlf",
        "later-line",
        "unquoted",
        "absent",
        "quoted-key",
        "trailing-comment",
        "skips-malformed",
    ],
)
def test_parse_localized_name(text: str, expected: str | None) -> None:
    assert parse_localized_name(text) == expected


def test_resolution_follows_priority_order(make_bundle: Callable[..., Path]) -> None:
    bundle = make_bundle(NON_ASCII_BUNDLE)
    reader = RecordingReader(
        fields={"CFBundleDisplayName": "Dïsplay", "CFBundleExecutable": "exec"},
        localized="Localized",
    )

    assert english_name_from_bundle(str(bundle), reader) == "Localized"
    assert reader.calls == ["CFBundleDisplayName", "CFBundleName", "localized"]


def test_resolution_falls_back_to_executable(make_bundle: Callable[..., Path]) -> None:
    bundle = make_bundle(NON_ASCII_BUNDLE)
    reader = RecordingReader(fields={"CFBundleExecutable": "UnicodeApp"})

    assert english_name_from_bundle(str(bundle), reader) == "UnicodeApp"


def test_resolution_keeps_name_without_ascii_candidate(make_bundle: Callable[..., Path]) -> None:
    bundle = make_bundle(NON_ASCII_BUNDLE)

    assert english_name_from_bundle(str(bundle), NullBundleReader()) == str(bundle)


def test_resolution_skips_ascii_and_missing_paths() -> None:
    reader = RecordingReader(fields={"CFBundleName": "Never"})

    assert english_name_from_bundle("Plain.app", reader) == "Plain.app"
    assert english_name_from_bundle("/nonexistent/Ünïcödé.app", reader) == "/nonexistent/Ünïcödé.app"
    assert reader.calls == []


def test_normalize_uses_bundle_display_name(make_bundle: Callable[..., Path]) -> None:
    bundle = make_bundle(NON_ASCII_BUNDLE, info={"CFBundleDisplayName": "Unicode Studio 2"})

    assert normalize(str(bundle)) == "Unicode Studio"


def test_normalize_falls_back_to_decomposed_basename(make_bundle: Callable[..., Path]) -> None:
    bundle = make_bundle(NON_ASCII_BUNDLE, info={"CFBundleName": "Ünïcödé"})

    assert normalize(str(bundle)) == "Unicode"
