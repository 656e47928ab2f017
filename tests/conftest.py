"""Shared pytest fixtures for casktoken tests."""

from __future__ import annotations

import plistlib
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def cask_repo(tmp_path: Path) -> Path:
    """Return a repository root with an empty ``Casks`` tree."""
    (tmp_path / "Casks").mkdir()
    return tmp_path


@pytest.fixture
def make_bundle(tmp_path: Path) -> Callable[..., Path]:
    """Factory creating a fake ``.app`` bundle with the given Info.plist fields."""

    def _make(
        name: str,
        info: dict[str, Any] | None = None,
        localized: str | None = None,
        lproj: str = "en.lproj",
    ) -> Path:
        bundle = tmp_path / name
        contents = bundle / "Contents"
        contents.mkdir(parents=True)
        if info is not None:
            with (contents / "Info.plist").open("wb") as handle:
                plistlib.dump(info, handle)
        if localized is not None:
            strings_dir = contents / "Resources" / lproj
            strings_dir.mkdir(parents=True)
            (strings_dir / "InfoPlist.strings").write_bytes(localized.encode("utf-16-le"))
        return bundle

    return _make
