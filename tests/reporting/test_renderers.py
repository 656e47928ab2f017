"""Tests for text and JSON rendering of proposals."""

from __future__ import annotations

import json
from pathlib import Path

from casktoken.constants.reporting import ANSI_YELLOW, WARNING_TOKEN_HAS_DIGITS
from casktoken.model import ProposalWarning, TokenProposal
from casktoken.reporting import render_json, render_text, render_warnings


def _proposal(**overrides: object) -> TokenProposal:
    values: dict[str, object] = {
        "raw_name": "Kext Updater.app",
        "simplified_name": "Kext Updater",
        "token": "kext-updater",
        "file_name": "kext-updater.rb",
    }
    values.update(overrides)
    return TokenProposal(**values)  # type: ignore[arg-type]


def test_render_text_aligns_labels() -> None:
    assert render_text(_proposal()).splitlines() == [
        "Proposed token:               kext-updater",
        "Proposed file name:           kext-updater.rb",
        'Cask Header Line:             cask "kext-updater" do',
    ]


def test_render_text_debug_adds_simplified_name() -> None:
    lines = render_text(_proposal(), debug=True).splitlines()

    assert lines[0] == "Proposed Simplified App name: Kext Updater"
    assert len(lines) == 4


def test_render_warnings() -> None:
    warning = ProposalWarning(code=WARNING_TOKEN_HAS_DIGITS, message="'a1' contains digits.")
    proposal = _proposal(warnings=(warning,))

    assert render_warnings(proposal) == "WARNING: 'a1' contains digits."
    assert render_warnings(proposal, color=True).startswith(ANSI_YELLOW)
    assert render_warnings(_proposal()) == ""


def test_render_json_round_trips_fields(tmp_path: Path) -> None:
    existing = tmp_path / "Casks" / "k" / "kext-updater.rb"

    payload = json.loads(render_json(_proposal(existing_path=existing)))

    assert payload["token"] == "kext-updater"
    assert payload["header_line"] == 'cask "kext-updater" do'
    assert payload["existing_path"] == str(existing)
    assert payload["from_exception"] is False
