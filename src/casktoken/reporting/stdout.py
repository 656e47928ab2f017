"""Plain-text rendering of a token proposal."""

from __future__ import annotations

from casktoken.constants.reporting import (
    ANSI_RESET,
    ANSI_YELLOW,
    LABEL_FILE_NAME,
    LABEL_HEADER,
    LABEL_SIMPLIFIED,
    LABEL_TOKEN,
    LABEL_WIDTH,
)
from casktoken.model import TokenProposal


def _line(label: str, value: str) -> str:
    return f"{label:<{LABEL_WIDTH}}{value}"


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def render_text(proposal: TokenProposal, *, debug: bool = False) -> str:
    """Render the proposal lines; the simplified name only in debug mode."""
    lines: list[str] = []
    if debug:
        lines.append(_line(LABEL_SIMPLIFIED, proposal.simplified_name))
    lines.append(_line(LABEL_TOKEN, proposal.token))
    lines.append(_line(LABEL_FILE_NAME, proposal.file_name))
    lines.append(_line(LABEL_HEADER, proposal.header_line))
    return "\n".join(lines)


def render_warnings(proposal: TokenProposal, *, color: bool = False) -> str:
    """Render one line per warning, or an empty string when there are none."""
    lines = [warning.format() for warning in proposal.warnings]
    if color:
        lines = [_colorize(line, ANSI_YELLOW) for line in lines]
    return "\n".join(lines)
