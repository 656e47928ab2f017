"""Immutable values passed between pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from casktoken.constants.reporting import HEADER_LINE_TEMPLATE, SCHEMA_VERSION


@dataclass(frozen=True)
class NormalizationTrace:
    """Every intermediate value produced while simplifying one raw name."""

    raw_name: str
    steps: tuple[tuple[str, str], ...] = ()
    from_exception: bool = False

    @property
    def simplified(self) -> str:
        """The final simplified app name."""
        return self.steps[-1][1] if self.steps else self.raw_name

    def value_after(self, step: str) -> str | None:
        for name, value in self.steps:
            if name == step:
                return value
        return None

    def with_step(self, step: str, value: str, *, from_exception: bool = False) -> NormalizationTrace:
        return NormalizationTrace(
            raw_name=self.raw_name,
            steps=(*self.steps, (step, value)),
            from_exception=self.from_exception or from_exception,
        )


@dataclass(frozen=True)
class TokenResult:
    """A cask token and its file name."""

    token: str
    file_name: str
    from_exception: bool = False


@dataclass(frozen=True)
class ProposalWarning:
    """An advisory problem with a proposed token."""

    code: str
    message: str

    def format(self) -> str:
        return f"WARNING: {self.message}"


@dataclass(frozen=True)
class TokenProposal:
    """Everything proposed for one application name."""

    raw_name: str
    simplified_name: str
    token: str
    file_name: str
    from_exception: bool = False
    existing_path: Path | None = None
    warnings: tuple[ProposalWarning, ...] = field(default_factory=tuple)

    @property
    def header_line(self) -> str:
        return HEADER_LINE_TEMPLATE.format(token=self.token)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema_version": SCHEMA_VERSION,
            "raw_name": self.raw_name,
            "simplified_name": self.simplified_name,
            "token": self.token,
            "file_name": self.file_name,
            "header_line": self.header_line,
            "from_exception": self.from_exception,
            "existing_path": str(self.existing_path) if self.existing_path else None,
            "warnings": [{"code": w.code, "message": w.message} for w in self.warnings],
        }
