"""Config data model for casktoken."""

from __future__ import annotations

from dataclasses import dataclass

from casktoken.constants.config import DEFAULT_CASKS_DIR


@dataclass(frozen=True)
class CaskTokenConfig:
    """Resolved user configuration.

    Every rule field extends the built-in table of the same kind; built-in
    entries always come first.
    """

    exceptions: tuple[tuple[str, str], ...] = ()
    preserve_trailing: tuple[str, ...] = ()
    remove_trailing: tuple[str, ...] = ()
    interior_suffixes: tuple[str, ...] = ()
    symbols: tuple[tuple[str, str], ...] = ()
    casks_dir: str = DEFAULT_CASKS_DIR

    @property
    def has_rule_overrides(self) -> bool:
        """Whether any rule table differs from the built-in defaults."""
        return bool(
            self.exceptions
            or self.preserve_trailing
            or self.remove_trailing
            or self.interior_suffixes
            or self.symbols
        )
