"""Compiler: turn raw rule sources into an immutable ``RuleTable``.

The built-in tables from ``casktoken.constants.rules`` always come first;
a ``CaskTokenConfig`` can only append to them.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from re import Pattern

from casktoken.config.model import CaskTokenConfig
from casktoken.constants.rules import (
    AFTER_INTERIOR_VERSION_PATTERNS,
    APP_EXCEPTION_PATTERNS,
    EXPANDED_SYMBOLS,
    PRESERVE_TRAILING_PATTERNS,
    REMOVE_TRAILING_PATTERNS,
)
from casktoken.exceptions import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleTable:
    """Compiled, read-only rule tables."""

    exceptions: tuple[tuple[Pattern[str], str], ...]
    exception_tokens: frozenset[str]
    preserve_trailing: Pattern[str]
    remove_trailing: tuple[Pattern[str], ...]
    interior_short: Pattern[str]
    interior_long: Pattern[str]
    symbols: tuple[tuple[str, str], ...]

    def match_exception(self, name: str) -> str | None:
        """Return the token of the first exception matching the whole name."""
        for pattern, token in self.exceptions:
            if pattern.fullmatch(name):
                return token
        return None

    def is_exception_token(self, value: str) -> bool:
        return value in self.exception_tokens

    def has_preserved_suffix(self, name: str) -> bool:
        return self.preserve_trailing.search(name) is not None

    def trailing_noise_start(self, name: str) -> int | None:
        """Return where the longest strippable noise suffix of ``name`` begins.

        Each matcher is end-anchored, so ``search`` yields its leftmost
        start; the earliest start over all matchers is the cut point.
        Empty matches are ignored so every cut shortens the name.
        """
        start: int | None = None
        for pattern in self.remove_trailing:
            match = pattern.search(name)
            if match is None or match.start() == match.end():
                continue
            if start is None or match.start() < start:
                start = match.start()
        return start


def compile_rule_table(config: CaskTokenConfig | None = None) -> RuleTable:
    """Compile built-in rules plus any additions from ``config``.

    Raises ConfigError if a user-supplied pattern cannot be compiled in
    its anchored form.
    """
    config = config or CaskTokenConfig()

    exception_sources = (*APP_EXCEPTION_PATTERNS, *config.exceptions)
    exceptions = tuple(
        (_compile(pattern, "exceptions"), token) for pattern, token in exception_sources
    )
    preserve = _compile(
        rf"(?:{_alternation((*PRESERVE_TRAILING_PATTERNS, *config.preserve_trailing))})\Z",
        "preserve_trailing",
    )
    remove = tuple(
        _compile(rf"(?<=.)(?:{pattern})\Z", "remove_trailing")
        for pattern in (*REMOVE_TRAILING_PATTERNS, *config.remove_trailing)
    )
    after_interior = _alternation((*AFTER_INTERIOR_VERSION_PATTERNS, *config.interior_suffixes))
    interior_short = _compile(rf"(?<=.)[.\d]+({after_interior})\Z", "interior_suffixes")
    interior_long = _compile(rf"(?<=.)[\s.\d-]*\d[\s.\d-]*({after_interior})\Z", "interior_suffixes")

    table = RuleTable(
        exceptions=exceptions,
        exception_tokens=frozenset(token for _, token in exception_sources),
        preserve_trailing=preserve,
        remove_trailing=remove,
        interior_short=interior_short,
        interior_long=interior_long,
        symbols=(*EXPANDED_SYMBOLS, *config.symbols),
    )
    logger.debug(
        "Compiled rule table: %d exceptions, %d trailing-removal matchers",
        len(table.exceptions),
        len(table.remove_trailing),
    )
    return table


def _alternation(patterns: Iterable[str]) -> str:
    return "|".join(f"(?:{pattern})" for pattern in patterns)


def _compile(source: str, key_name: str) -> Pattern[str]:
    try:
        return re.compile(source, re.IGNORECASE)
    except re.error as exc:
        raise ConfigError(f"{key_name}: cannot compile {source!r}: {exc}") from exc


DEFAULT_RULE_TABLE: RuleTable = compile_rule_table()
