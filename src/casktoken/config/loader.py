"""Config loading and normalization for casktoken."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

import yaml

from casktoken.config.model import CaskTokenConfig
from casktoken.constants.config import ALLOWED_CONFIG_KEYS, CONFIG_FILENAME, DEFAULT_CASKS_DIR
from casktoken.constants.naming import TOKEN_PATTERN
from casktoken.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> CaskTokenConfig:
    """Load and validate config from ``casktoken.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return CaskTokenConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = set(raw) - ALLOWED_CONFIG_KEYS
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {sorted(map(str, unknown))}")

    logger.debug("Loaded config from %s", path)

    casks_dir = raw.get("casks_dir", DEFAULT_CASKS_DIR)
    if not isinstance(casks_dir, str) or not casks_dir.strip():
        raise ConfigError("casks_dir must be a non-empty string")

    return CaskTokenConfig(
        exceptions=_build_exceptions(raw.get("exceptions", {})),
        preserve_trailing=_ensure_pattern_list(raw.get("preserve_trailing", []), "preserve_trailing"),
        remove_trailing=_ensure_pattern_list(raw.get("remove_trailing", []), "remove_trailing"),
        interior_suffixes=_ensure_pattern_list(raw.get("interior_suffixes", []), "interior_suffixes"),
        symbols=_build_symbols(raw.get("symbols", {})),
        casks_dir=casks_dir.strip(),
    )


def _ensure_string_mapping(value: Any, key_name: str) -> dict[str, str]:
    """Coerce a value to a str -> str mapping, raising ConfigError on type mismatch."""
    if value is None:
        return {}
    if not isinstance(value, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    ):
        raise ConfigError(f"{key_name} must be a mapping of strings to strings")
    return dict(value)


def _ensure_pattern_list(value: Any, key_name: str) -> tuple[str, ...]:
    """Coerce a value to a tuple of compilable regex sources."""
    if value is None:
        return ()
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    patterns = tuple(item for item in value if item.strip())
    for pattern in patterns:
        _check_pattern(pattern, key_name)
    return patterns


def _check_pattern(pattern: str, key_name: str) -> None:
    try:
        re.compile(pattern)
    except re.error as exc:
        raise ConfigError(f"{key_name}: invalid regular expression {pattern!r}: {exc}") from exc


def _build_exceptions(value: Any) -> tuple[tuple[str, str], ...]:
    """Validate ``exceptions``: regex pattern -> literal token, order preserved."""
    mapping = _ensure_string_mapping(value, "exceptions")
    entries: list[tuple[str, str]] = []
    for pattern, token in mapping.items():
        _check_pattern(pattern, "exceptions")
        if not TOKEN_PATTERN.fullmatch(token) or "--" in token:
            raise ConfigError(f"exceptions: {token!r} is not a valid token")
        entries.append((pattern, token))
    return tuple(entries)


def _build_symbols(value: Any) -> tuple[tuple[str, str], ...]:
    mapping = _ensure_string_mapping(value, "symbols")
    for symbol, word in mapping.items():
        if not symbol:
            raise ConfigError("symbols: symbol must be a non-empty string")
        if not word.strip():
            raise ConfigError(f"symbols: spell-out for {symbol!r} must be a non-empty string")
    return tuple(mapping.items())
