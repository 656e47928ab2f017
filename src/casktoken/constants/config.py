"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "casktoken.yaml"
DEFAULT_CASKS_DIR: str = "Casks"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "exceptions",
        "preserve_trailing",
        "remove_trailing",
        "interior_suffixes",
        "symbols",
        "casks_dir",
    }
)
