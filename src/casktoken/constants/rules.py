"""Built-in rule tables for app name normalization.

Patterns are raw regex source strings. They are compiled case-insensitively
by ``casktoken.rules.compile_rule_table``; anchoring is added there. A
``(?-i:...)`` group keeps a pattern case-sensitive.
"""

from __future__ import annotations

# Names the generic pipeline cannot simplify correctly. Matched against the
# whole name, first match wins. Values must be valid tokens.
APP_EXCEPTION_PATTERNS: tuple[tuple[str, str], ...] = (
    # looks like a trailing version, but is not
    (r"iterm", "iterm2"),
    (r"iterm2", "iterm2"),
    (r"pgadmin3", "pgadmin3"),
    (r"x48", "x48"),
    (r"vitamin-r[\s\d.]*", "vitamin-r"),
    (r"imagealpha", "imagealpha"),
    # upstream renamed the product
    (r"bitcoin-?qt", "bitcoin-core"),
    # "mac" is part of an English word here
    (r"imac", "imac"),
    (r"powermac", "powermac"),
)

# Trailing strings that resemble noise but belong to the name.
PRESERVE_TRAILING_PATTERNS: tuple[str, ...] = (
    r"id3",
    r"mp3",
    r"3[\s-]*d",
    r"diff3",
    r"\A[^\d]+\+\Z",
)

# Trailing noise, stripped repeatedly from the end of the name.
REMOVE_TRAILING_PATTERNS: tuple[str, ...] = (
    # spaces
    r"\s+",
    # generic terms, lowercase only
    r"(?-i:\bapp)",
    r"(?-i:\b(?:quick[\s-]*)?launcher)",
    # "mac", "for mac", "for OS X", "macOS", "for macOS"
    r"\b(?:for)?[\s-]*mac(?:intosh|OS)?",
    r"\b(?:for)?[\s-]*os[\s-]*x",
    # hardware designations such as "for x86", "32-bit", "ppc"
    r"(?:\bfor\s*)?x.?86",
    r"(?:\bfor\s*)?\bppc",
    r"(?:\bfor\s*)?\d+.?bits?",
    # frameworks
    r"\b(?:for)?[\s-]*(?:oracle|apple|sun)*[\s-]*(?:jvm|java|jre)",
    r"\bgtk",
    r"\bqt",
    r"\bwx",
    r"\bcocoa",
    # localizations
    r"en\s*-\s*us",
    # version numbers
    r"[^a-z0-9]+",
    r"\b(?:version|alpha|beta|gamma|release|release.?candidate)(?:[\s.\d-]*\d[\s.\d-]*)?",
    r"\b(?:v|ver|vsn|r|rc)[\s.\d-]*\d[\s.\d-]*",
    r"\d+(?:[a-z.]\d+)*",
    r"\b\d+\s*[a-z]",
    # constrained to a-c because of false positives
    r"\d+\s*[a-c]",
)

# Words allowed to follow an interior version number; the number goes, the word stays.
AFTER_INTERIOR_VERSION_PATTERNS: tuple[str, ...] = (
    r"ce",
    r"pro",
    r"professional",
    r"client",
    r"server",
    r"host",
    r"viewer",
    r"launcher",
    r"installer",
)

EXPANDED_SYMBOLS: tuple[tuple[str, str], ...] = (
    ("+", "plus"),
    ("@", "at"),
)
