"""Turn a simplified app name into a cask token and file name."""

from __future__ import annotations

from pathlib import Path

from casktoken.constants.naming import (
    CASK_EXTENSION_PATTERN,
    CASK_FILE_EXTENSION,
    COLLAPSE_DASH_PATTERN,
    DASH_BEFORE_DIGIT_PATTERN,
    DIGIT_PATTERN,
    LEADING_DASH_PATTERN,
    NON_TOKEN_CHAR_PATTERN,
    OPTIONAL_CASK_EXTENSION_PATTERN,
    SPACE_RUN_PATTERN,
    TRAILING_SPACES_PATTERN,
)
from casktoken.constants.reporting import WARNING_DUPLICATE_FILE, WARNING_TOKEN_HAS_DIGITS
from casktoken.exceptions import EmptyResultError
from casktoken.model import ProposalWarning, TokenResult
from casktoken.rules import DEFAULT_RULE_TABLE, RuleTable


def add_extension(name: str) -> str:
    return OPTIONAL_CASK_EXTENSION_PATTERN.sub(CASK_FILE_EXTENSION, name, count=1)


def remove_extension(name: str) -> str:
    return CASK_EXTENSION_PATTERN.sub("", name, count=1)


def spell_out_symbols(name: str, rules: RuleTable = DEFAULT_RULE_TABLE) -> str:
    """Replace each configured symbol with its space-padded word."""
    for symbol, word in rules.symbols:
        name = name.replace(symbol, f" {word} ")
    return TRAILING_SPACES_PATTERN.sub("", name)


def sanitize_token(name: str, rules: RuleTable = DEFAULT_RULE_TABLE) -> str:
    """Reduce a simplified app name to ``[a-z0-9-]``.

    May return an empty string; ``build`` treats that as an error.
    """
    token = spell_out_symbols(name.lower(), rules)
    token = SPACE_RUN_PATTERN.sub("-", token)
    token = NON_TOKEN_CHAR_PATTERN.sub("", token)
    token = COLLAPSE_DASH_PATTERN.sub("-", token)
    token = LEADING_DASH_PATTERN.sub("", token)
    return DASH_BEFORE_DIGIT_PATTERN.sub("", token)


def build(simplified: str, rules: RuleTable = DEFAULT_RULE_TABLE) -> TokenResult:
    """Build the token and file name for a simplified app name.

    A name equal to an exception-table token is used verbatim.

    Raises:
        EmptyResultError: sanitizing left nothing behind.
    """
    name = remove_extension(simplified)
    from_exception = rules.is_exception_token(name)
    token = name if from_exception else sanitize_token(name, rules)
    if not token:
        raise EmptyResultError(f"Could not determine a cask token from {simplified!r}")

    file_name = add_extension(token)
    return TokenResult(token=remove_extension(file_name), file_name=file_name, from_exception=from_exception)


def token_warnings(result: TokenResult, existing_path: Path | None = None) -> tuple[ProposalWarning, ...]:
    """Advisory warnings for a built token."""
    warnings: list[ProposalWarning] = []
    if DIGIT_PATTERN.search(result.token) and not result.from_exception:
        warnings.append(
            ProposalWarning(
                code=WARNING_TOKEN_HAS_DIGITS,
                message=f"'{result.token}' contains digits. Digits which are version numbers should be removed.",
            )
        )
    if existing_path is not None:
        warnings.append(
            ProposalWarning(
                code=WARNING_DUPLICATE_FILE,
                message=(
                    f"the file '{existing_path}' already exists. "
                    "Prepend the vendor name if this is not a duplicate."
                ),
            )
        )
    return tuple(warnings)
