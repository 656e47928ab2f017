"""Compose normalization, token building and the duplicate check."""

from __future__ import annotations

import logging
from pathlib import Path

from casktoken.bundle.reader import BundleMetadataReader
from casktoken.config.model import CaskTokenConfig
from casktoken.model import TokenProposal
from casktoken.naming.builder import build, token_warnings
from casktoken.naming.normalizer import trace_normalization
from casktoken.repo.duplicates import find_existing_cask
from casktoken.rules import DEFAULT_RULE_TABLE, RuleTable, compile_rule_table

logger = logging.getLogger(__name__)


def rules_for_config(config: CaskTokenConfig) -> RuleTable:
    """Reuse the default table unless the config adds rules."""
    if config.has_rule_overrides:
        return compile_rule_table(config)
    return DEFAULT_RULE_TABLE


def propose_token(
    raw: str | bytes,
    *,
    root: Path | None = None,
    config: CaskTokenConfig | None = None,
    rules: RuleTable | None = None,
    reader: BundleMetadataReader | None = None,
) -> TokenProposal:
    """Propose a simplified name, token, file name and warnings for ``raw``.

    The duplicate check runs only when ``root`` is given.

    Raises:
        EmptyResultError: no token could be derived.
    """
    config = config or CaskTokenConfig()
    rules = rules or rules_for_config(config)

    trace = trace_normalization(raw, rules, reader)
    result = build(trace.simplified, rules)
    existing = find_existing_cask(root, result.file_name, config.casks_dir) if root is not None else None

    proposal = TokenProposal(
        raw_name=trace.raw_name,
        simplified_name=trace.simplified,
        token=result.token,
        file_name=result.file_name,
        from_exception=result.from_exception,
        existing_path=existing,
        warnings=token_warnings(result, existing),
    )
    logger.debug("Proposed %r for %r", proposal.token, proposal.raw_name)
    return proposal
