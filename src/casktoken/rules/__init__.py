"""Compiled rule tables shared by the normalizer and the token builder."""

from __future__ import annotations

from casktoken.rules.table import DEFAULT_RULE_TABLE, RuleTable, compile_rule_table

__all__ = ["DEFAULT_RULE_TABLE", "RuleTable", "compile_rule_table"]
