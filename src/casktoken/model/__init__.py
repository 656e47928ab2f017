"""Core data models for casktoken."""

from .entities import NormalizationTrace, ProposalWarning, TokenProposal, TokenResult

__all__ = ["NormalizationTrace", "ProposalWarning", "TokenProposal", "TokenResult"]
