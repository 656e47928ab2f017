"""Name normalization and token building."""

from __future__ import annotations

from casktoken.naming.builder import build, token_warnings
from casktoken.naming.normalizer import normalize, trace_normalization

__all__ = ["build", "normalize", "token_warnings", "trace_normalization"]
