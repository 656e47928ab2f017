"""JSON rendering of a token proposal."""

from __future__ import annotations

import json

from casktoken.model import TokenProposal


def render_json(proposal: TokenProposal) -> str:
    return json.dumps(proposal.to_dict(), indent=2, sort_keys=True)
