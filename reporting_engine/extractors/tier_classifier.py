"""
Tier classifier - keyword heuristics for indicator importance/maturity.

Tiers:
- 1 (foundational): basic operational metrics (turnover, core funding, board meetings)
- 2 (developmental): growth and improvement (collaboration, satisfaction, training)
- 3 (advanced): strategic and outcome metrics (impact, policy, governance)

Rules run over the combined lower-cased indicator + method text; first match
wins and the default is tier 2.
"""

from ..constants import DEFAULT_TIER

# (tier, keyword groups): every group must contribute at least one keyword
TIER_RULES: tuple[tuple[int, tuple[tuple[str, ...], ...]], ...] = (
    (1, (("staff",), ("turnover",))),
    (1, (("funding",), ("core", "ratio"))),
    (1, (("board",), ("meeting",))),
    (2, (("collaboration", "coalition"),)),
    (2, (("satisfaction", "feedback"),)),
    (2, (("training", "professional development"),)),
    (3, (("outcome", "impact"),)),
    (3, (("policy", "advocacy"),)),
    (3, (("leadership", "governance"),)),
)


def classify_tier(indicator_text: str | None, method_text: str | None) -> int:
    """Return the tier (1-3) for an indicator."""
    text = f"{indicator_text or ''} {method_text or ''}".lower()
    for tier, groups in TIER_RULES:
        if all(any(keyword in text for keyword in group) for group in groups):
            return tier
    return DEFAULT_TIER
