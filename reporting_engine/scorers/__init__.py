"""Deterministic calculation and scoring modules."""

from .calculations import (
    average,
    average_staff,
    core_percentage,
    funding_ratio,
    growth_rate,
    round_half_up,
    total_funding,
    turnover_rate,
)
from .completion import (
    is_answered,
    score_completion,
    score_data_quality,
    typed_responses,
)
from .formulas import compute_calculated_values, evaluate_formula

__all__ = [
    # Calculations
    "round_half_up",
    "average_staff",
    "turnover_rate",
    "total_funding",
    "funding_ratio",
    "core_percentage",
    "average",
    "growth_rate",
    # Formula dispatch
    "evaluate_formula",
    "compute_calculated_values",
    # Completion scoring
    "is_answered",
    "score_completion",
    "score_data_quality",
    "typed_responses",
]
