"""
Formula dispatch for CALCULATED fields.

Calculated fields carry a tagged Formula record instead of a closure. This
module maps each variant to its pure calculation and evaluates a whole
indicator's calculated fields against the response store.
"""

import logging
from typing import Any, Mapping

from ..schemas.fields import Indicator
from ..schemas.formulas import (
    AverageStaffFormula,
    CorePercentageFormula,
    Formula,
    FundingRatioFormula,
    TotalFundingFormula,
    TurnoverRateFormula,
)
from . import calculations

logger = logging.getLogger(__name__)


def evaluate_formula(formula: Formula, values: Mapping[str, Any]) -> calculations.Number:
    """
    Evaluate one formula against sibling values keyed by field key.

    Args:
        formula: Tagged formula variant from a CALCULATED field
        values: Sibling values keyed by field key (e.g. {"staffLeft": 3})

    Returns:
        The calculated number (0 for missing operands or zero denominators)
    """
    if isinstance(formula, AverageStaffFormula):
        return calculations.average_staff(values.get(formula.start), values.get(formula.end))
    if isinstance(formula, TurnoverRateFormula):
        return calculations.turnover_rate(values.get(formula.staff_left), values.get(formula.average_staff))
    if isinstance(formula, TotalFundingFormula):
        return calculations.total_funding(values.get(formula.core), values.get(formula.project))
    if isinstance(formula, CorePercentageFormula):
        return calculations.core_percentage(values.get(formula.core), values.get(formula.total))
    if isinstance(formula, FundingRatioFormula):
        return calculations.funding_ratio(values.get(formula.project), values.get(formula.core))
    raise TypeError(f"Unsupported formula: {formula!r}")


def compute_calculated_values(indicator: Indicator, responses: Mapping[str, Any]) -> dict[str, calculations.Number]:
    """
    Evaluate every CALCULATED field of an indicator, in declaration order.

    Later formulas can read earlier derived values (turnover rate reads the
    average staff count, core percentage reads total funding).

    Returns:
        {field_id: value} for each calculated field
    """
    values: dict[str, Any] = {}
    for field in indicator.input_fields():
        values[indicator.field_key(field)] = responses.get(field.id)

    results: dict[str, calculations.Number] = {}
    for field in indicator.fields:
        if not field.is_calculated or field.formula is None:
            continue
        result = evaluate_formula(field.formula, values)
        values[indicator.field_key(field)] = result
        results[field.id] = result

    if results:
        logger.debug(f"Calculated {len(results)} values for {indicator.id}: {results}")
    return results
