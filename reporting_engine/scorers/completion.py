"""
Completion and data-quality scoring over compiled indicators and responses.

Scores:
- Completion (0-100): share of user-fillable fields with an answer.
  CALCULATED fields never count toward the total.
- Data quality:
    completeness (0-100): answered / all typed responses
    standardization (0-100): structured answers / answered
    overall (0-100): (answered x 0.6 + structured x 0.4) / all

An answer is "present" unless it is None or an empty string; 0, False and
"0" all count as answered. Every percentage is 0 when its denominator is 0.
"""

import logging
from typing import Any, Mapping, Sequence, Union

from ..constants import COMPLETENESS_WEIGHT, STANDARDIZATION_WEIGHT
from ..schemas.fields import (
    STRUCTURED_FIELD_TYPES,
    CompletionScore,
    DataQualityScore,
    FieldType,
    Indicator,
    TypedResponse,
)
from .calculations import round_half_up
from .formulas import compute_calculated_values

logger = logging.getLogger(__name__)


def is_answered(value: Any) -> bool:
    return value is not None and value != ""


def score_completion(indicators: Sequence[Indicator], responses: Mapping[str, Any]) -> CompletionScore:
    """
    Compute progress across all non-calculated fields.

    Args:
        indicators: Compiled indicators
        responses: Response store keyed by field id (read-only)

    Returns:
        CompletionScore with percentage, completed and total counts
    """
    total = 0
    completed = 0
    for indicator in indicators:
        for field in indicator.input_fields():
            total += 1
            if is_answered(responses.get(field.id)):
                completed += 1

    percentage = round_half_up(completed / total * 100) if total > 0 else 0
    return CompletionScore(percentage=percentage, completed=completed, total=total)


def _unpack(response: Union[TypedResponse, Mapping[str, Any]]) -> tuple[Any, FieldType | None]:
    """Read (value, type) from a TypedResponse or a plain {"value", "type"} dict."""
    if isinstance(response, TypedResponse):
        return response.value, response.type
    value = response.get("value")
    raw_type = response.get("type")
    try:
        field_type = FieldType(raw_type) if raw_type is not None else None
    except ValueError:
        field_type = None
    return value, field_type


def score_data_quality(responses: Mapping[str, Union[TypedResponse, Mapping[str, Any]]]) -> DataQualityScore:
    """
    Score the completeness and standardization level of typed responses.

    Unknown or missing types count as answered but not standardized.
    """
    total = 0
    completed = 0
    standardized = 0
    for response in responses.values():
        total += 1
        value, field_type = _unpack(response)
        if not is_answered(value):
            continue
        completed += 1
        if field_type in STRUCTURED_FIELD_TYPES:
            standardized += 1

    completeness = round_half_up(completed / total * 100) if total > 0 else 0
    standardization = round_half_up(standardized / completed * 100) if completed > 0 else 0
    overall = (
        round_half_up((completed * COMPLETENESS_WEIGHT + standardized * STANDARDIZATION_WEIGHT) / total * 100)
        if total > 0
        else 0
    )
    return DataQualityScore(completeness=completeness, standardization=standardization, overall_score=overall)


def typed_responses(indicators: Sequence[Indicator], responses: Mapping[str, Any]) -> dict[str, TypedResponse]:
    """
    Build the typed record set score_data_quality expects from compiled state.

    Input fields carry their raw response; calculated fields carry their
    computed value once every input of the indicator is answered, else None.
    """
    typed: dict[str, TypedResponse] = {}
    for indicator in indicators:
        inputs_complete = all(is_answered(responses.get(f.id)) for f in indicator.input_fields())
        calculated = compute_calculated_values(indicator, responses) if inputs_complete else {}
        for field in indicator.fields:
            if field.is_calculated:
                value = calculated.get(field.id)
            else:
                value = responses.get(field.id)
            typed[field.id] = TypedResponse(value=value, type=field.type)
    logger.debug(f"Built {len(typed)} typed responses from {len(indicators)} indicators")
    return typed
