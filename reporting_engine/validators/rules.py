"""
Data validation rules for user-entered responses.

Every rule is a pure predicate: it returns a human-readable error message, or
None when the value passes. Rules never raise for bad user input; enforcement
and display belong to the presentation layer.

Usage:
    from reporting_engine.validators.rules import run_validation, validate_field

    run_validation(ValidationRuleName.PERCENTAGE, 140)  # "Percentage cannot exceed 100%"
    validate_field(field, "")                           # ["This field is required"]

Design:
    - Numeric rules skip empty values; "required" is the only rule that
      reports a missing answer
    - Numeric strings from form inputs are coerced before checking
"""

import math
from typing import Any, Callable, Optional

from ..constants import SCALE_MAX, SCALE_MIN
from ..schemas.fields import IndicatorField, ValidationRuleName

NOT_A_NUMBER_MESSAGE = "Value must be a number"


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def _to_number(value: Any) -> Optional[float]:
    """Coerce a response to a float, or None if it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return None if math.isnan(value) else float(value)
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
        return None if math.isnan(number) else number
    return None


def required(value: Any) -> Optional[str]:
    if _is_empty(value):
        return "This field is required"
    return None


def percentage(value: Any) -> Optional[str]:
    """Percentage must be 0-100."""
    if _is_empty(value):
        return None
    number = _to_number(value)
    if number is None:
        return NOT_A_NUMBER_MESSAGE
    if number < 0:
        return "Percentage cannot be negative"
    if number > 100:
        return "Percentage cannot exceed 100%"
    return None


def currency(value: Any) -> Optional[str]:
    """Currency must be non-negative."""
    if _is_empty(value):
        return None
    number = _to_number(value)
    if number is None:
        return NOT_A_NUMBER_MESSAGE
    if number < 0:
        return "Amount cannot be negative"
    return None


def staff_count(value: Any) -> Optional[str]:
    """Counts must be non-negative whole numbers."""
    if _is_empty(value):
        return None
    number = _to_number(value)
    if number is None:
        return NOT_A_NUMBER_MESSAGE
    if number < 0:
        return "Staff count cannot be negative"
    if not number.is_integer():
        return "Staff count must be a whole number"
    return None


def scale(value: Any, min_value: int = SCALE_MIN, max_value: int = SCALE_MAX) -> Optional[str]:
    if _is_empty(value):
        return None
    number = _to_number(value)
    if number is None:
        return NOT_A_NUMBER_MESSAGE
    if number < min_value or number > max_value:
        return f"Value must be between {min_value} and {max_value}"
    return None


VALIDATION_RULES: dict[ValidationRuleName, Callable[[Any], Optional[str]]] = {
    ValidationRuleName.REQUIRED: required,
    ValidationRuleName.PERCENTAGE: percentage,
    ValidationRuleName.CURRENCY: currency,
    ValidationRuleName.STAFF_COUNT: staff_count,
    ValidationRuleName.SCALE: scale,
}


def run_validation(rule: ValidationRuleName | str, value: Any) -> Optional[str]:
    """Dispatch a named rule against a single value."""
    return VALIDATION_RULES[ValidationRuleName(rule)](value)


def validate_field(field: IndicatorField, value: Any) -> list[str]:
    """
    Apply a field's rules in declaration order.

    Args:
        field: Compiled field carrying its rule references
        value: Raw response from the response store (may be None)

    Returns:
        Error messages, empty when the value passes every rule
    """
    errors = []
    for rule in field.validation:
        message = run_validation(rule, value)
        if message:
            errors.append(message)
    return errors
