"""
Validators for user responses.

Pure rules that return an error message or None, plus field-level dispatch.
"""

from .rules import (
    VALIDATION_RULES,
    currency,
    percentage,
    required,
    run_validation,
    scale,
    staff_count,
    validate_field,
)

__all__ = [
    "VALIDATION_RULES",
    "required",
    "percentage",
    "currency",
    "staff_count",
    "scale",
    "run_validation",
    "validate_field",
]
