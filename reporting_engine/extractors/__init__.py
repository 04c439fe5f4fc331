"""Classifiers and text extractors for workplan indicator rows."""

from .field_classifier import (
    RULE_NAMES,
    RULES,
    CalculationSpec,
    ClassificationRule,
    FieldConfig,
    FieldSpec,
    classify_field,
    match_rule,
)
from .method_text import (
    extract_checkbox_options,
    extract_checkbox_question,
    extract_yes_no_question,
    slugify_option,
)
from .organization_detector import (
    GENERIC_ORGANIZATION,
    clear_cache,
    detect_organization,
    load_organizations,
)
from .tier_classifier import TIER_RULES, classify_tier

__all__ = [
    # Field configuration
    "RULES",
    "RULE_NAMES",
    "ClassificationRule",
    "FieldConfig",
    "FieldSpec",
    "CalculationSpec",
    "classify_field",
    "match_rule",
    # Method text extraction
    "extract_checkbox_options",
    "extract_checkbox_question",
    "extract_yes_no_question",
    "slugify_option",
    # Tiers
    "TIER_RULES",
    "classify_tier",
    # Organizations
    "GENERIC_ORGANIZATION",
    "detect_organization",
    "load_organizations",
    "clear_cache",
]
