"""Workplan reporting engine.

Compiles workplan indicator spreadsheets into standardized, typed input
fields with validation rules, calculated sub-fields and tiers, then scores
completion and data quality across a reporting session.
"""

from .extractors.field_classifier import classify_field
from .extractors.organization_detector import detect_organization
from .extractors.tier_classifier import classify_tier
from .parsers.indicator_compiler import MissingColumnError, compile_indicators
from .schemas.fields import FieldType, Indicator, IndicatorField, Option, Organization
from .scorers.completion import score_completion, score_data_quality
from .utils.report_generator import build_report

__version__ = "2.0.0"

__all__ = [
    "classify_field",
    "classify_tier",
    "detect_organization",
    "compile_indicators",
    "MissingColumnError",
    "score_completion",
    "score_data_quality",
    "build_report",
    "FieldType",
    "Indicator",
    "IndicatorField",
    "Option",
    "Organization",
]
