"""
Global constants for the indicator compilation engine.

Centralizes keyword tables, thresholds, and fixed labels used throughout
the engine for easier maintenance and tuning.
"""

# Field shaping
TEXT_SHORT_MAX_LENGTH = 100  # Fallback free-text answers are capped at this length
CHECKBOX_GLYPH = "☐"  # Marks an option inside a measurement-method description
OTHER_OPTION_VALUE = "other"
OTHER_OPTION_LABEL = "Other (specify)"
OTHER_PLEASE_SPECIFY = "other (please specify)"  # Compared lower-cased

# Tiers
DEFAULT_TIER = 2

# Column resolution - first header containing any keyword wins (case-insensitive)
INDICATOR_COLUMN_KEYWORDS = ("indicator", "outcome", "measure")
METHOD_COLUMN_KEYWORDS = ("method", "how", "measurement", "approach")
NOTES_COLUMN_KEYWORDS = ("note", "description", "comment")

# Data quality weighting (must sum to 1.0)
COMPLETENESS_WEIGHT = 0.6
STANDARDIZATION_WEIGHT = 0.4

# Scale bounds for satisfaction-style answers
SCALE_MIN = 1
SCALE_MAX = 5

# Organization fallbacks
GENERIC_ORGANIZATION_NAME = "Organization"
GENERIC_ORGANIZATION_CODE = "ORG"
UNKNOWN_ORGANIZATION_NAME = "Unknown Organization"
REPORT_FILENAME_FALLBACK = "report"
