"""Schema classes for compiled indicators, fields, formulas and scores."""

from .fields import (
    STRUCTURED_FIELD_TYPES,
    CompletionScore,
    DataQualityScore,
    FieldType,
    Indicator,
    IndicatorField,
    Option,
    Organization,
    TypedResponse,
    ValidationRuleName,
    is_field_active,
)
from .formulas import (
    AverageStaffFormula,
    CorePercentageFormula,
    Formula,
    FundingRatioFormula,
    TotalFundingFormula,
    TurnoverRateFormula,
)

__all__ = [
    # Fields and indicators
    "FieldType",
    "ValidationRuleName",
    "STRUCTURED_FIELD_TYPES",
    "Option",
    "IndicatorField",
    "Indicator",
    "is_field_active",
    # Scores
    "CompletionScore",
    "DataQualityScore",
    "TypedResponse",
    "Organization",
    # Formulas
    "Formula",
    "AverageStaffFormula",
    "TurnoverRateFormula",
    "TotalFundingFormula",
    "CorePercentageFormula",
    "FundingRatioFormula",
]
