"""Pydantic schema classes for compiled indicators and their fields.

An Indicator is built once per CSV row and treated as read-only configuration
for the rest of the session. Field ids are always "<indicatorId>_<suffix>", so
they are unique across a whole compilation run.

Serialization keeps the camelCase keys consumed by the form renderer
(maxLength, dependsOn, dependsOnValue); use model_dump(by_alias=True).
"""

from enum import Enum
from typing import Any, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .formulas import Formula

# =============================================================================
# Enums
# =============================================================================


class FieldType(str, Enum):
    """Standardized input types a field can render as."""

    # Quantitative
    NUMBER = "number"  # Staff count, client count, etc.
    CURRENCY = "currency"  # Funding amounts
    PERCENTAGE = "percentage"
    SCALE = "scale"  # 1-5 ratings

    # Standardized options
    RADIO = "radio"  # Single choice
    CHECKBOX = "checkbox"  # Multiple choice
    DROPDOWN = "dropdown"  # Single choice from a long list

    # Derived
    CALCULATED = "calculated"  # Auto-calculated from sibling inputs
    RATIO = "ratio"

    # Minimal text
    TEXT_SHORT = "text_short"  # Brief, structured text (max 100 chars)

    # Date/time
    DATE = "date"
    PERIOD = "period"  # Reporting period selector


class ValidationRuleName(str, Enum):
    """Named references to the pure rules in validators/rules.py."""

    REQUIRED = "required"
    PERCENTAGE = "percentage"
    CURRENCY = "currency"
    STAFF_COUNT = "staff_count"
    SCALE = "scale"


# Types that count as standardized (structured) answers for data quality
STRUCTURED_FIELD_TYPES = frozenset(
    {
        FieldType.NUMBER,
        FieldType.CURRENCY,
        FieldType.RADIO,
        FieldType.CHECKBOX,
        FieldType.SCALE,
        FieldType.CALCULATED,
    }
)

FieldFormat = Literal["percentage", "currency", "ratio"]


# =============================================================================
# Options
# =============================================================================


class Option(BaseModel):
    """One choice in a RADIO/CHECKBOX/SCALE/DROPDOWN field."""

    model_config = ConfigDict(frozen=True)

    value: Union[int, str]
    label: str


# =============================================================================
# Fields and indicators
# =============================================================================


class IndicatorField(BaseModel):
    """One standardized input (or calculated output) owned by an Indicator."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    type: FieldType
    label: str
    description: Optional[str] = None
    options: Optional[list[Option]] = None
    required: bool = False
    placeholder: Optional[str] = None
    validation: list[ValidationRuleName] = Field(default_factory=list)
    max_length: Optional[int] = Field(default=None, alias="maxLength")
    warning: Optional[str] = None

    # CALCULATED fields only
    formula: Optional[Formula] = None
    format: Optional[FieldFormat] = None
    unit: Optional[str] = None

    # Field is only semantically active when depends_on's response equals depends_on_value
    depends_on: Optional[str] = Field(default=None, alias="dependsOn")
    depends_on_value: Optional[Union[int, str]] = Field(default=None, alias="dependsOnValue")

    @field_validator("options")
    @classmethod
    def _options_non_empty_and_unique(cls, options: Optional[list[Option]]) -> Optional[list[Option]]:
        if options is None:
            return None
        if not options:
            raise ValueError("options must be non-empty when present")
        values = [o.value for o in options]
        if len(set(values)) != len(values):
            raise ValueError(f"option values must be unique within a field: {values}")
        return options

    @property
    def is_calculated(self) -> bool:
        return self.type == FieldType.CALCULATED


class Indicator(BaseModel):
    """One measurable reporting line item compiled from a single input row."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str = ""
    tier: int = Field(ge=1, le=3)
    fields: list[IndicatorField] = Field(default_factory=list)
    rule: Optional[str] = None  # classifier rule that shaped the fields

    def input_fields(self) -> list[IndicatorField]:
        """Fields the user fills in (everything except CALCULATED)."""
        return [f for f in self.fields if not f.is_calculated]

    def field_key(self, field: IndicatorField) -> str:
        """Strip the indicator prefix from a field id ("indicator_0_staffLeft" -> "staffLeft")."""
        prefix = f"{self.id}_"
        return field.id[len(prefix) :] if field.id.startswith(prefix) else field.id


def is_field_active(field: IndicatorField, responses: Mapping[str, Any]) -> bool:
    """Visibility predicate for dependent fields, evaluated by the presentation layer."""
    if field.depends_on is None:
        return True
    return responses.get(field.depends_on) == field.depends_on_value


# =============================================================================
# Scores and detection results
# =============================================================================


class CompletionScore(BaseModel):
    """Progress across all user-fillable fields."""

    percentage: int = Field(ge=0, le=100)
    completed: int = Field(ge=0)
    total: int = Field(ge=0)


class DataQualityScore(BaseModel):
    """Completeness and standardization level of a typed response set."""

    model_config = ConfigDict(populate_by_name=True)

    completeness: int = Field(ge=0, le=100)
    standardization: int = Field(ge=0, le=100)
    overall_score: int = Field(ge=0, le=100, alias="overallScore")


class TypedResponse(BaseModel):
    """A raw response tagged with the type of the field it answers."""

    value: Any = None
    type: FieldType


class Organization(BaseModel):
    """A known reporting organization."""

    model_config = ConfigDict(frozen=True)

    name: str
    code: str
