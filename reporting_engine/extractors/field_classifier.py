"""
Field configuration classifier for workplan indicators.

Maps an indicator's free text (name + measurement method) to a standardized
field shape. Rules are an explicit ordered list; the first matching rule
wins, and order matters because patterns overlap (a multi-part Universal
Indicator also contains "Check all that apply").

Rule order:
 1. turnover            calculated group: staff start/end/left -> average, rate
 2. funding_ratio       calculated group: core/project -> total, core %, ratio
 3. multi_part          (Yes/No) + Check all that apply -> radio + dependent checkbox
 4. benefits_checkbox   wellness/benefit + Check all that apply -> benefits catalog
 5. yes_no              yes/no radio
 6. checkbox            extracted ☐ options, else collaboration catalog
 7. difficulty          difficulty radio
 8. satisfaction        1-5 satisfaction scale
 9. board_compensation  board compensation checkbox
10. collaboration       count of meetings, or collaboration-type checkbox
11. count               generic whole number
12. percentage          generic percentage
13. fallback            short text (discouraged, carries a warning)

All matching is case-insensitive substring matching on lower-cased text.
classify_field() is total: any pair of strings (including empty) yields a
config, never an exception.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .. import options as catalogs
from ..constants import CHECKBOX_GLYPH, TEXT_SHORT_MAX_LENGTH
from ..schemas.fields import FieldFormat, FieldType, Option, ValidationRuleName
from ..schemas.formulas import (
    AverageStaffFormula,
    CorePercentageFormula,
    Formula,
    FundingRatioFormula,
    TotalFundingFormula,
    TurnoverRateFormula,
)
from .method_text import (
    CHECK_ALL_MARKER,
    extract_checkbox_options,
    extract_checkbox_question,
    extract_yes_no_question,
    has_yes_no_marker,
    mentions_yes_no,
)

logger = logging.getLogger(__name__)

FieldShape = Literal["calculated_group", "multi_part", "simple"]

REQUIRED = ValidationRuleName.REQUIRED
FALLBACK_WARNING = "Consider converting this to structured data for better comparability"


class FieldSpec(BaseModel):
    """One input of a calculated group or multi-part config, keyed within its indicator."""

    model_config = ConfigDict(frozen=True)

    key: str
    type: FieldType
    label: str
    description: Optional[str] = None
    placeholder: Optional[str] = None
    options: Optional[list[Option]] = None
    validation: list[ValidationRuleName] = Field(default_factory=list)
    depends_on: Optional[str] = None
    depends_on_value: Optional[str] = None


class CalculationSpec(BaseModel):
    """A derived value of a calculated group."""

    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    formula: Formula
    format: Optional[FieldFormat] = None


class FieldConfig(BaseModel):
    """Classifier output: the shape of the fields an indicator expands into."""

    model_config = ConfigDict(frozen=True)

    rule: str
    shape: FieldShape = "simple"

    # simple shape
    type: Optional[FieldType] = None
    options: Optional[list[Option]] = None
    validation: list[ValidationRuleName] = Field(default_factory=list)
    placeholder: Optional[str] = None
    max_length: Optional[int] = None
    warning: Optional[str] = None

    # calculated_group / multi_part shapes
    fields: list[FieldSpec] = Field(default_factory=list)
    calculations: list[CalculationSpec] = Field(default_factory=list)


@dataclass(frozen=True)
class IndicatorText:
    """Raw and lower-cased indicator/method text handed to every rule."""

    indicator: str
    method: str

    @property
    def name(self) -> str:
        return self.indicator.lower()

    @property
    def how(self) -> str:
        return self.method.lower()


@dataclass(frozen=True)
class ClassificationRule:
    """A named (predicate, builder) pair. Rules are tried in list order."""

    name: str
    predicate: Callable[[IndicatorText], bool]
    builder: Callable[[IndicatorText], FieldConfig]


def _has_any(text: str, *keywords: str) -> bool:
    return any(keyword in text for keyword in keywords)


# =============================================================================
# Builders
# =============================================================================


def _build_turnover(text: IndicatorText) -> FieldConfig:
    count_rules = [REQUIRED, ValidationRuleName.STAFF_COUNT]
    return FieldConfig(
        rule="turnover",
        shape="calculated_group",
        fields=[
            FieldSpec(
                key="staffAtStart",
                type=FieldType.NUMBER,
                label="Staff count at period start",
                validation=count_rules,
                placeholder="e.g., 12",
            ),
            FieldSpec(
                key="staffAtEnd",
                type=FieldType.NUMBER,
                label="Staff count at period end",
                validation=count_rules,
                placeholder="e.g., 10",
            ),
            FieldSpec(
                key="staffLeft",
                type=FieldType.NUMBER,
                label="Number of staff who left during period",
                validation=count_rules,
                placeholder="e.g., 3",
            ),
        ],
        calculations=[
            CalculationSpec(key="averageStaff", label="Average staff count", formula=AverageStaffFormula()),
            CalculationSpec(
                key="turnoverRate",
                label="Turnover rate (%)",
                formula=TurnoverRateFormula(),
                format="percentage",
            ),
        ],
    )


def _build_funding_ratio(text: IndicatorText) -> FieldConfig:
    money_rules = [REQUIRED, ValidationRuleName.CURRENCY]
    return FieldConfig(
        rule="funding_ratio",
        shape="calculated_group",
        fields=[
            FieldSpec(
                key="coreFunding",
                type=FieldType.CURRENCY,
                label="Total core funding ($)",
                validation=money_rules,
                placeholder="e.g., 150000",
            ),
            FieldSpec(
                key="projectFunding",
                type=FieldType.CURRENCY,
                label="Total project/program-specific funding ($)",
                validation=money_rules,
                placeholder="e.g., 75000",
            ),
        ],
        calculations=[
            CalculationSpec(
                key="totalFunding", label="Total funding ($)", formula=TotalFundingFormula(), format="currency"
            ),
            CalculationSpec(
                key="corePercentage",
                label="Core funding percentage (%)",
                formula=CorePercentageFormula(),
                format="percentage",
            ),
            CalculationSpec(
                key="fundingRatio", label="Funding leverage ratio", formula=FundingRatioFormula(), format="ratio"
            ),
        ],
    )


def _multi_part_options(method: str) -> list[Option]:
    extracted = extract_checkbox_options(method)
    if extracted:
        return extracted
    if _has_any(method.lower(), "benefit", "wellness"):
        return list(catalogs.EMPLOYEE_BENEFITS)
    return list(catalogs.COLLABORATION_TYPES)


def _build_multi_part(text: IndicatorText) -> FieldConfig:
    return FieldConfig(
        rule="multi_part",
        shape="multi_part",
        fields=[
            FieldSpec(
                key="hasProgram",
                type=FieldType.RADIO,
                label=extract_yes_no_question(text.method),
                options=list(catalogs.YES_NO),
                validation=[REQUIRED],
            ),
            FieldSpec(
                key="details",
                type=FieldType.CHECKBOX,
                label=extract_checkbox_question(text.method),
                options=_multi_part_options(text.method),
                validation=[REQUIRED],
                depends_on="hasProgram",
                depends_on_value="yes",
            ),
        ],
    )


def _simple(rule: str, field_type: FieldType, **kwargs) -> Callable[[IndicatorText], FieldConfig]:
    """Builder for a single-field config with fixed options/validation."""

    def build(text: IndicatorText) -> FieldConfig:
        return FieldConfig(rule=rule, shape="simple", type=field_type, **kwargs)

    return build


def _build_checkbox(text: IndicatorText) -> FieldConfig:
    extracted = extract_checkbox_options(text.method)
    return FieldConfig(
        rule="checkbox",
        type=FieldType.CHECKBOX,
        options=extracted or list(catalogs.COLLABORATION_TYPES),
        validation=[REQUIRED],
    )


def _build_collaboration(text: IndicatorText) -> FieldConfig:
    if "how many" in text.how:
        return FieldConfig(
            rule="collaboration",
            type=FieldType.NUMBER,
            validation=[REQUIRED, ValidationRuleName.STAFF_COUNT],
            placeholder="e.g., 4",
        )
    return FieldConfig(
        rule="collaboration",
        type=FieldType.CHECKBOX,
        options=list(catalogs.COLLABORATION_TYPES),
        validation=[REQUIRED],
    )


_build_fallback = _simple(
    "fallback",
    FieldType.TEXT_SHORT,
    validation=[REQUIRED],
    max_length=TEXT_SHORT_MAX_LENGTH,
    placeholder=f"Brief response (max {TEXT_SHORT_MAX_LENGTH} characters)",
    warning=FALLBACK_WARNING,
)


# =============================================================================
# Ordered rule list
# =============================================================================

RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule(
        "turnover",
        lambda t: _has_any(t.name, "turnover", "retention"),
        _build_turnover,
    ),
    ClassificationRule(
        "funding_ratio",
        lambda t: "funding" in t.name and _has_any(t.name, "ratio", "core"),
        _build_funding_ratio,
    ),
    ClassificationRule(
        "multi_part",
        lambda t: has_yes_no_marker(t.method) and CHECK_ALL_MARKER in t.how,
        _build_multi_part,
    ),
    ClassificationRule(
        "benefits_checkbox",
        lambda t: _has_any(t.name, "wellness", "benefit") and CHECK_ALL_MARKER in t.how,
        _simple(
            "benefits_checkbox",
            FieldType.CHECKBOX,
            options=list(catalogs.EMPLOYEE_BENEFITS),
            validation=[REQUIRED],
        ),
    ),
    ClassificationRule(
        "yes_no",
        lambda t: mentions_yes_no(t.method),
        _simple("yes_no", FieldType.RADIO, options=list(catalogs.YES_NO), validation=[REQUIRED]),
    ),
    ClassificationRule(
        "checkbox",
        lambda t: CHECK_ALL_MARKER in t.how or CHECKBOX_GLYPH in t.method,
        _build_checkbox,
    ),
    ClassificationRule(
        "difficulty",
        lambda t: "difficult" in t.how and "options:" in t.how,
        _simple("difficulty", FieldType.RADIO, options=list(catalogs.DIFFICULTY), validation=[REQUIRED]),
    ),
    ClassificationRule(
        "satisfaction",
        lambda t: "satisfaction" in t.name or "satisfied" in t.how,
        _simple(
            "satisfaction",
            FieldType.SCALE,
            options=list(catalogs.SATISFACTION_SCALE),
            validation=[REQUIRED, ValidationRuleName.SCALE],
        ),
    ),
    ClassificationRule(
        "board_compensation",
        lambda t: "board" in t.name and "compensation" in t.name,
        _simple(
            "board_compensation",
            FieldType.CHECKBOX,
            options=list(catalogs.BOARD_COMPENSATION),
            validation=[REQUIRED],
        ),
    ),
    ClassificationRule(
        "collaboration",
        lambda t: _has_any(t.name, "collaboration", "coalition"),
        _build_collaboration,
    ),
    ClassificationRule(
        "count",
        lambda t: _has_any(t.how, "how many", "number of"),
        _simple(
            "count",
            FieldType.NUMBER,
            validation=[REQUIRED, ValidationRuleName.STAFF_COUNT],
            placeholder="Enter number",
        ),
    ),
    ClassificationRule(
        "percentage",
        lambda t: _has_any(t.how, "percentage", "%"),
        _simple(
            "percentage",
            FieldType.PERCENTAGE,
            validation=[REQUIRED, ValidationRuleName.PERCENTAGE],
            placeholder="e.g., 25",
        ),
    ),
)

RULE_NAMES = tuple(rule.name for rule in RULES) + ("fallback",)


def match_rule(indicator_text: str | None, method_text: str | None) -> Optional[ClassificationRule]:
    """Return the first rule whose predicate matches, or None for the fallback."""
    text = IndicatorText(indicator=indicator_text or "", method=method_text or "")
    for rule in RULES:
        if rule.predicate(text):
            return rule
    return None


def classify_field(indicator_text: str | None, method_text: str | None) -> FieldConfig:
    """
    Decide the field shape for one indicator.

    Args:
        indicator_text: Indicator name/title from the workplan row
        method_text: Free-text measurement method (may be empty)

    Returns:
        FieldConfig for the first matching rule, or a short-text fallback
    """
    text = IndicatorText(indicator=indicator_text or "", method=method_text or "")
    rule = match_rule(text.indicator, text.method)
    if rule is not None:
        logger.debug(f"Classified '{text.indicator[:60]}' via rule={rule.name}")
        return rule.builder(text)

    logger.debug(f"No rule matched '{text.indicator[:60]}', using short-text fallback")
    return _build_fallback(text)
