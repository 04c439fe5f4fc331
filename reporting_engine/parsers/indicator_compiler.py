"""
Indicator compiler - turns workplan rows into standardized indicators.

Each non-blank row becomes one Indicator whose id comes from its row index
("indicator_<index>"), so recompiling a modified CSV yields fresh ids. The
indicator's fields are expanded from the classifier's FieldConfig:

- calculated_group: required inputs + CALCULATED derived fields
- multi_part:       primary field + dependent field gated on its value
- simple:           one "<id>_main" field carrying the row's label/description

Columns are found heuristically by header name (see resolve_columns).
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from ..constants import (
    INDICATOR_COLUMN_KEYWORDS,
    METHOD_COLUMN_KEYWORDS,
    NOTES_COLUMN_KEYWORDS,
)
from ..extractors.field_classifier import FieldConfig, classify_field
from ..extractors.tier_classifier import classify_tier
from ..schemas.fields import FieldType, Indicator, IndicatorField, ValidationRuleName

logger = logging.getLogger(__name__)

FORMAT_UNITS = {"percentage": "%", "currency": "$"}


class MissingColumnError(ValueError):
    """No header could be resolved to the indicator column."""

    def __init__(self, available_columns: Sequence[str]):
        self.available_columns = list(available_columns)
        super().__init__(f"No indicator column found. Available columns: {', '.join(self.available_columns)}")


@dataclass
class ColumnMap:
    """Header names resolved to their roles. Only indicator is mandatory."""

    indicator: str
    method: Optional[str] = None
    notes: Optional[str] = None


def _find_column(headers: Sequence[str], keywords: Sequence[str]) -> Optional[str]:
    for header in headers:
        lowered = str(header).lower()
        if any(keyword in lowered for keyword in keywords):
            return header
    return None


def resolve_columns(headers: Sequence[str]) -> ColumnMap:
    """
    Resolve header names to indicator/method/notes roles.

    First case-insensitive substring match per role wins.

    Raises:
        MissingColumnError: If no header matches the indicator role
    """
    indicator_col = _find_column(headers, INDICATOR_COLUMN_KEYWORDS)
    if indicator_col is None:
        raise MissingColumnError(headers)
    return ColumnMap(
        indicator=indicator_col,
        method=_find_column(headers, METHOD_COLUMN_KEYWORDS),
        notes=_find_column(headers, NOTES_COLUMN_KEYWORDS),
    )


def _cell(row: Mapping[str, Any], column: Optional[str]) -> str:
    if column is None:
        return ""
    value = row.get(column)
    return "" if value is None else str(value)


def expand_fields(indicator_id: str, indicator_text: str, method_text: str, config: FieldConfig) -> list[IndicatorField]:
    """Expand a classifier config into the concrete field list of one indicator."""
    if config.shape == "calculated_group":
        fields = [
            IndicatorField(
                id=f"{indicator_id}_{spec.key}",
                type=spec.type,
                label=spec.label,
                description=spec.description,
                required=True,
                placeholder=spec.placeholder,
                validation=spec.validation,
            )
            for spec in config.fields
        ]
        fields.extend(
            IndicatorField(
                id=f"{indicator_id}_{calc.key}",
                type=FieldType.CALCULATED,
                label=calc.label,
                formula=calc.formula,
                format=calc.format,
                unit=FORMAT_UNITS.get(calc.format, ""),
                required=False,
            )
            for calc in config.calculations
        )
        return fields

    if config.shape == "multi_part":
        return [
            IndicatorField(
                id=f"{indicator_id}_{spec.key}",
                type=spec.type,
                label=spec.label,
                options=spec.options,
                required=ValidationRuleName.REQUIRED in spec.validation,
                validation=spec.validation,
                depends_on=f"{indicator_id}_{spec.depends_on}" if spec.depends_on else None,
                depends_on_value=spec.depends_on_value,
            )
            for spec in config.fields
        ]

    return [
        IndicatorField(
            id=f"{indicator_id}_main",
            type=config.type,
            label=indicator_text,
            description=method_text or None,
            options=config.options,
            required=True,
            placeholder=config.placeholder,
            validation=config.validation,
            max_length=config.max_length,
            warning=config.warning,
        )
    ]


def compile_indicators(rows: Sequence[Mapping[str, Any]]) -> list[Indicator]:
    """
    Compile workplan rows into indicators with standardized fields.

    Args:
        rows: Parsed CSV rows (header -> string value), header row as keys

    Returns:
        One Indicator per row with non-blank indicator text, in row order

    Raises:
        MissingColumnError: If no header resolves to the indicator column
    """
    if not rows:
        return []

    headers = list(rows[0].keys())
    logger.debug(f"CSV headers: {headers}")
    columns = resolve_columns(headers)
    logger.info(
        f"Detected columns [indicator={columns.indicator!r} method={columns.method!r} notes={columns.notes!r}]"
    )

    indicators = []
    skipped = 0
    for index, row in enumerate(rows):
        indicator_text = _cell(row, columns.indicator)
        if not indicator_text.strip():
            skipped += 1
            logger.debug(f"Skipping row {index}: blank indicator text")
            continue

        method_text = _cell(row, columns.method)
        indicator_id = f"indicator_{index}"
        title = indicator_text.strip()
        config = classify_field(indicator_text, method_text)

        indicators.append(
            Indicator(
                id=indicator_id,
                title=title,
                description=_cell(row, columns.notes),
                tier=classify_tier(indicator_text, method_text),
                fields=expand_fields(indicator_id, title, method_text, config),
                rule=config.rule,
            )
        )

    logger.info(f"Compiled {len(indicators)} indicators from {len(rows)} rows ({skipped} blank rows skipped)")
    return indicators
