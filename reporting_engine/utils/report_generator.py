"""
Report generator for completed workplan submissions.

Builds the JSON-serializable submission payload:

    {
      "organization": "<name>",
      "submissionDate": "<ISO-8601>",
      "indicators": [{...indicator, "responses": [{...field, "value": ...}]}],
      "completionScore": {"percentage": .., "completed": .., "total": ..}
    }

The engine only supplies the data; write_report() is a thin file writer.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

from ..constants import REPORT_FILENAME_FALLBACK, UNKNOWN_ORGANIZATION_NAME
from ..schemas.fields import Indicator, Organization
from ..scorers.completion import is_answered, score_completion
from ..scorers.formulas import compute_calculated_values

logger = logging.getLogger(__name__)


def _field_dump(field) -> dict[str, Any]:
    return field.model_dump(mode="json", by_alias=True, exclude_none=True)


def _indicator_entry(indicator: Indicator, responses: Mapping[str, Any]) -> dict[str, Any]:
    inputs_complete = all(is_answered(responses.get(f.id)) for f in indicator.input_fields())
    calculated = compute_calculated_values(indicator, responses) if inputs_complete else {}

    entry = indicator.model_dump(mode="json", by_alias=True, exclude_none=True)
    entry["responses"] = []
    for field in indicator.fields:
        if field.is_calculated:
            value = calculated.get(field.id)
        else:
            value = responses.get(field.id)
            value = value if is_answered(value) else None
        entry["responses"].append({**_field_dump(field), "value": value})
    return entry


def build_report(
    organization: Optional[Organization],
    indicators: Sequence[Indicator],
    responses: Mapping[str, Any],
    submission_date: Optional[datetime] = None,
) -> dict[str, Any]:
    """
    Build the submission report for the current session state.

    Calculated fields carry their computed value once all inputs of their
    indicator are answered; otherwise None.

    Args:
        organization: Detected organization (None -> "Unknown Organization")
        indicators: Compiled indicators
        responses: Response store keyed by field id
        submission_date: Timestamp to record (defaults to now, UTC)

    Returns:
        JSON-serializable report dict
    """
    submitted = submission_date or datetime.now(timezone.utc)
    completion = score_completion(indicators, responses)
    report = {
        "organization": organization.name if organization else UNKNOWN_ORGANIZATION_NAME,
        "submissionDate": submitted.isoformat(),
        "indicators": [_indicator_entry(indicator, responses) for indicator in indicators],
        "completionScore": completion.model_dump(),
    }
    logger.debug(f"Built report for {report['organization']} with {len(indicators)} indicators")
    return report


def report_filename(organization: Optional[Organization], submission_date: Optional[datetime] = None) -> str:
    """<CODE>-<YYYY-MM-DD>.json, or report-<date>.json when no organization is known."""
    date = (submission_date or datetime.now(timezone.utc)).date().isoformat()
    code = organization.code if organization else REPORT_FILENAME_FALLBACK
    return f"{code}-{date}.json"


def write_report(report: dict[str, Any], output_dir: Path, filename: str) -> Path:
    """Write the report as indented JSON and return its path."""
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / filename
    with open(path, "w", encoding="utf-8") as f:
        json.dump(report, f, indent=2, ensure_ascii=False)
    logger.info(f"Wrote report to {path}")
    return path
