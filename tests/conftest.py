"""Shared fixtures for reporting engine tests."""

import sys
from pathlib import Path

import pytest

# Add repo root to path so tests can import reporting_engine without installing
sys.path.insert(0, str(Path(__file__).parent.parent))

UNIVERSAL_WELLNESS_METHOD = (
    "Does your organization offer a staff wellness program? (Yes/No) "
    "Which of the following supports are included? (Check all that apply): "
    "☐ Paid mental health days ☐ Employee Assistance Program ☐ Flexible hours "
    "☐ Other (please specify)"
)


@pytest.fixture(autouse=True)
def _reset_organization_cache():
    """Each test starts with a cold organization catalog cache."""
    from reporting_engine.extractors.organization_detector import clear_cache

    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def workplan_rows():
    """A representative workplan export, one row per classifier shape."""
    return [
        {
            "Indicator": "Staff Turnover Rate",
            "Measurement Method": "Count staff at start and end of the period and how many left",
            "Notes": "Reported annually",
        },
        {
            "Indicator": "Core funding ratio",
            "Measurement Method": "Compare core to project funding from audited statements",
            "Notes": "",
        },
        {
            "Indicator": "Universal Indicator: Staff wellness",
            "Measurement Method": UNIVERSAL_WELLNESS_METHOD,
            "Notes": "VFWC pilot",
        },
        {
            "Indicator": "   ",
            "Measurement Method": "Blank rows are skipped",
            "Notes": "",
        },
        {
            "Indicator": "Client satisfaction",
            "Measurement Method": "Survey: how satisfied were you with services?",
            "Notes": "",
        },
        {
            "Indicator": "Progress narrative",
            "Measurement Method": "Describe progress this quarter",
            "Notes": "",
        },
    ]


@pytest.fixture
def compiled(workplan_rows):
    from reporting_engine.parsers.indicator_compiler import compile_indicators

    return compile_indicators(workplan_rows)
