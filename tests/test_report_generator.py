"""Tests for the submission report payload and file writer."""

import json
from datetime import datetime, timezone

from reporting_engine.parsers.indicator_compiler import compile_indicators
from reporting_engine.schemas.fields import Organization
from reporting_engine.utils.report_generator import build_report, report_filename, write_report

SUBMITTED = datetime(2024, 3, 31, 12, 0, tzinfo=timezone.utc)
VFWC = Organization(code="VFWC", name="Victoria Family Works Centre")


def _responses_by_id(report):
    return {r["id"]: r["value"] for indicator in report["indicators"] for r in indicator["responses"]}


class TestBuildReport:
    def test_top_level_shape(self, compiled):
        report = build_report(VFWC, compiled, {}, submission_date=SUBMITTED)
        assert list(report) == ["organization", "submissionDate", "indicators", "completionScore"]
        assert report["organization"] == "Victoria Family Works Centre"
        assert report["submissionDate"] == "2024-03-31T12:00:00+00:00"
        assert report["completionScore"] == {"percentage": 0, "completed": 0, "total": 9}

    def test_unknown_organization(self, compiled):
        assert build_report(None, compiled, {})["organization"] == "Unknown Organization"

    def test_indicator_entries_carry_fields_and_values(self, compiled):
        report = build_report(VFWC, compiled, {"indicator_4_main": 4}, submission_date=SUBMITTED)
        entry = report["indicators"][3]
        assert entry["id"] == "indicator_4"
        assert entry["tier"] == 2
        (response,) = entry["responses"]
        assert response["type"] == "scale"
        assert response["value"] == 4

    def test_unanswered_values_are_none(self, compiled):
        report = build_report(VFWC, compiled, {"indicator_5_main": ""})
        values = _responses_by_id(report)
        assert values["indicator_5_main"] is None
        assert values["indicator_0_staffAtStart"] is None

    def test_zero_and_false_preserved(self, compiled):
        responses = {"indicator_0_staffLeft": 0, "indicator_2_hasProgram": False}
        values = _responses_by_id(build_report(VFWC, compiled, responses))
        assert values["indicator_0_staffLeft"] == 0
        assert values["indicator_2_hasProgram"] is False

    def test_calculated_values_included(self, compiled):
        responses = {
            "indicator_1_coreFunding": 150000,
            "indicator_1_projectFunding": 75000,
            "indicator_0_staffAtStart": 12,
        }
        values = _responses_by_id(build_report(VFWC, compiled, responses))
        assert values["indicator_1_totalFunding"] == 225000
        assert values["indicator_1_corePercentage"] == 67
        assert values["indicator_1_fundingRatio"] == 0.5
        # turnover inputs incomplete
        assert values["indicator_0_averageStaff"] is None

    def test_responses_use_camel_case_keys(self, compiled):
        report = build_report(VFWC, compiled, {})
        details = report["indicators"][2]["responses"][1]
        assert details["dependsOn"] == "indicator_2_hasProgram"
        assert "depends_on" not in details

    def test_json_serializable(self, compiled):
        json.dumps(build_report(VFWC, compiled, {"indicator_2_details": ["other"]}))

    def test_extreme_staff_counts_do_not_fail(self):
        indicators = compile_indicators([{"Indicator": "Staff Turnover Rate"}])
        responses = {
            "indicator_0_staffAtStart": 1e308,
            "indicator_0_staffAtEnd": 1e308,
            "indicator_0_staffLeft": 1,
        }
        values = _responses_by_id(build_report(None, indicators, responses))
        assert values["indicator_0_averageStaff"] == 0
        assert values["indicator_0_turnoverRate"] == 0


class TestReportFiles:
    def test_filename(self):
        assert report_filename(VFWC, SUBMITTED) == "VFWC-2024-03-31.json"

    def test_filename_without_organization(self):
        assert report_filename(None, SUBMITTED) == "report-2024-03-31.json"

    def test_write_report(self, tmp_path, compiled):
        report = build_report(VFWC, compiled, {}, submission_date=SUBMITTED)
        path = write_report(report, tmp_path / "out", report_filename(VFWC, SUBMITTED))
        assert path == tmp_path / "out" / "VFWC-2024-03-31.json"
        with open(path, encoding="utf-8") as f:
            assert json.load(f) == report
