"""Tests for compiling workplan rows into indicators."""

import pytest
from reporting_engine.parsers.csv_loader import load_workplan_rows
from reporting_engine.parsers.indicator_compiler import (
    MissingColumnError,
    compile_indicators,
    resolve_columns,
)
from reporting_engine.schemas.fields import FieldType, ValidationRuleName, is_field_active
from reporting_engine.scorers.completion import score_completion
from reporting_engine.scorers.formulas import compute_calculated_values

# ─── Column resolution ───────────────────────────────────────────────────────


class TestResolveColumns:
    def test_standard_headers(self):
        columns = resolve_columns(["Indicator", "Measurement Method", "Notes"])
        assert (columns.indicator, columns.method, columns.notes) == ("Indicator", "Measurement Method", "Notes")

    def test_alternative_headers(self):
        columns = resolve_columns(["Outcome", "How measured", "Comments"])
        assert (columns.indicator, columns.method, columns.notes) == ("Outcome", "How measured", "Comments")

    def test_case_insensitive(self):
        assert resolve_columns(["KEY OUTCOME"]).indicator == "KEY OUTCOME"

    def test_optional_columns_missing(self):
        columns = resolve_columns(["Indicator"])
        assert columns.method is None
        assert columns.notes is None

    def test_missing_indicator_column(self):
        with pytest.raises(MissingColumnError) as exc_info:
            resolve_columns(["Activity", "Target"])
        assert exc_info.value.available_columns == ["Activity", "Target"]
        assert "Activity, Target" in str(exc_info.value)

    def test_missing_column_error_is_value_error(self):
        with pytest.raises(ValueError):
            compile_indicators([{"Activity": "x"}])


# ─── Compilation ─────────────────────────────────────────────────────────────


class TestCompileIndicators:
    def test_empty_input(self):
        assert compile_indicators([]) == []

    def test_one_indicator_per_non_blank_row(self, compiled):
        assert [i.id for i in compiled] == [
            "indicator_0",
            "indicator_1",
            "indicator_2",
            "indicator_4",
            "indicator_5",
        ]
        assert [i.title for i in compiled] == [
            "Staff Turnover Rate",
            "Core funding ratio",
            "Universal Indicator: Staff wellness",
            "Client satisfaction",
            "Progress narrative",
        ]

    def test_field_ids_unique_and_prefixed(self, compiled):
        ids = [f.id for i in compiled for f in i.fields]
        assert len(ids) == len(set(ids))
        for indicator in compiled:
            assert all(f.id.startswith(f"{indicator.id}_") for f in indicator.fields)

    def test_every_indicator_has_fields(self, compiled):
        assert all(indicator.fields for indicator in compiled)

    def test_tiers(self, compiled):
        assert [i.tier for i in compiled] == [1, 1, 2, 2, 2]

    def test_matched_rule_recorded(self, compiled):
        assert [i.rule for i in compiled] == ["turnover", "funding_ratio", "multi_part", "satisfaction", "fallback"]
        assert compiled[0].model_dump(mode="json")["rule"] == "turnover"

    def test_description_from_notes(self, compiled):
        assert compiled[0].description == "Reported annually"
        assert compiled[1].description == ""

    def test_only_indicator_column(self):
        indicators = compile_indicators([{"Indicator": "Clients served"}, {"Indicator": "Staff turnover"}])
        assert len(indicators) == 2
        main = indicators[0].fields[0]
        assert main.id == "indicator_0_main"
        assert main.description is None
        assert indicators[0].description == ""

    def test_none_cells_treated_as_empty(self):
        indicators = compile_indicators([{"Indicator": "Narrative", "Method": None}, {"Indicator": None}])
        assert [i.id for i in indicators] == ["indicator_0"]


# ─── Field expansion ─────────────────────────────────────────────────────────


class TestExpansion:
    def test_turnover_group(self, compiled):
        fields = compiled[0].fields
        assert [f.id for f in fields] == [
            "indicator_0_staffAtStart",
            "indicator_0_staffAtEnd",
            "indicator_0_staffLeft",
            "indicator_0_averageStaff",
            "indicator_0_turnoverRate",
        ]
        inputs, calculated = fields[:3], fields[3:]
        assert all(f.required and f.type == FieldType.NUMBER for f in inputs)
        assert all(f.type == FieldType.CALCULATED and not f.required for f in calculated)
        assert calculated[0].unit == ""
        assert calculated[1].unit == "%"
        assert calculated[1].format == "percentage"

    def test_funding_units(self, compiled):
        calculated = [f for f in compiled[1].fields if f.is_calculated]
        assert [(f.format, f.unit) for f in calculated] == [("currency", "$"), ("percentage", "%"), ("ratio", "")]

    def test_multi_part_dependency_prefixed(self, compiled):
        primary, details = compiled[2].fields
        assert primary.id == "indicator_2_hasProgram"
        assert primary.required
        assert details.id == "indicator_2_details"
        assert details.depends_on == "indicator_2_hasProgram"
        assert details.depends_on_value == "yes"

    def test_dependent_field_visibility(self, compiled):
        _, details = compiled[2].fields
        assert not is_field_active(details, {})
        assert not is_field_active(details, {"indicator_2_hasProgram": "no"})
        assert is_field_active(details, {"indicator_2_hasProgram": "yes"})

    def test_simple_field(self, compiled):
        (field,) = compiled[3].fields
        assert field.id == "indicator_4_main"
        assert field.type == FieldType.SCALE
        assert field.label == "Client satisfaction"
        assert field.description == "Survey: how satisfied were you with services?"
        assert field.required

    def test_fallback_field_keeps_warning(self, compiled):
        (field,) = compiled[4].fields
        assert field.type == FieldType.TEXT_SHORT
        assert field.max_length == 100
        assert field.warning
        assert field.validation == [ValidationRuleName.REQUIRED]

    def test_serializes_with_camel_case_aliases(self, compiled):
        dumped = compiled[2].model_dump(mode="json", by_alias=True, exclude_none=True)
        details = dumped["fields"][1]
        assert details["dependsOn"] == "indicator_2_hasProgram"
        assert details["dependsOnValue"] == "yes"
        fallback = compiled[4].model_dump(mode="json", by_alias=True, exclude_none=True)["fields"][0]
        assert fallback["maxLength"] == 100

    def test_formula_round_trips_through_json(self, compiled):
        turnover = compiled[0]
        restored = type(turnover).model_validate(turnover.model_dump(mode="json", by_alias=True))
        assert restored == turnover


# ─── End to end ──────────────────────────────────────────────────────────────


class TestCompileThenScore:
    def test_turnover_scenario(self):
        (indicator,) = compile_indicators([{"Indicator": "Staff Turnover Rate"}])
        responses = {
            "indicator_0_staffAtStart": 12,
            "indicator_0_staffAtEnd": 10,
            "indicator_0_staffLeft": 3,
        }
        assert compute_calculated_values(indicator, responses) == {
            "indicator_0_averageStaff": 11,
            "indicator_0_turnoverRate": 27,
        }
        score = score_completion([indicator], responses)
        assert (score.completed, score.total, score.percentage) == (3, 3, 100)

    def test_funding_scenario(self):
        (indicator,) = compile_indicators([{"Indicator": "Core funding"}])
        responses = {"indicator_0_coreFunding": 150000, "indicator_0_projectFunding": 75000}
        assert compute_calculated_values(indicator, responses) == {
            "indicator_0_totalFunding": 225000,
            "indicator_0_corePercentage": 67,
            "indicator_0_fundingRatio": 0.5,
        }

    def test_from_csv_file(self, tmp_path):
        path = tmp_path / "workplan.csv"
        path.write_text(
            "\ufeffIndicator,Measurement Method,Notes\n"
            "Clients served,Number of unique clients,WAWC\n"
            ",,\n"
            '"Policy work","Do you track policy? (Yes/No) What did you do? Check all that apply ☐ Briefs ☐ Meetings",\n',
            encoding="utf-8",
        )
        rows = load_workplan_rows(path)
        assert list(rows[0].keys()) == ["Indicator", "Measurement Method", "Notes"]
        assert len(rows) == 2

        indicators = compile_indicators(rows)
        assert [i.id for i in indicators] == ["indicator_0", "indicator_1"]
        assert indicators[0].fields[0].type == FieldType.NUMBER
        details = indicators[1].fields[1]
        assert [o.value for o in details.options] == ["briefs", "meetings", "other"]
        assert details.label == "What did you do?"
