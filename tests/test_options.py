"""Tests for the standardized option catalogs."""

import pytest
from pydantic import ValidationError
from reporting_engine import options as catalogs
from reporting_engine.schemas.fields import FieldType, IndicatorField, Option


class TestCatalogs:
    @pytest.mark.parametrize("name,catalog", list(catalogs.STANDARD_OPTIONS.items()))
    def test_values_unique(self, name, catalog):
        values = [o.value for o in catalog]
        assert len(values) == len(set(values)), name

    @pytest.mark.parametrize(
        "catalog",
        [
            catalogs.EMPLOYEE_BENEFITS,
            catalogs.BOARD_COMPENSATION,
            catalogs.COLLABORATION_TYPES,
            catalogs.DISCLOSURE_CHANNELS,
            catalogs.AUDIT_TYPES,
        ],
    )
    def test_multi_select_catalogs_end_with_other(self, catalog):
        assert catalog[-1] == catalogs.OTHER

    def test_satisfaction_scale_is_numeric(self):
        assert [o.value for o in catalogs.SATISFACTION_SCALE] == [1, 2, 3, 4, 5]
        assert catalogs.SATISFACTION_SCALE[0].label == "Very Dissatisfied"

    def test_yes_no(self):
        assert [o.value for o in catalogs.YES_NO] == ["yes", "no"]
        assert [o.value for o in catalogs.YES_NO_NA] == ["yes", "no", "not_applicable"]

    def test_catalogs_are_immutable(self):
        with pytest.raises(ValidationError):
            catalogs.YES_NO[0].label = "Maybe"
        with pytest.raises(TypeError):
            catalogs.YES_NO[0] = Option(value="maybe", label="Maybe")


class TestFieldOptions:
    def test_duplicate_option_values_rejected(self):
        with pytest.raises(ValidationError):
            IndicatorField(
                id="x_main",
                type=FieldType.RADIO,
                label="x",
                options=[Option(value="a", label="A"), Option(value="a", label="Also A")],
            )

    def test_empty_options_rejected(self):
        with pytest.raises(ValidationError):
            IndicatorField(id="x_main", type=FieldType.CHECKBOX, label="x", options=[])
