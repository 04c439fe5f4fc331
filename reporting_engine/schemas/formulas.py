"""Tagged formula variants for CALCULATED fields.

A calculated field never stores a function. It stores one of these records,
which names the calculation to apply and the sibling field keys it reads.
Keys are field suffixes within the same indicator (e.g. "staffAtStart"), not
full field ids. Evaluation lives in reporting_engine/scorers/formulas.py.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _FormulaBase(BaseModel):
    model_config = ConfigDict(frozen=True)


class AverageStaffFormula(_FormulaBase):
    """round((start + end) / 2)"""

    kind: Literal["average_staff"] = "average_staff"
    start: str = "staffAtStart"
    end: str = "staffAtEnd"


class TurnoverRateFormula(_FormulaBase):
    """round(staff_left / average_staff * 100), 0 when average is 0."""

    kind: Literal["turnover_rate"] = "turnover_rate"
    staff_left: str = "staffLeft"
    average_staff: str = "averageStaff"


class TotalFundingFormula(_FormulaBase):
    """core + project"""

    kind: Literal["total_funding"] = "total_funding"
    core: str = "coreFunding"
    project: str = "projectFunding"


class CorePercentageFormula(_FormulaBase):
    """round(core / total * 100), 0 when total is 0."""

    kind: Literal["core_percentage"] = "core_percentage"
    core: str = "coreFunding"
    total: str = "totalFunding"


class FundingRatioFormula(_FormulaBase):
    """round(project / core * 100) / 100, 0 when core is 0."""

    kind: Literal["funding_ratio"] = "funding_ratio"
    project: str = "projectFunding"
    core: str = "coreFunding"


Formula = Annotated[
    Union[
        AverageStaffFormula,
        TurnoverRateFormula,
        TotalFundingFormula,
        CorePercentageFormula,
        FundingRatioFormula,
    ],
    Field(discriminator="kind"),
]
