"""
Automated calculation engine for derived indicator values.

All functions are pure and defined over possibly-missing numeric inputs.
None, NaN and non-numeric operands count as 0, and a zero or missing
denominator yields 0 instead of an undefined or infinite value. A result
too large for a float also yields 0.

Rounding is half away from zero (2.5 -> 3, -2.5 -> -3), never banker's
rounding, so 0.5 boundaries match what reporters compute by hand.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Iterable, Union

Number = Union[int, float]


def round_half_up(value: float, digits: int = 0) -> Number:
    """
    Round half away from zero.

    Returns an int when digits == 0, otherwise a float.
    Non-finite input (an operation that overflowed) rounds to 0.
    """
    if not math.isfinite(value):
        return 0 if digits == 0 else 0.0
    quantum = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        ctx.prec = 400  # wide enough for any finite float
        rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    return int(rounded) if digits == 0 else float(rounded)


def to_number(value: Any) -> float:
    """Coerce a response value to a finite float, defaulting to 0."""
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return 0.0
    if not isinstance(value, (int, float)):
        return 0.0
    try:
        value = float(value)
    except OverflowError:
        return 0.0
    return value if math.isfinite(value) else 0.0


def average_staff(staff_at_start: Any, staff_at_end: Any) -> int:
    """Average headcount over a period: round((start + end) / 2)."""
    return round_half_up((to_number(staff_at_start) + to_number(staff_at_end)) / 2)


def turnover_rate(staff_left: Any, average: Any) -> int:
    """Staff turnover rate: (staff who left / average staff count) x 100."""
    denominator = to_number(average)
    if not denominator:
        return 0
    return round_half_up(to_number(staff_left) / denominator * 100)


def total_funding(core: Any, project: Any) -> Number:
    total = to_number(core) + to_number(project)
    if not math.isfinite(total):
        return 0
    return int(total) if total.is_integer() else total


def funding_ratio(project: Any, core: Any) -> float:
    """Project (non-core) funding per core dollar, to 2 decimal places."""
    denominator = to_number(core)
    if not denominator:
        return 0
    return round_half_up(to_number(project) / denominator * 100) / 100


def core_percentage(core: Any, total: Any) -> int:
    denominator = to_number(total)
    if not denominator:
        return 0
    return round_half_up(to_number(core) / denominator * 100)


def average(values: Iterable[Any]) -> float:
    """Mean of the valid numeric entries to 2 decimals; None/NaN entries are ignored."""
    valid = []
    for value in values:
        if value is None or isinstance(value, bool):
            continue
        if isinstance(value, str):
            try:
                value = float(value.strip())
            except ValueError:
                continue
        if not isinstance(value, (int, float)):
            continue
        try:
            value = float(value)
        except OverflowError:
            continue
        if math.isfinite(value):
            valid.append(value)
    if not valid:
        return 0
    return round_half_up(sum(valid) / len(valid) * 100) / 100


def growth_rate(current: Any, previous: Any) -> int:
    """Period-over-period growth: ((current - previous) / previous) x 100."""
    denominator = to_number(previous)
    if not denominator:
        return 0
    return round_half_up((to_number(current) - denominator) / denominator * 100)
