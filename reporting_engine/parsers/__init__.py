"""Parsers that turn workplan exports into compiled indicators."""

from .csv_loader import load_workplan_rows
from .indicator_compiler import (
    ColumnMap,
    MissingColumnError,
    compile_indicators,
    expand_fields,
    resolve_columns,
)

__all__ = [
    "load_workplan_rows",
    "ColumnMap",
    "MissingColumnError",
    "compile_indicators",
    "expand_fields",
    "resolve_columns",
]
