"""
Reporting CLI - compile workplan CSVs and produce submission reports.

Usage:
    # Show how each indicator was classified
    python -m reporting_engine compile workplan.csv

    # Dump compiled indicators as JSON
    python -m reporting_engine compile workplan.csv --json

    # Score saved responses and write <ORG>-<date>.json
    python -m reporting_engine report workplan.csv --responses responses.json --output-dir reports/
"""

import argparse
import json
import sys
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from .config import get_log_level, get_output_dir
from .extractors.organization_detector import detect_organization
from .parsers.csv_loader import load_workplan_rows
from .parsers.indicator_compiler import MissingColumnError, compile_indicators
from .schemas.fields import is_field_active
from .scorers.completion import score_data_quality, typed_responses
from .utils.logger import configure_global_logging, get_logger
from .utils.report_generator import build_report, report_filename, write_report
from .validators.rules import validate_field

load_dotenv()
console = Console()


def _load(args: argparse.Namespace):
    """Load and compile the CSV named on the command line."""
    logger = get_logger()
    rows = load_workplan_rows(args.csv)
    with logger.time_operation("compile", source=Path(args.csv).name):
        indicators = compile_indicators(rows)
    num_fields = sum(len(indicator.fields) for indicator in indicators)
    logger.log_compile_complete(Path(args.csv).name, len(rows), len(indicators), num_fields)
    return rows, indicators


def cmd_compile(args: argparse.Namespace) -> int:
    """Compile a workplan and print the resulting indicators."""
    _, indicators = _load(args)

    if args.json:
        print(json.dumps([i.model_dump(mode="json", by_alias=True, exclude_none=True) for i in indicators], indent=2))
        return 0

    table = Table(title=f"Compiled indicators ({len(indicators)})")
    table.add_column("ID", style="dim")
    table.add_column("Tier", justify="center")
    table.add_column("Rule")
    table.add_column("Fields")
    table.add_column("Title")

    for indicator in indicators:
        field_types = ", ".join(f.type.value for f in indicator.fields)
        table.add_row(indicator.id, str(indicator.tier), indicator.rule or "", field_types, indicator.title[:60])

    console.print(table)
    return 0


def cmd_report(args: argparse.Namespace) -> int:
    """Score responses against a compiled workplan and write the report."""
    logger = get_logger()
    rows, indicators = _load(args)

    responses = {}
    if args.responses:
        with open(args.responses, encoding="utf-8") as f:
            responses = json.load(f)
        if not isinstance(responses, dict):
            logger.error("Responses file must contain a JSON object keyed by field id", path=args.responses)
            return 1

    # Validation is advisory: problems are logged, never enforced
    for indicator in indicators:
        for field in indicator.input_fields():
            if not is_field_active(field, responses):
                continue
            messages = validate_field(field, responses.get(field.id))
            if messages:
                logger.log_validation_issue(field.id, messages)

    organization = detect_organization(rows)
    report = build_report(organization, indicators, responses)
    output_dir = Path(args.output_dir) if args.output_dir else get_output_dir()
    path = write_report(report, output_dir, report_filename(organization))

    quality = score_data_quality(typed_responses(indicators, responses))
    completion = report["completionScore"]

    table = Table(title=report["organization"])
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Completion", f"{completion['percentage']}% ({completion['completed']}/{completion['total']})")
    table.add_row("Completeness", f"{quality.completeness}%")
    table.add_row("Standardization", f"{quality.standardization}%")
    table.add_row("Data quality", f"{quality.overall_score}%")
    table.add_row("Validation warnings", str(logger.get_error_summary()["total_warnings"]))
    console.print(table)
    console.print(f"Report written to [bold]{path}[/bold]")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="workplan-report",
        description="Compile workplan indicator CSVs into standardized reporting fields",
    )
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR (default: $REPORTING_LOG_LEVEL or INFO)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    compile_parser = subparsers.add_parser("compile", help="Compile a workplan CSV and show its indicators")
    compile_parser.add_argument("csv", help="Workplan CSV export")
    compile_parser.add_argument("--json", action="store_true", help="Print compiled indicators as JSON")
    compile_parser.set_defaults(func=cmd_compile)

    report_parser = subparsers.add_parser("report", help="Score responses and write a submission report")
    report_parser.add_argument("csv", help="Workplan CSV export")
    report_parser.add_argument("--responses", help="JSON object of responses keyed by field id")
    report_parser.add_argument("--output-dir", help="Directory for the report (default: $REPORTING_OUTPUT_DIR or ./reports)")
    report_parser.set_defaults(func=cmd_report)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = args.log_level or get_log_level()
    configure_global_logging(log_level, phase=args.command)
    logger = get_logger(log_level=log_level, phase=args.command)
    logger.clear_tracking()

    try:
        return args.func(args)
    except FileNotFoundError as e:
        logger.error("Input file not found", exception=e)
        return 1
    except MissingColumnError as e:
        logger.error("Cannot compile workplan", exception=e, available_columns=e.available_columns)
        return 1


if __name__ == "__main__":
    sys.exit(main())
