"""Logging and report utilities."""

from .logger import PipelineLogger, configure_global_logging, get_logger
from .report_generator import build_report, report_filename, write_report

__all__ = [
    "PipelineLogger",
    "configure_global_logging",
    "get_logger",
    "build_report",
    "report_filename",
    "write_report",
]
