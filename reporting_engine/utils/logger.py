"""
Logging infrastructure for the workplan reporting engine.

Provides:
- Structured logging with millisecond timestamps
- key=value context suffixes on every message
- Warning/error tracking for end-of-run summaries
- Timing of compile/report operations
"""

import logging
import sys
from contextlib import contextmanager
from datetime import datetime
from typing import Optional


class MillisecondsFormatter(logging.Formatter):
    """Formatter that appends milliseconds to the timestamp."""

    def formatTime(self, record, datefmt=None):  # noqa: N802 - must match parent class method name
        ct = datetime.fromtimestamp(record.created)
        if datefmt:
            return ct.strftime(datefmt) + f",{int(record.msecs):03d}"
        return ct.strftime("%Y-%m-%d %H:%M:%S") + f",{int(record.msecs):03d}"


def _format_string(phase: Optional[str]) -> str:
    if phase:
        return f"%(asctime)s | %(levelname)-8s | {phase} | %(filename)s:%(lineno)d | %(message)s"
    return "%(asctime)s | %(levelname)-8s | %(filename)s:%(lineno)d | %(message)s"


def _with_context(message: str, context: dict) -> str:
    if not context:
        return message
    formatted_data = " ".join(f"{k}={v}" for k, v in context.items())
    return f"{message} [{formatted_data}]"


class PipelineLogger:
    """
    Centralized logger for compile/report runs with structured output.
    """

    def __init__(
        self,
        name: str = "reporting_engine",
        log_level: str = "INFO",
        phase: Optional[str] = None,
    ):
        """
        Initialize the pipeline logger.

        Args:
            name: Logger name
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
            phase: Optional phase name shown in every line (e.g., "compile", "report")
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, log_level.upper()))
        self.phase = phase

        # The root handler installed by configure_global_logging prints our records
        self.logger.propagate = True
        self.logger.handlers.clear()

        # Track problems for summary reporting
        self.errors: list[dict] = []
        self.warnings: list[dict] = []

    def debug(self, message: str, **kwargs):
        self.logger.debug(_with_context(message, kwargs), stacklevel=2)

    def info(self, message: str, **kwargs):
        self.logger.info(_with_context(message, kwargs), stacklevel=2)

    def warning(self, message: str, **kwargs):
        """Log warning message and track for reporting."""
        message = _with_context(message, kwargs)
        self.logger.warning(message, stacklevel=2)
        self.warnings.append(
            {
                "message": message,
                "phase": self.phase,
                "timestamp": datetime.now().isoformat(),
                "data": kwargs,
            }
        )

    def error(self, message: str, exception: Optional[Exception] = None, **kwargs):
        """Log error message and track for reporting."""
        if exception:
            message = f"{message} | Exception: {str(exception)}"
        message = _with_context(message, kwargs)

        self.logger.error(message, exc_info=exception is not None, stacklevel=2)
        self.errors.append(
            {
                "message": message,
                "phase": self.phase,
                "exception": str(exception) if exception else None,
                "timestamp": datetime.now().isoformat(),
                "data": kwargs,
            }
        )

    def log_compile_complete(self, source: str, num_rows: int, num_indicators: int, num_fields: int):
        """Log the outcome of compiling one workplan."""
        self.info(
            "Workplan compiled",
            source=source,
            rows=num_rows,
            indicators=num_indicators,
            fields=num_fields,
            skipped=num_rows - num_indicators,
        )

    def log_validation_issue(self, field_id: str, messages: list[str]):
        """Log a response that fails its field's validation rules."""
        self.warning("Response failed validation", field_id=field_id, errors="; ".join(messages))

    @contextmanager
    def time_operation(self, operation: str, **context):
        """
        Context manager to time and log an operation.

        Usage:
            with logger.time_operation("compile", source="workplan.csv"):
                # ... perform operation ...
        """
        start_time = datetime.now()
        self.debug(f"Starting {operation}", **context)

        try:
            yield
            duration = (datetime.now() - start_time).total_seconds()
            self.info(f"Completed {operation}", duration_seconds=round(duration, 3), **context)
        except Exception as e:
            duration = (datetime.now() - start_time).total_seconds()
            self.error(f"Failed {operation}", exception=e, duration_seconds=round(duration, 3), **context)
            raise

    def get_error_summary(self) -> dict:
        """Get summary of errors and warnings for reporting."""
        return {
            "phase": self.phase,
            "total_errors": len(self.errors),
            "total_warnings": len(self.warnings),
            "errors": self.errors,
            "warnings": self.warnings,
        }

    def clear_tracking(self):
        """Clear tracked errors and warnings (useful between runs)."""
        self.errors = []
        self.warnings = []


# ============================================================================
# Global Logger Instance
# ============================================================================

_default_logger: Optional[PipelineLogger] = None


def get_logger(
    name: str = "reporting_engine",
    log_level: str = "INFO",
    phase: Optional[str] = None,
) -> PipelineLogger:
    """
    Get or create the default pipeline logger.

    Args:
        name: Logger name
        log_level: Logging level
        phase: Optional phase name (e.g., "compile"); also retags an existing logger

    Returns:
        PipelineLogger instance
    """
    global _default_logger

    if _default_logger is None:
        _default_logger = PipelineLogger(name=name, log_level=log_level, phase=phase)
    elif phase is not None:
        _default_logger.phase = phase

    return _default_logger


# ============================================================================
# Global Logging Configuration
# ============================================================================


def configure_global_logging(log_level: str = "INFO", phase: Optional[str] = None):
    """
    Configure the root logger with the unified format.

    Call this early in application startup so module loggers
    (logging.getLogger(__name__)) share the same output.

    Args:
        log_level: Logging level to apply globally (DEBUG, INFO, WARNING, ERROR)
        phase: Optional phase name (e.g., "report")
    """
    formatter = MillisecondsFormatter(_format_string(phase), datefmt="%Y-%m-%d %H:%M:%S")

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))
    root_logger.handlers.clear()

    root_handler = logging.StreamHandler(sys.stderr)
    root_handler.setLevel(getattr(logging, log_level.upper()))
    root_handler.setFormatter(formatter)
    root_logger.addHandler(root_handler)
