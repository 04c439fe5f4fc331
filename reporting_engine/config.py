"""
Central configuration for catalog and output paths.

Configure via environment variables (a .env file is loaded by the CLI):
  - REPORTING_CONFIG_DIR (default: <repo>/config)
  - REPORTING_OUTPUT_DIR (default: ./reports)
  - REPORTING_LOG_LEVEL (default: INFO)
"""

import os
from pathlib import Path


def get_config_dir() -> Path:
    """
    Get the directory holding YAML catalogs (organizations.yaml).

    Uses REPORTING_CONFIG_DIR environment variable if set, otherwise defaults
    to the config/ directory at the repository root.

    Returns:
        Path to config directory
    """
    env_path = os.environ.get("REPORTING_CONFIG_DIR")
    if env_path:
        return Path(env_path).expanduser().resolve()
    return Path(__file__).parent.parent / "config"


def get_output_dir() -> Path:
    """Get the directory reports are written to."""
    env_path = os.environ.get("REPORTING_OUTPUT_DIR")
    if env_path:
        return Path(env_path).expanduser().resolve()
    return Path.cwd() / "reports"


def get_log_level() -> str:
    """Get the configured log level name."""
    return os.environ.get("REPORTING_LOG_LEVEL", "INFO").upper()

