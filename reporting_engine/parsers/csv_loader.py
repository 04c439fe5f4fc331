"""
Loader for workplan CSV exports.

Delivers rows as header -> string mappings and performs no semantic
interpretation; column roles are resolved by the indicator compiler.
"""

import csv
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def load_workplan_rows(file_path: str | Path) -> list[dict[str, str]]:
    """Load a workplan CSV using its header row as keys.

    Lines with no non-blank cell are skipped. Missing trailing cells come
    back as "" rather than None.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(file_path)
    rows = []
    # utf-8-sig strips the BOM spreadsheet exports often prepend to the first header
    with open(path, newline="", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)
        for row in reader:
            cleaned = {key: (value or "") for key, value in row.items() if key is not None}
            if not any(value.strip() for value in cleaned.values()):
                continue
            rows.append(cleaned)

    logger.info(f"Loaded {len(rows)} rows from {path.name}")
    return rows
