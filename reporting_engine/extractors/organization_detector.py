"""Organization Detector - finds known organization codes in raw workplan rows.

Catalog order is significant: when a CSV mentions several known codes, the
first catalog entry found wins. The catalog is an ordered YAML list so that
order is pinned explicitly.

Usage:
    from reporting_engine.extractors.organization_detector import detect_organization

    detect_organization([{"Org": "VFWC"}])  # Organization(name="Victoria Family Works Centre", code="VFWC")
    detect_organization([])                 # None
    detect_organization([{"Foo": "bar"}])   # Organization(name="Organization", code="ORG")
"""

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

import yaml

from ..config import get_config_dir
from ..constants import GENERIC_ORGANIZATION_CODE, GENERIC_ORGANIZATION_NAME
from ..schemas.fields import Organization

logger = logging.getLogger(__name__)

DEFAULT_ORGANIZATIONS: tuple[Organization, ...] = (
    Organization(code="VFWC", name="Victoria Family Works Centre"),
    Organization(code="WAWC", name="Women's Action Women's Centre"),
    Organization(code="VCWS", name="Victoria Community Women's Shelter"),
    Organization(code="CWWA", name="Community Women's Worker Association"),
    Organization(code="YWCA", name="YWCA Victoria"),
)

GENERIC_ORGANIZATION = Organization(name=GENERIC_ORGANIZATION_NAME, code=GENERIC_ORGANIZATION_CODE)

# Module-level cache
_catalog_cache: Optional[tuple[Organization, ...]] = None


def _get_catalog_path() -> Path:
    return get_config_dir() / "organizations.yaml"


def _parse_catalog(raw: Any, source: Path) -> tuple[Organization, ...]:
    """Validate the YAML payload into an ordered tuple of organizations."""
    entries = (raw or {}).get("organizations") if isinstance(raw, dict) else None
    if not isinstance(entries, list) or not entries:
        raise ValueError(f"{source}: expected a non-empty 'organizations' list")

    organizations = []
    seen_codes: set[str] = set()
    for position, entry in enumerate(entries):
        if not isinstance(entry, dict) or not entry.get("code") or not entry.get("name"):
            raise ValueError(f"{source}: organization #{position} needs both 'code' and 'name': {entry!r}")
        code = str(entry["code"]).strip().upper()
        if code in seen_codes:
            raise ValueError(f"{source}: duplicate organization code {code}")
        seen_codes.add(code)
        organizations.append(Organization(code=code, name=str(entry["name"]).strip()))
    return tuple(organizations)


def load_organizations() -> tuple[Organization, ...]:
    """Load and cache the organization catalog, falling back to built-in defaults."""
    global _catalog_cache
    if _catalog_cache is not None:
        return _catalog_cache

    catalog_path = _get_catalog_path()
    if not catalog_path.exists():
        logger.warning(f"Organization catalog not found at {catalog_path}, using defaults")
        _catalog_cache = DEFAULT_ORGANIZATIONS
        return _catalog_cache

    with open(catalog_path) as f:
        raw = yaml.safe_load(f)

    _catalog_cache = _parse_catalog(raw, catalog_path)
    logger.info(f"Loaded {len(_catalog_cache)} organizations from {catalog_path}")
    return _catalog_cache


def clear_cache() -> None:
    """Clear the cached catalog (for testing or config reload)."""
    global _catalog_cache
    _catalog_cache = None


def detect_organization(
    rows: Sequence[Mapping[str, Any]],
    catalog: Optional[Sequence[Organization]] = None,
) -> Optional[Organization]:
    """
    Detect the reporting organization from raw CSV rows.

    Search order:
    1. Any catalog code in a case-insensitive serialization of all row data
    2. A column header that exactly matches a catalog code
    3. The generic placeholder organization

    Args:
        rows: Parsed CSV rows (header -> value)
        catalog: Optional catalog override; defaults to load_organizations()

    Returns:
        The detected Organization, or None when rows is empty
    """
    if not rows:
        return None

    organizations = tuple(catalog) if catalog is not None else load_organizations()
    all_text = json.dumps([dict(row) for row in rows], default=str).lower()

    for organization in organizations:
        if organization.code.lower() in all_text:
            logger.debug(f"Detected organization {organization.code} in row data")
            return organization

    by_code = {organization.code: organization for organization in organizations}
    for header in rows[0].keys():
        match = by_code.get(str(header).upper())
        if match:
            logger.debug(f"Detected organization {match.code} from header '{header}'")
            return match

    return GENERIC_ORGANIZATION
