"""
Standardized response libraries.

Pre-defined option sets keep answers comparable across organizations.
Catalogs are tuples of frozen Option models built once at import and never
mutated; callers that need a list should copy with list(...).
"""

from .constants import OTHER_OPTION_LABEL, OTHER_OPTION_VALUE
from .schemas.fields import Option


def _catalog(*pairs: tuple) -> tuple[Option, ...]:
    return tuple(Option(value=value, label=label) for value, label in pairs)


OTHER = Option(value=OTHER_OPTION_VALUE, label=OTHER_OPTION_LABEL)

DIFFICULTY = _catalog(
    ("not_difficult", "Not difficult"),
    ("somewhat_difficult", "Somewhat difficult"),
    ("very_difficult", "Very difficult"),
    ("not_applicable", "Not applicable"),
)

YES_NO_NA = _catalog(
    ("yes", "Yes"),
    ("no", "No"),
    ("not_applicable", "Not applicable"),
)

YES_NO = _catalog(
    ("yes", "Yes"),
    ("no", "No"),
)

SATISFACTION_SCALE = _catalog(
    (1, "Very Dissatisfied"),
    (2, "Dissatisfied"),
    (3, "Neutral"),
    (4, "Satisfied"),
    (5, "Very Satisfied"),
)

EMPLOYEE_BENEFITS = _catalog(
    ("health_dental", "Health and/or dental insurance"),
    ("eap", "Employee Assistance Program (EAP)"),
    ("mental_health_days", "Paid mental health or self-care days"),
    ("rrsp_matching", "RRSP matching or retirement savings program"),
    ("professional_development", "Paid professional development time or funds"),
    ("flexible_schedule", "Flexible work schedule"),
    ("remote_work", "Remote work options"),
    ("wellness_program", "Wellness program or gym membership"),
    ("extended_leave", "Extended parental/family leave"),
    (OTHER_OPTION_VALUE, OTHER_OPTION_LABEL),
)

BOARD_COMPENSATION = _catalog(
    ("per_meeting", "Per-meeting stipend"),
    ("monthly", "Monthly honorarium"),
    ("annual", "Annual honorarium"),
    ("travel", "Travel reimbursement"),
    ("childcare", "Childcare reimbursement"),
    ("gifts", "Gift cards or tokens"),
    (OTHER_OPTION_VALUE, OTHER_OPTION_LABEL),
)

COLLABORATION_TYPES = _catalog(
    ("co_programming", "Co-delivered programming or services"),
    ("joint_funding", "Joint funding proposals or reports"),
    ("shared_advocacy", "Shared advocacy or policy initiatives"),
    ("events", "Attended shared events or working groups"),
    ("coordination", "Regular coordination or planning"),
    ("resource_sharing", "Resource sharing (space, staff, tools)"),
    (OTHER_OPTION_VALUE, OTHER_OPTION_LABEL),
)

DISCLOSURE_CHANNELS = _catalog(
    ("annual_report", "Annual report"),
    ("agm_documents", "AGM documents"),
    ("audited_financials", "Audited financials"),
    ("website", "Website"),
    (OTHER_OPTION_VALUE, OTHER_OPTION_LABEL),
)

AUDIT_TYPES = _catalog(
    ("full_audit", "Full financial audit (by external auditor)"),
    ("review_engagement", "Financial review engagement (by external accountant)"),
    ("internal_review", "Internal financial review by board or finance committee"),
    (OTHER_OPTION_VALUE, OTHER_OPTION_LABEL),
)

# Name -> catalog, for lookups by configuration or tests
STANDARD_OPTIONS: dict[str, tuple[Option, ...]] = {
    "difficulty": DIFFICULTY,
    "yes_no_na": YES_NO_NA,
    "yes_no": YES_NO,
    "satisfaction_scale": SATISFACTION_SCALE,
    "employee_benefits": EMPLOYEE_BENEFITS,
    "board_compensation": BOARD_COMPENSATION,
    "collaboration_types": COLLABORATION_TYPES,
    "disclosure_channels": DISCLOSURE_CHANNELS,
    "audit_types": AUDIT_TYPES,
}
