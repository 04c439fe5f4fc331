"""
Text extraction helpers for free-text measurement methods.

Workplan methods embed structured content in prose, e.g.:

    Does your organization offer a wellness program? (Yes/No)
    If yes, which of the following are included? (Check all that apply):
    ☐ Gym membership ☐ Mental health days ☐ Other (please specify)

This module pulls out:
- checkbox options (segments after each ☐ glyph)
- the embedded yes/no question
- the embedded checkbox question
"""

import re

from ..constants import CHECKBOX_GLYPH, OTHER_OPTION_VALUE, OTHER_PLEASE_SPECIFY
from ..options import OTHER
from ..schemas.fields import Option

YES_NO_MARKER = re.compile(r"\(\s*yes\s*/\s*no\s*\)", re.IGNORECASE)
YES_NO_ANY = re.compile(r"yes\s*/\s*no", re.IGNORECASE)
CHECK_ALL_MARKER = "check all that apply"

_YES_NO_QUESTION = re.compile(r"^([^?]*\?)\s*\(\s*yes\s*/\s*no\s*\)", re.IGNORECASE)
_CHECKBOX_QUESTION = re.compile(r"\bwhich of the following[^?]*\?|\bwhat\b[^?]*\?", re.IGNORECASE)
_NON_ALNUM = re.compile(r"[^a-z0-9]+")

DEFAULT_YES_NO_QUESTION = "Does your organization have this?"
DEFAULT_CHECKBOX_QUESTION = "Which of the following apply?"


def slugify_option(label: str) -> str:
    """
    Derive a machine value from an option label.

    "Paid mental-health days" -> "paid_mental_health_days". Idempotent:
    slugify_option(slugify_option(x)) == slugify_option(x).
    """
    return _NON_ALNUM.sub("_", label.lower()).strip("_")


def _unique_value(slug: str, taken: set[str]) -> str:
    """Suffix colliding slugs with _2, _3, ... so option values stay unique."""
    if slug not in taken:
        return slug
    n = 2
    while f"{slug}_{n}" in taken:
        n += 1
    return f"{slug}_{n}"


def extract_checkbox_options(method_text: str | None) -> list[Option]:
    """
    Extract ☐-delimited options from a measurement method.

    Text before the first glyph is a preamble and is discarded. Each option
    ends at the next glyph or the end of its line, so both line-per-option
    and inline "☐ A ☐ B" layouts work. "Other (please specify)" entries are
    dropped and a single trailing "Other (specify)" option is appended when
    at least one real option was found.

    Returns:
        Options in source order, or [] when the text holds none
    """
    if not method_text or CHECKBOX_GLYPH not in method_text:
        return []

    options: list[Option] = []
    taken = {OTHER_OPTION_VALUE}
    for segment in method_text.split(CHECKBOX_GLYPH)[1:]:
        label = segment.strip().split("\n", 1)[0].strip()
        if not label or OTHER_PLEASE_SPECIFY in label.lower():
            continue
        slug = slugify_option(label)
        if not slug:
            continue
        value = _unique_value(slug, taken)
        taken.add(value)
        options.append(Option(value=value, label=label))

    if options:
        options.append(OTHER)
    return options


def extract_yes_no_question(method_text: str | None) -> str:
    """Return the question preceding "(Yes/No)", or a generic default."""
    match = _YES_NO_QUESTION.search((method_text or "").strip())
    return match.group(1).strip() if match else DEFAULT_YES_NO_QUESTION


def extract_checkbox_question(method_text: str | None) -> str:
    """
    Return the first "which of the following...?" or "what...?" question.

    Matching ignores case; the returned label starts with a capital letter
    ("If yes, which of the following..." -> "Which of the following...").
    """
    match = _CHECKBOX_QUESTION.search(method_text or "")
    if not match:
        return DEFAULT_CHECKBOX_QUESTION
    question = match.group(0).strip()
    return question[0].upper() + question[1:]


def has_yes_no_marker(method_text: str) -> bool:
    """True for a parenthesized "(Yes/No)" marker, any case or spacing."""
    return bool(YES_NO_MARKER.search(method_text))


def mentions_yes_no(method_text: str) -> bool:
    """True for any "yes/no" variant ("Yes/No", "yes / no", ...)."""
    return bool(YES_NO_ANY.search(method_text))
