"""
Blood Pressure Category Explainer

Turns category text into patient-facing explanation, recommendation and
range strings, plus doctor-visit and monitoring guidance.

Every lookup is total: None, blank, or unrecognised text resolves to a
fallback record instead of raising. Matching is case-insensitive against
the four category names.

Usage:
    from bp_calculator.core.classification import explain

    result = explain("prehigh")
    print(result.explanation, result.when_to_see_doctor)
"""
from __future__ import annotations

from typing import Optional

from .base import (
    BPCategory,
    CareGuidance,
    CategoryExplanation,
    CategoryInfo,
    DISPLAY_NAMES,
)

# ── Static lookup table ──────────────────────────────────────────────────────

_CATEGORY_INFO = {
    BPCategory.LOW: CategoryInfo(
        explanation="Low BP (<90/60 mmHg): May cause dizziness. Usually not concerning.",
        recommendation="Drink more water. Add slight salt. Avoid sudden movements.",
        range="< 90/60 mmHg",
        display_name=DISPLAY_NAMES[BPCategory.LOW],
    ),
    BPCategory.IDEAL: CategoryInfo(
        explanation="Ideal BP (90/60-120/80 mmHg): Optimal for heart health.",
        recommendation="Maintain lifestyle. Exercise regularly. Eat balanced diet.",
        range="90/60 - 120/80 mmHg",
        display_name=DISPLAY_NAMES[BPCategory.IDEAL],
    ),
    BPCategory.PRE_HIGH: CategoryInfo(
        explanation="Pre-High BP (121/81-139/89 mmHg): Lifestyle changes needed.",
        recommendation="Reduce salt. Exercise more. Manage stress. Limit alcohol.",
        range="121/81 - 139/89 mmHg",
        display_name=DISPLAY_NAMES[BPCategory.PRE_HIGH],
    ),
    BPCategory.HIGH: CategoryInfo(
        explanation="High BP (≥140/90 mmHg): Consult doctor. Increases heart risks.",
        recommendation="See doctor. Monitor weekly. May need medication.",
        range="≥ 140/90 mmHg",
        display_name=DISPLAY_NAMES[BPCategory.HIGH],
    ),
}

FALLBACK_INFO = CategoryInfo(
    explanation="Invalid category. Use: Low, Ideal, PreHigh, High",
    recommendation="No recommendations for invalid category.",
    range="Unknown range",
)

# Lowercase category name -> member
_CATEGORY_BY_KEY = {category.value.lower(): category for category in BPCategory}

_CATEGORY_MESSAGES = {
    BPCategory.LOW:      "Your blood pressure is lower than normal",
    BPCategory.IDEAL:    "Your blood pressure is ideal",
    BPCategory.PRE_HIGH: "Your blood pressure is pre-high",
    BPCategory.HIGH:     "Your blood pressure is high",
}
FALLBACK_MESSAGE = "Unable to determine blood pressure category"

# ── Guidance ─────────────────────────────────────────────────────────────────

_GUIDANCE = {
    BPCategory.HIGH: CareGuidance(
        when_to_see_doctor="Consult doctor as soon as possible",
        monitoring_frequency="Weekly or as directed by doctor",
    ),
    BPCategory.PRE_HIGH: CareGuidance(
        when_to_see_doctor="Schedule checkup within 3 months",
        monitoring_frequency="Monthly",
    ),
}
DEFAULT_GUIDANCE = CareGuidance(
    when_to_see_doctor="Regular annual checkups are sufficient",
    monitoring_frequency="Every 6-12 months",
)


# ── Helpers ──────────────────────────────────────────────────────────────────

def normalize_category(category: Optional[str]) -> Optional[BPCategory]:
    """
    Resolve category text to a BPCategory, or None when it matches nothing.

    The single normalisation point for every lookup below: None and blank
    text are invalid, otherwise surrounding whitespace and case are ignored.
    """
    if category is None:
        return None
    return _CATEGORY_BY_KEY.get(category.strip().lower())


def get_category_info(category: Optional[str]) -> CategoryInfo:
    return _CATEGORY_INFO.get(normalize_category(category), FALLBACK_INFO)


# ── Public lookups ───────────────────────────────────────────────────────────

def get_explanation(category: Optional[str]) -> str:
    """Descriptive sentence with the numeric range and a risk note."""
    return get_category_info(category).explanation


def get_recommendations(category: Optional[str]) -> str:
    """Actionable advice for the category."""
    return get_category_info(category).recommendation


def get_range(category: Optional[str]) -> str:
    """Numeric range as display text."""
    return get_category_info(category).range


def get_message(category: Optional[str]) -> str:
    member = normalize_category(category)
    return _CATEGORY_MESSAGES.get(member, FALLBACK_MESSAGE)


def get_guidance(category: Optional[str]) -> CareGuidance:
    """
    Doctor-visit urgency and monitoring frequency.

    High and PreHigh get specific guidance; every other input, invalid
    text included, gets the routine schedule.
    """
    return _GUIDANCE.get(normalize_category(category), DEFAULT_GUIDANCE)


def explain(category: Optional[str]) -> CategoryExplanation:
    """
    Bundle all lookups for one category text.

    `is_valid` is True iff the explanation is not the fallback string.
    The category text is echoed back as given (None becomes "").
    """
    member = normalize_category(category)
    info = _CATEGORY_INFO.get(member, FALLBACK_INFO)
    guidance = _GUIDANCE.get(member, DEFAULT_GUIDANCE)
    return CategoryExplanation(
        category=category or "",
        is_valid=info.explanation != FALLBACK_INFO.explanation,
        range=info.range,
        explanation=info.explanation,
        recommendations=info.recommendation,
        when_to_see_doctor=guidance.when_to_see_doctor,
        monitoring_frequency=guidance.monitoring_frequency,
    )
