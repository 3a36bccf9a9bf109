"""
Blood Pressure Classification - Base Types

Defines the category enumeration and the record types produced by the
explainer.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum


class BPCategory(str, Enum):
    """
    Clinical bucket for a reading.

    LOW      – below 90/60 mmHg
    IDEAL    – 90/60 up to 120/80 mmHg
    PRE_HIGH – 121/81 up to 139/89 mmHg
    HIGH     – 140/90 mmHg and above
    """
    LOW      = "Low"
    IDEAL    = "Ideal"
    PRE_HIGH = "PreHigh"
    HIGH     = "High"

    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES[self]


DISPLAY_NAMES = {
    BPCategory.LOW:      "Low Blood Pressure",
    BPCategory.IDEAL:    "Ideal Blood Pressure",
    BPCategory.PRE_HIGH: "Pre-High Blood Pressure",
    BPCategory.HIGH:     "High Blood Pressure",
}


@dataclass(frozen=True)
class CategoryInfo:
    """Static explanation record for one category (or the fallback)."""
    explanation: str
    recommendation: str
    range: str
    display_name: str = ""


@dataclass(frozen=True)
class CareGuidance:
    """Doctor-visit urgency and monitoring frequency for a category."""
    when_to_see_doctor: str
    monitoring_frequency: str


@dataclass(frozen=True)
class CategoryExplanation:
    """Combined explainer output for one category text."""
    category: str
    is_valid: bool
    range: str
    explanation: str
    recommendations: str
    when_to_see_doctor: str
    monitoring_frequency: str

    def to_dict(self) -> dict:
        return asdict(self)
