"""
Blood Pressure Classifier

Rule ordering (first match wins):
    1. High     - systolic >= 140 or diastolic >= 90
    2. PreHigh  - systolic >= 120 or diastolic >= 80
    3. Ideal    - systolic >= 90 and diastolic >= 60
    4. Low      - everything else

Total over all integers: bounds checking belongs to the caller
(see bp_calculator.services.blood_pressure.validate_reading).
"""
from dataclasses import dataclass

from .base import BPCategory

# ── Thresholds (mmHg) ────────────────────────────────────────────────────────
SBP_HIGH    = 140
DBP_HIGH    = 90
SBP_PREHIGH = 120
DBP_PREHIGH = 80
SBP_IDEAL   = 90
DBP_IDEAL   = 60


def classify(systolic: int, diastolic: int) -> BPCategory:
    """Map a (systolic, diastolic) pair to its BPCategory."""
    if systolic >= SBP_HIGH or diastolic >= DBP_HIGH:
        return BPCategory.HIGH
    if systolic >= SBP_PREHIGH or diastolic >= DBP_PREHIGH:
        return BPCategory.PRE_HIGH
    if systolic >= SBP_IDEAL and diastolic >= DBP_IDEAL:
        return BPCategory.IDEAL
    return BPCategory.LOW


@dataclass(frozen=True)
class Reading:
    """A validated (systolic, diastolic) pair in mmHg."""
    systolic: int
    diastolic: int

    @property
    def category(self) -> BPCategory:
        return classify(self.systolic, self.diastolic)
