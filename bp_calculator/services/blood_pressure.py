"""
Blood Pressure Service

Validates incoming readings, classifies them, and assembles the combined
result consumed by the JSON API and the web page.
"""
from typing import Any, Dict, List, Optional

from bp_calculator import config
from bp_calculator.core.classification import (
    BPCategory,
    Reading,
    explain,
    get_category_info,
    get_message,
)
from bp_calculator.utils import RangeViolation, get_logger

logger = get_logger(__name__)


def validate_reading(systolic: int, diastolic: int) -> Reading:
    """
    Check clinical bounds and ordering, returning an immutable Reading.

    Raises:
        RangeViolation: systolic outside [70, 190], diastolic outside
            [40, 100], or systolic not greater than diastolic.
    """
    if systolic < config.SYSTOLIC_MIN or systolic > config.SYSTOLIC_MAX:
        logger.warning(f"BP validation failed - Systolic out of range: {systolic}")
        raise RangeViolation(
            f"Systolic must be between {config.SYSTOLIC_MIN} and {config.SYSTOLIC_MAX}",
            field="systolic",
            details={"value": systolic},
        )

    if diastolic < config.DIASTOLIC_MIN or diastolic > config.DIASTOLIC_MAX:
        logger.warning(f"BP validation failed - Diastolic out of range: {diastolic}")
        raise RangeViolation(
            f"Diastolic must be between {config.DIASTOLIC_MIN} and {config.DIASTOLIC_MAX}",
            field="diastolic",
            details={"value": diastolic},
        )

    if systolic <= diastolic:
        logger.warning(f"BP validation failed - Systolic <= Diastolic: {systolic}/{diastolic}")
        raise RangeViolation(
            "Systolic must be greater than Diastolic",
            field="reading",
            details={"systolic": systolic, "diastolic": diastolic},
        )

    return Reading(systolic=systolic, diastolic=diastolic)


class BloodPressureService:
    """
    Composes validation, classification and explanation.

    Stateless; one instance can serve any number of concurrent requests.
    """

    def calculate(self, systolic: int, diastolic: int) -> Dict[str, Any]:
        """
        Classify a reading and attach its explanation.

        Raises:
            RangeViolation: when the reading fails validation.
        """
        logger.info(f"BP calculation - Systolic: {systolic}, Diastolic: {diastolic}")
        reading = validate_reading(systolic, diastolic)

        category = reading.category
        info = get_category_info(category.value)
        logger.info(
            f"Blood pressure reading {reading.systolic}/{reading.diastolic} "
            f"categorized as {category.value}"
        )

        return {
            "category": category.value,
            "category_display_name": category.display_name,
            "systolic": reading.systolic,
            "diastolic": reading.diastolic,
            "message": get_message(category.value),
            "explanation": info.explanation,
            "recommendations": info.recommendation,
            "range": info.range,
        }

    def explain(self, category: Optional[str]) -> Dict[str, Any]:
        """Explanation and guidance for category text; never raises."""
        logger.info(f"BP explanation requested for category: {category}")
        result = explain(category)
        if not result.is_valid:
            logger.debug(f"Unrecognised category text: {category!r}")
        return result.to_dict()

    @staticmethod
    def list_categories() -> List[Dict[str, str]]:
        """All categories, mildest first, with display names and ranges."""
        return [
            {
                "name": c.value,
                "display_name": c.display_name,
                "range": get_category_info(c.value).range,
            }
            for c in BPCategory
        ]
