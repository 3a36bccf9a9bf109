"""
Blood Pressure Classification Layer

Classifies readings into categories and explains them.

Usage:
    from bp_calculator.core.classification import classify, explain

    category = classify(130, 85)          # BPCategory.PRE_HIGH
    details = explain(category.value)     # CategoryExplanation
"""
from .base import (
    BPCategory,
    CategoryInfo,
    CareGuidance,
    CategoryExplanation,
    DISPLAY_NAMES,
)
from .classifier import Reading, classify
from .explainer import (
    FALLBACK_INFO,
    explain,
    get_category_info,
    get_explanation,
    get_guidance,
    get_message,
    get_range,
    get_recommendations,
    normalize_category,
)

__all__ = [
    "BPCategory",
    "Reading",
    "CategoryInfo",
    "CareGuidance",
    "CategoryExplanation",
    "DISPLAY_NAMES",
    "FALLBACK_INFO",
    "classify",
    "explain",
    "get_category_info",
    "get_explanation",
    "get_guidance",
    "get_message",
    "get_range",
    "get_recommendations",
    "normalize_category",
]
