"""
Pydantic models for the JSON API.
"""
from .blood_pressure import (
    BPRequest,
    BPCalculationResponse,
    BPExplanationResponse,
    CategorySummary,
    CategoryListResponse,
    HealthResponse,
    MetricsResponse,
    ErrorResponse,
)

__all__ = [
    "BPRequest",
    "BPCalculationResponse",
    "BPExplanationResponse",
    "CategorySummary",
    "CategoryListResponse",
    "HealthResponse",
    "MetricsResponse",
    "ErrorResponse",
]
