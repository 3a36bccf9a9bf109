"""
API Request / Response Models
"""
from pydantic import BaseModel, Field
from typing import List


class BPRequest(BaseModel):
    """Reading submitted for classification."""
    systolic: int = Field(..., description="Systolic pressure (mmHg), 70-190")
    diastolic: int = Field(..., description="Diastolic pressure (mmHg), 40-100")


class BPCalculationResponse(BaseModel):
    """Classification result for one reading."""
    category: str
    category_display_name: str
    systolic: int
    diastolic: int
    message: str
    explanation: str
    recommendations: str
    range: str


class BPExplanationResponse(BaseModel):
    """Explanation and guidance for a category name."""
    category: str
    is_valid: bool
    range: str
    explanation: str
    recommendations: str
    when_to_see_doctor: str
    monitoring_frequency: str


class CategorySummary(BaseModel):
    name: str
    display_name: str
    range: str


class CategoryListResponse(BaseModel):
    categories: List[CategorySummary]


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    service: str
    version: str
    environment: str


class MetricsResponse(BaseModel):
    timestamp: str
    uptime_seconds: float
    memory_used_bytes: int


class ErrorResponse(BaseModel):
    error: str
    message: str
    details: dict = Field(default_factory=dict)
