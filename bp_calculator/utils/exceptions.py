"""
Custom Exception Hierarchy

Error types raised by the reading validation layer, carrying structured
information for API responses. The classifier and explainer never raise.
"""
from typing import Optional, Dict, Any


class BPCalculatorError(Exception):
    """Base exception for all blood pressure calculator errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details
        }


class RangeViolation(BPCalculatorError):
    """A reading outside clinical bounds, or systolic not above diastolic."""

    def __init__(
        self,
        message: str,
        field: str = "reading",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="RANGE_VIOLATION",
            details={"field": field, **(details or {})}
        )
        self.field = field
