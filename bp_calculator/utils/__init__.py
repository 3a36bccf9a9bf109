"""
Utilities Package - Logging and Exception Handling
"""
from .logging import daily_file_handler, get_logger, setup_logging
from .exceptions import BPCalculatorError, RangeViolation

__all__ = [
    "daily_file_handler",
    "get_logger",
    "setup_logging",
    "BPCalculatorError",
    "RangeViolation",
]
