"""
Domain models and value objects.

Contains the NonNegative value object and its construction helper.
"""

from nonneg_float.domain.construction import nonneg
from nonneg_float.domain.non_negative import (
    INVALID_VALUE_MESSAGE,
    InvalidValueError,
    NonNegative,
    NonNegativeInvariantViolation,
)

__all__ = [
    # Value object
    "NonNegative",
    # Errors
    "INVALID_VALUE_MESSAGE",
    "InvalidValueError",
    "NonNegativeInvariantViolation",
    # Construction helper
    "nonneg",
]
