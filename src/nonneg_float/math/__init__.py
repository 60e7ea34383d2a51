"""
Core math modules для nonneg_float

Предикаты float и работа с представлениями.
"""

from nonneg_float.math.numerical_safeguards import (
    # Representations
    DEFAULT_REPRESENTATION,
    SUPPORTED_REPRESENTATIONS,
    coerce_to_representation,
    infer_representation,
    is_float_representation,
    # NaN/Inf detection
    is_non_negative_finite,
    is_valid_float,
)

__all__ = [
    # Representations
    "DEFAULT_REPRESENTATION",
    "SUPPORTED_REPRESENTATIONS",
    "coerce_to_representation",
    "infer_representation",
    "is_float_representation",
    # NaN/Inf detection
    "is_non_negative_finite",
    "is_valid_float",
]
