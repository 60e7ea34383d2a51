"""
nonneg_float — неотрицательные конечные значения float

Единственный value object NonNegative[T] гарантирует при конструировании,
что значение >= 0 и конечное, для любого представления float
(Python float, numpy.float16/32/64).
"""

import logging

from nonneg_float.domain import (
    INVALID_VALUE_MESSAGE,
    InvalidValueError,
    NonNegative,
    NonNegativeInvariantViolation,
    nonneg,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.2.0"

__all__ = [
    "INVALID_VALUE_MESSAGE",
    "InvalidValueError",
    "NonNegative",
    "NonNegativeInvariantViolation",
    "nonneg",
]
