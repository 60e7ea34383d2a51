"""
Contract Validation Module

Проверка сериализованной формы NonNegative по JSON Schema.
"""

from .validators import (
    iter_payload_errors,
    non_negative_json_schema,
    validate_non_negative_payload,
)

__all__ = [
    "iter_payload_errors",
    "non_negative_json_schema",
    "validate_non_negative_payload",
]
