"""
Contract validation сериализованного NonNegative

JSON Schema контракта не хранится отдельно: она берётся у pydantic
(TypeAdapter(NonNegative).json_schema() → {"type": "number", "minimum": 0})
и проверяется через jsonschema. Так описание на проводе и декодер
не расходятся.

JSON Schema не выражает конечность: декодирование в NonNegative всё равно
повторно выполняет try_new.
"""

import functools
import logging
from typing import Any, Dict, Iterator

from jsonschema import Draft202012Validator, ValidationError
from pydantic import TypeAdapter

from nonneg_float.domain.non_negative import NonNegative

logger = logging.getLogger(__name__)


@functools.lru_cache(maxsize=1)
def non_negative_json_schema() -> Dict[str, Any]:
    """JSON Schema сериализованного NonNegative (draft 2020-12, от pydantic)."""
    schema = TypeAdapter(NonNegative).json_schema()
    Draft202012Validator.check_schema(schema)
    logger.debug("Built NonNegative JSON schema: %s", schema)
    return schema


def iter_payload_errors(data: Any) -> Iterator[ValidationError]:
    """Итератор по всем ошибкам валидации payload."""
    return Draft202012Validator(non_negative_json_schema()).iter_errors(data)


def validate_non_negative_payload(data: Any) -> None:
    """
    Валидация сериализованного NonNegative.

    Args:
        data: Декодированный JSON (ожидается число)

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    Draft202012Validator(non_negative_json_schema()).validate(data)
