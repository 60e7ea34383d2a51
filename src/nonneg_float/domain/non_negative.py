"""
NonNegative — обёртка float с гарантией неотрицательности и конечности

Immutable value object над любым представлением float (Python float,
numpy.float16/32/64). Инвариант проверяется при конструировании и
действует всё время жизни экземпляра:

    value >= 0 AND isfinite(value)

Конструкторы:
- NonNegative(value) / NonNegative.try_new(value) — fallible: InvalidValueError
- NonNegative.new(value) — asserting: NonNegativeInvariantViolation
- NonNegative.zero() / NonNegative() — ноль, всегда успешно

Сериализация (pydantic v2): закодированная форма — голое число,
декодирование повторно выполняет try_new.
"""

import functools
import typing
from typing import Any, Final, Generic, TypeVar

import numpy as np
from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import PydanticCustomError, core_schema

from nonneg_float.math.numerical_safeguards import (
    DEFAULT_REPRESENTATION,
    coerce_to_representation,
    is_float_representation,
    is_non_negative_finite,
)

# =============================================================================
# СООБЩЕНИЯ ОБ ОШИБКАХ
# =============================================================================

# Фиксированное описание единственного вида ошибки (InvalidValue)
INVALID_VALUE_MESSAGE: Final[str] = "Value must be non-negative and finite"


# Представление: Python float или скаляр numpy.floating
FloatT = TypeVar("FloatT", float, np.floating)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidValueError(ValueError):
    """
    Значение отрицательное, NaN или ±Inf.

    Attributes:
        value: Отклонённое значение (после приведения к представлению)
    """

    description: Final[str] = INVALID_VALUE_MESSAGE

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"{INVALID_VALUE_MESSAGE}, got {value!r}")


class NonNegativeInvariantViolation(AssertionError):
    """
    Нарушение инварианта в asserting-конструкторе NonNegative.new.

    Не является ValueError: обработчики fallible-пути его не перехватывают.
    """


# =============================================================================
# NON-NEGATIVE VALUE
# =============================================================================


@functools.total_ordering
class NonNegative(Generic[FloatT]):
    """
    Неотрицательное конечное значение float.

    Immutable: присваивание и удаление атрибутов запрещены.
    Равенство и порядок совпадают со стандартными для float; NaN исключён
    конструированием, поэтому порядок тотальный.

    Параметр типа — только аннотация (его учитывает pydantic): вызов
    NonNegative[np.float32](1.0) хранит Python float. Для приведения к
    представлению используйте NonNegative(1.0, np.float32) или
    nonneg(np.float32, 1.0).
    """

    __slots__ = ("_value",)

    def __init__(self, value: Any = 0.0, representation: type | None = None):
        """
        Fallible-конструктор.

        Args:
            value: Исходное значение (default: 0.0)
            representation: Представление float (optional, иначе выводится)

        Raises:
            InvalidValueError: Если value < 0, NaN или ±Inf
            TypeError: Если значение не вещественное или представление не float
        """
        coerced = coerce_to_representation(value, representation)
        if not is_non_negative_finite(coerced):
            raise InvalidValueError(coerced)
        object.__setattr__(self, "_value", coerced)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls, representation: type = DEFAULT_REPRESENTATION) -> "NonNegative[FloatT]":
        """Аддитивная единица (0) в заданном представлении."""
        return cls(0.0, representation)

    @classmethod
    def try_new(
        cls, value: Any, representation: type | None = None
    ) -> "NonNegative[FloatT]":
        """
        Валидация и обёртка значения.

        Args:
            value: Исходное значение
            representation: Представление float (optional)

        Returns:
            Новый экземпляр NonNegative

        Raises:
            InvalidValueError: Если value < 0, NaN или ±Inf
        """
        return cls(value, representation)

    @classmethod
    def new(cls, value: Any, representation: type | None = None) -> "NonNegative[FloatT]":
        """
        Asserting-конструктор для заведомо валидных значений (литералы).

        Raises:
            NonNegativeInvariantViolation: Если значение невалидно
        """
        try:
            return cls.try_new(value, representation)
        except InvalidValueError as exc:
            raise NonNegativeInvariantViolation(INVALID_VALUE_MESSAGE) from exc

    # -------------------------------------------------------------------------
    # Доступ
    # -------------------------------------------------------------------------

    def get(self) -> FloatT:
        """Обёрнутое значение."""
        return self._value

    @property
    def value(self) -> FloatT:
        return self._value

    # -------------------------------------------------------------------------
    # Immutability
    # -------------------------------------------------------------------------

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        # Unpickle проходит через __init__ и повторно валидирует значение
        return (type(self), (self._value,))

    # -------------------------------------------------------------------------
    # Сравнение и hash
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NonNegative):
            return NotImplemented
        return bool(self._value == other._value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NonNegative):
            return NotImplemented
        return bool(self._value < other._value)

    def __hash__(self) -> int:
        return hash(self._value)

    # -------------------------------------------------------------------------
    # Отображение и конверсия
    # -------------------------------------------------------------------------

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __str__(self) -> str:
        return str(self._value)

    def __format__(self, format_spec: str) -> str:
        return format(self._value, format_spec)

    def __float__(self) -> float:
        return float(self._value)

    # -------------------------------------------------------------------------
    # Pydantic integration
    # -------------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Core schema для pydantic v2.

        Вход: число или NonNegative; значение целиком проходит через try_new
        с представлением из параметра типа (NonNegative[np.float32]), поэтому
        bool и строки отклоняются так же, как в конструкторе.
        Выход: голое число (в JSON-режиме — Python float).
        """
        representation = _representation_from_source(source_type)

        def validate(value: Any) -> "NonNegative[Any]":
            if isinstance(value, NonNegative):
                value = value.get()
            try:
                return cls.try_new(value, representation)
            except TypeError as exc:
                raise PydanticCustomError(
                    "non_negative_type",
                    "Input should be a real number, got {type_name}",
                    {"type_name": type(value).__name__},
                ) from exc

        return core_schema.no_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize, info_arg=True
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        # Plain-валидатор не описывает вход; на проводе это число >= 0
        json_schema = handler(core_schema.float_schema())
        json_schema["minimum"] = 0
        return json_schema


# =============================================================================
# PYDANTIC HELPERS
# =============================================================================


def _representation_from_source(source_type: Any) -> type | None:
    """Представление из параметра NonNegative[...]; None для голого типа."""
    args = typing.get_args(source_type)
    if args and is_float_representation(args[0]):
        return args[0]
    return None


def _serialize(value: NonNegative[Any], info: core_schema.SerializationInfo) -> Any:
    if info.mode_is_json():
        return float(value)
    return value.get()
