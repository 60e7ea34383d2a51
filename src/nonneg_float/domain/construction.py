"""
nonneg — удобное конструирование NonNegative

Три формы вызова:
    nonneg(float)              → NonNegative.zero(float)
    nonneg(5.5)                → NonNegative.try_new(5.5)
    nonneg(np.float32, 3.14)   → NonNegative.try_new(3.14, representation=np.float32)

Невалидные значения всегда поднимают InvalidValueError (fallible-путь),
никогда NonNegativeInvariantViolation. Для литералов, где нарушение —
ошибка программиста, используйте NonNegative.new.
"""

from typing import Any, overload

from nonneg_float.domain.non_negative import NonNegative
from nonneg_float.math.numerical_safeguards import is_float_representation


@overload
def nonneg(representation: type, /) -> NonNegative[Any]: ...


@overload
def nonneg(value: Any, /) -> NonNegative[Any]: ...


@overload
def nonneg(representation: type, value: Any, /) -> NonNegative[Any]: ...


def nonneg(*args: Any) -> NonNegative[Any]:
    """
    Конструирование NonNegative по одной из трёх форм.

    Raises:
        InvalidValueError: Если значение отрицательное, NaN или ±Inf
        TypeError: Если тип не является представлением float или
            число аргументов не 1 и не 2
    """
    if len(args) == 1:
        (arg,) = args
        if isinstance(arg, type):
            _check_representation(arg)
            return NonNegative.zero(arg)
        return NonNegative.try_new(arg)

    if len(args) == 2:
        representation, value = args
        _check_representation(representation)
        return NonNegative.try_new(value, representation)

    raise TypeError(f"nonneg() takes 1 or 2 positional arguments ({len(args)} given)")


def _check_representation(representation: Any) -> None:
    if not is_float_representation(representation):
        raise TypeError(f"not a floating-point representation: {representation!r}")
