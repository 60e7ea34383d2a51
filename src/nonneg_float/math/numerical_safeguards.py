"""
Numerical Safeguards — примитивы проверки float

Модуль содержит всё, что нужно NonNegative для проверки инварианта:
- NaN/Inf детекция
- Проверка неотрицательности с учётом конечности
- Поддерживаемые представления float (Python float и numpy.floating)
- Приведение значения к выбранному представлению

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не считаются валидными
2. -0.0 считается неотрицательным (IEEE-754: -0.0 == 0.0)
3. Приведение к представлению происходит ДО проверки (переполнение → Inf → отказ)
"""

import math
import numbers
from typing import Any, Final

import numpy as np


# =============================================================================
# ПРЕДСТАВЛЕНИЯ FLOAT
# =============================================================================

# Представление по умолчанию (IEEE-754 binary64)
DEFAULT_REPRESENTATION: Final[type] = float

# Явно поддерживаемые представления; любой подкласс numpy.floating тоже допустим
SUPPORTED_REPRESENTATIONS: Final[tuple[type, ...]] = (
    float,
    np.float16,
    np.float32,
    np.float64,
)


def is_float_representation(representation: Any) -> bool:
    """
    Проверка, является ли тип допустимым представлением float.

    Args:
        representation: Проверяемый объект (ожидается тип)

    Returns:
        True для float и подклассов numpy.floating

    Examples:
        >>> is_float_representation(float)
        True
        >>> is_float_representation(np.float32)
        True
        >>> is_float_representation(int)
        False
    """
    if not isinstance(representation, type):
        return False
    return representation is float or issubclass(representation, np.floating)


def infer_representation(value: Any) -> type:
    """
    Вывод представления по значению.

    Правила:
        - numpy.floating → собственный тип скаляра
        - float → float
        - прочие вещественные (int, Fraction, numpy.integer) → float
        - bool и не-вещественные → TypeError

    Args:
        value: Исходное значение

    Returns:
        Тип представления

    Raises:
        TypeError: Если значение не является вещественным числом
    """
    if isinstance(value, np.floating):
        return type(value)

    # bool — подкласс int, но как литерал числа это почти всегда ошибка
    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"bool is not a floating-point value: {value!r}")

    if isinstance(value, numbers.Real):
        return DEFAULT_REPRESENTATION

    raise TypeError(
        f"expected a real number, got {type(value).__name__}: {value!r}"
    )


def coerce_to_representation(value: Any, representation: type | None = None) -> Any:
    """
    Приведение значения к представлению float.

    Если representation не задан, он выводится через infer_representation.
    Переполнение при сужении (например, 1e39 → float32) даёт Inf без
    RuntimeWarning; такое значение затем отклоняется проверкой конечности.

    Args:
        value: Исходное значение
        representation: Целевое представление (optional)

    Returns:
        Значение в целевом представлении

    Raises:
        TypeError: Если representation не является float-представлением
            или значение не вещественное
    """
    if representation is None:
        representation = infer_representation(value)
    elif not is_float_representation(representation):
        raise TypeError(f"not a floating-point representation: {representation!r}")
    else:
        # Проверка типа входа выполняется и при явном представлении
        infer_representation(value)

    if type(value) is representation:
        return value

    try:
        if representation is float:
            return float(value)
        with np.errstate(over="ignore"):
            return representation(value)
    except OverflowError:
        # Целые вне диапазона float: знак сохраняется, модуль → Inf
        return representation(math.inf if value > 0 else -math.inf)


# =============================================================================
# NaN/Inf ДЕТЕКЦИЯ
# =============================================================================


def is_valid_float(value: Any) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Скаляры numpy.floating проверяются в собственной точности: math.isfinite
    сначала приводит к double, и конечный np.longdouble > 1.8e308 стал бы Inf.

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    if isinstance(value, np.floating):
        return bool(np.isfinite(value))
    return math.isfinite(value)


def is_non_negative_finite(value: Any) -> bool:
    """
    Проверка инварианта NonNegative: value >= 0 и value конечное.

    NaN отклоняется проверкой конечности (любое сравнение с NaN ложно).

    Args:
        value: Проверяемое значение

    Returns:
        True если 0 <= value < +Inf

    Examples:
        >>> is_non_negative_finite(3.14)
        True
        >>> is_non_negative_finite(-0.0)
        True
        >>> is_non_negative_finite(-1e-300)
        False
        >>> is_non_negative_finite(float("inf"))
        False
    """
    return is_valid_float(value) and bool(value >= 0)
