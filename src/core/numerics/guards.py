"""
Argument Guards — Валидация аргументов на границе API

Набор validate_* функций: каждая либо молча возвращает управление,
либо сразу поднимает исключение из src.core.numerics.errors.
"""

import operator
from typing import Any, Final

from src.core.numerics.errors import ArgumentNullError, ArgumentRangeError

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Минимальное основание системы счисления
MIN_BASE: Final[int] = 2


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_not_none(value: Any, name: str) -> None:
    """
    Валидация, что аргумент не None.

    Raises:
        ArgumentNullError: Если value is None
    """
    if value is None:
        raise ArgumentNullError(f"{name} cannot be None")


def as_integer(value: Any, name: str) -> int:
    """
    Приведение целочисленного значения к int.

    Принимает int, BigUnsignedInteger, numpy integer scalars и всё,
    что реализует __index__.

    Raises:
        ArgumentNullError: Если value is None
        TypeError: Если value не целочисленное
    """
    validate_not_none(value, name)
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"{name} must be an integer, got {type(value).__name__}"
        ) from None


def validate_non_negative(value: int, name: str) -> None:
    """
    Валидация, что целое значение неотрицательное.

    Raises:
        ArgumentRangeError: Если value < 0
    """
    if value < 0:
        raise ArgumentRangeError(f"{name} must be non-negative, got {value}")


def validate_base(base: Any, name: str = "base") -> int:
    """
    Валидация основания системы счисления.

    Returns:
        Основание как int

    Raises:
        ArgumentNullError: Если base is None
        ArgumentRangeError: Если base < 2
    """
    value = as_integer(base, name)
    if value < MIN_BASE:
        raise ArgumentRangeError(f"{name} must be at least {MIN_BASE}, got {value}")
    return value
