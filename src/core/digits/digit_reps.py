"""
DigitReps — Конверсия целых в цифры системы счисления

Алгоритм: digit = n mod base; n = n div base (цифры от младшей к старшей)
в builder ширины shortest_digit_type(base), затем разворот списка.
n = 0 даёт пустой список цифр.

Входные типы:
- int (знаковый, произвольной длины)
- BigUnsignedInteger
- numpy integer scalars (np.int8..np.int64, np.uint8..np.uint64)

Для знаковых numpy-скаляров фиксированной ширины минимальное значение
отображается в модуль через max + 1, а не через отрицание (в фиксированной
ширине -min не представим).
"""

import logging
from typing import Any

import numpy as np

from src.core.digits.digit_list import DigitList, DigitListBuilder
from src.core.digits.integral_reps import SignedIntegralDigitRep, UnsignedIntegralDigitRep
from src.core.numerics.big_unsigned import BigUnsignedInteger
from src.core.numerics.errors import ArgumentRangeError
from src.core.numerics.guards import as_integer, validate_base

log = logging.getLogger(__name__)


# =============================================================================
# ВНУТРЕННИЕ ПРИМИТИВЫ
# =============================================================================


def digits_in_base(magnitude: int, base: int) -> DigitList:
    """
    Цифры неотрицательного целого в основании base (без проверок).

    Args:
        magnitude: Неотрицательное целое
        base: Основание, уже проверенное (>= 2)

    Returns:
        DigitList ширины shortest_digit_type(base), без ведущих нулей
    """
    builder = DigitListBuilder.new_from_base_size(base)
    while magnitude > 0:
        magnitude, digit = divmod(magnitude, base)
        builder.add(digit)
    builder.reverse()
    return builder.to_list()


def _signed_magnitude(n: Any) -> tuple[bool, int]:
    """Знак и модуль знакового целого."""
    if isinstance(n, np.signedinteger):
        info = np.iinfo(type(n))
        value = int(n)
        if value == int(info.min):
            return True, int(info.max) + 1
        return value < 0, abs(value)

    value = as_integer(n, "n")
    return value < 0, -value if value < 0 else value


# =============================================================================
# ПУБЛИЧНЫЕ ОПЕРАЦИИ
# =============================================================================


def unsigned_in_base(n: Any, base: Any) -> UnsignedIntegralDigitRep:
    """
    Представление неотрицательного целого в основании base.

    Args:
        n: int >= 0, BigUnsignedInteger или numpy integer >= 0
        base: Основание >= 2

    Raises:
        ArgumentRangeError: Если n < 0 или base < 2

    Examples:
        >>> unsigned_in_base(421305, 10).digits.raw_digits
        (4, 2, 1, 3, 0, 5)
    """
    base_value = validate_base(base)
    value = as_integer(n, "n")
    if value < 0:
        raise ArgumentRangeError(
            f"n must be non-negative for an unsigned representation, got {value}"
        )

    digits = digits_in_base(value, base_value)
    log.debug(
        "Converted %d to %d %s digits in base %d",
        value,
        len(digits),
        digits.digit_type.name,
        base_value,
    )
    return UnsignedIntegralDigitRep(base=base_value, digits=digits)


def signed_in_base(n: Any, base: Any) -> SignedIntegralDigitRep:
    """
    Представление знакового целого в основании base.

    Args:
        n: int, BigUnsignedInteger или numpy integer
        base: Основание >= 2

    Raises:
        ArgumentRangeError: Если base < 2

    Examples:
        >>> rep = signed_in_base(-109800602, 300)
        >>> rep.is_negative, rep.digits.raw_digits
        (True, (4, 20, 2, 2))
    """
    base_value = validate_base(base)
    is_negative, magnitude = _signed_magnitude(n)

    digits = digits_in_base(magnitude, base_value)
    log.debug(
        "Converted %s%d to %d %s digits in base %d",
        "-" if is_negative else "",
        magnitude,
        len(digits),
        digits.digit_type.name,
        base_value,
    )
    return SignedIntegralDigitRep(is_negative=is_negative, base=base_value, digits=digits)


def in_base(n: Any, base: Any) -> UnsignedIntegralDigitRep | SignedIntegralDigitRep:
    """
    Представление целого в основании base с выбором по типу входа.

    BigUnsignedInteger и беззнаковые numpy-скаляры дают
    UnsignedIntegralDigitRep, остальные целые — SignedIntegralDigitRep.
    """
    if isinstance(n, (BigUnsignedInteger, np.unsignedinteger)):
        return unsigned_in_base(n, base)
    return signed_in_base(n, base)
