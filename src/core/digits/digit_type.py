"""
DigitType — Ширина хранения цифр

Пять ширин хранения, упорядоченных по размеру:
BYTE (8 бит) < USHORT (16) < UINT (32) < ULONG (64) < BIG_UNSIGNED_INTEGER

Фиксированные ширины хранятся в array.array с подходящим typecode,
произвольная — в tuple из BigUnsignedInteger.

shortest_digit_type(base) — единственный источник правды для выбора ширины
по основанию: цифры в base b принимают значения 0..b-1, поэтому основание,
равное пределу ширины (256, 65536, 2**32, 2**64), ещё помещается в неё.
"""

import logging
from array import array
from enum import IntEnum
from typing import Any, Final

from src.core.numerics.guards import validate_base

log = logging.getLogger(__name__)

# =============================================================================
# ПРЕДЕЛЫ ОСНОВАНИЙ
# =============================================================================

# Максимальное основание, цифры которого помещаются в 8 бит
MAX_BYTE_DIGIT_BASE: Final[int] = 1 << 8

# Максимальное основание, цифры которого помещаются в 16 бит
MAX_USHORT_DIGIT_BASE: Final[int] = 1 << 16

# Максимальное основание, цифры которого помещаются в 32 бита
MAX_UINT_DIGIT_BASE: Final[int] = 1 << 32

# Максимальное основание, цифры которого помещаются в 64 бита
MAX_ULONG_DIGIT_BASE: Final[int] = 1 << 64


def _typecode_for_bytes(size: int) -> str:
    # Наименьший беззнаковый typecode array.array, вмещающий size байт
    for typecode in ("B", "H", "I", "L", "Q"):
        if array(typecode).itemsize >= size:
            return typecode
    raise RuntimeError(f"No unsigned array typecode holds {size} bytes")


# =============================================================================
# DIGIT TYPE
# =============================================================================


class DigitType(IntEnum):
    """Ширина хранения цифр; значение члена — размер в байтах (255 = произвольная)."""

    BYTE = 1
    USHORT = 2
    UINT = 4
    ULONG = 8
    BIG_UNSIGNED_INTEGER = 255

    @property
    def is_fixed_width(self) -> bool:
        return self is not DigitType.BIG_UNSIGNED_INTEGER

    @property
    def bits(self) -> int | None:
        """Количество бит на цифру; None для произвольной ширины."""
        if not self.is_fixed_width:
            return None
        return self.value * 8

    @property
    def max_value(self) -> int | None:
        """Максимальная цифра; None для произвольной ширины."""
        if not self.is_fixed_width:
            return None
        return (1 << (self.value * 8)) - 1

    @property
    def typecode(self) -> str | None:
        """Typecode array.array для фиксированной ширины."""
        if not self.is_fixed_width:
            return None
        return _TYPECODES[self]

    def fits(self, digit: int) -> bool:
        """Помещается ли неотрицательная цифра в эту ширину."""
        max_value = self.max_value
        return max_value is None or digit <= max_value

    def __str__(self) -> str:
        return self.name


_TYPECODES: Final[dict[DigitType, str]] = {
    digit_type: _typecode_for_bytes(digit_type.value)
    for digit_type in DigitType
    if digit_type is not DigitType.BIG_UNSIGNED_INTEGER
}


# =============================================================================
# ВЫБОР ШИРИНЫ
# =============================================================================


def shortest_digit_type(base: Any) -> DigitType:
    """
    Наименьшая ширина, вмещающая все цифры основания base.

    Args:
        base: Основание (int, BigUnsignedInteger или numpy integer), >= 2

    Returns:
        base <= 256 → BYTE; <= 65536 → USHORT; <= 2**32 → UINT;
        <= 2**64 → ULONG; иначе BIG_UNSIGNED_INTEGER

    Raises:
        ArgumentRangeError: Если base < 2
    """
    value = validate_base(base)

    if value <= MAX_BYTE_DIGIT_BASE:
        result = DigitType.BYTE
    elif value <= MAX_USHORT_DIGIT_BASE:
        result = DigitType.USHORT
    elif value <= MAX_UINT_DIGIT_BASE:
        result = DigitType.UINT
    elif value <= MAX_ULONG_DIGIT_BASE:
        result = DigitType.ULONG
    else:
        result = DigitType.BIG_UNSIGNED_INTEGER

    log.debug("Base %d uses %s digits", value, result.name)
    return result
