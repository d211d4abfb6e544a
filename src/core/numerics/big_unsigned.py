"""
BigUnsignedInteger — Беззнаковое целое произвольной точности

Неизменяемая обёртка над int с инвариантом value >= 0.

Правила арифметики:
- BU (+, *, //, %) BU → BU
- BU - BU → BU, либо DigitOverflowError, если результат отрицательный
- смешанные операции со знаковым int расширяются до int,
  кроме x % int и x & int (результат заведомо неотрицательный) → BU
- ~x и -x → int

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Обёрнутое значение никогда не бывает отрицательным
2. hash и == согласованы с эквивалентным int
"""

from __future__ import annotations

import functools
import math
import numbers
import operator
from typing import Any, ClassVar, Final

from src.core.numerics.errors import (
    DigitOverflowError,
    NegativeCastError,
    NegativeParseError,
)

# =============================================================================
# ПОРОГИ ДЛЯ ОЦЕНКИ ДЛИНЫ В БИТАХ
# =============================================================================

# Ширины порогов по убыванию; первая применяется в цикле, остальные по разу
BIT_LENGTH_PROBE_WIDTHS: Final[tuple[int, ...]] = (512, 256, 128, 63)


@functools.cache
def _bit_length_thresholds() -> tuple[tuple[int, int], ...]:
    """Таблица (2**bits - 1, bits), вычисляется один раз при первом обращении."""
    return tuple(((1 << bits) - 1, bits) for bits in BIT_LENGTH_PROBE_WIDTHS)


def probe_bit_length(n: int) -> int:
    """
    Длина неотрицательного целого в битах.

    Сдвигает значение крупными шагами по убывающим порогам
    (512, 256, 128, 63 бит), затем добивает по одному биту.
    Результат совпадает с int.bit_length() для n >= 0.

    Args:
        n: Неотрицательное целое

    Returns:
        Количество значащих битов (0 для нуля)
    """
    thresholds = _bit_length_thresholds()
    total = 0

    head_value, head_bits = thresholds[0]
    while n > head_value:
        n >>= head_bits
        total += head_bits

    for value, bits in thresholds[1:]:
        if n > value:
            n >>= bits
            total += bits

    while n > 0:
        n >>= 1
        total += 1

    return total


def _negative_subtraction() -> DigitOverflowError:
    return DigitOverflowError("Result of subtraction would be negative.")


# =============================================================================
# BIG UNSIGNED INTEGER
# =============================================================================


class BigUnsignedInteger:
    """
    Неотрицательное целое произвольной точности.

    Примеры:
        >>> BigUnsignedInteger(7) + BigUnsignedInteger(5)
        BigUnsignedInteger(12)
        >>> BigUnsignedInteger(7) - 10
        -3
        >>> BigUnsignedInteger.parse("123")
        BigUnsignedInteger(123)
    """

    __slots__ = ("_value",)

    ZERO: ClassVar[BigUnsignedInteger]
    ONE: ClassVar[BigUnsignedInteger]

    def __init__(self, value: Any = 0) -> None:
        if isinstance(value, BigUnsignedInteger):
            self._value = value._value
            return

        int_value = operator.index(value)
        if int_value < 0:
            raise NegativeCastError("Cannot cast negative value to BigUnsignedInteger.")
        self._value = int_value

    @classmethod
    def _wrap(cls, value: int) -> BigUnsignedInteger:
        # Только для значений, неотрицательность которых уже доказана
        instance = object.__new__(cls)
        instance._value = value
        return instance

    @staticmethod
    def _extract_value(other: Any) -> int | None:
        if isinstance(other, BigUnsignedInteger):
            return other._value
        if isinstance(other, numbers.Integral):
            return int(other)
        return None

    # -------------------------------------------------------------------------
    # Разбор
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str, base: int = 10) -> BigUnsignedInteger:
        """
        Разбор текстового представления в основании base (по умолчанию десятичного).

        base передаётся в int(text, base): 16 принимает "ff" и "0xff",
        0 определяет основание по префиксу.

        Raises:
            NegativeParseError: Если текст задаёт отрицательное число
            ValueError: Если текст не является целым числом
        """
        value = int(text, base)
        if value < 0:
            raise NegativeParseError(
                "Cannot parse a negative integer as an instance of BigUnsignedInteger."
            )
        return cls._wrap(value)

    @classmethod
    def try_parse(cls, text: str, base: int = 10) -> BigUnsignedInteger | None:
        """Как parse, но возвращает None вместо исключения."""
        try:
            return cls.parse(text, base)
        except (TypeError, ValueError):
            return None

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def value(self) -> int:
        return self._value

    @property
    def is_zero(self) -> bool:
        return self._value == 0

    @property
    def is_one(self) -> bool:
        return self._value == 1

    @property
    def is_even(self) -> bool:
        return self._value & 1 == 0

    @property
    def is_odd(self) -> bool:
        return self._value & 1 == 1

    @property
    def is_pow2(self) -> bool:
        return self._value != 0 and self._value & (self._value - 1) == 0

    def bit_length(self) -> int:
        return self._value.bit_length()

    def probe_bit_length(self) -> int:
        """Длина в битах через пороговый алгоритм (см. probe_bit_length)."""
        return probe_bit_length(self._value)

    def bit_count(self) -> int:
        """Количество единичных битов (popcount)."""
        return self._value.bit_count()

    def trailing_zero_count(self) -> int:
        """Количество младших нулевых битов; для нуля возвращает 0."""
        if self._value == 0:
            return 0
        return (self._value & -self._value).bit_length() - 1

    def log2(self) -> int:
        """
        Целая часть двоичного логарифма.

        Raises:
            ValueError: Для нуля
        """
        if self._value == 0:
            raise ValueError("Cannot take the logarithm of zero.")
        return self._value.bit_length() - 1

    def divrem(self, divisor: Any) -> tuple[BigUnsignedInteger, BigUnsignedInteger]:
        """Частное и остаток одним вызовом."""
        quotient, remainder = divmod(self._value, BigUnsignedInteger(divisor)._value)
        return BigUnsignedInteger._wrap(quotient), BigUnsignedInteger._wrap(remainder)

    def gcd(self, other: Any) -> BigUnsignedInteger:
        return BigUnsignedInteger._wrap(math.gcd(self._value, BigUnsignedInteger(other)._value))

    @staticmethod
    def max(left: Any, right: Any) -> BigUnsignedInteger:
        left_value, right_value = BigUnsignedInteger(left), BigUnsignedInteger(right)
        return left_value if left_value >= right_value else right_value

    @staticmethod
    def min(left: Any, right: Any) -> BigUnsignedInteger:
        left_value, right_value = BigUnsignedInteger(left), BigUnsignedInteger(right)
        return left_value if left_value <= right_value else right_value

    # -------------------------------------------------------------------------
    # Протоколы int
    # -------------------------------------------------------------------------

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"BigUnsignedInteger({self._value})"

    def __format__(self, format_spec: str) -> str:
        return format(self._value, format_spec)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        other_value = self._extract_value(other)
        if other_value is None:
            return NotImplemented
        return self._value == other_value

    def __lt__(self, other: Any) -> bool:
        other_value = self._extract_value(other)
        if other_value is None:
            return NotImplemented
        return self._value < other_value

    def __le__(self, other: Any) -> bool:
        other_value = self._extract_value(other)
        if other_value is None:
            return NotImplemented
        return self._value <= other_value

    def __gt__(self, other: Any) -> bool:
        other_value = self._extract_value(other)
        if other_value is None:
            return NotImplemented
        return self._value > other_value

    def __ge__(self, other: Any) -> bool:
        other_value = self._extract_value(other)
        if other_value is None:
            return NotImplemented
        return self._value >= other_value

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> Any:
        if isinstance(other, BigUnsignedInteger):
            return BigUnsignedInteger._wrap(self._value + other._value)
        if isinstance(other, int):
            return self._value + other
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, BigUnsignedInteger):
            if other._value > self._value:
                raise _negative_subtraction()
            return BigUnsignedInteger._wrap(self._value - other._value)
        if isinstance(other, int):
            return self._value - other
        return NotImplemented

    def __rsub__(self, other: Any) -> Any:
        if isinstance(other, int):
            return other - self._value
        return NotImplemented

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, BigUnsignedInteger):
            return BigUnsignedInteger._wrap(self._value * other._value)
        if isinstance(other, int):
            return self._value * other
        return NotImplemented

    __rmul__ = __mul__

    def __floordiv__(self, other: Any) -> Any:
        if isinstance(other, BigUnsignedInteger):
            return BigUnsignedInteger._wrap(self._value // other._value)
        if isinstance(other, int):
            return self._value // other
        return NotImplemented

    def __rfloordiv__(self, other: Any) -> Any:
        if isinstance(other, int):
            return other // self._value
        return NotImplemented

    def __mod__(self, other: Any) -> Any:
        other_value = self._extract_value(other)
        if other_value is None:
            return NotImplemented
        # Остаток берёт знак делимого, поэтому он неотрицателен при любом делителе
        return BigUnsignedInteger._wrap(self._value % abs(other_value))

    def __rmod__(self, other: Any) -> Any:
        if isinstance(other, int):
            return other % self._value
        return NotImplemented

    def __divmod__(self, other: Any) -> Any:
        if isinstance(other, BigUnsignedInteger):
            return self.divrem(other)
        if isinstance(other, int):
            return divmod(self._value, other)
        return NotImplemented

    def __pow__(self, exponent: Any) -> Any:
        if not isinstance(exponent, (int, BigUnsignedInteger)):
            return NotImplemented
        exponent_value = int(exponent)
        if exponent_value < 0:
            return self._value**exponent_value
        return BigUnsignedInteger._wrap(self._value**exponent_value)

    def __neg__(self) -> int:
        return -self._value

    def __pos__(self) -> BigUnsignedInteger:
        return self

    def __abs__(self) -> BigUnsignedInteger:
        return self

    # -------------------------------------------------------------------------
    # Битовые операции
    # -------------------------------------------------------------------------

    def __and__(self, other: Any) -> Any:
        other_value = self._extract_value(other)
        if other_value is None:
            return NotImplemented
        return BigUnsignedInteger._wrap(self._value & other_value)

    __rand__ = __and__

    def __or__(self, other: Any) -> Any:
        if isinstance(other, BigUnsignedInteger):
            return BigUnsignedInteger._wrap(self._value | other._value)
        if isinstance(other, int):
            return self._value | other
        return NotImplemented

    __ror__ = __or__

    def __xor__(self, other: Any) -> Any:
        if isinstance(other, BigUnsignedInteger):
            return BigUnsignedInteger._wrap(self._value ^ other._value)
        if isinstance(other, int):
            return self._value ^ other
        return NotImplemented

    __rxor__ = __xor__

    def __lshift__(self, shift: Any) -> BigUnsignedInteger:
        return BigUnsignedInteger._wrap(self._value << operator.index(shift))

    def __rshift__(self, shift: Any) -> BigUnsignedInteger:
        return BigUnsignedInteger._wrap(self._value >> operator.index(shift))

    def __invert__(self) -> int:
        return ~self._value


BigUnsignedInteger.ZERO = BigUnsignedInteger._wrap(0)
BigUnsignedInteger.ONE = BigUnsignedInteger._wrap(1)
