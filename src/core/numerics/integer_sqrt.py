"""
Integer Sqrt — Целочисленный квадратный корень

Вычисляет floor(sqrt(n)) без перехода к float, поэтому результат точен
для целых любой длины.

Алгоритм (shift-subtract, по два бита за шаг):
1. Быстрый путь: 0 → 0; 1..3 → 1; 4..8 → 2; 9..15 → 3
2. shift = bit_length(n) - 1, округлённый вниз до чётного
3. bit = 1 << shift; root = 0
4. Пока bit > 0: temp = root + bit; root >>= 1;
   если n >= temp: n -= temp, root += bit; bit >>= 2
"""

from src.core.numerics.big_unsigned import BigUnsignedInteger, probe_bit_length
from src.core.numerics.errors import ArgumentRangeError
from src.core.numerics.guards import as_integer


def _shift_subtract_sqrt(n: int) -> int:
    if n == 0:
        return 0
    if n < 4:
        return 1
    if n < 9:
        return 2
    if n < 16:
        return 3

    shift = probe_bit_length(n) - 1
    if shift % 2 != 0:
        shift -= 1

    root = 0
    bit = 1 << shift
    while bit > 0:
        temp = root + bit
        root >>= 1
        if n >= temp:
            n -= temp
            root += bit
        bit >>= 2

    return root


def integer_sqrt(n: int) -> int:
    """
    Целочисленный квадратный корень знакового целого.

    Args:
        n: Неотрицательное целое (int или numpy integer)

    Returns:
        floor(sqrt(n))

    Raises:
        ArgumentRangeError: Если n < 0

    Examples:
        >>> integer_sqrt(15)
        3
        >>> integer_sqrt(16)
        4
    """
    value = as_integer(n, "n")
    if value < 0:
        raise ArgumentRangeError(f"Cannot take the square root of a negative. (n = {value})")
    return _shift_subtract_sqrt(value)


def integer_sqrt_unsigned(n: BigUnsignedInteger) -> BigUnsignedInteger:
    """
    Целочисленный квадратный корень BigUnsignedInteger.

    Raises:
        ArgumentRangeError: Если передано отрицательное значение другого типа
    """
    if not isinstance(n, BigUnsignedInteger):
        value = as_integer(n, "n")
        if value < 0:
            raise ArgumentRangeError(
                f"Cannot take the square root of a negative unsigned value. (n = {value})"
            )
        n = BigUnsignedInteger(value)
    return BigUnsignedInteger(_shift_subtract_sqrt(int(n)))
