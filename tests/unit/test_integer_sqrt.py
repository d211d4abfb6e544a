"""
Тесты для Integer Sqrt

Проверяет:
1. Быстрый путь для малых значений
2. Точность для очень больших целых
3. floor-свойство: r*r <= n < (r+1)*(r+1)
4. Ошибку для отрицательных значений
5. Вариант для BigUnsignedInteger
"""

import pytest

from src.core.numerics import (
    ArgumentRangeError,
    BigUnsignedInteger,
    integer_sqrt,
    integer_sqrt_unsigned,
)


class TestIntegerSqrt:
    """Тесты integer_sqrt"""

    @pytest.mark.parametrize(
        ("n", "expected"),
        [(0, 0), (1, 1), (3, 1), (4, 2), (8, 2), (9, 3), (15, 3), (16, 4), (17, 4), (99, 9), (100, 10)],
    )
    def test_small_values(self, n: int, expected: int) -> None:
        """Малые значения, включая быстрый путь"""
        assert integer_sqrt(n) == expected

    def test_very_large_value(self) -> None:
        """Очень большое целое"""
        n = 23384026197294446691258957323460528314494919639040
        assert integer_sqrt(n) == 4835703278458516698824703

    @pytest.mark.parametrize("n", [2**64, 2**64 - 1, 10**40 + 12345, 2**1025 + 1, (10**200 + 3) ** 2])
    def test_floor_property(self, n: int) -> None:
        """r*r <= n < (r+1)*(r+1)"""
        root = integer_sqrt(n)
        assert root * root <= n < (root + 1) * (root + 1)

    def test_perfect_square(self) -> None:
        """Точный квадрат"""
        assert integer_sqrt((2**300 + 11) ** 2) == 2**300 + 11

    def test_negative_rejected(self) -> None:
        """Отрицательное значение → ArgumentRangeError"""
        with pytest.raises(ArgumentRangeError, match="square root of a negative"):
            integer_sqrt(-1)


class TestIntegerSqrtUnsigned:
    """Тесты integer_sqrt_unsigned"""

    def test_returns_big_unsigned(self) -> None:
        """Результат — BigUnsignedInteger"""
        result = integer_sqrt_unsigned(BigUnsignedInteger(10**30))
        assert isinstance(result, BigUnsignedInteger)
        assert result == 10**15

    def test_small_values(self) -> None:
        """Быстрый путь"""
        assert integer_sqrt_unsigned(BigUnsignedInteger(0)) == 0
        assert integer_sqrt_unsigned(BigUnsignedInteger(15)) == 3

    def test_negative_int_rejected(self) -> None:
        """Отрицательный int → ArgumentRangeError с отдельным сообщением"""
        with pytest.raises(ArgumentRangeError, match="negative unsigned value"):
            integer_sqrt_unsigned(-4)
