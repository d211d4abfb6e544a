"""
Тесты для DigitType и выбора ширины по основанию

Проверяет:
1. Пороговые основания 256 / 65536 / 2**32 / 2**64 и соседние значения
2. Отклонение оснований < 2
3. Свойства ширин (bits, max_value, typecode)
4. Приём BigUnsignedInteger и numpy-скаляров как оснований
"""

from array import array

import numpy as np
import pytest

from src.core.digits import (
    MAX_BYTE_DIGIT_BASE,
    MAX_UINT_DIGIT_BASE,
    MAX_ULONG_DIGIT_BASE,
    MAX_USHORT_DIGIT_BASE,
    DigitType,
    shortest_digit_type,
)
from src.core.numerics import ArgumentRangeError, BigUnsignedInteger


class TestShortestDigitType:
    """Тесты shortest_digit_type"""

    @pytest.mark.parametrize(
        ("base", "expected"),
        [
            (2, DigitType.BYTE),
            (10, DigitType.BYTE),
            (256, DigitType.BYTE),
            (257, DigitType.USHORT),
            (30000, DigitType.USHORT),
            (65536, DigitType.USHORT),
            (65537, DigitType.UINT),
            (2**32, DigitType.UINT),
            (2**32 + 1, DigitType.ULONG),
            (2**64, DigitType.ULONG),
            (2**64 + 1, DigitType.BIG_UNSIGNED_INTEGER),
            (2**70, DigitType.BIG_UNSIGNED_INTEGER),
        ],
    )
    def test_boundaries(self, base: int, expected: DigitType) -> None:
        """Основание на пределе ширины ещё помещается, следующее — нет"""
        assert shortest_digit_type(base) is expected

    def test_limit_constants(self) -> None:
        """Константы пределов"""
        assert MAX_BYTE_DIGIT_BASE == 256
        assert MAX_USHORT_DIGIT_BASE == 65536
        assert MAX_UINT_DIGIT_BASE == 2**32
        assert MAX_ULONG_DIGIT_BASE == 2**64

    @pytest.mark.parametrize("base", [1, 0, -10])
    def test_base_below_two_rejected(self, base: int) -> None:
        """base < 2 → ArgumentRangeError"""
        with pytest.raises(ArgumentRangeError, match="at least 2"):
            shortest_digit_type(base)

    def test_accepts_big_unsigned_and_numpy(self) -> None:
        """Основание как BigUnsignedInteger или numpy-скаляр"""
        assert shortest_digit_type(BigUnsignedInteger(2**64 + 1)) is DigitType.BIG_UNSIGNED_INTEGER
        assert shortest_digit_type(np.uint32(300)) is DigitType.USHORT


class TestDigitTypeProperties:
    """Тесты свойств DigitType"""

    def test_ordered_by_width(self) -> None:
        """Ширины упорядочены"""
        assert (
            DigitType.BYTE
            < DigitType.USHORT
            < DigitType.UINT
            < DigitType.ULONG
            < DigitType.BIG_UNSIGNED_INTEGER
        )

    def test_max_values(self) -> None:
        """Максимальные цифры"""
        assert DigitType.BYTE.max_value == 255
        assert DigitType.USHORT.max_value == 65535
        assert DigitType.UINT.max_value == 2**32 - 1
        assert DigitType.ULONG.max_value == 2**64 - 1
        assert DigitType.BIG_UNSIGNED_INTEGER.max_value is None

    def test_bits(self) -> None:
        """Количество бит"""
        assert [t.bits for t in DigitType] == [8, 16, 32, 64, None]

    def test_typecodes_hold_width(self) -> None:
        """Typecode вмещает всю ширину"""
        for digit_type in DigitType:
            if digit_type.is_fixed_width:
                assert array(digit_type.typecode).itemsize >= digit_type.value
        assert DigitType.BIG_UNSIGNED_INTEGER.typecode is None

    def test_fits(self) -> None:
        """Проверка вместимости"""
        assert DigitType.BYTE.fits(255)
        assert not DigitType.BYTE.fits(256)
        assert DigitType.BIG_UNSIGNED_INTEGER.fits(2**200)

    def test_str(self) -> None:
        """Строковое представление — имя ширины"""
        assert str(DigitType.USHORT) == "USHORT"
