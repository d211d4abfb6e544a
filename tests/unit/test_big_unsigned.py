"""
Тесты для BigUnsignedInteger

Проверяет:
1. Инвариант value >= 0 при создании и приведении
2. Арифметику BU ∘ BU (остаётся в типе)
3. Расширение до int при смешанных операциях
4. Ошибку переполнения при отрицательной разности
5. Разбор строк (parse / try_parse)
6. Битовые помощники и пороговую оценку длины в битах
"""

import numpy as np
import pytest

from src.core.numerics import (
    ArgumentRangeError,
    BigUnsignedInteger,
    DigitOverflowError,
    NegativeCastError,
    NegativeParseError,
    NumericsError,
    probe_bit_length,
)


# =============================================================================
# ТЕСТЫ: Создание
# =============================================================================


class TestConstruction:
    """Тесты конструктора и приведения"""

    def test_from_int(self) -> None:
        """Создание из неотрицательного int"""
        assert BigUnsignedInteger(42).value == 42
        assert BigUnsignedInteger().value == 0

    def test_from_numpy_unsigned(self) -> None:
        """Создание из numpy-скаляра"""
        assert BigUnsignedInteger(np.uint64(2**64 - 1)).value == 2**64 - 1

    def test_from_big_unsigned(self) -> None:
        """Копирование другого BigUnsignedInteger"""
        assert BigUnsignedInteger(BigUnsignedInteger(7)) == 7

    def test_negative_cast_rejected(self) -> None:
        """Отрицательное значение → NegativeCastError"""
        with pytest.raises(NegativeCastError, match="Cannot cast negative value"):
            BigUnsignedInteger(-1)

    def test_negative_cast_is_value_error(self) -> None:
        """NegativeCastError — это и NumericsError, и ValueError"""
        with pytest.raises(ValueError):
            BigUnsignedInteger(-5)
        with pytest.raises(NumericsError):
            BigUnsignedInteger(-5)

    def test_non_integer_rejected(self) -> None:
        """float не принимается"""
        with pytest.raises(TypeError):
            BigUnsignedInteger(1.5)

    def test_constants(self) -> None:
        """ZERO и ONE"""
        assert BigUnsignedInteger.ZERO.is_zero
        assert BigUnsignedInteger.ONE.is_one
        assert BigUnsignedInteger.ZERO == 0
        assert BigUnsignedInteger.ONE == 1


# =============================================================================
# ТЕСТЫ: Арифметика
# =============================================================================


class TestArithmetic:
    """Тесты арифметических операторов"""

    def test_unsigned_operations_stay_unsigned(self) -> None:
        """BU ∘ BU → BU для +, *, //, %"""
        a, b = BigUnsignedInteger(17), BigUnsignedInteger(5)
        for result, expected in ((a + b, 22), (a * b, 85), (a // b, 3), (a % b, 2)):
            assert isinstance(result, BigUnsignedInteger)
            assert result == expected

    def test_subtraction_in_range(self) -> None:
        """BU - BU при a >= b остаётся BU"""
        result = BigUnsignedInteger(10) - BigUnsignedInteger(10)
        assert isinstance(result, BigUnsignedInteger)
        assert result.is_zero

    def test_subtraction_negative_overflows(self) -> None:
        """BU - BU < 0 → DigitOverflowError"""
        with pytest.raises(DigitOverflowError, match="would be negative"):
            BigUnsignedInteger(3) - BigUnsignedInteger(4)

    def test_subtraction_overflow_is_overflow_error(self) -> None:
        """DigitOverflowError ловится как OverflowError"""
        with pytest.raises(OverflowError):
            BigUnsignedInteger(0) - BigUnsignedInteger(1)

    def test_mixed_operations_widen_to_int(self) -> None:
        """Смешанные операции со знаковым int дают int"""
        a = BigUnsignedInteger(7)
        assert type(a + 3) is int and a + 3 == 10
        assert type(3 + a) is int and 3 + a == 10
        assert type(a - 10) is int and a - 10 == -3
        assert type(10 - a) is int and 10 - a == 3
        assert type(a * -2) is int and a * -2 == -14
        assert type(a // 2) is int and a // 2 == 3

    def test_modulo_by_int_stays_unsigned(self) -> None:
        """x % int неотрицателен даже для отрицательного делителя"""
        result = BigUnsignedInteger(7) % -3
        assert isinstance(result, BigUnsignedInteger)
        assert result == 1

    def test_unary_minus_and_invert_are_int(self) -> None:
        """-x и ~x → int"""
        a = BigUnsignedInteger(5)
        assert -a == -5
        assert ~a == -6
        assert type(-a) is int

    def test_divrem(self) -> None:
        """divrem возвращает частное и остаток"""
        quotient, remainder = BigUnsignedInteger(100).divrem(7)
        assert (quotient, remainder) == (14, 2)
        assert isinstance(quotient, BigUnsignedInteger)

    def test_divrem_by_zero(self) -> None:
        """Деление на ноль → ZeroDivisionError"""
        with pytest.raises(ZeroDivisionError):
            BigUnsignedInteger(1).divrem(0)

    def test_power(self) -> None:
        """Возведение в неотрицательную степень"""
        assert BigUnsignedInteger(2) ** 70 == 2**70

    def test_gcd_min_max(self) -> None:
        """gcd, min и max"""
        assert BigUnsignedInteger(84).gcd(36) == 12
        assert BigUnsignedInteger.max(3, 9) == 9
        assert BigUnsignedInteger.min(3, 9) == 3


# =============================================================================
# ТЕСТЫ: Битовые операции
# =============================================================================


class TestBitwise:
    """Тесты битовых операторов и помощников"""

    def test_and_with_signed_stays_unsigned(self) -> None:
        """x & int → BU"""
        result = BigUnsignedInteger(0b1101) & -2
        assert isinstance(result, BigUnsignedInteger)
        assert result == 0b1100

    def test_or_xor(self) -> None:
        """| и ^ между BU остаются BU, с int расширяются"""
        a, b = BigUnsignedInteger(0b1010), BigUnsignedInteger(0b0110)
        assert isinstance(a | b, BigUnsignedInteger) and a | b == 0b1110
        assert isinstance(a ^ b, BigUnsignedInteger) and a ^ b == 0b1100
        assert type(a | -1) is int

    def test_shifts(self) -> None:
        """Сдвиги"""
        assert BigUnsignedInteger(1) << 100 == 2**100
        assert BigUnsignedInteger(2**100) >> 99 == 2

    def test_parity_and_pow2(self) -> None:
        """Чётность и степень двойки"""
        assert BigUnsignedInteger(10).is_even
        assert BigUnsignedInteger(11).is_odd
        assert BigUnsignedInteger(1024).is_pow2
        assert not BigUnsignedInteger(1023).is_pow2
        assert not BigUnsignedInteger(0).is_pow2

    def test_counts(self) -> None:
        """popcount, trailing zeroes и log2"""
        value = BigUnsignedInteger(0b1011000)
        assert value.bit_count() == 3
        assert value.trailing_zero_count() == 3
        assert value.log2() == 6
        assert BigUnsignedInteger(0).trailing_zero_count() == 0

    def test_log2_of_zero(self) -> None:
        """log2(0) не определён"""
        with pytest.raises(ValueError):
            BigUnsignedInteger(0).log2()

    @pytest.mark.parametrize(
        "value",
        [0, 1, 2, 255, 2**63 - 1, 2**63, 2**64, 2**128 - 1, 2**128, 2**300 + 7, 2**512, 2**1500 + 3],
    )
    def test_probe_bit_length_matches_builtin(self, value: int) -> None:
        """Пороговая оценка совпадает с int.bit_length()"""
        assert probe_bit_length(value) == value.bit_length()
        assert BigUnsignedInteger(value).probe_bit_length() == value.bit_length()


# =============================================================================
# ТЕСТЫ: Сравнение и хеширование
# =============================================================================


class TestComparison:
    """Тесты сравнения"""

    def test_equal_to_int(self) -> None:
        """BU равен эквивалентному int и имеет тот же hash"""
        assert BigUnsignedInteger(5) == 5
        assert hash(BigUnsignedInteger(5)) == hash(5)
        assert {BigUnsignedInteger(5): "x"}[5] == "x"

    def test_ordering(self) -> None:
        """Упорядочивание с int и BU"""
        assert BigUnsignedInteger(3) < BigUnsignedInteger(4)
        assert BigUnsignedInteger(3) > -1
        assert BigUnsignedInteger(3) <= 3
        assert sorted([BigUnsignedInteger(9), BigUnsignedInteger(2)]) == [2, 9]

    def test_int_protocols(self) -> None:
        """int(), index, bool, str, format"""
        value = BigUnsignedInteger(255)
        assert int(value) == 255
        assert [0, 1, 2][BigUnsignedInteger(1)] == 1
        assert bool(value) and not bool(BigUnsignedInteger(0))
        assert str(value) == "255"
        assert f"{value:x}" == "ff"
        assert repr(value) == "BigUnsignedInteger(255)"


# =============================================================================
# ТЕСТЫ: Разбор
# =============================================================================


class TestParse:
    """Тесты parse / try_parse"""

    def test_parse_valid(self) -> None:
        """Разбор десятичной строки"""
        assert BigUnsignedInteger.parse("123456789012345678901234567890") == (
            123456789012345678901234567890
        )

    def test_parse_negative(self) -> None:
        """Отрицательный литерал → NegativeParseError"""
        with pytest.raises(NegativeParseError, match="Cannot parse a negative integer"):
            BigUnsignedInteger.parse("-12")

    def test_parse_malformed(self) -> None:
        """Некорректный текст → ValueError"""
        with pytest.raises(ValueError):
            BigUnsignedInteger.parse("twelve")

    def test_try_parse(self) -> None:
        """try_parse возвращает None вместо исключения"""
        assert BigUnsignedInteger.try_parse("42") == 42
        assert BigUnsignedInteger.try_parse("-42") is None
        assert BigUnsignedInteger.try_parse("4x2") is None

    @pytest.mark.parametrize(
        ("text", "base", "expected"),
        [("ff", 16, 255), ("0xFF", 16, 255), ("101", 2, 5), ("0o17", 0, 15), ("z", 36, 35)],
    )
    def test_parse_in_base(self, text: str, base: int, expected: int) -> None:
        """parse принимает основание, как int(text, base)"""
        assert BigUnsignedInteger.parse(text, base) == expected

    def test_parse_negative_hex(self) -> None:
        """Отрицательный шестнадцатеричный литерал → NegativeParseError"""
        with pytest.raises(NegativeParseError):
            BigUnsignedInteger.parse("-ff", 16)

    def test_try_parse_in_base(self) -> None:
        """try_parse передаёт основание в parse"""
        assert BigUnsignedInteger.try_parse("ff", 16) == 255
        assert BigUnsignedInteger.try_parse("ff") is None
        assert BigUnsignedInteger.try_parse("12", 2) is None

    def test_argument_range_error_is_distinct(self) -> None:
        """Ошибки разных категорий различимы"""
        assert not issubclass(NegativeParseError, ArgumentRangeError)
