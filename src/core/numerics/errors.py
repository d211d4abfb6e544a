"""
Numerics Errors — Исключения числового ядра

Все ошибки ядра наследуют NumericsError и соответствующее встроенное
исключение Python, поэтому вызывающий код может ловить как доменный тип,
так и стандартный (ValueError, OverflowError, ...).

Соответствие категорий:
- argument-null     → ArgumentNullError (TypeError)
- argument-range    → ArgumentRangeError (ValueError)
- overflow          → DigitOverflowError (OverflowError)
- ordering          → SplitOrderError (ValueError)
- bounds            → встроенный IndexError
- cast              → NegativeCastError (ValueError)
- format            → NegativeParseError (ValueError)
- zero denominator  → ZeroDenominatorError (ZeroDivisionError)

Ошибки обнаруживаются сразу на границе API: никаких повторов,
никакого clamping, никакого подавления.
"""


class NumericsError(Exception):
    """Базовое исключение числового ядра."""

    pass


class ArgumentNullError(NumericsError, TypeError):
    """Обязательный аргумент равен None."""

    pass


class ArgumentRangeError(NumericsError, ValueError):
    """Аргумент вне допустимого диапазона (отрицательная цифра, base < 2, ...)."""

    pass


class DigitOverflowError(NumericsError, OverflowError):
    """
    Значение не помещается в целевой тип.

    Возникает при сужающем добавлении цифры в builder, при добавлении
    слишком широкого остатка в RemainderMap и при отрицательном результате
    вычитания BigUnsignedInteger.
    """

    pass


class SplitOrderError(NumericsError, ValueError):
    """Индексы разбиения не строго возрастают."""

    pass


class NegativeCastError(NumericsError, ValueError):
    """Попытка привести отрицательное значение к беззнаковому типу."""

    pass


class NegativeParseError(NumericsError, ValueError):
    """Разобранный текст задаёт отрицательное число для беззнакового типа."""

    pass


class ZeroDenominatorError(NumericsError, ZeroDivisionError):
    """Знаменатель дроби равен нулю."""

    def __init__(self, message: str = "Denominator cannot be zero.") -> None:
        super().__init__(message)
