"""
DigitList — Неизменяемая последовательность цифр с тегом ширины

Цифры хранятся от старшей к младшей. Основание в списке не хранится:
список — это просто цифры, ширину которых задаёт DigitType.

Хранение:
- BYTE / USHORT / UINT / ULONG → array.array с соответствующим typecode
- BIG_UNSIGNED_INTEGER         → tuple[BigUnsignedInteger, ...]

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая цифра >= 0 и помещается в DigitType списка
2. Хранилище никогда не изменяется после создания
3. == — равенство записей (та же ширина и те же цифры);
   is_equivalent_to — численное равенство независимо от ширины
4. Доступ по индексу проверяет границы

DigitListBuilder — изменяемый объект-накопитель одной ширины с проверяемым
сужением при добавлении цифр.
"""

from __future__ import annotations

import operator
from array import array
from collections.abc import Iterable, Iterator
from typing import Any, Optional

from src.core.digits.array_segment import ImmutableArraySegment
from src.core.digits.digit_type import DigitType, shortest_digit_type
from src.core.digits.formatting import DigitFormatOptions
from src.core.numerics.big_unsigned import BigUnsignedInteger
from src.core.numerics.errors import (
    ArgumentNullError,
    ArgumentRangeError,
    DigitOverflowError,
    SplitOrderError,
)
from src.core.numerics.guards import as_integer, validate_not_none


# =============================================================================
# ХРАНИЛИЩЕ
# =============================================================================


def _checked_digit(digit: Any, digit_type: DigitType) -> int:
    """Цифра как int после проверки знака и ширины."""
    value = as_integer(digit, "digit")
    if value < 0:
        raise ArgumentRangeError(f"Digits must be non-negative, got {value}")
    if not digit_type.fits(value):
        raise DigitOverflowError(
            f"Digit {value} does not fit in {digit_type.name} "
            f"(max {digit_type.max_value})"
        )
    return value


def _make_storage(digit_type: DigitType, values: Iterable[int]) -> Any:
    if digit_type.is_fixed_width:
        return array(digit_type.typecode, values)
    return tuple(BigUnsignedInteger(value) for value in values)


def _shortest_for_digits(values: list[int]) -> DigitType:
    if not values:
        return DigitType.BYTE
    return shortest_digit_type(max(max(values) + 1, 2))


# =============================================================================
# DIGIT LIST
# =============================================================================


class DigitList:
    """
    Неизменяемый список цифр (старшая цифра первая).

    Examples:
        >>> digits = DigitList.create_range([0, 1, 2])
        >>> str(digits)
        '{ 0 1 2 }'
        >>> digits.without_leading_zeroes().raw_digits
        (1, 2)
    """

    __slots__ = ("_digit_type", "_digits")

    def __init__(self, digit_type: DigitType, digits: Iterable[Any]) -> None:
        """
        Список заданной ширины; каждая цифра проверяется.

        Raises:
            ArgumentNullError: Если digits is None
            ArgumentRangeError: Если есть отрицательная цифра
            DigitOverflowError: Если цифра не помещается в digit_type
        """
        validate_not_none(digits, "digits")
        digit_type = DigitType(digit_type)
        values = [_checked_digit(digit, digit_type) for digit in digits]
        self._digit_type = digit_type
        self._digits = _make_storage(digit_type, values)

    @classmethod
    def _from_storage(cls, digit_type: DigitType, storage: Any) -> DigitList:
        # storage уже проверено и имеет тип хранилища digit_type
        instance = object.__new__(cls)
        instance._digit_type = digit_type
        instance._digits = storage
        return instance

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def create_range(
        cls, digits: Iterable[Any], digit_type: Optional[DigitType] = None
    ) -> DigitList:
        """
        Создание списка из последовательности цифр.

        Args:
            digits: Цифры от старшей к младшей
            digit_type: Ширина хранения; None — наименьшая ширина,
                вмещающая наибольшую цифру

        Raises:
            ArgumentNullError: Если digits is None
            ArgumentRangeError: Если есть отрицательная цифра
            DigitOverflowError: Если цифра не помещается в digit_type
        """
        validate_not_none(digits, "digits")

        if digit_type is None:
            values = [as_integer(digit, "digit") for digit in digits]
            if any(value < 0 for value in values):
                raise ArgumentRangeError(f"Digits must be non-negative, got {values}")
            digit_type = _shortest_for_digits(values)
        else:
            digit_type = DigitType(digit_type)
            values = [_checked_digit(digit, digit_type) for digit in digits]

        return cls._from_storage(digit_type, _make_storage(digit_type, values))

    @classmethod
    def empty(cls, digit_type: DigitType = DigitType.BYTE) -> DigitList:
        digit_type = DigitType(digit_type)
        return cls._from_storage(digit_type, _make_storage(digit_type, ()))

    @classmethod
    def empty_from_base_size(cls, base: Any) -> DigitList:
        """Пустой список наименьшей ширины, вмещающей цифры основания base."""
        return cls.empty(shortest_digit_type(base))

    # -------------------------------------------------------------------------
    # Доступ
    # -------------------------------------------------------------------------

    @property
    def digit_type(self) -> DigitType:
        return self._digit_type

    @property
    def count(self) -> int:
        return len(self._digits)

    @property
    def raw_digits(self) -> tuple[int, ...]:
        """Цифры как tuple[int, ...] независимо от ширины."""
        return tuple(int(digit) for digit in self._digits)

    def __len__(self) -> int:
        return len(self._digits)

    def __getitem__(self, index: int) -> BigUnsignedInteger:
        position = operator.index(index)
        if not 0 <= position < len(self._digits):
            raise IndexError(
                f"Digit index {position} out of range [0, {len(self._digits)})"
            )
        return BigUnsignedInteger(self._digits[position])

    def __iter__(self) -> Iterator[BigUnsignedInteger]:
        for digit in self._digits:
            yield BigUnsignedInteger(digit)

    # -------------------------------------------------------------------------
    # Операции
    # -------------------------------------------------------------------------

    def without_leading_zeroes(self) -> DigitList:
        """
        Список без ведущих нулей.

        Возвращает self, если удалять нечего; операция идемпотентна.
        """
        first_nonzero = 0
        while first_nonzero < len(self._digits) and self._digits[first_nonzero] == 0:
            first_nonzero += 1

        if first_nonzero == 0:
            return self
        return DigitList._from_storage(self._digit_type, self._digits[first_nonzero:])

    def is_equivalent_to(self, other: Optional[DigitList]) -> bool:
        """
        Численное равенство цифр независимо от ширины хранения.

        Raises:
            ArgumentNullError: Если other is None
        """
        if other is None:
            raise ArgumentNullError("other cannot be None")
        if not isinstance(other, DigitList):
            raise TypeError(f"other must be a DigitList, got {type(other).__name__}")
        return self.raw_digits == other.raw_digits

    def split_at_indices(self, *indices: int) -> tuple[DigitList, ...]:
        """
        Разбиение списка по индексам-границам.

        Индексы — границы, а не элементы: (2, 4) для [0..6] даёт
        [0, 1], [2, 3], [4, 5, 6]. Первый индекс может быть 0 (тогда первая
        часть пустая), каждый следующий строго больше предыдущего.
        Все части сохраняют DigitType исходного списка.

        Returns:
            (self,) если индексы не переданы, иначе len(indices) + 1 частей

        Raises:
            ArgumentNullError: Если индекс None
            IndexError: Если индекс отрицательный или >= len(self)
            SplitOrderError: Если индекс не больше предыдущего
        """
        if not indices:
            return (self,)

        whole = ImmutableArraySegment.create(self._digits)
        segments: list[ImmutableArraySegment[Any]] = []
        last_index = 0
        previous: Optional[int] = None

        for raw_index in indices:
            if raw_index is None:
                raise ArgumentNullError("indices cannot contain None")
            index = operator.index(raw_index)

            if index < 0:
                raise IndexError(f"Indices must be non-negative, got {index}")
            if previous is not None and index <= previous:
                raise SplitOrderError(
                    f"Indices must be strictly increasing, got {index} after {previous}"
                )
            if index >= len(self._digits):
                raise IndexError(
                    f"Index {index} was out of range of the digit list "
                    f"(count {len(self._digits)})"
                )

            segments.append(whole.subsegment(last_index, index - last_index))
            last_index = index
            previous = index

        segments.append(whole.subsegment(last_index, len(self._digits) - last_index))
        return tuple(
            DigitList._from_storage(self._digit_type, segment.materialize())
            for segment in segments
        )

    def to_integer(self, base: int) -> int:
        """Значение цифр, прочитанных в основании base."""
        value = 0
        for digit in self.raw_digits:
            value = value * base + digit
        return value

    def to_builder(self) -> DigitListBuilder:
        """Builder той же ширины, заполненный цифрами списка."""
        return DigitListBuilder(self._digit_type, self.raw_digits)

    # -------------------------------------------------------------------------
    # Равенство
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitList):
            return NotImplemented
        return (
            self._digit_type is other._digit_type
            and self.raw_digits == other.raw_digits
        )

    def __hash__(self) -> int:
        return hash((self._digit_type, self.raw_digits))

    # -------------------------------------------------------------------------
    # Форматирование
    # -------------------------------------------------------------------------

    def format_as_list(self, options: Optional[DigitFormatOptions] = None) -> str:
        """Цифры через разделитель, без скобок."""
        options = options or DigitFormatOptions()
        return options.separator.join(options.format_digit(digit) for digit in self._digits)

    def to_string(self, options: Optional[DigitFormatOptions] = None) -> str:
        return f"{{ {self.format_as_list(options)} }}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"DigitList({self._digit_type.name}, {list(self.raw_digits)})"


# =============================================================================
# BUILDER
# =============================================================================


class DigitListBuilder:
    """
    Изменяемый накопитель цифр одной ширины.

    Принадлежит одному владельцу; to_list() замораживает копию,
    после чего builder остаётся пригодным к использованию.
    """

    def __init__(
        self,
        digit_type: DigitType = DigitType.BYTE,
        digits: Optional[Iterable[Any]] = None,
    ) -> None:
        self._digit_type = DigitType(digit_type)
        self._digits: list[int] = []
        if digits is not None:
            for digit in digits:
                self.add(digit)

    @classmethod
    def new_from_base_size(cls, base: Any) -> DigitListBuilder:
        """Builder наименьшей ширины, вмещающей цифры основания base."""
        return cls(shortest_digit_type(base))

    @property
    def digit_type(self) -> DigitType:
        return self._digit_type

    @property
    def count(self) -> int:
        return len(self._digits)

    def __len__(self) -> int:
        return len(self._digits)

    def add(self, digit: Any) -> None:
        """
        Добавление цифры любой исходной ширины.

        Raises:
            ArgumentRangeError: Если цифра отрицательная
            DigitOverflowError: Если цифра не помещается в ширину builder
        """
        self._digits.append(_checked_digit(digit, self._digit_type))

    def reverse(self) -> None:
        self._digits.reverse()

    def clear(self) -> None:
        self._digits.clear()

    def to_list(self) -> DigitList:
        return DigitList._from_storage(
            self._digit_type, _make_storage(self._digit_type, self._digits)
        )

    def __repr__(self) -> str:
        return f"DigitListBuilder({self._digit_type.name}, {self._digits})"
