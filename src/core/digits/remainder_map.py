"""
RemainderMap — Отображение остаток → индекс шага деления

Эфемерная структура для обнаружения цикла при разложении дроби:
остатки при делении на d лежат в [0, d), поэтому ширина ключей
выбирается как shortest_digit_type(d).
"""

from typing import Any, Optional

from src.core.digits.digit_type import DigitType, shortest_digit_type
from src.core.numerics.errors import (
    ArgumentRangeError,
    DigitOverflowError,
    ZeroDenominatorError,
)
from src.core.numerics.guards import as_integer, validate_non_negative


class RemainderMap:
    """Остаток → индекс первой дробной цифры, на которой он встретился."""

    def __init__(self, digit_type: DigitType = DigitType.BYTE) -> None:
        self._digit_type = DigitType(digit_type)
        self._indices: dict[int, int] = {}

    @classmethod
    def new_from_denominator_size(cls, denominator: Any) -> "RemainderMap":
        """
        Карта с шириной ключей под остатки от деления на denominator.

        Raises:
            ZeroDenominatorError: Если denominator == 0
            ArgumentRangeError: Если denominator отрицательный
        """
        value = as_integer(denominator, "denominator")
        if value == 0:
            raise ZeroDenominatorError()
        validate_non_negative(value, "denominator")
        if value == 1:
            return cls(DigitType.BYTE)
        return cls(shortest_digit_type(value))

    @property
    def digit_type(self) -> DigitType:
        return self._digit_type

    def add_if_not_exists(self, remainder: Any, index: int) -> Optional[int]:
        """
        Запоминает индекс остатка, если остаток встречается впервые.

        Returns:
            None, если остаток добавлен; иначе индекс, записанный ранее

        Raises:
            ArgumentRangeError: Если remainder или index отрицательные
            DigitOverflowError: Если remainder шире ключей карты
        """
        key = as_integer(remainder, "remainder")
        if key < 0:
            raise ArgumentRangeError(f"remainder must be non-negative, got {key}")
        validate_non_negative(index, "index")
        if not self._digit_type.fits(key):
            raise DigitOverflowError(
                f"Remainder {key} does not fit in {self._digit_type.name} map keys"
            )

        existing = self._indices.get(key)
        if existing is not None:
            return existing
        self._indices[key] = index
        return None

    def __len__(self) -> int:
        return len(self._indices)

    def __contains__(self, remainder: object) -> bool:
        return remainder in self._indices
