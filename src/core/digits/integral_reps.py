"""
Integral Digit Reps — Целочисленные представления в системе счисления

UnsignedIntegralDigitRep: (base, digits)
SignedIntegralDigitRep:   (is_negative, base, digits)

Immutable Pydantic модели. Фабрики create() устанавливают инварианты
(base >= 2, без ведущих нулей, ноль не бывает отрицательным); прямой
конструктор используется процедурами конверсии, которые строят цифры
уже без ведущих нулей.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from src.core.digits.digit_list import DigitList
from src.core.digits.formatting import DigitFormatOptions
from src.core.numerics.guards import as_integer, validate_base, validate_not_none


def _format_integral(
    is_negative: bool, base: int, digits: DigitList, options: Optional[DigitFormatOptions]
) -> str:
    options = options or DigitFormatOptions()
    sign = "-" if is_negative else ""

    if len(digits) == 0:
        return "0"
    if len(digits) == 1:
        return f"{sign}{options.format_digit(digits[0])}"
    return f"{sign}{digits.to_string(options)}{options.base_suffix(base)}"


# =============================================================================
# UNSIGNED
# =============================================================================


class UnsignedIntegralDigitRep(BaseModel):
    """
    Беззнаковое целое как цифры в основании base.

    Examples:
        >>> rep = UnsignedIntegralDigitRep.create(12, DigitList.create_range([0, 0, 1, 0]))
        >>> rep.digits.raw_digits
        (1, 0)
        >>> str(rep)
        '{ 1 0 } (Base 12)'
    """

    base: int = Field(..., ge=2, description="Основание системы счисления")
    digits: DigitList = Field(..., description="Цифры от старшей к младшей")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("base", mode="before")
    @classmethod
    def coerce_base(cls, v: Any) -> int:
        """BigUnsignedInteger и numpy integer приводятся к int."""
        return as_integer(v, "base")

    @classmethod
    def create(cls, base: Any, digits: DigitList) -> "UnsignedIntegralDigitRep":
        """
        Представление с удалёнными ведущими нулями.

        Raises:
            ArgumentRangeError: Если base < 2
            ArgumentNullError: Если digits is None
        """
        base_value = validate_base(base)
        validate_not_none(digits, "digits")
        return cls(base=base_value, digits=digits.without_leading_zeroes())

    def to_integer(self) -> int:
        """Значение, восстановленное из цифр."""
        return self.digits.to_integer(self.base)

    def to_string(self, options: Optional[DigitFormatOptions] = None) -> str:
        return _format_integral(False, self.base, self.digits, options)

    def __str__(self) -> str:
        return self.to_string()


# =============================================================================
# SIGNED
# =============================================================================


class SignedIntegralDigitRep(BaseModel):
    """
    Знаковое целое как знак и цифры модуля в основании base.

    Ноль всегда неотрицательный и представлен пустым списком цифр.
    """

    is_negative: bool = Field(..., description="Признак отрицательного значения")
    base: int = Field(..., ge=2, description="Основание системы счисления")
    digits: DigitList = Field(..., description="Цифры модуля от старшей к младшей")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("base", mode="before")
    @classmethod
    def coerce_base(cls, v: Any) -> int:
        """BigUnsignedInteger и numpy integer приводятся к int."""
        return as_integer(v, "base")

    @classmethod
    def create(cls, is_negative: bool, base: Any, digits: DigitList) -> "SignedIntegralDigitRep":
        """
        Представление с удалёнными ведущими нулями.

        Если после удаления цифр не осталось, is_negative сбрасывается.

        Raises:
            ArgumentRangeError: Если base < 2
            ArgumentNullError: Если digits is None
        """
        base_value = validate_base(base)
        validate_not_none(digits, "digits")
        stripped = digits.without_leading_zeroes()
        if len(stripped) == 0:
            is_negative = False
        return cls(is_negative=is_negative, base=base_value, digits=stripped)

    @property
    def sign(self) -> int:
        """-1, 0 или 1; пустые цифры всегда дают 0."""
        if len(self.digits) == 0:
            return 0
        return -1 if self.is_negative else 1

    def to_integer(self) -> int:
        """Значение, восстановленное из знака и цифр."""
        magnitude = self.digits.to_integer(self.base)
        return -magnitude if self.is_negative else magnitude

    def to_string(self, options: Optional[DigitFormatOptions] = None) -> str:
        return _format_integral(self.is_negative, self.base, self.digits, options)

    def __str__(self) -> str:
        return self.to_string()
