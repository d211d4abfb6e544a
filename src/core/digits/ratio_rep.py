"""
RatioDigitRep — Рациональное число в системе счисления

Разложение n/d в основании base на целую часть, конечную (terminating)
и периодическую (repeating) дробные части.

Алгоритм (деление столбиком с обнаружением цикла):
1. Знак = знак дроби (ноль никогда не отрицательный)
2. whole, rem = divmod(|n|, |d|); целая часть → беззнаковая конверсия
3. Пока не остановились:
   - rem == 0 → все накопленные цифры конечные, периода нет
   - rem уже встречался на шаге k → цифры[0:k] конечные, цифры[k:] период
   - иначе запоминаем (rem → шаг), digit, rem = divmod(rem * base, |d|)

Остатки лежат в [0, |d|), поэтому цикл завершается не более чем за |d| шагов.
"""

import logging
from fractions import Fraction
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from src.core.digits.digit_list import DigitList, DigitListBuilder
from src.core.digits.digit_reps import digits_in_base
from src.core.digits.formatting import DigitFormatOptions
from src.core.digits.remainder_map import RemainderMap
from src.core.numerics.errors import ZeroDenominatorError
from src.core.numerics.guards import as_integer, validate_base, validate_not_none

log = logging.getLogger(__name__)


# =============================================================================
# RATIO DIGIT REP
# =============================================================================


class RatioDigitRep(BaseModel):
    """
    Разложение рационального числа в основании base.

    Examples:
        >>> str(ratio_in_base(1, 3, 10))
        '0 . [ 3 ] (Base 10)'
        >>> str(ratio_in_base(5, 4, 10))
        '1 . 2 5 (Base 10)'
    """

    is_negative: bool = Field(..., description="Признак отрицательного значения")
    base: int = Field(..., ge=2, description="Основание системы счисления")
    whole: DigitList = Field(..., description="Цифры целой части")
    terminating: DigitList = Field(..., description="Непериодические дробные цифры")
    repeating: Optional[DigitList] = Field(
        default=None, description="Период дробной части (None, если дробь конечна)"
    )

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("base", mode="before")
    @classmethod
    def coerce_base(cls, v: Any) -> int:
        """BigUnsignedInteger и numpy integer приводятся к int."""
        return as_integer(v, "base")

    @property
    def has_fractional(self) -> bool:
        return len(self.terminating) != 0 or self.repeating is not None

    @property
    def has_repeat(self) -> bool:
        return self.repeating is not None

    def to_fraction(self) -> Fraction:
        """
        Точное значение, восстановленное из цифр.

        value = W + T / b^t + R / (b^t * (b^r - 1))
        """
        base = self.base
        value = Fraction(self.whole.to_integer(base))

        terminating_scale = base ** len(self.terminating)
        value += Fraction(self.terminating.to_integer(base), terminating_scale)

        if self.repeating is not None:
            period = base ** len(self.repeating) - 1
            value += Fraction(self.repeating.to_integer(base), terminating_scale * period)

        return -value if self.is_negative else value

    def to_string(self, options: Optional[DigitFormatOptions] = None) -> str:
        options = options or DigitFormatOptions()
        sign = "-" if self.is_negative else ""
        gap = options.component_separator

        if len(self.whole) == 0:
            result = f"{sign}0"
        elif len(self.whole) == 1:
            result = f"{sign}{options.format_digit(self.whole[0])}"
        else:
            result = f"{sign}{self.whole.format_as_list(options)}"

        if self.has_fractional:
            result += f"{gap}{options.radix_point}"
            if len(self.terminating) > 0:
                result += gap + self.terminating.format_as_list(options)
            if self.repeating is not None:
                result += f"{gap}{options.repeat_opener}{gap}"
                result += self.repeating.format_as_list(options)
                result += f"{gap}{options.repeat_closer}"

        if len(self.whole) > 1 or self.has_fractional:
            result += options.base_suffix(self.base)
        return result

    def __str__(self) -> str:
        return self.to_string()


# =============================================================================
# РАЗЛОЖЕНИЕ
# =============================================================================


def ratio_in_base(numerator: Any, denominator: Any, base: Any) -> RatioDigitRep:
    """
    Разложение numerator / denominator в основании base.

    Args:
        numerator: Числитель (любое целое)
        denominator: Знаменатель (ненулевое целое)
        base: Основание >= 2

    Returns:
        RatioDigitRep с целой, конечной и периодической частями

    Raises:
        ZeroDenominatorError: Если denominator == 0
        ArgumentRangeError: Если base < 2
    """
    base_value = validate_base(base)
    n = as_integer(numerator, "numerator")
    d = as_integer(denominator, "denominator")
    if d == 0:
        raise ZeroDenominatorError()

    is_negative = n != 0 and (n < 0) != (d < 0)
    n, d = abs(n), abs(d)

    whole, remainder = divmod(n, d)
    whole_digits = digits_in_base(whole, base_value)

    remainders = RemainderMap.new_from_denominator_size(d)
    builder = DigitListBuilder.new_from_base_size(base_value)
    repeating: Optional[DigitList] = None
    index = 0

    while True:
        if remainder == 0:
            terminating = builder.to_list()
            break

        existing = remainders.add_if_not_exists(remainder, index)
        if existing is not None:
            terminating, repeating = builder.to_list().split_at_indices(existing)
            log.debug(
                "Cycle of length %d detected after %d fractional digits of %d/%d in base %d",
                index - existing,
                existing,
                n,
                d,
                base_value,
            )
            break

        digit, remainder = divmod(remainder * base_value, d)
        builder.add(digit)
        index += 1

    return RatioDigitRep(
        is_negative=is_negative,
        base=base_value,
        whole=whole_digits,
        terminating=terminating,
        repeating=repeating,
    )


def fraction_in_base(value: Fraction, base: Any) -> RatioDigitRep:
    """Разложение Fraction в основании base."""
    validate_not_none(value, "value")
    return ratio_in_base(value.numerator, value.denominator, base)
