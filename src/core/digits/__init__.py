"""
Core digits для radix-digits

Представление целых и рациональных чисел цифрами произвольного
основания с хранением цифр в наименьшей подходящей ширине.
"""

# Digit Types
from src.core.digits.digit_type import (
    MAX_BYTE_DIGIT_BASE,
    MAX_UINT_DIGIT_BASE,
    MAX_ULONG_DIGIT_BASE,
    MAX_USHORT_DIGIT_BASE,
    DigitType,
    shortest_digit_type,
)

# Digit Lists
from src.core.digits.array_segment import ImmutableArraySegment
from src.core.digits.digit_list import DigitList, DigitListBuilder
from src.core.digits.formatting import DigitFormatOptions

# Integral Representations
from src.core.digits.integral_reps import SignedIntegralDigitRep, UnsignedIntegralDigitRep
from src.core.digits.digit_reps import (
    digits_in_base,
    in_base,
    signed_in_base,
    unsigned_in_base,
)

# Ratio Representations
from src.core.digits.remainder_map import RemainderMap
from src.core.digits.ratio_rep import RatioDigitRep, fraction_in_base, ratio_in_base

__all__ = [
    # Digit Types
    "MAX_BYTE_DIGIT_BASE",
    "MAX_USHORT_DIGIT_BASE",
    "MAX_UINT_DIGIT_BASE",
    "MAX_ULONG_DIGIT_BASE",
    "DigitType",
    "shortest_digit_type",
    # Digit Lists
    "ImmutableArraySegment",
    "DigitList",
    "DigitListBuilder",
    "DigitFormatOptions",
    # Integral Representations
    "UnsignedIntegralDigitRep",
    "SignedIntegralDigitRep",
    "digits_in_base",
    "in_base",
    "signed_in_base",
    "unsigned_in_base",
    # Ratio Representations
    "RemainderMap",
    "RatioDigitRep",
    "fraction_in_base",
    "ratio_in_base",
]
