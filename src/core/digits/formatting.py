"""
Digit Formatting — Параметры текстового представления цифр

DigitFormatOptions — frozen конфигурация форматирования, общая для
DigitList, целочисленных и рациональных представлений.

Форматы:
- DigitList:      { d0 d1 d2 }
- Integral rep:   0 | d0 | [-]{ d0 d1 } (Base N)
- Ratio rep:      [-]whole . terminating [ repeating ] (Base N)
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class DigitFormatOptions:
    """
    Конфигурация форматирования цифр.

    Attributes:
        separator: Разделитель между цифрами
        digit_format: format spec для каждой цифры ("d" — десятичный)
        base_format: format spec для основания в суффиксе "(Base N)"
        digit_formatter: Необязательная функция int → str; при наличии
            заменяет digit_format
        component_separator: Разделитель между частями рационального числа
        radix_point: Разделитель целой и дробной части
        repeat_opener: Открывающий маркер периода
        repeat_closer: Закрывающий маркер периода
    """

    separator: str = " "
    digit_format: str = "d"
    base_format: str = "d"
    digit_formatter: Optional[Callable[[int], str]] = None
    component_separator: str = " "
    radix_point: str = "."
    repeat_opener: str = "["
    repeat_closer: str = "]"

    def format_digit(self, digit: Any) -> str:
        if self.digit_formatter is not None:
            return self.digit_formatter(int(digit))
        return format(int(digit), self.digit_format)

    def format_base(self, base: int) -> str:
        return format(base, self.base_format)

    def base_suffix(self, base: int) -> str:
        return f" (Base {self.format_base(base)})"

