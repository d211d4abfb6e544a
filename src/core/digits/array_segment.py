"""
ImmutableArraySegment — Окно (offset, count) над неизменяемой последовательностью

Используется DigitList.split_at_indices: разбиение сначала режет окна
без копирования, и только затем материализует каждое окно в новый список.
"""

from collections.abc import Iterator, Sequence
from typing import Generic, TypeVar

from src.core.numerics.guards import validate_non_negative, validate_not_none

T = TypeVar("T")


class ImmutableArraySegment(Generic[T]):
    """Неизменяемое окно над последовательностью (array.array или tuple)."""

    __slots__ = ("_items", "_offset", "_count")

    def __init__(self, items: Sequence[T], offset: int, count: int) -> None:
        self._items = items
        self._offset = offset
        self._count = count

    @classmethod
    def create(cls, items: Sequence[T]) -> "ImmutableArraySegment[T]":
        """Окно на всю последовательность."""
        validate_not_none(items, "items")
        return cls(items, 0, len(items))

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def count(self) -> int:
        return self._count

    def subsegment(self, offset: int, count: int) -> "ImmutableArraySegment[T]":
        """
        Под-окно относительно текущего окна.

        Raises:
            ArgumentRangeError: Если offset или count отрицательные
            IndexError: Если под-окно выходит за границы текущего окна
        """
        validate_non_negative(offset, "offset")
        validate_non_negative(count, "count")

        new_offset = self._offset + offset
        if new_offset + count > self._offset + self._count:
            raise IndexError(
                "Cannot construct an immutable array sub-segment that exceeds "
                "the bounds of the parent segment."
            )
        return ImmutableArraySegment(self._items, new_offset, count)

    def materialize(self) -> Sequence[T]:
        """Копия окна того же типа, что и исходная последовательность."""
        return self._items[self._offset : self._offset + self._count]

    def __len__(self) -> int:
        return self._count

    def __getitem__(self, index: int) -> T:
        if not 0 <= index < self._count:
            raise IndexError(f"Segment index {index} out of range [0, {self._count})")
        return self._items[self._offset + index]

    def __iter__(self) -> Iterator[T]:
        for i in range(self._offset, self._offset + self._count):
            yield self._items[i]

    def __repr__(self) -> str:
        return f"ImmutableArraySegment(offset={self._offset}, count={self._count})"
