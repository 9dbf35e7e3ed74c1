"""Filter, map and aggregate plain lists."""

from __future__ import annotations

from statistics import fmean
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

MIN_WORD_LENGTH = 3


def filter_and_map(words: Iterable[str]) -> list[str]:
    """Uppercase the words longer than MIN_WORD_LENGTH, keeping their order."""
    return [word.upper() for word in words if len(word) > MIN_WORD_LENGTH]


def calculate_average(numbers: Sequence[int]) -> float | None:
    """Return the arithmetic mean, or None for an empty sequence."""
    if not numbers:
        return None
    return fmean(numbers)


def count_elements(numbers: Iterable[int]) -> int:
    """Count elements, consuming iterators."""
    return sum(1 for _ in numbers)


def filter_odd_numbers(numbers: Iterable[int]) -> list[int]:
    """Keep the odd numbers, in order."""
    return [n for n in numbers if n % 2 != 0]
