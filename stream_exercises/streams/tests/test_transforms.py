"""Tests for streams.transforms module."""

from __future__ import annotations

import pytest

from stream_exercises.streams.transforms import (
    calculate_average,
    count_elements,
    filter_and_map,
    filter_odd_numbers,
)


class TestFilterAndMap:
    """Tests for filter_and_map function."""

    def test_short_words_dropped(self) -> None:
        """Test that words of three characters or fewer are dropped."""
        assert filter_and_map(["a", "ab", "abc", "abcd", "abcde"]) == ["ABCD", "ABCDE"]

    def test_order_preserved(self) -> None:
        """Test that kept words stay in input order."""
        assert filter_and_map(["hello", "hi", "world"]) == ["HELLO", "WORLD"]

    def test_empty(self) -> None:
        """Test an empty input."""
        assert filter_and_map([]) == []


class TestCalculateAverage:
    """Tests for calculate_average function."""

    def test_average(self) -> None:
        """Test the mean of a list."""
        assert calculate_average([10, 20, 30, 40, 50]) == pytest.approx(30.0)

    def test_empty_is_none(self) -> None:
        """Test that an empty list has no average."""
        assert calculate_average([]) is None


class TestCountElements:
    """Tests for count_elements function."""

    @pytest.mark.parametrize(
        ("numbers", "expected"),
        [([1, 2, 3, 4, 5, 6, 7], 7), ([], 0), ([42], 1)],
    )
    def test_count(self, numbers: list[int], expected: int) -> None:
        """Test counting elements."""
        assert count_elements(numbers) == expected

    def test_counts_iterators(self) -> None:
        """Test counting a one-shot iterator."""
        assert count_elements(iter(range(5))) == 5


class TestFilterOddNumbers:
    """Tests for filter_odd_numbers function."""

    def test_mixed(self) -> None:
        """Test that only odd numbers remain, in order."""
        assert filter_odd_numbers([1, 2, 3, 4, 5, 6, 7, 8, 9, 10]) == [1, 3, 5, 7, 9]

    def test_negative_odds(self) -> None:
        """Test that negative odd numbers are kept."""
        assert filter_odd_numbers([-3, -2, 0]) == [-3]

    def test_even_only(self) -> None:
        """Test a list without odd numbers."""
        assert filter_odd_numbers([2, 4, 6]) == []
