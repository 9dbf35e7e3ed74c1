#!/usr/bin/env python3
"""Frequency analyzer - character and word statistics for short texts.

Usage:
    # From raw text
    python -m stream_exercises.frequency.analyzer --text "Vitor Martins"

    # From a file
    python -m stream_exercises.frequency.analyzer --file path/to/file.txt

    # Log what is being analyzed
    python -m stream_exercises.frequency.analyzer --text "racecar" --verbose
"""

from __future__ import annotations

import argparse
from collections import Counter
import logging
import os
from pathlib import Path
import re
import sys
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from collections.abc import Sequence

_logger = logging.getLogger(__name__)

VOWELS = frozenset("aeiou")
SPACE = " "
DEFAULT_ENCODING = "utf-8"


class InvalidInputError(ValueError):
    """Raised when a text argument is None."""


class FrequencyReport(NamedTuple):
    """Summary of a single text."""

    total_characters: int
    unique_characters: int
    most_used: list[str]
    least_used: list[str]
    vowels: int
    consonants: int
    longest_word: str | None
    most_common_word: str | None
    is_palindrome: bool
    frequencies: Counter[str]


def _require_text(text: str | None, name: str = "text") -> str:
    if text is None:
        msg = f"{name} must not be None"
        raise InvalidInputError(msg)
    return text


def _count_characters(text: str, *, skip_spaces: bool) -> Counter[str]:
    folded = text.lower()
    if skip_spaces:
        return Counter(char for char in folded if char != SPACE)
    return Counter(folded)


def _keys_with_count(counts: Counter[str], count: int) -> list[str]:
    return sorted(key for key, value in counts.items() if value == count)


def character_frequencies(text: str | None) -> Counter[str]:
    """Count case-folded characters, ignoring spaces.

    Args:
        text: The input text.

    Returns:
        Counter mapping each character to its number of occurrences.

    Raises:
        InvalidInputError: If text is None.
    """
    return _count_characters(_require_text(text), skip_spaces=True)


def most_used_characters(text: str | None) -> list[str]:
    """Find every character tied at the highest count.

    Spaces are counted like any other character. Letters are case-folded.

    Args:
        text: The input text.

    Returns:
        Characters with the maximum count, sorted ascending. Empty for "".

    Raises:
        InvalidInputError: If text is None.
    """
    counts = _count_characters(_require_text(text), skip_spaces=False)
    if not counts:
        return []
    return _keys_with_count(counts, max(counts.values()))


def most_used_character(text: str | None) -> str | None:
    """Return the smallest of the most used characters, or None for ""."""
    characters = most_used_characters(text)
    return characters[0] if characters else None


def least_used_characters(text: str | None) -> list[str]:
    """Find every non-space character tied at the lowest count.

    Args:
        text: The input text.

    Returns:
        Characters with the minimum count, sorted ascending.

    Raises:
        InvalidInputError: If text is None.
    """
    counts = character_frequencies(text)
    if not counts:
        return []
    return _keys_with_count(counts, min(counts.values()))


def characters_with_frequency(text: str | None, frequency: int) -> list[str]:
    """Find non-space characters that occur exactly ``frequency`` times."""
    return _keys_with_count(character_frequencies(text), frequency)


def _split_sentence(sentence: str | None) -> list[str]:
    return [word for word in _require_text(sentence, "sentence").split(SPACE) if word]


def longest_word(sentence: str | None) -> str | None:
    """Return the longest word of a sentence.

    Words are separated by single spaces. When several words share the
    maximum length, the first one wins.

    Args:
        sentence: The sentence to search.

    Returns:
        The longest word, or None if the sentence has no words.

    Raises:
        InvalidInputError: If sentence is None.
    """
    words = _split_sentence(sentence)
    if not words:
        return None
    return max(words, key=len)


def all_longest_words(sentence: str | None) -> list[str]:
    """Return every word at the maximum length, in order of appearance."""
    words = _split_sentence(sentence)
    if not words:
        return []
    longest = max(len(word) for word in words)
    return [word for word in words if len(word) == longest]


def count_vowels(text: str | None) -> int:
    """Count vowels (a, e, i, o, u) case-insensitively."""
    return sum(1 for char in _require_text(text).lower() if char in VOWELS)


def count_consonants(text: str | None) -> int:
    """Count alphabetic characters that are not vowels."""
    return sum(
        1
        for char in _require_text(text).lower()
        if char.isalpha() and char not in VOWELS
    )


def is_palindrome(text: str | None) -> bool:
    """Check whether text reads the same backwards.

    Only spaces are stripped; punctuation and digits take part in the
    comparison. The empty string is a palindrome.

    Raises:
        InvalidInputError: If text is None.
    """
    normalized = _require_text(text).lower().replace(SPACE, "")
    return normalized == normalized[::-1]


def extract_words(text: str | None) -> list[str]:
    """Split text on runs of non-word characters and case-fold the words.

    Args:
        text: The input text to extract words from.

    Returns:
        List of lowercase words, in order.
    """
    # Underscore is a word character, so "snake_case" stays one word
    return [word.lower() for word in re.split(r"\W+", _require_text(text)) if word]


def most_common_word(text: str | None) -> str | None:
    """Return the word with the highest count.

    Ties go to the word that appeared first in the text.
    """
    counts = Counter(extract_words(text))
    if not counts:
        return None
    # most_common() is a stable sort over insertion order
    return counts.most_common(1)[0][0]


def group_words_by_length(text: str | None) -> dict[int, list[str]]:
    """Group whitespace-separated words by length, keeping case and order."""
    grouped: dict[int, list[str]] = {}
    for word in _require_text(text).split():
        grouped.setdefault(len(word), []).append(word)
    return grouped


def unique_characters_in_order(text: str | None) -> list[str]:
    """Return distinct characters in order of first occurrence."""
    return list(dict.fromkeys(_require_text(text)))


def analyze_text(text: str | None) -> FrequencyReport:
    """Build a FrequencyReport for text.

    Args:
        text: The input text to analyze.

    Returns:
        FrequencyReport with counts, extremes and word statistics.
    """
    text = _require_text(text)
    frequencies = character_frequencies(text)
    _logger.debug("Analyzing %d characters", len(text))
    return FrequencyReport(
        total_characters=sum(frequencies.values()),
        unique_characters=len(frequencies),
        most_used=most_used_characters(text),
        least_used=least_used_characters(text),
        vowels=count_vowels(text),
        consonants=count_consonants(text),
        longest_word=longest_word(text),
        most_common_word=most_common_word(text),
        is_palindrome=is_palindrome(text),
        frequencies=frequencies,
    )


def format_report(report: FrequencyReport) -> str:
    """Format a report and its character table as text.

    The table rows and percentages both come from ``report.frequencies``.

    Args:
        report: Summary produced by analyze_text.

    Returns:
        Formatted string with summary lines and a frequency table.
    """
    if report.total_characters == 0:
        return "No characters found in input."

    def _join(chars: list[str]) -> str:
        return ", ".join(repr(char) for char in chars)

    lines = [
        f"Total characters: {report.total_characters}",
        f"Unique characters: {report.unique_characters}",
        f"Most used: {_join(report.most_used)}",
        f"Least used: {_join(report.least_used)}",
        f"Vowels: {report.vowels}",
        f"Consonants: {report.consonants}",
        f"Longest word: {report.longest_word or '-'}",
        f"Most common word: {report.most_common_word or '-'}",
        f"Palindrome: {'yes' if report.is_palindrome else 'no'}",
        "",
    ]

    items = sorted(
        report.frequencies.items(), key=lambda item: (-item[1], item[0])
    )
    max_count = max(count for _, count in items)
    count_width = max(len(str(max_count)), 5)  # Minimum width for "Count" header

    header = f"{'Char':<6}  {'Count':>{count_width}}  {'Percentage':>10}"
    lines.append(header)
    lines.append("-" * len(header))

    for char, count in items:
        percentage = (count / report.total_characters) * 100
        lines.append(f"{char!r:<6}  {count:>{count_width}}  {percentage:>9.2f}%")

    return "\n".join(lines)


def read_file(filepath: str | Path) -> str:
    """Read text content from a file.

    The encoding defaults to UTF-8 and can be overridden with the
    STREAM_EXERCISES_ENCODING environment variable.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        UnicodeDecodeError: If the file can't be decoded.
        OSError: If the file can't be read.
        LookupError: If the configured encoding is unknown.
    """
    encoding = os.environ.get("STREAM_EXERCISES_ENCODING", DEFAULT_ENCODING)
    return Path(filepath).read_text(encoding=encoding)


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the frequency analyzer.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = argparse.ArgumentParser(
        description="Analyze character and word frequency in text.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument(
        "--text",
        "-t",
        type=str,
        help="Raw text to analyze",
    )
    input_group.add_argument(
        "--file",
        "-f",
        type=str,
        help="Path to a file to analyze",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        if args.text is not None:
            text = args.text
        else:
            _logger.info("Reading %s", args.file)
            text = read_file(args.file)
    except FileNotFoundError as e:
        sys.stderr.write(f"Error: File not found - {e}\n")
        return 1
    except UnicodeDecodeError as e:
        sys.stderr.write(f"Error: Could not decode file - {e}\n")
        return 1
    except LookupError as e:
        sys.stderr.write(f"Error: Unknown encoding - {e}\n")
        return 1
    except OSError as e:
        sys.stderr.write(f"Error: Could not read file - {e}\n")
        return 1

    report = analyze_text(text)
    _logger.info("Most used characters: %s", report.most_used)
    sys.stdout.write(format_report(report) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
