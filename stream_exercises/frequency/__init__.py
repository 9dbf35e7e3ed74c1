"""Character and word frequency package.

This package provides tools for:
1. Counting characters and words in a text (analyzer module)
2. Finding ties at the most/least used counts, longest words and palindromes

Example usage:
    from stream_exercises.frequency.analyzer import (
        character_frequencies,
        most_used_characters,
    )

    print(most_used_characters("Vitor Martins"))  # ['i', 'r', 't']
    print(character_frequencies("hello")["l"])  # 2
"""

from __future__ import annotations
