"""Asynchronous string stream operators built on asyncio.

Streams are async iterables of strings or characters. Operators that wait
take a ``sleep`` coroutine function (``asyncio.sleep`` by default) so callers
can substitute their own clock.

Example usage:
    import asyncio
    from stream_exercises.reactive.processor import batch_words, from_iterable

    async def demo() -> None:
        async for batch in batch_words(from_iterable("abcde"), 2):
            print(batch)  # ['a', 'b'], ['c', 'd'], ['e']

    asyncio.run(demo())
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, TypeVar

from stream_exercises.frequency import analyzer

if TYPE_CHECKING:
    from collections import Counter
    from collections.abc import (
        AsyncIterable,
        AsyncIterator,
        Awaitable,
        Callable,
        Iterable,
    )

    SleepFunc = Callable[[float], Awaitable[object]]

_logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_BACKOFF_BASE = 0.1  # seconds before the second element
DEFAULT_MAX_CONCURRENCY = 4


async def from_iterable(items: Iterable[T]) -> AsyncIterator[T]:
    """Turn a plain iterable into an async stream."""
    for item in items:
        yield item


async def string_to_stream(text: str | None) -> AsyncIterator[str]:
    """Emit the characters of text one by one."""
    if text is None:
        msg = "text must not be None"
        raise analyzer.InvalidInputError(msg)
    for char in text:
        yield char


async def find_most_used_character(text: str | None) -> str | None:
    """Return the smallest most used character, or None for empty text."""
    return analyzer.most_used_character(text)


async def find_all_most_used_characters(text: str | None) -> AsyncIterator[str]:
    """Emit every character tied at the highest count, sorted ascending."""
    for char in analyzer.most_used_characters(text):
        yield char


async def count_vowels(text: str | None) -> int:
    """Count vowels case-insensitively."""
    return analyzer.count_vowels(text)


async def get_character_frequencies(text: str | None) -> Counter[str]:
    """Return the case-folded character table, spaces excluded."""
    return analyzer.character_frequencies(text)


async def is_palindrome(text: str | None) -> bool:
    """Null-safe palindrome check: None is never a palindrome."""
    if text is None:
        return False
    return analyzer.is_palindrome(text)


async def filter_alphabetic(chars: AsyncIterable[str]) -> AsyncIterator[str]:
    """Emit only alphabetic characters."""
    async for char in chars:
        if char.isalpha():
            yield char


async def to_upper_case(words: AsyncIterable[str]) -> AsyncIterator[str]:
    """Emit every word uppercased."""
    async for word in words:
        yield word.upper()


async def filter_words_by_length(
    words: AsyncIterable[str], min_length: int
) -> AsyncIterator[str]:
    """Emit only words strictly longer than min_length."""
    async for word in words:
        if len(word) > min_length:
            yield word


async def emit_words_with_index(words: AsyncIterable[str]) -> AsyncIterator[str]:
    """Emit words prefixed with their zero-based position, as ``"0: word"``."""
    index = 0
    async for word in words:
        yield f"{index}: {word}"
        index += 1


async def emit_with_delay(
    words: Iterable[str],
    delay: float,
    *,
    sleep: SleepFunc = asyncio.sleep,
) -> AsyncIterator[str]:
    """Emit each word after waiting ``delay`` seconds, including the first."""
    for word in words:
        await sleep(delay)
        yield word


async def emit_with_backoff(
    text: str,
    base_delay: float = DEFAULT_BACKOFF_BASE,
    *,
    sleep: SleepFunc = asyncio.sleep,
) -> AsyncIterator[str]:
    """Emit characters with exponentially growing pauses.

    The first character is emitted immediately; the pause before character
    ``i`` is ``base_delay * 2 ** (i - 1)``.
    """
    for index, char in enumerate(text):
        if index:
            await sleep(base_delay * 2 ** (index - 1))
        yield char


async def _sum_lengths(words: AsyncIterable[str]) -> int:
    total = 0
    async for word in words:
        total += len(word)
    return total


async def count_total_characters(
    first: AsyncIterable[str], second: AsyncIterable[str]
) -> int:
    """Consume both streams concurrently and add up the string lengths."""
    totals = await asyncio.gather(_sum_lengths(first), _sum_lengths(second))
    return sum(totals)


async def find_longest_word(words: AsyncIterable[str]) -> str | None:
    """Return the first longest word, or None for an empty stream."""
    longest: str | None = None
    async for word in words:
        if longest is None or len(word) > len(longest):
            longest = word
    return longest


async def group_by_vowel_consonant(text: str) -> dict[str, list[str]]:
    """Split the letters of text into vowels and consonants, in order."""
    groups: dict[str, list[str]] = {"vowel": [], "consonant": []}
    for char in text.lower():
        if char.isalpha():
            key = "vowel" if char in analyzer.VOWELS else "consonant"
            groups[key].append(char)
    return groups


async def process_with_fallback(source: Awaitable[T], fallback: T) -> T:
    """Await source, returning fallback if it raises."""
    try:
        return await source
    except Exception:  # noqa: BLE001
        _logger.warning("Source failed, using fallback %r", fallback, exc_info=True)
        return fallback


async def batch_words(
    words: AsyncIterable[str], batch_size: int
) -> AsyncIterator[list[str]]:
    """Group words into lists of batch_size; the last list may be shorter.

    Raises:
        ValueError: If batch_size is less than 1.
    """
    if batch_size < 1:
        msg = f"batch_size must be at least 1, got {batch_size}"
        raise ValueError(msg)
    batch: list[str] = []
    async for word in words:
        batch.append(word)
        if len(batch) == batch_size:
            yield batch
            batch = []
    if batch:
        yield batch


async def process_with_retry(
    factory: Callable[[], Awaitable[T]],
    max_retries: int,
    *,
    delay: float = 0.0,
    sleep: SleepFunc = asyncio.sleep,
) -> T:
    """Run a fresh attempt from factory until one succeeds.

    Args:
        factory: Called once per attempt to produce the awaitable.
        max_retries: Retries allowed after the first attempt.
        delay: Seconds to wait between attempts.
        sleep: Coroutine function used for waiting.

    Returns:
        The result of the first successful attempt.

    Raises:
        ValueError: If max_retries is negative.
        Exception: The last attempt's error once retries are exhausted.
    """
    if max_retries < 0:
        msg = f"max_retries must be non-negative, got {max_retries}"
        raise ValueError(msg)
    attempt = 0
    while True:
        try:
            return await factory()
        except Exception:
            if attempt >= max_retries:
                _logger.warning("Giving up after %d attempts", attempt + 1)
                raise
            attempt += 1
            _logger.warning("Attempt %d failed, retrying", attempt, exc_info=True)
            if delay > 0:
                await sleep(delay)


async def concatenate_words(words: AsyncIterable[str], delimiter: str) -> str:
    """Join every word of the stream with delimiter."""
    return delimiter.join([word async for word in words])


async def process_in_parallel(
    words: Iterable[str],
    transform: Callable[[str], str] = str.strip,
    *,
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
) -> list[str]:
    """Apply transform to every word in worker threads.

    At most max_concurrency transforms run at once. Results keep input order.

    Raises:
        ValueError: If max_concurrency is less than 1.
    """
    if max_concurrency < 1:
        msg = f"max_concurrency must be at least 1, got {max_concurrency}"
        raise ValueError(msg)
    semaphore = asyncio.Semaphore(max_concurrency)

    async def _run(word: str) -> str:
        async with semaphore:
            return await asyncio.to_thread(transform, word)

    results = await asyncio.gather(*(_run(word) for word in words))
    _logger.debug("Processed %d words in parallel", len(results))
    return list(results)
