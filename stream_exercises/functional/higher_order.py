"""Higher-order function exercises: predicates, composition and closures.

Every helper takes plain callables; a class works wherever a one-argument
callable is expected.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
R = TypeVar("R")


@dataclass(frozen=True)
class Person:
    """A named person, built by constructor-reference exercises."""

    name: str

    def __str__(self) -> str:
        """Render as ``Person(name='...')``."""
        return f"Person(name='{self.name}')"


def apply_predicate_to_filter(
    numbers: Iterable[int], predicate: Callable[[int], bool]
) -> list[int]:
    """Keep the numbers that satisfy predicate, in order."""
    return [n for n in numbers if predicate(n)]


def apply_function_to_transform(
    items: Iterable[str], transformer: Callable[[str], R]
) -> list[R]:
    """Map every item through transformer."""
    return [transformer(item) for item in items]


def compose_functions(
    first: Callable[[T], R], second: Callable[[R], V], value: T
) -> V:
    """Apply ``first`` then ``second`` to value."""
    return second(first(value))


def apply_consumer_to_each(
    items: Iterable[str], consumer: Callable[[str], object]
) -> None:
    """Call consumer once per item, discarding its return value."""
    for item in items:
        consumer(item)


def use_supplier_to_generate(supplier: Callable[[], T], count: int) -> list[T]:
    """Call supplier ``count`` times and collect the results.

    Args:
        supplier: Zero-argument callable invoked for every element.
        count: Number of elements to generate.

    Returns:
        List of ``count`` supplied values.

    Raises:
        ValueError: If count is negative.
    """
    if count < 0:
        msg = f"count must be non-negative, got {count}"
        raise ValueError(msg)
    return [supplier() for _ in range(count)]


def chain_predicates_with_and(
    numbers: Iterable[int],
    first: Callable[[int], bool],
    second: Callable[[int], bool],
) -> list[int]:
    """Keep the numbers that satisfy both predicates."""
    return [n for n in numbers if first(n) and second(n)]


def chain_predicates_with_or(
    numbers: Iterable[int],
    first: Callable[[int], bool],
    second: Callable[[int], bool],
) -> list[int]:
    """Keep the numbers that satisfy either predicate."""
    return [n for n in numbers if first(n) or second(n)]


def apply_bi_function(a: T, b: T, function: Callable[[T, T], R]) -> R:
    """Apply a two-argument function."""
    return function(a, b)


def apply_unary_operator(value: int, operator: Callable[[int], int]) -> int:
    """Apply a one-argument integer operator."""
    return operator(value)


def chain_unary_operators(value: int, *operators: Callable[[int], int]) -> int:
    """Apply operators left to right, feeding each result into the next."""
    return reduce(lambda acc, operator: operator(acc), operators, value)


def reduce_with_binary_operator(
    numbers: Iterable[int], initial: int, operator: Callable[[int, int], int]
) -> int:
    """Fold numbers into a single value, starting from initial.

    Args:
        numbers: Values to fold.
        initial: Starting accumulator, returned as-is for no numbers.
        operator: Combines the accumulator with the next number.

    Returns:
        The folded value.
    """
    return reduce(operator, numbers, initial)


def apply_tri_function(a: T, b: U, c: V, function: Callable[[T, U, V], R]) -> R:
    """Apply a three-argument function."""
    return function(a, b, c)


def apply_method_reference(items: Iterable[T], mapper: Callable[[T], R]) -> list[R]:
    """Map items through an unbound method or any other one-argument callable."""
    return [mapper(item) for item in items]


def create_objects_with_constructor(
    names: Iterable[str], constructor: Callable[[str], T]
) -> list[T]:
    """Build one object per name by calling constructor."""
    return [constructor(name) for name in names]


def curry(function: Callable[[T, U], R], first_arg: T) -> Callable[[U], R]:
    """Fix the first argument of a two-argument function.

    Args:
        function: Two-argument function to partially apply.
        first_arg: Value bound to the first parameter.

    Returns:
        One-argument function taking the remaining parameter.
    """

    def curried(second_arg: U) -> R:
        return function(first_arg, second_arg)

    return curried


def use_function_and_then(
    value: str, length: Callable[[str], int], predicate: Callable[[int], bool]
) -> bool:
    """Measure value with length, then test the result with predicate."""
    return predicate(length(value))


def filter_and_map(
    numbers: Iterable[int],
    predicate: Callable[[int], bool],
    mapper: Callable[[int], str],
) -> list[str]:
    """Keep numbers matching predicate and map them to strings."""
    return [mapper(n) for n in numbers if predicate(n)]


def create_prefix_function(prefix: str) -> Callable[[str], str]:
    """Return a function that prepends prefix to its argument."""
    return lambda text: prefix + text
