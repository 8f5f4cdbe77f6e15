"""Small combinators over sequences."""

import functools
from typing import Callable, Hashable, Sequence, TypeVar

T = TypeVar("T")
U = TypeVar("U")
H = TypeVar("H", bound=Hashable)


def transform(sequence: Sequence[T], fn: Callable[[int, T], U]) -> list[U]:
    """Apply fn(index, value) to every item, keeping order."""
    return [fn(i, v) for i, v in enumerate(sequence)]


def reduce(sequence: Sequence[T], initial: U, fn: Callable[[U, T], U]) -> U:
    """Left fold starting from initial."""
    return functools.reduce(fn, sequence, initial)


def filter_by(sequence: Sequence[T], predicate: Callable[[int, T], bool]) -> list[T]:
    """Keep items for which predicate(index, value) is true."""
    return [v for i, v in enumerate(sequence) if predicate(i, v)]


def unique(sequence: Sequence[H]) -> list[H]:
    """
    Each distinct value once.

    Callers should not depend on output order. Deduplication goes through a
    dict, so values come back in first-seen order.
    """
    return list(dict.fromkeys(sequence))


def equal(a: Sequence[T], b: Sequence[T]) -> bool:
    """Same length and equal item by item; list vs tuple does not matter."""
    if len(a) != len(b):
        return False
    return all(x == y for x, y in zip(a, b))


def pluck(sequence: Sequence[T], accessor: Callable[[T], U]) -> list[U]:
    """
    Pull one field out of every item with a typed accessor.

    Typical use is collecting ids before batching them:

        ids = pluck(users, lambda u: u.id)
        for batch in split(ids, 500):
            ...
    """
    return [accessor(v) for v in sequence]
