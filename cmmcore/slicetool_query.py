"""Query, search and transformation helpers for sequences."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable, Sequence, TypeVar

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)

_NESTED = (list, tuple)


def contain(items: Iterable[T], target: T) -> bool:
    """Tell whether target is among the items."""
    return any(item == target for item in items)


def contain_by(items: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Tell whether any item satisfies the predicate."""
    return any(predicate(item) for item in items)


def contain_sub_slice(items: Sequence[T], sub_items: Iterable[T]) -> bool:
    """Tell whether every element of sub_items occurs in items."""
    return all(contain(items, v) for v in sub_items)


def chunk(items: Sequence[T], size: int) -> list[list[T]]:
    """Split items into consecutive groups of at most size elements."""
    if not items or size <= 0:
        return []
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


def compact(items: Iterable[T]) -> list[T]:
    """Drop falsey values such as False, None, 0 and ""."""
    return [v for v in items if v]


def concat(items: Iterable[T], *args: Iterable[T]) -> list[T]:
    """Return a new list of items followed by every further sequence."""
    result = list(items)
    for extra in args:
        result.extend(extra)
    return result


def difference(items: Iterable[T], compared: Sequence[T]) -> list[T]:
    """Items that do not occur in compared, in their original order."""
    return [v for v in items if not contain(compared, v)]


def difference_by(
    items: Sequence[T],
    compared: Sequence[T],
    iteratee: Callable[[int, T], Any],
) -> list[T]:
    """Like difference, but compares the values produced by iteratee."""
    mapped_compared = map_items(compared, iteratee)
    return [
        original
        for original, key in zip(items, map_items(items, iteratee))
        if not contain(mapped_compared, key)
    ]


def difference_with(
    items: Iterable[T],
    compared: Sequence[T],
    comparator: Callable[[T, T], bool],
) -> list[T]:
    """Items for which comparator matches nothing in compared."""
    return [v for v in items if not any(comparator(v, other) for other in compared)]


def equal(items1: Sequence[T], items2: Sequence[T]) -> bool:
    """Same length and equal elements in the same order."""
    return len(items1) == len(items2) and all(a == b for a, b in zip(items1, items2))


def equal_with(
    items1: Sequence[T], items2: Sequence[U], comparator: Callable[[T, U], bool]
) -> bool:
    """Same length and comparator holds for each pair of elements."""
    return len(items1) == len(items2) and all(
        comparator(a, b) for a, b in zip(items1, items2)
    )


def every(items: Iterable[T], predicate: Callable[[int, T], bool]) -> bool:
    """Tell whether every item passes the predicate."""
    return all(predicate(i, v) for i, v in enumerate(items))


def none(items: Iterable[T], predicate: Callable[[int, T], bool]) -> bool:
    """Tell whether no item passes the predicate."""
    return not any(predicate(i, v) for i, v in enumerate(items))


def some(items: Iterable[T], predicate: Callable[[int, T], bool]) -> bool:
    """Tell whether at least one item passes the predicate."""
    return any(predicate(i, v) for i, v in enumerate(items))


def filter_items(items: Iterable[T], predicate: Callable[[int, T], bool]) -> list[T]:
    """Items that pass the predicate."""
    return [v for i, v in enumerate(items) if predicate(i, v)]


def count(items: Iterable[T], item: T) -> int:
    """Number of occurrences of item."""
    return sum(1 for v in items if v == item)


def count_by(items: Iterable[T], predicate: Callable[[int, T], bool]) -> int:
    """Number of items passing the predicate."""
    return sum(1 for i, v in enumerate(items) if predicate(i, v))


def group_by(
    items: Iterable[T], group_fn: Callable[[int, T], bool]
) -> tuple[list[T], list[T]]:
    """Split items into those passing group_fn and those failing it."""
    passed: list[T] = []
    failed: list[T] = []
    for i, v in enumerate(items):
        (passed if group_fn(i, v) else failed).append(v)
    return passed, failed


def group_with(items: Iterable[T], iteratee: Callable[[T], K]) -> dict[K, list[T]]:
    """Group items under the key iteratee computes for each."""
    result: dict[K, list[T]] = {}
    for v in items:
        result.setdefault(iteratee(v), []).append(v)
    return result


def find_by(
    items: Iterable[T], predicate: Callable[[int, T], bool]
) -> tuple[T | None, bool]:
    """First item passing the predicate, with whether one was found."""
    for i, v in enumerate(items):
        if predicate(i, v):
            return v, True
    return None, False


def find_last_by(
    items: Sequence[T], predicate: Callable[[int, T], bool]
) -> tuple[T | None, bool]:
    """Last item passing the predicate, with whether one was found."""
    for i in reversed(range(len(items))):
        if predicate(i, items[i]):
            return items[i], True
    return None, False


def flatten(items: Iterable[Any]) -> list[Any]:
    """Flatten nested lists and tuples by one level."""
    result: list[Any] = []
    for item in items:
        if isinstance(item, _NESTED):
            result.extend(item)
        else:
            result.append(item)
    return result


def flatten_deep(items: Iterable[Any]) -> list[Any]:
    """Flatten nested lists and tuples completely."""
    result: list[Any] = []
    for item in items:
        if isinstance(item, _NESTED):
            result.extend(flatten_deep(item))
        else:
            result.append(item)
    return result


def for_each(items: Iterable[T], iteratee: Callable[[int, T], Any]) -> None:
    """Call iteratee with the index and value of every item."""
    for i, v in enumerate(items):
        iteratee(i, v)


def for_each_with_break(items: Iterable[T], iteratee: Callable[[int, T], bool]) -> None:
    """Call iteratee for each item until it returns False."""
    for i, v in enumerate(items):
        if not iteratee(i, v):
            break


def map_items(items: Iterable[T], iteratee: Callable[[int, T], U]) -> list[U]:
    """Apply iteratee to the index and value of every item."""
    return [iteratee(i, v) for i, v in enumerate(items)]


def filter_map(
    items: Iterable[T], iteratee: Callable[[int, T], tuple[U, bool]]
) -> list[U]:
    """Map and filter at once; iteratee returns (value, keep)."""
    result: list[U] = []
    for i, v in enumerate(items):
        value, keep = iteratee(i, v)
        if keep:
            result.append(value)
    return result


def flat_map(items: Iterable[T], iteratee: Callable[[int, T], Iterable[U]]) -> list[U]:
    """Map every item to a sequence and concatenate the results."""
    result: list[U] = []
    for i, v in enumerate(items):
        result.extend(iteratee(i, v))
    return result


def reduce_items(
    items: Iterable[T], iteratee: Callable[[int, T, T], T], initial: T
) -> T:
    """Fold items left to right; iteratee gets (index, item, accumulator)."""
    acc = initial
    for i, v in enumerate(items):
        acc = iteratee(i, v, acc)
    return acc


def reduce_by(items: Iterable[T], initial: U, reducer: Callable[[int, T, U], U]) -> U:
    """Fold items left to right into a value of any type."""
    acc = initial
    for i, v in enumerate(items):
        acc = reducer(i, v, acc)
    return acc


def reduce_right(
    items: Sequence[T], initial: U, reducer: Callable[[int, T, U], U]
) -> U:
    """Fold items right to left into a value of any type."""
    acc = initial
    for i in reversed(range(len(items))):
        acc = reducer(i, items[i], acc)
    return acc