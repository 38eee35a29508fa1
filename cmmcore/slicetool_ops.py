"""Editing, set, ordering and lookup helpers for sequences."""

from __future__ import annotations

import random
from functools import cmp_to_key
from typing import Any, Callable, Hashable, Iterable, Sequence, TypeVar

from cmmcore.randutil import rand_int
from cmmcore.slicetool_query import contain

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)

_SORTABLE_FIELD_TYPES = (bool, int, float, str)


def replace(items: Sequence[T], old: T, new: T, n: int) -> list[T]:
    """Copy of items with the first n occurrences of old replaced; n < 0 means all."""
    result = list(items)
    for i, v in enumerate(result):
        if n == 0:
            break
        if v == old:
            result[i] = new
            n -= 1
    return result


def replace_all(items: Sequence[T], old: T, new: T) -> list[T]:
    """Copy of items with every occurrence of old replaced by new."""
    return replace(items, old, new, -1)


def repeat(item: T, n: int) -> list[T]:
    """A list holding item n times."""
    if n < 0:
        raise ValueError("n must not be negative")
    return [item] * n


def _require_sequence(items: Any) -> None:
    if not isinstance(items, (list, tuple)):
        raise TypeError(f"Invalid slice type, value of type {type(items).__name__}")


def string_slice(items: Sequence[Any]) -> list[str]:
    """Return items as a list of strings; every element must be a string."""
    _require_sequence(items)
    if not all(isinstance(v, str) for v in items):
        raise TypeError("invalid element type")
    return list(items)


def int_slice(items: Sequence[Any]) -> list[int]:
    """Return items as a list of ints; every element must be an int."""
    _require_sequence(items)
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in items):
        raise TypeError("invalid element type")
    return list(items)


def delete_at(items: Sequence[T], index: int) -> list[T]:
    """Copy of items without the element at index; a too large index removes the last."""
    if not items:
        raise IndexError("cannot delete from an empty sequence")
    if index < 0:
        raise IndexError("index must not be negative")
    index = min(index, len(items) - 1)
    return list(items[:index]) + list(items[index + 1 :])


def delete_range(items: Sequence[T], start: int, end: int) -> list[T]:
    """Copy of items without the elements from start up to, not including, end."""
    if start < 0 or start > len(items):
        raise IndexError("start out of range")
    if end < 0 or end - start > len(items):
        raise IndexError("end out of range")
    return list(items[:start]) + list(items[end:])


def drop(items: Sequence[T], n: int) -> list[T]:
    """Items without the first n elements."""
    if len(items) <= n:
        return []
    if n <= 0:
        return list(items)
    return list(items[n:])


def drop_right(items: Sequence[T], n: int) -> list[T]:
    """Items without the last n elements."""
    if len(items) <= n:
        return []
    if n <= 0:
        return list(items)
    return list(items[: len(items) - n])


def drop_while(items: Sequence[T], predicate: Callable[[T], bool]) -> list[T]:
    """Drop leading items while the predicate holds."""
    i = 0
    while i < len(items) and predicate(items[i]):
        i += 1
    return list(items[i:])


def drop_right_while(items: Sequence[T], predicate: Callable[[T], bool]) -> list[T]:
    """Drop trailing items while the predicate holds."""
    i = len(items)
    while i > 0 and predicate(items[i - 1]):
        i -= 1
    return list(items[:i])


def insert_at(items: Sequence[T], index: int, value: Any) -> list[T]:
    """Insert a value, or every element of a list of values, at index.

    An index outside 0..len(items) leaves the items unchanged.
    """
    result = list(items)
    if index < 0 or index > len(result):
        return result
    if isinstance(value, list):
        result[index:index] = value
    else:
        result.insert(index, value)
    return result


def update_at(items: Sequence[T], index: int, value: T) -> list[T]:
    """Copy of items with the element at index replaced; out of range changes nothing."""
    result = list(items)
    if 0 <= index < len(result):
        result[index] = value
    return result


def unique(items: Iterable[T]) -> list[T]:
    """Items without duplicates, first occurrences kept in order."""
    result: list[T] = []
    for v in items:
        if not contain(result, v):
            result.append(v)
    return result


def unique_by(items: Iterable[T], iteratee: Callable[[T], U]) -> list[U]:
    """Map every item through iteratee, then remove duplicates."""
    return unique(iteratee(v) for v in items)


def union(*args: Iterable[K]) -> list[K]:
    """Unique elements of all sequences, in order of first appearance."""
    seen: set[K] = set()
    result: list[K] = []
    for seq in args:
        for item in seq:
            if item not in seen:
                seen.add(item)
                result.append(item)
    return result


def union_by(predicate: Callable[[T], K], *args: Iterable[T]) -> list[T]:
    """Like union, but elements are told apart by the key predicate gives them."""
    seen: set[K] = set()
    result: list[T] = []
    for seq in args:
        for item in seq:
            key = predicate(item)
            if key not in seen:
                seen.add(key)
                result.append(item)
    return result


def merge(*args: Iterable[T]) -> list[T]:
    """Concatenate all sequences into one list."""
    result: list[T] = []
    for seq in args:
        result.extend(seq)
    return result


def _intersect(first: Iterable[K], second: Iterable[K]) -> list[K]:
    pending = set(first)
    out: list[K] = []
    for val in second:
        if val in pending:
            out.append(val)
            pending.discard(val)
    return out


def intersection(*args: Iterable[K]) -> list[K]:
    """Unique elements present in every sequence."""
    if not args:
        return []
    if len(args) == 1:
        return unique(args[0])
    result = _intersect(args[0], args[1])
    for seq in args[2:]:
        result = _intersect(result, seq)
    return result


def symmetric_difference(*args: Iterable[K]) -> list[K]:
    """Unique elements that are not shared by every sequence."""
    if not args:
        return []
    if len(args) == 1:
        return unique(args[0])
    common = set(intersection(*args))
    return unique(v for seq in args for v in seq if v not in common)


def reverse(items: list[T]) -> None:
    """Reverse the list in place."""
    items.reverse()


def shuffle(items: list[T]) -> list[T]:
    """Shuffle the list in place and return it."""
    random.shuffle(items)
    return items


def is_ascending(items: Sequence[Any]) -> bool:
    """Tell whether no element is greater than the one after it."""
    return all(not a > b for a, b in zip(items, items[1:]))


def is_descending(items: Sequence[Any]) -> bool:
    """Tell whether no element is smaller than the one after it."""
    return all(not a < b for a, b in zip(items, items[1:]))


def is_sorted(items: Sequence[Any]) -> bool:
    """Tell whether items are in ascending or descending order."""
    return is_ascending(items) or is_descending(items)


def is_sorted_by_key(items: Sequence[T], iteratee: Callable[[T], Any]) -> bool:
    """Tell whether the keys iteratee gives are ascending or descending."""
    return is_sorted([iteratee(v) for v in items])


def sort_items(items: list[Any], order: str = "asc") -> None:
    """Sort in place; order "desc" sorts descending, anything else ascending."""
    items.sort(reverse=order == "desc")


def sort_by(items: list[T], less: Callable[[T, T], bool]) -> None:
    """Sort in place in the order the less function defines."""

    def compare(a: T, b: T) -> int:
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    items.sort(key=cmp_to_key(compare))


def sort_by_field(items: list[Any], field: str, order: str = "asc") -> None:
    """Sort objects in place by an attribute of type int, float, str or bool."""
    values = []
    for item in items:
        if isinstance(item, (int, float, str, bytes, list, tuple, dict, set)) or item is None:
            raise TypeError(
                f"data type {type(item).__name__} not support, should be an object"
            )
        if not hasattr(item, field):
            raise ValueError(f"field name {field} not found")
        value = getattr(item, field)
        if not isinstance(value, _SORTABLE_FIELD_TYPES):
            raise TypeError(f"field type {type(value).__name__} not supported")
        values.append(value)
    keyed = sorted(zip(values, range(len(items))), key=lambda p: p[0], reverse=order == "desc")
    items[:] = [items[i] for _, i in keyed]


def without(items: Sequence[T], *args: T) -> list[T]:
    """Items excluding every given value."""
    if not args or not items:
        return list(items)
    return [v for v in items if not contain(args, v)]


def index_of(items: Sequence[T], value: T) -> int:
    """Index of the first occurrence of value, or -1."""
    return next((i for i, v in enumerate(items) if v == value), -1)


def last_index_of(items: Sequence[T], value: T) -> int:
    """Index of the last occurrence of value, or -1."""
    return next((i for i in reversed(range(len(items))) if items[i] == value), -1)


def append_if_absent(items: Sequence[T], item: T) -> list[T]:
    """Copy of items with item appended unless already present."""
    result = list(items)
    if not contain(result, item):
        result.append(item)
    return result


def set_to_default_if(
    items: list[T], predicate: Callable[[T], bool], default: Any = None
) -> tuple[list[T], int]:
    """Set matching elements to default in place; return the list and the count."""
    changed = 0
    for i, v in enumerate(items):
        if predicate(v):
            items[i] = default
            changed += 1
    return items, changed


def key_by(items: Iterable[T], iteratee: Callable[[T], K]) -> dict[K, T]:
    """Map each key iteratee gives to its item; later items win."""
    return {iteratee(v): v for v in items}


def _sprint(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def join(items: Iterable[Any], separator: str) -> str:
    """Join the text forms of the items with the separator."""
    return separator.join(_sprint(v) for v in items)


def partition(items: Iterable[T], *args: Callable[[T], bool]) -> list[list[T]]:
    """Group items by the first predicate each passes; the last group holds the rest."""
    result: list[list[T]] = [[] for _ in range(len(args) + 1)]
    for item in items:
        for i, predicate in enumerate(args):
            if predicate is None:
                raise ValueError("predicate function must not be nil")
            if predicate(item):
                result[i].append(item)
                break
        else:
            result[-1].append(item)
    return result


def random_item(items: Sequence[T]) -> tuple[T | None, int]:
    """A random element and its index; (None, -1) when empty."""
    if not items:
        return None, -1
    idx = rand_int(0, len(items))
    return items[idx], idx