"""Array (list) helpers.

Provides small helpers for working with plain Python lists:
- last: Get the last element without raising on empty input
- remove_of: Remove every occurrence of a value in place
- uniq: Deduplicated copy preserving first occurrences
- uniq_by: Deduplicated copy keyed by a field of each element

Values only match when they have the same type and compare equal, so 1, 1.0
and True are three distinct values.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any


def last(seq: Sequence[Any]) -> Any:
    """Return the last element of a sequence, or None when it is empty."""
    if not seq:
        return None
    return seq[-1]


def _same(left: Any, right: Any) -> bool:
    return type(left) is type(right) and left == right


def remove_of(seq: list[Any], item: Any) -> int:
    """
    Remove every element matching item from seq, in place.

    Args:
        seq: List to mutate
        item: Value to remove (same type and ==)

    Returns:
        Index of the first removed element in the original list, or -1 if
        nothing matched (seq is left unchanged in that case)

    Examples:
        >>> values = [1, 2, 3, 2]
        >>> remove_of(values, 2)
        1
        >>> values
        [1, 3]

        >>> remove_of(values, 9)
        -1
    """
    first = -1
    kept: list[Any] = []
    for i, value in enumerate(seq):
        if _same(value, item):
            if first == -1:
                first = i
            continue
        kept.append(value)

    if first != -1:
        seq[:] = kept
    return first


def _already_seen(value: Any, seen: set[Any], seen_unhashable: list[Any]) -> bool:
    """Check value against the bookkeeping and record it when new."""
    try:
        # Keyed by type so that 1, 1.0 and True stay apart
        tagged = (type(value), value)
        if tagged in seen:
            return True
        seen.add(tagged)
    except TypeError:
        # Unhashable (list, dict, tuple holding a list): equality scan
        if any(_same(value, other) for other in seen_unhashable):
            return True
        seen_unhashable.append(value)
    return False


def uniq(seq: Iterable[Any]) -> list[Any]:
    """
    Return a new list with the first occurrence of each distinct value.

    Unhashable values (lists, dicts) are compared by equality.

    Examples:
        >>> uniq([1, 2, 2, 3, 1])
        [1, 2, 3]

        >>> uniq([1, True, 0, False, 1.0])
        [1, True, 0, False, 1.0]

        >>> uniq([[1], [1], {"a": 1}])
        [[1], {'a': 1}]
    """
    seen: set[Any] = set()
    seen_unhashable: list[Any] = []
    return [value for value in seq if not _already_seen(value, seen, seen_unhashable)]


def _field(item: Any, key: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(key)
    return getattr(item, key, None)


def uniq_by(seq: Iterable[Any], key: str) -> list[Any]:
    """
    Return a new list keeping the first element for each distinct value of key.

    Elements may be mappings or plain objects. Elements that lack the key are
    grouped under None, so only the first of them is kept.

    Examples:
        >>> uniq_by([{"a": "110"}, {"a": "111"}, {"a": "113"}, {"a": "111"}], "a")
        [{'a': '110'}, {'a': '111'}, {'a': '113'}]
    """
    seen: set[Any] = set()
    seen_unhashable: list[Any] = []
    return [item for item in seq if not _already_seen(_field(item, key), seen, seen_unhashable)]
