"""Data structures utilities.

Provides the `assign_deep` family to recursively merge source dictionaries into a
target dictionary, with variants that keep only existing keys or merge lists by index.

Provides `get_deep` / `set_deep` to read and write values behind a path of keys
without raising on missing intermediate levels.

Provides `invert` / `invert_by` to swap keys and values, and the `is_empty` /
`is_plain` predicates used to classify containers.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping, MutableMapping, Sequence
from enum import Enum
from typing import Any

from .array import last


class Kind(Enum):
    """
    Shape of a value as seen by the merge helpers.

    RECORD is a plain key-value container (dict), SEQUENCE is a list,
    everything else (numbers, strings, None, dates, tuples, sets, objects) is SCALAR.
    """

    SCALAR = "scalar"
    SEQUENCE = "sequence"
    RECORD = "record"


def kind_of(value: Any) -> Kind:
    """Classify value once so merge code can dispatch on the tag."""
    if isinstance(value, dict):
        return Kind.RECORD
    if isinstance(value, list):
        return Kind.SEQUENCE
    return Kind.SCALAR


def is_plain(value: Any) -> bool:
    """
    Check whether value is a plain key-value record.

    Examples:
        >>> is_plain({"k": 1})
        True
        >>> is_plain({"k": {"k2": 1}})
        True
        >>> is_plain([])
        False
        >>> from datetime import date
        >>> is_plain(date(2024, 1, 1))
        False
    """
    return kind_of(value) is Kind.RECORD


def is_empty(value: Any) -> bool:
    """
    Check whether value is None or a mapping without keys.

    Sequences, strings and numbers are never empty here, even when their
    length is zero.

    Examples:
        >>> is_empty({})
        True
        >>> is_empty(None)
        True
        >>> is_empty([])
        False
        >>> is_empty({"a": 1})
        False
    """
    if value is None:
        return True
    if isinstance(value, Mapping):
        return len(value) == 0
    return False


def deep_copy(value: Any) -> Any:
    """
    Copy lists and dicts recursively; return every other value by reference.

    Dates, tuples, sets, callables and custom objects are shared with the source.
    """
    match kind_of(value):
        case Kind.SEQUENCE:
            return [deep_copy(item) for item in value]
        case Kind.RECORD:
            return {k: deep_copy(v) for k, v in value.items()}
        case _:
            return value


def _merge_value(current: Any, incoming: Any, *, exists: bool, with_array: bool) -> Any:
    """Return the value that should end up in the target slot."""
    match (kind_of(current), kind_of(incoming)):
        case (Kind.RECORD, Kind.RECORD):
            _merge_record(current, incoming, exists=exists, with_array=with_array)
            return current
        case (Kind.SEQUENCE, Kind.SEQUENCE) if with_array:
            _merge_sequence(current, incoming, exists=exists, with_array=with_array)
            return current
        case _:
            return deep_copy(incoming)


def _merge_record(target: dict, source: Mapping, *, exists: bool, with_array: bool) -> None:
    for key, incoming in source.items():
        # exists: never introduce keys the target does not already hold
        if exists and key not in target:
            continue
        target[key] = _merge_value(target.get(key), incoming, exists=exists, with_array=with_array)


def _merge_sequence(target: list, source: Sequence, *, exists: bool, with_array: bool) -> None:
    for index, incoming in enumerate(source):
        if index < len(target):
            target[index] = _merge_value(target[index], incoming, exists=exists, with_array=with_array)
        elif not exists:
            target.append(deep_copy(incoming))


def _assign(target: dict, sources: tuple[Any, ...], *, exists: bool, with_array: bool) -> dict:
    if not isinstance(target, MutableMapping):
        raise TypeError("target must be a dict")
    for source in sources:
        # Non-record sources (None included) contribute nothing
        if kind_of(source) is Kind.RECORD:
            _merge_record(target, source, exists=exists, with_array=with_array)
    return target


def assign_deep(target: dict, *sources: Any) -> dict:
    """
    Deep-merge sources into target, replacing lists as a whole.

    Nested dicts present on both sides are merged recursively; any other source
    value (lists included) is deep-copied over the target value. Mutates and
    returns target; sources are never modified.

    Args:
        target: Dict receiving the values (mutated)
        *sources: Dicts merged left to right

    Returns:
        The same target object

    Raises:
        TypeError: If target is not a dict

    Examples:
        >>> assign_deep({"a": 1, "b": {"x": 1, "y": "2"}}, {"b": {"x": "k"}})
        {'a': 1, 'b': {'x': 'k', 'y': '2'}}

        >>> assign_deep({"a": [1, 2]}, {"a": ["k"]})
        {'a': ['k']}
    """
    return _assign(target, sources, exists=False, with_array=False)


def assign_deep_exists(target: dict, *sources: Any) -> dict:
    """
    Deep-merge like `assign_deep`, but only for keys target already holds.

    The restriction applies at every nesting level, so no new keys are ever
    introduced into target.

    Examples:
        >>> assign_deep_exists({"a": 1, "b": {"x": 1}}, {"a": 2, "b": {"x": 3, "y": 4}, "c": 5})
        {'a': 2, 'b': {'x': 3}}
    """
    return _assign(target, sources, exists=True, with_array=False)


def assign_deep_with_array(target: dict, *sources: Any) -> dict:
    """
    Deep-merge like `assign_deep`, but merge lists position by position.

    Element i of a source list is merged into element i of the target list;
    extra source elements are appended.

    Examples:
        >>> assign_deep_with_array({"a": 1, "b": {"x": 1, "y": "2"}}, {"b": {"x": "k"}})
        {'a': 1, 'b': {'x': 'k', 'y': '2'}}

        >>> assign_deep_with_array({"a": [1, 2]}, {"a": ["k"]})
        {'a': ['k', 2]}
    """
    return _assign(target, sources, exists=False, with_array=True)


def _step(current: Any, key: Any) -> Any:
    """Follow one key: mapping lookup, sequence index or attribute."""
    if isinstance(current, Mapping):
        return current.get(key)
    if isinstance(current, Sequence) and not isinstance(current, str | bytes | bytearray):
        if isinstance(key, int) and -len(current) <= key < len(current):
            return current[key]
        return None
    if isinstance(key, str):
        return getattr(current, key, None)
    return None


def get_deep(obj: Any, *keys: Any) -> Any:
    """
    Read the value behind a path of keys, returning None on any missing step.

    A falsy root is returned unchanged.

    Examples:
        >>> data = {"k1": {"k2": [10, 20]}}
        >>> get_deep(data, "k1", "k2", 1)
        20
        >>> get_deep(data, "k1", "missing", "k3") is None
        True
    """
    value = obj
    if not value:
        return value
    for key in keys:
        value = _step(value, key)
        if value is None:
            return None
    return value


def _put(container: Any, key: Any, value: Any) -> None:
    """Store value under key; a list grows with None up to an integer key past its end."""
    if isinstance(container, list) and isinstance(key, int) and key >= len(container):
        container.extend([None] * (key - len(container) + 1))
    container[key] = value


def set_deep(obj: MutableMapping, keys: Sequence[Hashable], value: Any) -> MutableMapping:
    """
    Write value behind a path of keys, creating empty dicts for missing levels.

    Each level is read the way get_deep reads it, so integer keys index into
    lists. Intermediate levels that are missing or None are replaced with {}.
    Returns obj for convenience; obj is mutated in place.

    Examples:
        >>> data = {}
        >>> set_deep(data, ["k1", "k2"], "val")
        {'k1': {'k2': 'val'}}
        >>> set_deep({"a": [{}]}, ["a", 0, "b"], 1)
        {'a': [{'b': 1}]}
    """
    if not keys:
        return obj

    current = obj
    for key in keys[:-1]:
        child = _step(current, key)
        if child is None:
            child = {}
            _put(current, key, child)
        current = child
    _put(current, last(keys), value)
    return obj


def invert(obj: Mapping) -> dict[str, Any]:
    """
    Swap keys and values; values become string keys.

    When several keys share a value, the last one wins.

    Examples:
        >>> invert({"x": "a", "y": "b", "z": "a"})
        {'a': 'z', 'b': 'y'}
    """
    return {str(v): k for k, v in obj.items()}


def invert_by(obj: Mapping, fn: Callable[[Any, Any], Hashable]) -> dict[Hashable, Any]:
    """
    Swap keys and values, computing each new key with fn(value, key).

    Examples:
        >>> invert_by({"x": "a", "y": "b"}, lambda v, _k: "new_" + v)
        {'new_a': 'x', 'new_b': 'y'}
    """
    return {fn(v, k): k for k, v in obj.items()}
