"""Structural equality over a tagged value model.

Values are classified into a small set of kinds before comparison:

- ``PRIMITIVE`` values compare by value, without coercion across kinds.
  Immutable stdlib value types (dates, times, UUIDs, paths) count as
  primitives.
- ``SEQUENCE`` values (lists, tuples) compare element-wise.
- ``MAPPING`` values compare key set and values under each key.
- ``RECORD`` values (plain objects with a ``__dict__``) compare like mappings
  over their attributes, but only against objects of the same type.
- ``REFERENCE`` values compare by identity.

Shallow equality unwraps one level of structure; deep equality recurses.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping
from datetime import date, time, timedelta
from enum import Enum
from numbers import Number
from pathlib import PurePath
from typing import Any
from uuid import UUID

from typing_extensions import Sentinel


EqualityTest = Callable[[Any, Any], bool]


class ValueKind(Enum):
    PRIMITIVE = "primitive"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    RECORD = "record"
    REFERENCE = "reference"


_VALUE_TYPES = (str, bytes, set, frozenset, date, time, timedelta, UUID, PurePath)


def classify(value: Any) -> ValueKind:
    """Return the kind of a value in the comparison model."""
    if value is None or isinstance(value, (bool, Number, *_VALUE_TYPES)):
        return ValueKind.PRIMITIVE
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, Sentinel):
        return ValueKind.REFERENCE
    if (
        hasattr(value, "__dict__")
        and not inspect.isclass(value)
        and not inspect.isroutine(value)
        and not inspect.ismodule(value)
    ):
        return ValueKind.RECORD
    return ValueKind.REFERENCE


def _primitive_group(value: Any) -> type | None:
    # bool is an int subclass but must never equal 0 or 1.
    if value is None:
        return None
    if isinstance(value, bool):
        return bool
    if isinstance(value, Number):
        return Number
    for value_type in _VALUE_TYPES:
        if isinstance(value, value_type):
            return frozenset if value_type is set else value_type
    return type(value)


def is_direct_equal(x: Any, y: Any) -> bool:
    """Strict equality: primitives by value within one kind, all else by identity.

    NaN is never directly equal to anything, including itself.
    """
    if classify(x) is ValueKind.PRIMITIVE and classify(y) is ValueKind.PRIMITIVE:
        if x is None or y is None:
            return x is y
        if _primitive_group(x) is not _primitive_group(y):
            return False
        return bool(x == y)
    return x is y


def _same_sequence_type(x: Any, y: Any) -> bool:
    return isinstance(x, list) == isinstance(y, list)


def _keyed_items(value: Any, kind: ValueKind) -> Mapping[Any, Any]:
    return value if kind is ValueKind.MAPPING else vars(value)


def _same_keys(x_items: Mapping[Any, Any], y_items: Mapping[Any, Any]) -> bool:
    # Hash lookup alone would match True with 1; keys must be directly equal.
    if len(x_items) != len(y_items):
        return False
    y_keys = {key: key for key in y_items}
    return all(key in y_keys and is_direct_equal(key, y_keys[key]) for key in x_items)


def _equal_members(x: Any, y: Any, eq_test: EqualityTest) -> bool:
    if is_direct_equal(x, y):
        return True

    kind = classify(x)
    if kind is not classify(y):
        return False

    if kind is ValueKind.SEQUENCE:
        return (
            _same_sequence_type(x, y)
            and len(x) == len(y)
            and all(eq_test(x_i, y_i) for x_i, y_i in zip(x, y))
        )

    if kind is ValueKind.RECORD and type(x) is not type(y):
        return False

    if kind in (ValueKind.MAPPING, ValueKind.RECORD):
        x_items = _keyed_items(x, kind)
        y_items = _keyed_items(y, kind)
        if not _same_keys(x_items, y_items):
            return False
        return all(eq_test(x_items[k], y_items[k]) for k in x_items)

    return False


def is_shallow_equal(x: Any, y: Any) -> bool:
    """Compare one level of structure; nested values compare directly."""
    return _equal_members(x, y, is_direct_equal)


def is_deep_equal(x: Any, y: Any) -> bool:
    """Compare structure at every depth.

    Cyclic structures terminate: a pair of containers already under
    comparison further up the stack is assumed equal.
    """
    in_progress: set[tuple[int, int]] = set()

    def deep(a: Any, b: Any) -> bool:
        if classify(a) in (ValueKind.PRIMITIVE, ValueKind.REFERENCE):
            return _equal_members(a, b, deep)

        pair = (id(a), id(b))
        if pair in in_progress:
            return True
        in_progress.add(pair)
        try:
            return _equal_members(a, b, deep)
        finally:
            in_progress.discard(pair)

    return deep(x, y)


__all__ = [
    "ValueKind",
    "classify",
    "is_deep_equal",
    "is_direct_equal",
    "is_shallow_equal",
]
