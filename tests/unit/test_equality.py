"""Tests for gauntlet.assertions.equality."""

import math
from datetime import date, datetime, timedelta
from pathlib import PurePosixPath
from uuid import UUID

import pytest

from gauntlet.assertions.equality import (
    ValueKind,
    classify,
    is_deep_equal,
    is_direct_equal,
    is_shallow_equal,
)


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y


class OtherPoint:
    def __init__(self, x, y):
        self.x = x
        self.y = y


PRIMITIVES = [None, True, False, 0, 1, -3, 2.5, "", "abc", b"abc", frozenset({1, 2})]


class TestClassify:
    @pytest.mark.parametrize(
        "value, kind",
        [
            (None, ValueKind.PRIMITIVE),
            (True, ValueKind.PRIMITIVE),
            (1.5, ValueKind.PRIMITIVE),
            ("s", ValueKind.PRIMITIVE),
            ({1}, ValueKind.PRIMITIVE),
            (date(2020, 1, 1), ValueKind.PRIMITIVE),
            (datetime(2020, 1, 1, 12), ValueKind.PRIMITIVE),
            (timedelta(seconds=3), ValueKind.PRIMITIVE),
            (UUID(int=1), ValueKind.PRIMITIVE),
            (PurePosixPath("a"), ValueKind.PRIMITIVE),
            ([1], ValueKind.SEQUENCE),
            ((1,), ValueKind.SEQUENCE),
            ({"a": 1}, ValueKind.MAPPING),
            (Point(1, 2), ValueKind.RECORD),
            (Point, ValueKind.REFERENCE),
            (len, ValueKind.REFERENCE),
            (math, ValueKind.REFERENCE),
        ],
    )
    def test_kinds(self, value, kind):
        assert classify(value) is kind


class TestDirectEqual:
    @pytest.mark.parametrize("value", PRIMITIVES)
    def test_reflexive_for_primitives(self, value):
        assert is_direct_equal(value, value)

    @pytest.mark.parametrize("x", PRIMITIVES)
    @pytest.mark.parametrize("y", PRIMITIVES)
    def test_symmetric_for_primitives(self, x, y):
        assert is_direct_equal(x, y) == is_direct_equal(y, x)

    def test_no_coercion_between_kinds(self):
        assert not is_direct_equal(True, 1)
        assert not is_direct_equal(0, False)
        assert not is_direct_equal("1", 1)
        assert not is_direct_equal(None, 0)
        assert not is_direct_equal(b"a", "a")

    def test_numbers_compare_by_value(self):
        assert is_direct_equal(5, 5.0)

    def test_nan_is_never_equal(self):
        nan = float("nan")
        assert not is_direct_equal(nan, nan)

    def test_containers_compare_by_identity(self):
        a = [1, 2]
        assert is_direct_equal(a, a)
        assert not is_direct_equal(a, [1, 2])
        assert not is_direct_equal({"a": 1}, {"a": 1})


class TestShallowEqual:
    def test_sequences_element_wise(self):
        assert is_shallow_equal([1, "a", None], [1, "a", None])
        assert not is_shallow_equal([1, 2], [1, 2, 3])
        assert not is_shallow_equal([1, 2], [2, 1])

    def test_lists_and_tuples_do_not_mix(self):
        assert not is_shallow_equal([1, 2], (1, 2))
        assert is_shallow_equal((1, 2), (1, 2))

    def test_mappings_ignore_key_order(self):
        assert is_shallow_equal({"a": 1, "b": 2}, {"b": 2, "a": 1})
        assert not is_shallow_equal({"a": 1}, {"a": 1, "b": 2})
        assert not is_shallow_equal({"a": 1}, {"a": 2})

    def test_nested_structures_compare_by_identity(self):
        assert not is_shallow_equal({"a": {"x": 1}}, {"a": {"x": 1}})
        inner = {"x": 1}
        assert is_shallow_equal({"a": inner}, {"a": inner})

    def test_records_of_same_type(self):
        assert is_shallow_equal(Point(1, 2), Point(1, 2))
        assert not is_shallow_equal(Point(1, 2), Point(1, 3))
        assert not is_shallow_equal(Point(1, 2), OtherPoint(1, 2))

    def test_mapping_and_sequence_are_unequal(self):
        assert not is_shallow_equal({0: "a"}, ["a"])
        assert not is_shallow_equal(["a"], {0: "a"})

    def test_none_is_not_a_mapping(self):
        assert not is_shallow_equal(None, {})
        assert not is_shallow_equal({}, None)


class TestDeepEqual:
    def test_nested_mappings(self):
        assert is_deep_equal({"a": {"x": 1}}, {"a": {"x": 1}})
        assert not is_deep_equal({"a": {"x": 1}}, {"a": {"x": 2}})

    def test_nested_mixed_structures(self):
        x = {"items": [Point(1, [2, 3]), {"k": (4, 5)}], "name": "n"}
        y = {"items": [Point(1, [2, 3]), {"k": (4, 5)}], "name": "n"}
        assert is_deep_equal(x, y)
        assert is_deep_equal(y, x)

        y["items"][0].y.append(4)
        assert not is_deep_equal(x, y)

    def test_nan_inside_structure_is_unequal(self):
        assert not is_deep_equal([float("nan")], [float("nan")])

    def test_reflexive(self):
        value = {"a": [1, {"b": (2, 3)}], "c": Point(4, 5)}
        assert is_deep_equal(value, value)

    def test_cyclic_structures_terminate(self):
        a: list = [1]
        a.append(a)
        b: list = [1]
        b.append(b)
        assert is_deep_equal(a, b)

        c: list = [2]
        c.append(c)
        assert not is_deep_equal(a, c)

    def test_mutually_cyclic_mappings(self):
        x: dict = {"name": "x"}
        x["self"] = x
        y: dict = {"name": "x"}
        y["self"] = y
        assert is_deep_equal(x, y)

    def test_mapping_keys_are_not_coerced(self):
        assert not is_deep_equal({1: "a"}, {True: "a"})
        assert not is_shallow_equal({True: "a"}, {1: "a"})
        assert is_deep_equal({5: "a"}, {5.0: "a"})

    def test_stdlib_value_types_compare_by_value(self):
        assert is_deep_equal([date(2020, 1, 1)], [date(2020, 1, 1)])
        assert not is_deep_equal([date(2020, 1, 1)], [date(2020, 1, 2)])
        assert is_deep_equal({"id": UUID(int=7)}, {"id": UUID(int=7)})
        assert is_shallow_equal((PurePosixPath("a/b"),), (PurePosixPath("a/b"),))
