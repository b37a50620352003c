"""Assertion library for test method bodies."""

from .base import AssertionFailure, fail, failure_logging_suppressed, render
from .basic import (
    approx,
    deep_equal,
    distinct,
    distinct_by_key,
    equal,
    is_false,
    is_nan,
    is_true,
    not_equal,
    shallow_equal,
    throws,
    throws_like,
)
from .equality import ValueKind, classify, is_deep_equal, is_direct_equal, is_shallow_equal

__all__ = [
    "AssertionFailure",
    "fail",
    "failure_logging_suppressed",
    "render",
    # Comparisons
    "approx",
    "deep_equal",
    "distinct",
    "distinct_by_key",
    "equal",
    "is_false",
    "is_nan",
    "is_true",
    "not_equal",
    "shallow_equal",
    "throws",
    "throws_like",
    # Equality strategies
    "ValueKind",
    "classify",
    "is_deep_equal",
    "is_direct_equal",
    "is_shallow_equal",
]
