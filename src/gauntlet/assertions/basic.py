"""Assertion primitives used inside test method bodies.

Every primitive takes a mandatory ``message`` describing what was being
checked. On success it returns ``None``; on failure it raises
:class:`~gauntlet.assertions.base.AssertionFailure` with the rendered operands
followed by the message.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from typing import Any, TypeVar

from gauntlet.assertions.base import fail, failure_logging_suppressed, render
from gauntlet.assertions.equality import is_deep_equal, is_direct_equal, is_shallow_equal


T = TypeVar("T")

ErrorPredicate = Callable[[BaseException], bool]


def is_true(b: bool, message: str) -> None:
    if not b:
        fail(message)


def is_false(b: bool, message: str) -> None:
    if b:
        fail(message)


def is_nan(x: float, message: str) -> None:
    """Fail unless ``x`` is NaN, i.e. unless it is unequal to itself."""
    if x == x:
        fail(f"Expected NaN, was {x}\n{message}", x)


def equal(x: T, y: T, message: str) -> None:
    if not is_direct_equal(x, y):
        fail(f"{render(x)} !== {render(y)}\n{message}", x, y)


def not_equal(x: T, y: T, message: str) -> None:
    if is_direct_equal(x, y):
        fail(f"{render(x)} === {render(y)}\n{message}", x, y)


def approx(x: float, y: float, epsilon: float, message: str) -> None:
    """Fail if ``x`` and ``y`` are ``epsilon`` or more apart."""
    if abs(x - y) >= epsilon:
        fail(f"{x} !== {y}\n{message}", x, y)


def shallow_equal(x: T, y: T, message: str) -> None:
    if not is_shallow_equal(x, y):
        fail(f"{render(x)}\n  !== {render(y)}\n{message}", x, y)


def deep_equal(x: T, y: T, message: str) -> None:
    if not is_deep_equal(x, y):
        fail(f"{render(x)}\n  !== {render(y)}\n{message}", x, y)


def _render_sequence(seq: Sequence[Any]) -> str:
    return "[" + ", ".join(render(item) for item in seq) + "]"


def distinct(seq: Sequence[T], message: str) -> None:
    """Fail on the first element directly equal to an earlier one."""
    seen: list[T] = []
    for x in seq:
        if any(is_direct_equal(x, s) for s in seen):
            fail(f"{render(x)} in {_render_sequence(seq)}\n{message}", x, seq)
        seen.append(x)


def distinct_by_key(seq: Sequence[T], key: Callable[[T], Hashable], message: str) -> None:
    """Fail on the first two elements mapping to the same key."""
    by_key: dict[Hashable, T] = {}
    for x in seq:
        k = key(x)
        if k in by_key:
            y = by_key[k]
            fail(
                f"{render(y)} and {render(x)} share key {k} in {_render_sequence(seq)}\n{message}",
                y,
                x,
                k,
                seq,
            )
        by_key[k] = x


def _as_predicate(
    predicate: ErrorPredicate | type[BaseException] | tuple[type[BaseException], ...],
) -> ErrorPredicate:
    if isinstance(predicate, tuple) or (
        isinstance(predicate, type) and issubclass(predicate, BaseException)
    ):
        error_types = predicate
        return lambda exc: isinstance(exc, error_types)
    return predicate


def throws(fn: Callable[[], Any], message: str) -> None:
    """Fail unless ``fn()`` raises."""
    throws_like(fn, lambda exc: True, message)


def throws_like(
    fn: Callable[[], Any],
    predicate: ErrorPredicate | type[BaseException] | tuple[type[BaseException], ...],
    message: str,
) -> None:
    """Fail unless ``fn()`` raises an exception accepted by ``predicate``.

    ``predicate`` may be a callable taking the exception, or an exception
    class (or tuple of classes) to check against with ``isinstance``.

    Failure logging is suppressed while ``fn`` and the predicate run, so
    assertion failures that ``fn`` raises on purpose do not reach the log.
    """
    accepts = _as_predicate(predicate)
    raised: Exception | None = None

    with failure_logging_suppressed():
        try:
            fn()
        except Exception as exc:
            raised = exc
        matched = raised is not None and accepts(raised)

    if raised is None:
        fail(f"Expected exception, but none was thrown\n{message}")
    if not matched:
        fail(f"Exception thrown does not satisfy predicate: {render(raised)}\n{message}", raised)
