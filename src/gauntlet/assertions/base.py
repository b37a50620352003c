"""Assertion failure type, failure logging and value rendering."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, NoReturn

from typing_extensions import Sentinel

logger = logging.getLogger(__name__)


FAILURE_LOGGING: ContextVar[bool] = ContextVar("failure_logging", default=True)


class AssertionFailure(AssertionError):
    """AssertionError raised by the assertion primitives.

    Attributes:
    ----------
    message: str
        Rendered description of the failed comparison
    operands: tuple
        Raw values involved in the comparison, kept for diagnostics
    """

    def __init__(self, message: str, operands: tuple[Any, ...] = ()) -> None:
        self.message = message
        self.operands = operands
        super().__init__(message)


def render(value: Any) -> str:
    """Render a value for a failure message.

    Strings are JSON-quoted so that ``"1"`` and ``1`` stay distinguishable.
    Sentinel tokens render as a tagged placeholder.
    """
    if isinstance(value, str):
        return json.dumps(value)
    if isinstance(value, Sentinel):
        return f"Sentinel({value!r})"
    if type(value) is object:
        return "Sentinel()"
    return str(value)


def is_failure_logging_enabled() -> bool:
    return FAILURE_LOGGING.get()


@contextmanager
def failure_logging_suppressed() -> Iterator[None]:
    """Silence failure logging, restoring the previous state on exit."""
    token = FAILURE_LOGGING.set(False)
    try:
        yield
    finally:
        FAILURE_LOGGING.reset(token)


def fail(message: str, *operands: Any) -> NoReturn:
    """Log the operands (unless suppressed) and raise an AssertionFailure."""
    if operands and FAILURE_LOGGING.get():
        logger.error(
            "%s\noperands: %s",
            message,
            ", ".join(repr(operand) for operand in operands),
            extra={"operands": operands},
        )
    raise AssertionFailure(message, operands)
