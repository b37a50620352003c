"""Gauntlet - a minimal class-based unit test harness."""

from . import assertions
from .assertions import AssertionFailure
from .testing import (
    ClassReport,
    Registry,
    Runner,
    TestResult,
    get_registry,
    ignore,
    run_all,
    run_one,
    test,
)
from .types import Outcome
from .version import __version__


__all__ = [
    # Registration
    "test",
    "ignore",
    "Registry",
    "get_registry",
    # Running
    "Runner",
    "run_all",
    "run_one",
    # Results
    "ClassReport",
    "TestResult",
    "Outcome",
    # Assertions
    "assertions",
    "AssertionFailure",
    "__version__",
]
