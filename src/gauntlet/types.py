"""Shared types for the Gauntlet test harness."""

from enum import Enum


class Outcome(Enum):
    """Outcome of running a single test method."""

    PASS = "pass"
    IGNORED = "ignored"
    FAIL = "fail"  # An error escaped the test body
    ERROR = "error"  # Fixture or discovery problem
