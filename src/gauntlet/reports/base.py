"""Base reporter protocol for gauntlet test output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from gauntlet.testing.result import ClassReport, TestResult


class Reporter(Protocol):
    """Protocol defining the interface for test reporters.

    Reporters only consume report data; they never run tests themselves.
    """

    def report_run(self, reports: list[ClassReport]) -> None:
        """Called with the sorted class reports of a whole run."""
        ...

    def report_result(self, result: TestResult) -> None:
        """Called with the result of a single re-run test."""
        ...
