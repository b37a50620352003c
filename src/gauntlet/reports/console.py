"""Terminal reporter built on rich."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.padding import Padding
from rich.text import Text

from gauntlet.testing.result import ClassReport, TestResult
from gauntlet.types import Outcome


OUTCOME_COLOURS = {
    Outcome.PASS: "green",
    Outcome.FAIL: "red",
    Outcome.ERROR: "red",
    Outcome.IGNORED: "grey50",
}


def _stats_markup(count: int, passed: int, ignored: int) -> str:
    if count == 0:
        colour = OUTCOME_COLOURS[Outcome.IGNORED]
    elif passed == count:
        colour = OUTCOME_COLOURS[Outcome.PASS]
    else:
        colour = OUTCOME_COLOURS[Outcome.FAIL]

    markup = f"[{colour}]{passed}/{count} passed[/{colour}]"
    if ignored > 0:
        grey = OUTCOME_COLOURS[Outcome.IGNORED]
        markup += f", [{grey}]{ignored} ignored[/{grey}]"
    return markup


class ConsoleReporter:
    """Prints class summaries and failing results to the terminal.

    Classes whose tests all passed are collapsed to a single heading unless
    ``verbosity`` is positive.
    """

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        self.console = console or Console()
        self.verbosity = verbosity

    def report_run(self, reports: list[ClassReport]) -> None:
        count = sum(report.count for report in reports)
        passed = sum(report.passed for report in reports)
        ignored = sum(report.ignored for report in reports)

        self.console.print(
            f"[bold]{len(reports)} test classes run[/bold] "
            f"(total {_stats_markup(count, passed, ignored)})"
        )

        for report in reports:
            self._print_class(report)

    def report_result(self, result: TestResult) -> None:
        self._print_result(result)

    def _print_class(self, report: ClassReport) -> None:
        collapsed = report.all_passed and self.verbosity <= 0
        marker = "\\[+]" if collapsed else "\\[\u2212]"
        stats = _stats_markup(report.count, report.passed, report.ignored)
        self.console.print(f"{marker} [bold]{escape(report.class_name)}[/bold] ({stats})")

        if collapsed or self.verbosity < 0:
            return

        for result in report.results:
            self._print_result(result, indent=4)

    def _print_result(self, result: TestResult, indent: int = 0) -> None:
        colour = OUTCOME_COLOURS[result.outcome]
        line = (
            f"{escape(result.class_name)}.{escape(result.method_name)}: "
            f"[bold {colour}]{result.outcome.value}[/bold {colour}]"
        )
        if result.ignore_reason:
            line += f" [{OUTCOME_COLOURS[Outcome.IGNORED]}]({escape(result.ignore_reason)})[/]"
        self.console.print(Padding(Text.from_markup(line), (0, 0, 0, indent)))

        if result.is_problem and result.stack_trace:
            self.console.print(Padding(Text(result.stack_trace, style="dim"), (0, 0, 0, indent + 4)))


__all__ = ["ConsoleReporter", "OUTCOME_COLOURS"]
