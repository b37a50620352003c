"""Reporting module for gauntlet test output."""

from gauntlet.reports.base import Reporter
from gauntlet.reports.console import ConsoleReporter


__all__ = [
    "ConsoleReporter",
    "Reporter",
]
