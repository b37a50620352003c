"""Test execution engine.

Provides class registration, method discovery and a synchronous runner.
"""

from .case import TestClass, discover
from .registry import Registry, get_registry, test
from .result import ClassReport, TestResult
from .runner import Runner, clean_stack_trace, run_all, run_one
from .tags import ignore, mark_ignored


__all__ = [
    "TestClass",
    "discover",
    "Registry",
    "get_registry",
    "test",
    "ignore",
    "mark_ignored",
    "ClassReport",
    "TestResult",
    "Runner",
    "clean_stack_trace",
    "run_all",
    "run_one",
]
