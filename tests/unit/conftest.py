"""Shared fixtures for unit tests."""

import io

import pytest
from rich.console import Console

from gauntlet.testing import Registry


@pytest.fixture
def registry() -> Registry:
    """Provide an empty registry, isolated from the default one."""
    return Registry()


@pytest.fixture
def console() -> Console:
    """Provide a rich console writing to a string buffer."""
    return Console(file=io.StringIO(), width=200)
