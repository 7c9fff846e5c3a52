"""
Pytest configuration and shared fixtures for shellout tests.

Process-spawning tests use the running interpreter as the child so they
behave the same on every platform; tests that need a POSIX shell skip
themselves elsewhere.
"""

from __future__ import annotations

import shutil
import sys

import pytest

from shellout import SubprocessShell


@pytest.fixture
def shell():
    """The default subprocess-backed shell."""
    return SubprocessShell.default()


@pytest.fixture
def python():
    """Absolute path of the interpreter running the tests."""
    return sys.executable


@pytest.fixture
def missing_command():
    """A command name guaranteed not to resolve from the PATH."""
    name = "icantbelievethisisacommandinyourenvironment"
    if shutil.which(name) is not None:
        pytest.fail(f"precondition failed: '{name}' is not supposed to be a command here")
    return name
