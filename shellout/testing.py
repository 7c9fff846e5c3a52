"""
Test double for code that depends on a Shell.

Usage:
    fake = FakeShell(Result(exit_code=0, stdout=b"main\\n"))
    branch = current_branch(shell=fake)
    assert fake.calls[0].argv == ["git", "branch", "--show-current"]
"""

import logging
import threading
from collections import deque
from typing import List, Union

from .exec import Cmd, Result

logger = logging.getLogger("shellout.testing")

__all__ = ['FakeShell']

Outcome = Union[Result, BaseException]


class FakeShell:
    """
    Shell that replays scripted outcomes instead of starting processes.

    Each call to run() records its Cmd in ``calls`` and consumes the next
    queued outcome: a Result is returned, an exception is raised.
    """

    def __init__(self, *outcomes: Outcome):
        self._outcomes = deque(outcomes)
        self._lock = threading.Lock()
        self.calls: List[Cmd] = []

    def push(self, *outcomes: Outcome) -> None:
        """Queue more outcomes after the ones already pending."""
        with self._lock:
            self._outcomes.extend(outcomes)

    @property
    def pending(self) -> int:
        """Number of outcomes not yet consumed."""
        with self._lock:
            return len(self._outcomes)

    def run(self, cmd: Cmd) -> Result:
        with self._lock:
            self.calls.append(cmd)
            if not self._outcomes:
                raise AssertionError(f"FakeShell has no outcome queued for {cmd.argv}")
            outcome = self._outcomes.popleft()

        logger.debug(f"fake run of {cmd.command}: {outcome!r}")
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome
