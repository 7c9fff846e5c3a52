"""
Execution data types - what to run and what came back.
"""

from dataclasses import dataclass
from typing import BinaryIO, List, Mapping, Optional, Sequence, Union

__all__ = [
    'Cmd',
    'Result',
]


@dataclass(frozen=True)
class Cmd:
    """
    The information required to start a command process.

    Attributes:
        command: Name or path of the executable. A bare name is looked up
            on the PATH; anything containing a path separator is used as is.
        args: Arguments passed to the process after the command name
        env: Environment of the process, as "KEY=VALUE" strings or a
            mapping. None inherits the current environment; an empty
            sequence gives the process an empty environment.
        dir: Working directory of the process ("" for the current one)
        stdin: Bytes or a binary stream fed to the process's standard
            input. None connects standard input to the null device.
    """
    command: str = ""
    args: Sequence[str] = ()
    env: Optional[Union[Sequence[str], Mapping[str, str]]] = None
    dir: str = ""
    stdin: Optional[Union[bytes, BinaryIO]] = None

    @property
    def argv(self) -> List[str]:
        """Full argument vector, command name first."""
        return [self.command, *self.args]


@dataclass
class Result:
    """
    Outcome of running a command.

    Attributes:
        exit_code: Exit code from the process (negative if terminated by signal)
        stdout: Everything the process wrote to standard output
        stderr: Everything the process wrote to standard error
    """
    exit_code: int
    stdout: bytes = b""
    stderr: bytes = b""

    @property
    def success(self) -> bool:
        return self.exit_code == 0

    def text(self, stream: str = "stdout", encoding: str = "utf-8", errors: str = "replace") -> str:
        """Decode one of the captured streams ("stdout" or "stderr")."""
        if stream not in ("stdout", "stderr"):
            raise ValueError(f"unknown stream: {stream!r}")
        return getattr(self, stream).decode(encoding, errors=errors)
