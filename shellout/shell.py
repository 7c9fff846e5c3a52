"""
Shell - run a command to completion and capture what it wrote.

Trades flexibility for ergonomics: the whole of stdout and stderr is held
in memory, so this is not the tool for interactive processes or commands
that produce large volumes of output.
"""

import errno
import io
import logging
import os
import shutil
import subprocess
from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable

from .errors import CommandNotFoundError, CommandProcessFailedError
from .exec import Cmd, Result

logger = logging.getLogger("shellout.shell")

__all__ = ['Shell', 'SubprocessShell', 'new', 'run']


@runtime_checkable
class Shell(Protocol):
    """
    Anything that can run a Cmd.

    Code that shells out should depend on this rather than on
    SubprocessShell so tests can hand it a fake (see shellout.testing).
    """

    def run(self, cmd: Cmd) -> Result:
        """
        Run the command and capture its output as a Result.

        A process exiting with a non-zero status is a Result, not an error.

        Raises:
            CommandNotFoundError: The command could not be resolved
            CommandProcessFailedError: The process could not be started or run
        """
        ...


class SubprocessShell:
    """
    Shell backed by the subprocess module.

    Holds no state, so the default instance is shared by every caller and
    concurrent calls never interfere with each other.

    Usage:
        shell = SubprocessShell.default()
        result = shell.run(Cmd("git", ["status", "--short"], dir="/src/repo"))
        if result.exit_code != 0:
            print(result.stderr.decode())
    """

    __slots__ = ()

    @classmethod
    def default(cls) -> "SubprocessShell":
        """Get the shared default instance."""
        return _default_shell

    def run(self, cmd: Cmd) -> Result:
        """
        Run the command synchronously and capture its output.

        Args:
            cmd: What to run, with its arguments, environment, directory
                and standard input

        Returns:
            Result with exit_code, stdout and stderr

        Raises:
            CommandNotFoundError: The command is not on the PATH or its
                explicit path does not exist. No process is started.
            CommandProcessFailedError: The process could not be started or
                run (empty command, permission denied, bad working
                directory, malformed environment, I/O failure).

        Example:
            result = shell.run(Cmd("/bin/sh", ["-c", "exit 17"]))
            assert result.exit_code == 17
        """
        if not cmd.command:
            cause = ValueError("no command specified")
            logger.debug(f"refusing to run: {cause}")
            raise CommandProcessFailedError(cmd.command, cause) from cause

        executable = _resolve(cmd)
        logger.debug(f"running {cmd.command} ({executable}) with {len(cmd.args)} args")

        try:
            proc = subprocess.run(
                cmd.argv,
                executable=executable,
                env=_environ(cmd.env),
                cwd=cmd.dir or None,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=False,
                **_stdin_kwargs(cmd.stdin),
            )
        except (OSError, ValueError, subprocess.SubprocessError) as e:
            logger.debug(f"{cmd.command} failed to run: {e}")
            raise CommandProcessFailedError(cmd.command, e) from e

        logger.debug(f"{cmd.command} finished, exit_code: {proc.returncode}")
        return Result(exit_code=proc.returncode, stdout=proc.stdout, stderr=proc.stderr)


_default_shell = SubprocessShell()


def new() -> Shell:
    """Return a Shell backed by the host's process facility."""
    return _default_shell


def run(cmd: Cmd) -> Result:
    """Run cmd on the default Shell. See Shell.run."""
    return _default_shell.run(cmd)


def _resolve(cmd: Cmd) -> str:
    """Find the executable for cmd.command, raising CommandNotFoundError on a miss."""
    name = cmd.command

    # Explicit paths skip the PATH search; relative ones start from cmd.dir.
    if os.path.dirname(name):
        path = name
        if cmd.dir and not os.path.isabs(name):
            path = os.path.join(cmd.dir, name)
        if not os.path.exists(path):
            cause = FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
            logger.debug(f"{name} not found: {cause}")
            raise CommandNotFoundError(name, cause) from cause
        return name

    found = shutil.which(name)
    if found is None:
        cause = FileNotFoundError(errno.ENOENT, "executable file not found in PATH", name)
        logger.debug(f"{name} not found: {cause}")
        raise CommandNotFoundError(name, cause) from cause
    logger.debug(f"resolved {name} to {found}")
    return found


def _environ(env) -> Optional[Dict[str, str]]:
    """Turn Cmd.env into the mapping subprocess expects (None inherits)."""
    if env is None:
        return None
    if isinstance(env, Mapping):
        return dict(env)

    environ = {}
    for entry in env:
        key, sep, value = entry.partition("=")
        if not sep:
            raise ValueError(f"environment entry is not KEY=VALUE: {entry!r}")
        # Later entries win, like a shell export.
        environ[key] = value
    return environ


def _stdin_kwargs(stdin) -> Dict[str, Any]:
    """Pick how subprocess should feed the process's standard input."""
    if stdin is None:
        return {"stdin": subprocess.DEVNULL}
    if isinstance(stdin, (bytes, bytearray, memoryview)):
        return {"input": bytes(stdin)}

    # Only unbuffered files share their position with the descriptor; a
    # buffered reader may have read ahead, so it is drained instead.
    if isinstance(stdin, io.FileIO) and not stdin.closed:
        return {"stdin": stdin}

    data = stdin.read()
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise ValueError(f"stdin must be a binary stream, read() returned {type(data).__name__}")
    return {"input": bytes(data)}
