"""
Shellout error types.

Exactly two failure kinds can come out of running a command. A process
that runs and exits non-zero is not one of them.
"""

__all__ = ['ShelloutError', 'CommandNotFoundError', 'CommandProcessFailedError']


class ShelloutError(Exception):
    """Base exception for all shellout errors."""
    pass


class CommandNotFoundError(ShelloutError):
    """
    Raised when a command can not be resolved from the PATH or its explicit path.

    No process is started when this is raised.

    Attributes:
        command: The command name or path that could not be resolved
        cause: The underlying lookup error
    """
    def __init__(self, command: str, cause: BaseException):
        self.command = command
        self.cause = cause
        super().__init__(f"Command '{command}' not found: {cause}")


class CommandProcessFailedError(ShelloutError):
    """
    Raised when the command process could not be started or run.

    Unlike subprocess.CalledProcessError this is never raised for a
    non-zero exit status.

    Attributes:
        command: The command name or path that was being run
        cause: The underlying error from the host
    """
    def __init__(self, command: str, cause: BaseException):
        self.command = command
        self.cause = cause
        super().__init__(f"Command '{command}' process failed: {cause}")
