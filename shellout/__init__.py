"""
Shellout - run a command, capture its output, get its exit code.

A non-zero exit code is data on the Result, never an error. The only
errors are CommandNotFoundError and CommandProcessFailedError.
"""

from .errors import ShelloutError, CommandNotFoundError, CommandProcessFailedError
from .exec import Cmd, Result
from .shell import Shell, SubprocessShell, new, run

__all__ = [
    # Running commands
    "run",
    "new",
    "Shell",
    "SubprocessShell",
    # Data types
    "Cmd",
    "Result",
    # Error types
    "ShelloutError",
    "CommandNotFoundError",
    "CommandProcessFailedError",
]

# Get version from package metadata
try:
    from importlib.metadata import version, PackageNotFoundError
    __version__ = version("shellout")
except PackageNotFoundError:
    # Package not installed (e.g., development mode)
    __version__ = "0.0.0+dev"
