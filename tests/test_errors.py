"""
Unit tests for shellout error types (no processes started).

Tests the error hierarchy and the command/cause attributes.
"""

import pytest
from shellout.errors import ShelloutError, CommandNotFoundError, CommandProcessFailedError


class TestShelloutError:
    """Test base ShelloutError exception."""

    def test_is_exception(self):
        """Test that ShelloutError is an Exception."""
        assert issubclass(ShelloutError, Exception)

    def test_message(self):
        """Test that ShelloutError stores message."""
        err = ShelloutError("test message")
        assert str(err) == "test message"


class TestCommandNotFoundError:
    """Test CommandNotFoundError exception."""

    def test_inherits_shellout_error(self):
        assert issubclass(CommandNotFoundError, ShelloutError)

    def test_attributes(self):
        """Test that the command and the underlying cause are kept."""
        cause = FileNotFoundError(2, "executable file not found in PATH", "nope")
        err = CommandNotFoundError("nope", cause)
        assert err.command == "nope"
        assert err.cause is cause

    def test_message_format(self):
        cause = FileNotFoundError(2, "executable file not found in PATH", "nope")
        err = CommandNotFoundError("nope", cause)
        assert "nope" in str(err)
        assert "not found" in str(err)
        assert "executable file not found in PATH" in str(err)

    def test_not_a_process_failure(self):
        """Test that the two kinds are distinguishable without the cause."""
        err = CommandNotFoundError("nope", FileNotFoundError())
        assert not isinstance(err, CommandProcessFailedError)


class TestCommandProcessFailedError:
    """Test CommandProcessFailedError exception."""

    def test_inherits_shellout_error(self):
        assert issubclass(CommandProcessFailedError, ShelloutError)

    def test_attributes(self):
        cause = PermissionError(13, "Permission denied")
        err = CommandProcessFailedError("./script.sh", cause)
        assert err.command == "./script.sh"
        assert err.cause is cause

    def test_message_format(self):
        err = CommandProcessFailedError("./script.sh", PermissionError(13, "Permission denied"))
        assert "./script.sh" in str(err)
        assert "Permission denied" in str(err)

    def test_empty_command(self):
        """Test the message when no command was given at all."""
        err = CommandProcessFailedError("", ValueError("no command specified"))
        assert err.command == ""
        assert "no command specified" in str(err)

    def test_not_a_lookup_failure(self):
        err = CommandProcessFailedError("sh", OSError())
        assert not isinstance(err, CommandNotFoundError)


class TestErrorHierarchy:
    """Test the complete error hierarchy."""

    def test_catch_all_with_base_class(self):
        """Test catching all shellout errors with base class."""
        errors = [
            ShelloutError("base"),
            CommandNotFoundError("cmd", FileNotFoundError()),
            CommandProcessFailedError("cmd", OSError()),
        ]

        for error in errors:
            try:
                raise error
            except ShelloutError as e:
                assert e is error

    def test_errors_in_module(self):
        """Test that errors are exported from shellout module."""
        import shellout

        assert shellout.ShelloutError is ShelloutError
        assert shellout.CommandNotFoundError is CommandNotFoundError
        assert shellout.CommandProcessFailedError is CommandProcessFailedError


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
