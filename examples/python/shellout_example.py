#!/usr/bin/env python3
"""
Shellout Example - Running Commands and Reading Their Results

Demonstrates core shellout features:
- Command execution with results
- Separate stdout and stderr handling
- Environment variables and working directory
- Feeding standard input
- Exit codes versus errors

Requires: pip install shellout
"""

import logging
import os
import sys
import tempfile

import shellout
from shellout import Cmd

logger = logging.getLogger("shellout_example")

PYTHON = sys.executable


def setup_logging():
    """Configure stdout logging for the example."""
    logging.basicConfig(
        level=logging.ERROR,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def example_basic():
    """Example 1: Basic command execution."""
    print("\n=== Example 1: Basic Command Execution ===")

    result = shellout.run(Cmd(PYTHON, ["--version"]))
    print(f"Stdout: {result.text().strip()}")
    print(f"Exit code: {result.exit_code}")


def example_stdout_stderr():
    """Example 2: Separate stdout and stderr."""
    print("\n\n=== Example 2: Separate stdout and stderr ===")

    code = "import sys; print('to stdout'); print('to stderr', file=sys.stderr)"
    result = shellout.run(Cmd(PYTHON, ["-c", code]))

    print(f"Exit code: {result.exit_code}")
    print(f"Stdout: '{result.text().strip()}'")
    print(f"Stderr: '{result.text('stderr').strip()}'")


def example_environment_and_directory():
    """Example 3: Environment variables and working directory."""
    print("\n\n=== Example 3: Environment and Working Directory ===")

    code = "import os; print(os.getcwd()); print(os.environ['PROJECT'])"
    with tempfile.TemporaryDirectory() as workdir:
        # env=None would inherit ours; extend it explicitly instead
        env = [f"{k}={v}" for k, v in os.environ.items()] + ["PROJECT=data-pipeline"]
        result = shellout.run(Cmd(PYTHON, ["-c", code], env=env, dir=workdir))

    cwd, project = result.text().splitlines()
    print(f"  cwd: {cwd}")
    print(f"  PROJECT: {project}")


def example_stdin():
    """Example 4: Standard input."""
    print("\n\n=== Example 4: Standard Input ===")

    code = "import sys; data = sys.stdin.buffer.read(); print(len(data), 'bytes')"
    result = shellout.run(Cmd(PYTHON, ["-c", code], stdin=os.urandom(1024)))
    print(f"  child read {result.text().strip()}")


def example_error_handling():
    """Example 5: Exit codes and errors."""
    print("\n\n=== Example 5: Error Handling ===")

    # A non-zero exit is data, not an exception
    result = shellout.run(Cmd(PYTHON, ["-c", "import sys; sys.exit(17)"]))
    print(f"Command exited with code {result.exit_code} (success={result.success})")

    try:
        shellout.run(Cmd("icantbelievethisisacommandinyourenvironment"))
    except shellout.CommandNotFoundError as e:
        print(f"Not found: {e}")

    try:
        shellout.run(Cmd())
    except shellout.CommandProcessFailedError as e:
        print(f"Process failed: {e}")


def main():
    """Run all examples."""
    print("Shellout Examples")
    print("=" * 60)

    example_basic()
    example_stdout_stderr()
    example_environment_and_directory()
    example_stdin()
    example_error_handling()

    print("\n" + "=" * 60)
    print("All examples completed!")


if __name__ == "__main__":
    setup_logging()
    logger.info("Python logging configured; shellout debug logs go to stdout.")
    main()
