"""
Subprocess Utilities

Thin wrappers around external tools used by the prerequisite gate and
provider adapters.
"""

import subprocess
from typing import Optional

from ambit.exceptions import FlyCommandError
from ambit.logger import OperationLogger
from ambit.models.results import ExecutionResult


def command_exists(tool_name: str) -> bool:
    """Check if a tool is installed on PATH."""
    try:
        subprocess.run(["which", tool_name], check=True, capture_output=True)
        return True
    except (subprocess.CalledProcessError, FileNotFoundError):
        return False


def run_command(
    args: list[str], logger: Optional[OperationLogger] = None
) -> ExecutionResult:
    """
    Run an external command and capture its output.

    Args:
        args: Command and arguments
        logger: Optional operation logger for command and output

    Returns:
        ExecutionResult object
    """
    command = " ".join(args)
    if logger:
        logger.log_command(command)

    result = subprocess.run(args, capture_output=True, text=True, check=False)

    if logger:
        logger.log_output(result.stdout, "stdout")
        logger.log_output(result.stderr, "stderr")

    return ExecutionResult(
        returncode=result.returncode,
        stdout=result.stdout,
        stderr=result.stderr,
        command=command,
    )


def raise_for_fly_failure(result: ExecutionResult, action: str) -> ExecutionResult:
    """
    Raise FlyCommandError if a flyctl invocation failed.

    Raises:
        FlyCommandError: With the last meaningful stderr line as detail
    """
    if result.is_failure:
        raise FlyCommandError(action, result.stderr)
    return result
