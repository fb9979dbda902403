"""
Logging system for ambit
Writes each operation to its own log file with clean console output
"""

from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from rich.console import Console

from ambit.config import AmbitConfig
from ambit.constants import LOG_DATE_FORMAT, LOG_TIME_FORMAT
from ambit.error_detail import strip_ansi

console = Console()


class OperationLogger:
    """
    Manages logging for a single ambit operation
    - Writes all output to a log file in real-time
    - Mirrors messages to the console when verbose
    - Captures errors with context
    """

    def __init__(
        self,
        config: AmbitConfig,
        operation: str,
        verbose: bool = False,
    ):
        """
        Initialize logger

        Args:
            config: Configuration root (logs live under config.logs_dir)
            operation: Operation name (e.g., 'doctor', 'auth')
            verbose: If True, show all messages in console
        """
        self.operation = operation
        self.verbose = verbose
        self.has_errors = False

        # Structure: logs/{date}/{time}_{operation}.log
        now = datetime.now()
        logs_dir = config.logs_dir / now.strftime(LOG_DATE_FORMAT)
        logs_dir.mkdir(parents=True, exist_ok=True)

        self.log_path: Path = logs_dir / f"{now.strftime(LOG_TIME_FORMAT)}_{operation}.log"
        self.log_file: Optional[TextIO] = open(self.log_path, "w", buffering=1)

        self._write_log_header()

    def _write_log_header(self):
        """Write log file header"""
        header = f"""{"=" * 80}
ambit Operation Log
{"=" * 80}
Operation: {self.operation}
Started: {datetime.now().isoformat()}
{"=" * 80}

"""
        self.log_file.write(header)

    def log(self, message: str, level: str = "INFO"):
        """
        Log a message to file and optionally console

        Args:
            message: Message to log
            level: Log level (INFO, WARNING, ERROR, DEBUG)
        """
        timestamp = datetime.now().strftime("%H:%M:%S")
        if self.log_file:
            self.log_file.write(f"[{timestamp}] [{level}] {strip_ansi(message)}\n")

        if self.verbose:
            if level == "ERROR":
                console.print(f"[red]{message}[/red]")
            elif level == "WARNING":
                console.print(f"[yellow]{message}[/yellow]")
            elif level == "DEBUG":
                console.print(f"[dim]{message}[/dim]")
            else:
                console.print(message)

    def debug(self, message: str):
        self.log(message, "DEBUG")

    def warning(self, message: str):
        self.log(message, "WARNING")

    def log_command(self, command: str):
        """Log a command being executed"""
        self.debug(f"Executing: {command}")

    def log_output(self, output: str, stream: str = "stdout"):
        """
        Log command output, ANSI codes stripped

        Args:
            output: Command output (single line or multiline)
            stream: Stream name (stdout, stderr)
        """
        if not output or not self.log_file:
            return

        for line in strip_ansi(output).splitlines():
            self.log_file.write(f"  [{stream}] {line}\n")

    def log_error(self, error: str, context: Optional[str] = None):
        """
        Log an error block with context (file only)

        Args:
            error: Error message
            context: Additional context (e.g., command that failed)
        """
        self.has_errors = True
        if not self.log_file:
            return

        error_block = f"""
{"!" * 80}
ERROR OCCURRED
{"!" * 80}
{strip_ansi(error)}
"""
        if context:
            error_block += f"\nContext: {strip_ansi(context)}\n"

        error_block += f"{'!' * 80}\n\n"
        self.log_file.write(error_block)

    def close(self):
        """Close log file"""
        if self.log_file:
            footer = f"""
{"=" * 80}
Completed: {datetime.now().isoformat()}
Status: {"FAILED" if self.has_errors else "SUCCESS"}
{"=" * 80}
"""
            self.log_file.write(footer)
            self.log_file.close()
            self.log_file = None

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, _exc_tb):
        """Context manager exit"""
        if exc_type is not None and exc_type != SystemExit:
            # Log unhandled exception (but not SystemExit - that's expected)
            self.log_error(
                str(exc_val) if exc_val else "Operation failed",
                context=f"{exc_type.__name__}",
            )
        self.close()
        return False  # Don't suppress exceptions
