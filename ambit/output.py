"""
Output

Unified console output for ambit commands. Human messages are skipped in
JSON mode; die() is the single place that terminates an operation.
"""

import json
from typing import Any, NoReturn, Optional

from rich.console import Console

from ambit.logger import OperationLogger


class Output:
    """Console reporter shared by the prerequisite gate and commands."""

    def __init__(
        self,
        json_mode: bool = False,
        console: Optional[Console] = None,
        logger: Optional[OperationLogger] = None,
    ):
        self.json_mode = json_mode
        self.console = console or Console()
        self.logger = logger
        self.result: Optional[dict[str, Any]] = None

    def ok(self, message: str) -> "Output":
        """Print success message (skip in JSON mode)."""
        if self.logger:
            self.logger.log(message)
        if not self.json_mode:
            self.console.print(f"[green]✓ {message}[/green]")
        return self

    def err(self, message: str) -> "Output":
        """Print error message (skip in JSON mode)."""
        if self.logger:
            self.logger.log(message, "ERROR")
        if not self.json_mode:
            self.console.print(f"[red]✗ {message}[/red]")
        return self

    def warn(self, message: str) -> "Output":
        """Print warning message (skip in JSON mode)."""
        if self.logger:
            self.logger.warning(message)
        if not self.json_mode:
            self.console.print(f"[yellow]⚠ {message}[/yellow]")
        return self

    def dim(self, message: str) -> "Output":
        if not self.json_mode:
            self.console.print(f"[dim]{message}[/dim]")
        return self

    def done(self, **data: Any) -> "Output":
        """Set the success result printed in JSON mode."""
        self.result = {"ok": True, **data}
        return self

    def print(self) -> None:
        """Emit the JSON result (JSON mode only)."""
        if self.json_mode and self.result is not None:
            print(json.dumps(self.result, indent=2))

    def die(self, message: str, code: int = 1) -> NoReturn:
        """
        Report a fatal error and exit.

        Args:
            message: Error message
            code: Exit code
        """
        if self.logger:
            self.logger.log_error(message)
        if self.json_mode:
            print(json.dumps({"ok": False, "error": message}, indent=2))
        else:
            self.console.print(f"[bold red]✗ {message}[/bold red]")
        raise SystemExit(code)
