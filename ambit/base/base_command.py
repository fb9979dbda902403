"""
Base Command Class

Abstract base for all ambit CLI commands.
Provides common functionality and structure.
"""

from abc import ABC, abstractmethod
from typing import Optional

from rich.console import Console

from ambit.config import AmbitConfig
from ambit.exceptions import AmbitError
from ambit.logger import OperationLogger
from ambit.output import Output


class BaseCommand(ABC):
    """
    Abstract base command class.

    Provides:
    - Configuration root
    - Logger initialization
    - Output (human or JSON)
    - Error handling
    """

    name = "command"

    def __init__(
        self,
        config: Optional[AmbitConfig] = None,
        verbose: bool = False,
        json_output: bool = False,
        console: Optional[Console] = None,
    ):
        self.config = config or AmbitConfig.from_env()
        self.verbose = verbose
        self.json_output = json_output
        self.console = console or Console()
        self.logger: Optional[OperationLogger] = None
        self.out = Output(json_mode=json_output, console=self.console)

    def init_logger(self) -> OperationLogger:
        """Open the operation log and attach it to the output."""
        self.logger = OperationLogger(self.config, self.name, verbose=self.verbose)
        self.out.logger = self.logger
        return self.logger

    @abstractmethod
    def execute(self, **kwargs) -> None:
        """
        Execute command logic.

        Must be implemented by subclasses.
        """
        pass

    def run(self, **kwargs) -> None:
        """
        Run command with error handling.

        Args:
            **kwargs: Command arguments
        """
        try:
            self.init_logger()
            self.execute(**kwargs)
        except KeyboardInterrupt:
            self.console.print("\n[yellow]⚠️  Operation cancelled by user[/yellow]")
            raise SystemExit(130)
        except SystemExit:
            raise
        except AmbitError as e:
            self.out.die(e.format_message())
        except PermissionError as e:
            self.out.die(f"Permission denied: {e}")
        except Exception as e:
            self.out.die(f"{type(e).__name__}: {e}")
        finally:
            self.out.print()
            if self.logger:
                self.logger.close()
