"""
Result Models

Dataclass models for command executions and prerequisite checks.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class ExecutionResult:
    """Result of a subprocess execution."""

    returncode: int
    stdout: str = ""
    stderr: str = ""
    command: str = ""

    @property
    def is_success(self) -> bool:
        """Check if execution succeeded."""
        return self.returncode == 0

    @property
    def is_failure(self) -> bool:
        """Check if execution failed."""
        return self.returncode != 0

    def __repr__(self) -> str:
        return f"ExecutionResult(returncode={self.returncode}, command='{self.command[:50]}')"


@dataclass
class PrerequisiteResult:
    """Outcome of a single prerequisite check."""

    ok: bool
    message: str = ""
    value: Optional[Any] = None

    @classmethod
    def passed(cls, value: Optional[Any] = None) -> "PrerequisiteResult":
        return cls(ok=True, value=value)

    @classmethod
    def failed(cls, message: str) -> "PrerequisiteResult":
        return cls(ok=False, message=message)


@dataclass
class PrerequisiteReport:
    """Aggregated outcome of every prerequisite check."""

    results: list[tuple[str, PrerequisiteResult]] = field(default_factory=list)

    @property
    def errors(self) -> list[str]:
        """Failure messages, in check order."""
        return [r.message for _, r in self.results if not r.ok]

    @property
    def is_valid(self) -> bool:
        """Check if every prerequisite passed."""
        return not self.errors

    def add(self, name: str, result: PrerequisiteResult) -> None:
        """Record the result of a named check."""
        self.results.append((name, result))

    def value(self, name: str) -> Optional[Any]:
        """Value produced by the first passing check with this name."""
        for check_name, result in self.results:
            if check_name == name and result.ok:
                return result.value
        return None

    def __repr__(self) -> str:
        return f"PrerequisiteReport(valid={self.is_valid}, errors={len(self.errors)})"
