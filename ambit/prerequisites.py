"""
Prerequisite Gate

Runs every prerequisite check before a mutating provider call and reports
all failures in one pass. Checks are a plain ordered list of named
validators; the aggregation and termination rules do not depend on which
checks are in it.
"""

from dataclasses import dataclass
from typing import Callable, NoReturn, Optional, Protocol, Sequence

from ambit import utils
from ambit.constants import (
    ERROR_FLYCTL_NOT_FOUND,
    ERROR_MISSING_PREREQUISITES,
    ERROR_TAILSCALE_KEY_REQUIRED,
    FLYCTL_BINARY,
)
from ambit.credentials import CredentialStore
from ambit.models.results import PrerequisiteReport, PrerequisiteResult

FLYCTL_CHECK = "flyctl"
TAILSCALE_KEY_CHECK = "tailscale-api-key"


class Reporter(Protocol):
    def err(self, message: str) -> object: ...

    def die(self, message: str) -> NoReturn: ...


@dataclass(frozen=True)
class Prerequisite:
    """A named, independent check."""

    name: str
    check: Callable[[], PrerequisiteResult]


@dataclass(frozen=True)
class Dependencies:
    """Values resolved by a passing gate, for reuse by the caller."""

    tailscale_key: str
    tailscale_key_source: str


def binary_prerequisite(
    name: str,
    binary: str,
    message: str,
    command_exists: Optional[Callable[[str], bool]] = None,
) -> Prerequisite:
    """Prerequisite satisfied when a binary is found on PATH."""
    exists = command_exists or utils.command_exists

    def check() -> PrerequisiteResult:
        if exists(binary):
            return PrerequisiteResult.passed(binary)
        return PrerequisiteResult.failed(message)

    return Prerequisite(name, check)


def credential_prerequisite(
    name: str, store: CredentialStore, message: str
) -> Prerequisite:
    """Prerequisite satisfied when the store resolves a key (value: ResolvedKey)."""

    def check() -> PrerequisiteResult:
        resolved = store.resolve()
        if resolved:
            return PrerequisiteResult.passed(resolved)
        return PrerequisiteResult.failed(message)

    return Prerequisite(name, check)


def default_prerequisites(
    store: CredentialStore,
    command_exists: Optional[Callable[[str], bool]] = None,
) -> list[Prerequisite]:
    """flyctl on PATH and a Tailscale API key, in that order."""
    return [
        binary_prerequisite(
            FLYCTL_CHECK, FLYCTL_BINARY, ERROR_FLYCTL_NOT_FOUND, command_exists
        ),
        credential_prerequisite(
            TAILSCALE_KEY_CHECK, store, ERROR_TAILSCALE_KEY_REQUIRED
        ),
    ]


def run_prerequisites(prerequisites: Sequence[Prerequisite]) -> PrerequisiteReport:
    """Evaluate every prerequisite; never stops at the first failure."""
    report = PrerequisiteReport()
    for prerequisite in prerequisites:
        report.add(prerequisite.name, prerequisite.check())
    return report


def enforce(report: PrerequisiteReport, out: Reporter) -> None:
    """
    Terminate unless every prerequisite passed.

    A single failure dies with its own message. Several failures are each
    reported, then the operation dies with a summary.
    """
    errors = report.errors
    if len(errors) == 1:
        out.die(errors[0])
    if len(errors) > 1:
        for error in errors:
            out.err(error)
        out.die(ERROR_MISSING_PREREQUISITES)


def check_dependencies(
    out: Reporter,
    store: CredentialStore,
    prerequisites: Optional[Sequence[Prerequisite]] = None,
    command_exists: Optional[Callable[[str], bool]] = None,
) -> Dependencies:
    """
    Verify flyctl and the Tailscale API key before any mutating call.

    Args:
        out: Reporter with err() and a non-returning die()
        store: Credential store used for the key lookup
        prerequisites: Extra checks run after the default ones
        command_exists: Binary lookup (injectable for tests)

    Returns:
        Dependencies with the resolved key and its tier, so callers skip a
        second lookup
    """
    checks = default_prerequisites(store, command_exists)
    if prerequisites:
        checks.extend(prerequisites)

    report = run_prerequisites(checks)
    enforce(report, out)
    resolved = report.value(TAILSCALE_KEY_CHECK)
    return Dependencies(
        tailscale_key=resolved.key, tailscale_key_source=resolved.source
    )
