"""
ambit Domain Models

Dataclass models for canonical state and pydantic schemas for raw documents.
"""

from .results import (
    ExecutionResult,
    PrerequisiteResult,
    PrerequisiteReport,
)
from .machine import (
    MachineResult,
    MachineSize,
    MachineState,
    ResourceRequest,
    Router,
    WorkloadMachine,
)
from .fly import (
    FlyMachine,
    FlyMachineConfig,
    FlyMachineGuest,
    parse_machines,
)
from .credentials import StoredCredentials

__all__ = [
    # Results
    "ExecutionResult",
    "PrerequisiteResult",
    "PrerequisiteReport",
    # Machines
    "MachineResult",
    "MachineSize",
    "MachineState",
    "ResourceRequest",
    "Router",
    "WorkloadMachine",
    # Fly schemas
    "FlyMachine",
    "FlyMachineConfig",
    "FlyMachineGuest",
    "parse_machines",
    # Credentials
    "StoredCredentials",
]
