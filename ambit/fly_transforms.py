"""
Fly Transforms

Pure translations between Fly machine descriptors and the canonical machine
model. Unfamiliar states and missing guest blocks resolve to conservative
defaults instead of raising, so a machine is always displayable.
"""

from typing import Iterable, Optional

from ambit.models.fly import FlyMachine, FlyMachineGuest
from ambit.models.machine import (
    MachineResult,
    MachineSize,
    MachineState,
    ResourceRequest,
)

# Fly machine states -> canonical state. Anything else is CREATING.
FLY_STATE_MAP = {
    "started": MachineState.RUNNING,
    "stopped": MachineState.FROZEN,
    "suspended": MachineState.FROZEN,
    "created": MachineState.CREATING,
    "starting": MachineState.CREATING,
    "destroying": MachineState.FAILED,
    "destroyed": MachineState.FAILED,
    "failed": MachineState.FAILED,
}

SIZE_RESOURCES = {
    MachineSize.SHARED_CPU_1X: ResourceRequest(cpus=1, memory_mb=1024),
    MachineSize.SHARED_CPU_2X: ResourceRequest(cpus=2, memory_mb=2048),
    MachineSize.SHARED_CPU_4X: ResourceRequest(cpus=4, memory_mb=4096),
}


def canonical_state(raw_state: str) -> MachineState:
    """
    Map a Fly machine state to the canonical state.

    Args:
        raw_state: Fly state string (case-insensitive)

    Returns:
        MachineState (CREATING for unrecognized states)
    """
    return FLY_STATE_MAP.get(raw_state.lower(), MachineState.CREATING)


def canonical_size(cpus: Optional[int] = None) -> MachineSize:
    """
    Map a CPU count to a size tier.

    Args:
        cpus: Guest CPU count, or None when the machine has no guest config

    Returns:
        MachineSize (SHARED_CPU_1X when cpus is None)
    """
    if cpus is None:
        return MachineSize.SHARED_CPU_1X
    if cpus >= 4:
        return MachineSize.SHARED_CPU_4X
    if cpus >= 2:
        return MachineSize.SHARED_CPU_2X
    return MachineSize.SHARED_CPU_1X


def size_from_guest(guest: Optional[FlyMachineGuest]) -> MachineSize:
    """Size tier of a Fly guest block."""
    return canonical_size(guest.cpus if guest else None)


def resource_request(size: MachineSize) -> ResourceRequest:
    """Concrete resources requested for a size tier."""
    return SIZE_RESOURCES[size]


def map_machine(raw: FlyMachine) -> MachineResult:
    """Map one raw Fly machine to a MachineResult."""
    return MachineResult(
        id=raw.id,
        state=canonical_state(raw.state),
        size=size_from_guest(raw.guest),
        region=raw.region,
        private_ip=raw.private_ip,
    )


def map_machines(raw: Iterable[FlyMachine]) -> list[MachineResult]:
    """Map raw Fly machines to MachineResults, preserving order."""
    return [map_machine(machine) for machine in raw]
