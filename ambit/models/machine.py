"""
Machine Models

Canonical, provider-independent view of router and workload machines.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ambit.naming import router_app_name, router_tag, workload_app_name
from ambit.subnet import machine_subnet


class MachineState(Enum):
    """Canonical machine lifecycle state."""

    CREATING = "creating"
    RUNNING = "running"
    FROZEN = "frozen"
    FAILED = "failed"


class MachineSize(Enum):
    """Size tier used to request compute capacity."""

    SHARED_CPU_1X = "shared-cpu-1x"
    SHARED_CPU_2X = "shared-cpu-2x"
    SHARED_CPU_4X = "shared-cpu-4x"


@dataclass(frozen=True)
class ResourceRequest:
    """Concrete guest resources for a size tier."""

    cpus: int
    memory_mb: int
    cpu_kind: str = "shared"

    def to_guest(self) -> dict:
        """Render as a Fly machine guest block."""
        return {
            "cpu_kind": self.cpu_kind,
            "cpus": self.cpus,
            "memory_mb": self.memory_mb,
        }


@dataclass(frozen=True)
class MachineResult:
    """Canonical view of a provider machine. Recomputed on every query."""

    id: str
    state: MachineState
    size: MachineSize
    region: str
    private_ip: Optional[str] = None

    @property
    def is_running(self) -> bool:
        """Check if machine is running."""
        return self.state == MachineState.RUNNING

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "id": self.id,
            "state": self.state.value,
            "size": self.size.value,
            "region": self.region,
            "private_ip": self.private_ip,
        }


@dataclass(frozen=True)
class Router:
    """A Tailscale subnet router deployed on a Fly network."""

    app_name: str
    network: str
    router_id: str
    state: MachineState
    subnet: Optional[str] = None

    @property
    def tag(self) -> str:
        """Tailscale ACL tag of the router's network."""
        return router_tag(self.network)

    @classmethod
    def from_machine(
        cls, network: str, router_id: str, machine: Optional[MachineResult]
    ) -> "Router":
        """
        Derive router state from fresh machine data.

        Args:
            network: Fly network name
            router_id: Random router suffix
            machine: Router machine, or None when no machine exists yet

        Returns:
            Router instance
        """
        if machine is None:
            return cls(
                app_name=router_app_name(network, router_id),
                network=network,
                router_id=router_id,
                state=MachineState.CREATING,
            )

        return cls(
            app_name=router_app_name(network, router_id),
            network=network,
            router_id=router_id,
            state=machine.state,
            subnet=machine_subnet(machine),
        )


@dataclass(frozen=True)
class WorkloadMachine:
    """A user workload attached to a router."""

    name: str
    router_id: str

    @property
    def app_name(self) -> str:
        """Fly app name of the workload."""
        return workload_app_name(self.name, self.router_id)

    @classmethod
    def for_router(cls, name: str, router_id: str) -> "WorkloadMachine":
        """Create a workload bound to a router."""
        return cls(name=name, router_id=router_id)
