"""
Fly.io CLI Response Schemas

Raw descriptors as emitted by `fly machines list --json`. Unknown fields are
ignored and the machine state is kept as a free string so that unfamiliar
provider states still parse.
"""

from typing import Any, Optional

from pydantic import BaseModel, TypeAdapter


class FlyMachineGuest(BaseModel):
    cpu_kind: str
    cpus: int
    memory_mb: int


class FlyMachineConfig(BaseModel):
    guest: Optional[FlyMachineGuest] = None
    metadata: Optional[dict[str, str]] = None
    auto_destroy: Optional[bool] = None


class FlyMachine(BaseModel):
    id: str
    name: str
    state: str = "created"
    region: str
    private_ip: Optional[str] = None
    config: Optional[FlyMachineConfig] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def guest(self) -> Optional[FlyMachineGuest]:
        """Guest resources, if the machine config carries them."""
        return self.config.guest if self.config else None


_machine_list = TypeAdapter(list[FlyMachine])


def parse_machines(payload: Any) -> list[FlyMachine]:
    """
    Validate a decoded machine list.

    Raises:
        pydantic.ValidationError: If an entry lacks id, name or region
    """
    return _machine_list.validate_python(payload)
