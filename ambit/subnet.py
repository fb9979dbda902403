"""Subnet derivation for Fly 6PN private addresses.

A Fly private address looks like fdaa:X:XXXX::Y. The first three groups
identify the organization network, which the router advertises as a /48.
"""

from typing import TYPE_CHECKING, Optional

from ambit.constants import SUBNET_GROUP_COUNT, SUBNET_SUFFIX

if TYPE_CHECKING:
    from ambit.models.machine import MachineResult


def advertised_subnet(private_address: str) -> str:
    """
    Derive the advertised subnet from a private address.

    Malformed input is not rejected: missing groups render empty, so
    "fdaa" becomes "fdaa::::/48".

    Args:
        private_address: Machine private IPv6 address

    Returns:
        Subnet CIDR (e.g., "fdaa:1:2ab3::/48")
    """
    parts = private_address.split(":")
    parts += [""] * (SUBNET_GROUP_COUNT - len(parts))
    return ":".join(parts[:SUBNET_GROUP_COUNT]) + SUBNET_SUFFIX


def machine_subnet(machine: "MachineResult") -> Optional[str]:
    """Advertised subnet of a machine, or None before it has an address."""
    if not machine.private_ip:
        return None
    return advertised_subnet(machine.private_ip)
