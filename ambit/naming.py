"""
Naming Authority

Deterministic router/workload names and Tailscale tags derived from a Fly
network and a random router id. Every router name produced here can be split
back into its suffix with router_suffix() for the same network.
"""

import secrets

from ambit.constants import (
    NAME_SEPARATOR,
    ROUTER_APP_PREFIX,
    ROUTER_ID_ALPHABET,
    ROUTER_ID_LENGTH,
    ROUTER_TAG_PREFIX,
)
from ambit.exceptions import ProtectedAppError, RouterNameError


def router_prefix(network: str) -> str:
    """Common prefix of every router app name on a network."""
    return f"{ROUTER_APP_PREFIX}{network}{NAME_SEPARATOR}"


def router_app_name(network: str, suffix: str) -> str:
    """
    Build the Fly app name for a router.

    Args:
        network: Fly custom private network name
        suffix: Random router id

    Returns:
        App name, e.g. "ambit-lab-x7k2p9"
    """
    return f"{router_prefix(network)}{suffix}"


def router_suffix(app_name: str, network: str) -> str:
    """
    Recover the router id from a router app name.

    Only names built by router_app_name() for the same network are
    guaranteed to round-trip. A network that contains the separator can
    shadow a shorter one: "ambit-a-b-x" parsed against network "a" yields
    "b-x" rather than an error.

    Args:
        app_name: Router app name
        network: Network the name was built for

    Returns:
        Router id

    Raises:
        RouterNameError: If app_name does not carry the router prefix for
            network, or nothing follows it
    """
    prefix = router_prefix(network)
    if not app_name.startswith(prefix) or len(app_name) == len(prefix):
        raise RouterNameError(app_name, prefix)
    return app_name[len(prefix):]


def workload_app_name(name: str, router_id: str) -> str:
    """Workload app name scoped to a router, e.g. "browser-x7k2p9"."""
    return f"{name}{NAME_SEPARATOR}{router_id}"


def router_tag(network: str) -> str:
    """Tailscale ACL tag shared by the routers of a network."""
    return f"{ROUTER_TAG_PREFIX}{network}"


def random_router_id(length: int = ROUTER_ID_LENGTH) -> str:
    """Generate a router id from lowercase letters and digits."""
    return "".join(secrets.choice(ROUTER_ID_ALPHABET) for _ in range(length))


def is_router_app(app_name: str) -> bool:
    """Check if an app name belongs to ambit router infrastructure."""
    return app_name.startswith(ROUTER_APP_PREFIX)


def assert_not_router(app_name: str) -> None:
    """
    Refuse workload operations on router apps.

    Raises:
        ProtectedAppError: If app_name carries the router prefix
    """
    if is_router_app(app_name):
        raise ProtectedAppError(app_name)
