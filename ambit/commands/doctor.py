"""ambit CLI - Doctor command"""

import rich_click as click

from ambit.base import BaseCommand
from ambit.credentials import get_credential_store
from ambit.prerequisites import check_dependencies


class DoctorCommand(BaseCommand):
    """Verify local prerequisites for provisioning routers."""

    name = "doctor"

    def execute(self) -> None:
        store = get_credential_store(self.config, logger=self.logger)
        deps = check_dependencies(self.out, store)

        self.out.ok("Flyctl Installed")
        self.out.ok(f"Tailscale API Key Found ({deps.tailscale_key_source})")
        self.out.done(checks=["flyctl", "tailscale-api-key"])


@click.command()
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.option("--verbose", "-v", is_flag=True, help="Show log messages")
def doctor(json_output: bool, verbose: bool):
    """
    Check prerequisites

    Checks:
    - flyctl installation
    - Tailscale API key (TAILSCALE_API_KEY or saved credentials)
    """
    cmd = DoctorCommand(verbose=verbose, json_output=json_output)
    cmd.run()
