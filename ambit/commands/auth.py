"""ambit CLI - Tailscale credential commands"""

import rich_click as click

from ambit.base import BaseCommand
from ambit.credentials import get_credential_store, looks_like_api_key


class SetKeyCommand(BaseCommand):
    """Persist the Tailscale API key to the config directory."""

    name = "auth-set-key"

    def execute(self, key: str) -> None:
        key = key.strip()
        if not key:
            self.out.die("API key must not be empty")
        if not looks_like_api_key(key):
            self.out.warn("Key does not start with 'tskey-api-'; is this an auth key?")

        store = get_credential_store(self.config, logger=self.logger)
        store.set(key)
        if self.config.environ.get(self.config.api_key_env):
            self.out.warn(
                f"{self.config.api_key_env} is set and overrides the saved key"
            )

        self.out.ok(f"Saved to {self.config.credentials_path}")
        self.out.done(path=str(self.config.credentials_path))


class ShowKeyCommand(BaseCommand):
    """Show where the Tailscale API key resolves from."""

    name = "auth-show"

    def execute(self) -> None:
        store = get_credential_store(self.config, logger=self.logger)
        resolved = store.resolve()
        if not resolved:
            self.out.die("No Tailscale API key configured")

        key = resolved.key
        masked = f"{key[:10]}…{key[-4:]}" if len(key) > 14 else "****"
        self.out.ok(f"Tailscale API key: {masked} (from {resolved.source})")
        self.out.done(source=resolved.source, key=masked)


@click.group()
def auth():
    """Manage the Tailscale API key"""
    pass


@auth.command("set-key")
@click.argument("key")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def set_key(key: str, json_output: bool):
    """Save a Tailscale API key (tskey-api-...)"""
    SetKeyCommand(json_output=json_output).run(key=key)


@auth.command("show")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def show(json_output: bool):
    """Show the resolved Tailscale API key (masked)"""
    ShowKeyCommand(json_output=json_output).run()
