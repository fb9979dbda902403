"""
Credential Store

Tailscale API key resolution across two tiers: an environment variable that
always wins and is never persisted, then a JSON document under the config
directory. A missing, unreadable or malformed document reads as "no key";
deciding what that means is left to the caller.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from pydantic import ValidationError

from ambit.config import AmbitConfig
from ambit.constants import (
    CREDENTIALS_FILENAME,
    CREDENTIALS_FILE_PERMISSIONS,
    ENV_TAILSCALE_API_KEY,
    TAILSCALE_API_KEY_PREFIX,
)
from ambit.logger import OperationLogger
from ambit.models.credentials import StoredCredentials


class ConfigCredentialStore:
    """File tier: <config_dir>/credentials.json."""

    def __init__(self, config_dir: Path, logger: Optional[OperationLogger] = None):
        self.config_dir = config_dir
        self.path = config_dir / CREDENTIALS_FILENAME
        self.logger = logger

    def get(self) -> Optional[str]:
        """
        Read the persisted API key.

        Returns:
            API key, or None if the file is missing or invalid
        """
        if not self.path.exists():
            return None

        try:
            content = self.path.read_text()
            return StoredCredentials.model_validate_json(content).api_key
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            if self.logger:
                self.logger.debug(f"Ignoring unreadable credentials at {self.path}: {e}")
            return None

    def set(self, key: str) -> None:
        """Persist the API key, overwriting any previous document."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        document = StoredCredentials.for_key(key).to_document()
        self.path.write_text(json.dumps(document, indent=2) + "\n")
        self.path.chmod(CREDENTIALS_FILE_PERMISSIONS)
        if self.logger:
            self.logger.log(f"Saved Tailscale API key to {self.path}")


@dataclass(frozen=True)
class ResolvedKey:
    """An API key and the tier it was read from ('env' or 'file')."""

    key: str
    source: str


class CredentialStore:
    """Environment-over-file resolver for the Tailscale API key."""

    def __init__(
        self,
        file_store: ConfigCredentialStore,
        environ: Mapping[str, str],
        env_var: str = ENV_TAILSCALE_API_KEY,
    ):
        self.file_store = file_store
        self.environ = environ
        self.env_var = env_var

    def resolve(self) -> Optional[ResolvedKey]:
        """Resolve the API key and its tier; the environment takes precedence."""
        env_key = self.environ.get(self.env_var)
        if env_key:
            return ResolvedKey(env_key, "env")
        file_key = self.file_store.get()
        if file_key:
            return ResolvedKey(file_key, "file")
        return None

    def get(self) -> Optional[str]:
        """Resolve the API key; the environment takes precedence."""
        resolved = self.resolve()
        return resolved.key if resolved else None

    def set(self, key: str) -> None:
        """Persist the API key to the file tier."""
        self.file_store.set(key)

    @property
    def source(self) -> Optional[str]:
        """Where get() would read the key from: 'env', 'file' or None."""
        resolved = self.resolve()
        return resolved.source if resolved else None


def get_credential_store(
    config: AmbitConfig, logger: Optional[OperationLogger] = None
) -> CredentialStore:
    """Build the default environment-over-file credential store."""
    return CredentialStore(
        ConfigCredentialStore(config.config_dir, logger=logger),
        environ=config.environ,
        env_var=config.api_key_env,
    )


def looks_like_api_key(key: str) -> bool:
    """Check for the Tailscale API key prefix (auth keys are rejected)."""
    return key.startswith(TAILSCALE_API_KEY_PREFIX)
