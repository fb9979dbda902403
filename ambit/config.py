"""
Configuration

Explicit configuration root for the ambit core. Built once at startup and
passed to every component that touches the filesystem or the environment.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from ambit.constants import (
    CREDENTIALS_FILENAME,
    DEFAULT_CONFIG_DIR,
    ENV_CONFIG_DIR,
    ENV_TAILSCALE_API_KEY,
    LOGS_DIRNAME,
)


@dataclass(frozen=True)
class AmbitConfig:
    """Configuration root: where state lives and which environment is visible."""

    config_dir: Path
    environ: Mapping[str, str] = field(default_factory=dict)
    api_key_env: str = ENV_TAILSCALE_API_KEY

    @property
    def credentials_path(self) -> Path:
        """Path of the persisted Tailscale credentials document."""
        return self.config_dir / CREDENTIALS_FILENAME

    @property
    def logs_dir(self) -> Path:
        """Root directory for operation logs."""
        return self.config_dir / LOGS_DIRNAME

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AmbitConfig":
        """
        Build configuration from an environment mapping.

        Args:
            environ: Environment view (defaults to a snapshot of os.environ)

        Returns:
            AmbitConfig rooted at $AMBIT_CONFIG_DIR or ~/.config/ambit
        """
        if environ is None:
            environ = dict(os.environ)

        config_dir = environ.get(ENV_CONFIG_DIR) or DEFAULT_CONFIG_DIR
        return cls(config_dir=Path(config_dir).expanduser(), environ=environ)
