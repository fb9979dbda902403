"""
Shared fixtures for ambit tests.
"""

from pathlib import Path
from typing import NoReturn

import pytest

from ambit.config import AmbitConfig
from ambit.credentials import ConfigCredentialStore, CredentialStore


class Died(Exception):
    """Raised by RecordingOutput.die in place of exiting."""


class RecordingOutput:
    """Reporter that records err/die calls."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.deaths: list[str] = []

    def err(self, message: str) -> "RecordingOutput":
        self.errors.append(message)
        return self

    def die(self, message: str) -> NoReturn:
        self.deaths.append(message)
        raise Died(message)


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    return tmp_path / "config" / "ambit"


@pytest.fixture
def environ() -> dict[str, str]:
    return {}


@pytest.fixture
def config(config_dir: Path, environ: dict[str, str]) -> AmbitConfig:
    return AmbitConfig(config_dir=config_dir, environ=environ)


@pytest.fixture
def file_store(config_dir: Path) -> ConfigCredentialStore:
    return ConfigCredentialStore(config_dir)


@pytest.fixture
def store(file_store: ConfigCredentialStore, environ: dict[str, str]) -> CredentialStore:
    return CredentialStore(file_store, environ=environ)


@pytest.fixture
def out() -> RecordingOutput:
    return RecordingOutput()
