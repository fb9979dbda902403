"""
Tests for the prerequisite gate.
"""

import pytest

from ambit.credentials import CredentialStore
from ambit.models.results import PrerequisiteResult
from ambit.prerequisites import (
    Dependencies,
    Prerequisite,
    check_dependencies,
    run_prerequisites,
)

from tests.conftest import Died, RecordingOutput

FLYCTL_MESSAGE = "Flyctl Not Found. Install from https://fly.io/docs/flyctl/install/"
KEY_MESSAGE = "Tailscale API Key Required. Run 'ambit create' or set TAILSCALE_API_KEY"


def fly_installed(name: str) -> bool:
    return name == "fly"


def nothing_installed(name: str) -> bool:
    return False


class TestCheckDependencies:
    def test_both_missing(self, out: RecordingOutput, store: CredentialStore) -> None:
        with pytest.raises(Died):
            check_dependencies(out, store, command_exists=nothing_installed)

        assert out.errors == [FLYCTL_MESSAGE, KEY_MESSAGE]
        assert out.deaths == ["Missing Prerequisites"]

    def test_only_key_missing(self, out: RecordingOutput, store: CredentialStore) -> None:
        with pytest.raises(Died):
            check_dependencies(out, store, command_exists=fly_installed)

        assert out.errors == []
        assert out.deaths == [KEY_MESSAGE]

    def test_only_flyctl_missing(
        self, out: RecordingOutput, store: CredentialStore
    ) -> None:
        store.set("tskey-api-abc")
        with pytest.raises(Died):
            check_dependencies(out, store, command_exists=nothing_installed)

        assert out.errors == []
        assert out.deaths == [FLYCTL_MESSAGE]

    def test_all_present_returns_key(
        self, out: RecordingOutput, store: CredentialStore
    ) -> None:
        store.set("tskey-api-abc")
        deps = check_dependencies(out, store, command_exists=fly_installed)

        assert deps == Dependencies(
            tailscale_key="tskey-api-abc", tailscale_key_source="file"
        )
        assert out.errors == []
        assert out.deaths == []

    def test_env_key_is_returned(
        self, out: RecordingOutput, store: CredentialStore, environ: dict[str, str]
    ) -> None:
        environ["TAILSCALE_API_KEY"] = "tskey-api-env"
        deps = check_dependencies(out, store, command_exists=fly_installed)
        assert deps.tailscale_key == "tskey-api-env"
        assert deps.tailscale_key_source == "env"

    def test_both_checks_run_before_deciding(
        self, out: RecordingOutput, store: CredentialStore
    ) -> None:
        looked_up = []

        def command_exists(name: str) -> bool:
            looked_up.append(name)
            return False

        with pytest.raises(Died):
            check_dependencies(out, store, command_exists=command_exists)
        assert looked_up == ["fly"]
        assert KEY_MESSAGE in out.errors

    def test_extra_prerequisites_join_aggregation(
        self, out: RecordingOutput, store: CredentialStore
    ) -> None:
        store.set("tskey-api-abc")
        extra = Prerequisite(
            "tailscale", lambda: PrerequisiteResult.failed("Tailscale Not Installed")
        )
        with pytest.raises(Died):
            check_dependencies(
                out, store, prerequisites=[extra], command_exists=nothing_installed
            )

        assert out.errors == [FLYCTL_MESSAGE, "Tailscale Not Installed"]
        assert out.deaths == ["Missing Prerequisites"]

    def test_duplicate_name_does_not_hide_failure(
        self, out: RecordingOutput, store: CredentialStore
    ) -> None:
        store.set("tskey-api-abc")
        shadow = Prerequisite("flyctl", lambda: PrerequisiteResult.passed("fly"))
        with pytest.raises(Died):
            check_dependencies(
                out, store, prerequisites=[shadow], command_exists=nothing_installed
            )

        assert out.errors == []
        assert out.deaths == [FLYCTL_MESSAGE]

    def test_key_is_resolved_once(
        self, out: RecordingOutput, store: CredentialStore, monkeypatch
    ) -> None:
        store.set("tskey-api-abc")
        reads = []
        original = store.file_store.get

        def counting_get():
            reads.append(1)
            return original()

        monkeypatch.setattr(store.file_store, "get", counting_get)
        deps = check_dependencies(out, store, command_exists=fly_installed)

        assert deps.tailscale_key_source == "file"
        assert len(reads) == 1


class TestRunPrerequisites:
    def test_report_collects_everything(self) -> None:
        calls = []

        def failing(name: str) -> Prerequisite:
            def check() -> PrerequisiteResult:
                calls.append(name)
                return PrerequisiteResult.failed(f"{name} missing")

            return Prerequisite(name, check)

        report = run_prerequisites([failing("a"), failing("b"), failing("c")])

        assert calls == ["a", "b", "c"]
        assert report.errors == ["a missing", "b missing", "c missing"]
        assert not report.is_valid

    def test_report_values(self) -> None:
        report = run_prerequisites(
            [Prerequisite("key", lambda: PrerequisiteResult.passed("secret"))]
        )
        assert report.is_valid
        assert report.value("key") == "secret"
        assert report.value("missing") is None

    def test_report_keeps_duplicate_names(self) -> None:
        report = run_prerequisites(
            [
                Prerequisite("key", lambda: PrerequisiteResult.failed("no key")),
                Prerequisite("key", lambda: PrerequisiteResult.passed("secret")),
            ]
        )
        assert report.errors == ["no key"]
        assert not report.is_valid
        assert report.value("key") == "secret"
