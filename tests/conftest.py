"""Shared test fixtures."""

from __future__ import annotations

from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from lagoon_cli.config.manager import ConfigManager
from lagoon_cli.config.models import Profile
from lagoon_cli.models.project import ReferenceOption


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's own Lagoon settings out of the tests."""
    for var in ("LAGOON_API_URL", "LAGOON_API_TOKEN", "LAGOON_PROFILE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def sample_profile() -> Profile:
    """Return a sample profile for testing."""
    return Profile(
        name="test-api",
        url="https://api.lagoon.test/graphql",
        token="testtoken",
    )


@pytest.fixture
def make_console():
    """Return a factory for (console, buffer) pairs that record output."""

    def factory() -> tuple[Console, StringIO]:
        buf = StringIO()
        return Console(file=buf, force_terminal=False, width=120), buf

    return factory


@pytest.fixture
def stdin(monkeypatch: pytest.MonkeyPatch):
    """Feed lines to ``input()`` by replacing stdin."""

    def feed(*lines: str) -> None:
        monkeypatch.setattr("sys.stdin", StringIO("".join(f"{line}\n" for line in lines)))

    return feed


@pytest.fixture
def one_customer() -> list[dict]:
    return [{"value": "c1", "name": "Acme"}]


@pytest.fixture
def two_openshifts() -> list[dict]:
    return [
        {"value": "o1", "name": "amazeeio-east"},
        {"value": "o2", "name": "amazeeio-west"},
    ]


@pytest.fixture
def option_lists(one_customer, two_openshifts) -> dict[str, list[ReferenceOption]]:
    return {
        "customers": [ReferenceOption(**c) for c in one_customer],
        "openshifts": [ReferenceOption(**o) for o in two_openshifts],
    }


@pytest.fixture
def created_project() -> dict:
    """Sample ``addProject`` response payload."""
    return {
        "id": 18,
        "name": "demo",
        "customer": {"name": "Acme"},
        "git_url": "https://github.com/acme/demo.git",
        "active_systems_deploy": "lagoon_openshiftBuildDeploy",
        "active_systems_remove": "lagoon_openshiftRemove",
        "branches": "true",
        "pullrequests": None,
        "openshift": {"name": "amazeeio-west"},
        "created": "2026-10-17 12:00:00",
    }
