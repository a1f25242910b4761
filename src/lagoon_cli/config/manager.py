"""Configuration manager: the TOML profile store and connection resolution."""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import pydantic
import tomli_w

from lagoon_cli.client.errors import ConfigurationError
from lagoon_cli.config.constants import (
    CONFIG_FILE,
    ENV_API_TOKEN,
    ENV_API_URL,
    ENV_PROFILE,
)
from lagoon_cli.config.models import CLIConfig, Profile, graphql_endpoint

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib


def _write_private(path: Path, text: str) -> None:
    """Replace *path* with *text*, readable by the owner only."""
    path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
    temp = path.with_suffix(".tmp")
    fd = os.open(temp, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as fh:
        fh.write(text)
    temp.replace(path)


class ConfigManager:
    """Stores Lagoon API profiles and resolves the connection a command uses."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._config: CLIConfig | None = None

    @property
    def config(self) -> CLIConfig:
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> CLIConfig:
        if not self.config_path.exists():
            return CLIConfig()
        try:
            data = tomllib.loads(self.config_path.read_text(encoding="utf-8"))
            return CLIConfig.from_file_data(data)
        except (tomllib.TOMLDecodeError, pydantic.ValidationError) as exc:
            raise ConfigurationError(
                f"Invalid config file {self.config_path}: {exc}"
            ) from exc

    def save(self) -> None:
        _write_private(self.config_path, tomli_w.dumps(self.config.to_file_data()))

    @contextmanager
    def _editing(self) -> Iterator[CLIConfig]:
        yield self.config
        self.save()

    def add_profile(self, profile: Profile) -> None:
        with self._editing() as config:
            config.profiles[profile.name] = profile
            config.default_profile = config.default_profile or profile.name

    def remove_profile(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        with self._editing() as config:
            del config.profiles[name]
            if config.default_profile == name:
                config.default_profile = next(iter(config.profiles), None)
        return True

    def set_default(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        with self._editing() as config:
            config.default_profile = name
        return True

    def get_profile(self, name: str | None = None) -> Profile | None:
        key = name or self.config.default_profile
        return self.config.profiles.get(key) if key else None

    def resolve_profile(
        self,
        profile_name: str | None = None,
        url: str | None = None,
        token: str | None = None,
    ) -> Profile:
        """Resolve the endpoint and bearer token for one command.

        Each setting comes from the flag, then the ``LAGOON_*`` environment,
        then the selected profile (named, or the default). A stored token is
        only sent to its own profile's endpoint: overriding the URL with a
        different endpoint requires a token for it as well.
        """
        name = profile_name or os.environ.get(ENV_PROFILE)
        stored = self.get_profile(name)
        if name and stored is None:
            raise ConfigurationError(
                f"Profile '{name}' not found in {self.config_path}."
            )

        fields = stored.model_dump(exclude={"name"}) if stored else {}
        endpoint = url or os.environ.get(ENV_API_URL)
        if endpoint:
            endpoint = graphql_endpoint(endpoint)
            if stored is None or endpoint != stored.url:
                fields.pop("token", None)
            fields["url"] = endpoint
        if "url" not in fields:
            raise ConfigurationError(
                "No API URL configured. Use 'lagoon-cli config add' or set "
                f"{ENV_API_URL} or pass --url."
            )

        explicit_token = token or os.environ.get(ENV_API_TOKEN)
        if explicit_token:
            fields["token"] = explicit_token
        resolved = Profile(name=stored.name if stored else "cli", **fields)
        if resolved.token is None:
            raise ConfigurationError(
                f"No API token configured for {resolved.url}. Pass --token, set "
                f"{ENV_API_TOKEN} or add one with 'lagoon-cli config add'."
            )
        return resolved
