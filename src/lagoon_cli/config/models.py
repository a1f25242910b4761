"""Pydantic models for CLI configuration."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from lagoon_cli.config.constants import DEFAULT_TIMEOUT, GRAPHQL_PATH


def graphql_endpoint(url: str) -> str:
    """Normalise an API URL to the GraphQL endpoint it refers to.

    A bare host such as ``https://api.lagoon.example.com`` means the
    ``/graphql`` endpoint Lagoon serves its API on; an explicit path is kept.
    """
    endpoint = url.strip().rstrip("/")
    scheme, sep, rest = endpoint.partition("://")
    if not sep or scheme.lower() not in ("http", "https"):
        raise ValueError("API URL must start with http:// or https://")
    host, slash, _ = rest.partition("/")
    if not host:
        raise ValueError(f"API URL '{url}' has no host")
    if not slash:
        endpoint += GRAPHQL_PATH
    return endpoint


def bearer_token(token: str) -> str | None:
    """Strip whitespace and a pasted ``Bearer`` prefix from a Lagoon token."""
    value = token.strip()
    if value[:7].lower() == "bearer ":
        value = value[7:].strip()
    if any(ch.isspace() for ch in value):
        raise ValueError("API token must not contain whitespace")
    return value or None


class Profile(BaseModel):
    """A named Lagoon API connection."""

    name: str
    url: str = Field(description="GraphQL endpoint, e.g. https://api.lagoon.example.com/graphql")
    token: str | None = Field(default=None, description="Lagoon bearer token")
    verify_ssl: bool = True
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, le=600)

    @field_validator("url")
    @classmethod
    def _endpoint(cls, v: str) -> str:
        return graphql_endpoint(v)

    @field_validator("token")
    @classmethod
    def _token(cls, v: str | None) -> str | None:
        return None if v is None else bearer_token(v)

    def redacted(self) -> dict[str, Any]:
        """Profile fields for display, with the token shortened."""
        data = self.model_dump(exclude_none=True)
        if self.token:
            data["token"] = self.token[:8] + "..." if len(self.token) > 8 else "***"
        return data


class CLIConfig(BaseModel):
    """Contents of the config file."""

    default_profile: str | None = None
    default_format: str = "table"
    profiles: dict[str, Profile] = Field(default_factory=dict)

    @classmethod
    def from_file_data(cls, data: dict[str, Any]) -> CLIConfig:
        # Profile names are the TOML table keys, not a field inside them
        profiles = {
            name: {**fields, "name": name}
            for name, fields in data.get("profiles", {}).items()
        }
        return cls.model_validate({**data, "profiles": profiles})

    def to_file_data(self) -> dict[str, Any]:
        data = self.model_dump(exclude_defaults=True, exclude={"profiles"})
        if self.profiles:
            data["profiles"] = {
                name: profile.model_dump(exclude={"name"}, exclude_defaults=True)
                for name, profile in self.profiles.items()
            }
        return data
