"""Shared helpers for CLI commands — client factory and options."""

from __future__ import annotations

from typing import Annotated

import typer

from lagoon_cli.client.graphql import GraphQLClient
from lagoon_cli.config.manager import ConfigManager

# Shared Typer option type aliases
ProfileOpt = Annotated[
    str | None,
    typer.Option("--profile", "-p", help="Config profile"),
]
UrlOpt = Annotated[
    str | None,
    typer.Option("--url", help="GraphQL endpoint override"),
]
TokenOpt = Annotated[
    str | None,
    typer.Option("--token", help="API token override"),
]
FormatOpt = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format: table, json, yaml, csv"),
]


def make_client(
    profile: str | None,
    url: str | None,
    token: str | None,
) -> GraphQLClient:
    """Create a GraphQLClient from CLI options, env vars, or config profile."""
    mgr = ConfigManager()
    resolved = mgr.resolve_profile(profile_name=profile, url=url, token=token)
    return GraphQLClient(resolved)
