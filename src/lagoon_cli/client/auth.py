"""Authentication for the Lagoon API."""

from __future__ import annotations

from collections.abc import Generator

import httpx

from lagoon_cli.config.models import Profile


class BearerTokenAuth(httpx.Auth):
    """Authenticate with a Lagoon token (Authorization: Bearer header)."""

    def __init__(self, token: str) -> None:
        self.token = token

    def auth_flow(
        self, request: httpx.Request,
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self.token}"
        yield request


def resolve_auth(profile: Profile) -> httpx.Auth | None:
    """Resolve authentication from a profile."""
    if profile.token:
        return BearerTokenAuth(profile.token)
    return None
