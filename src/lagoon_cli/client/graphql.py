"""GraphQL HTTP client."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pydantic

from lagoon_cli.client.auth import resolve_auth
from lagoon_cli.client.errors import (
    APIConnectionError,
    APIError,
    AuthenticationError,
    LagoonCLIError,
)
from lagoon_cli.config.constants import DEFAULT_MAX_RETRIES
from lagoon_cli.config.models import Profile
from lagoon_cli.models.graphql import GraphQLError, GraphQLResult


class GraphQLClient:
    """Synchronous client that POSTs GraphQL documents to one endpoint."""

    def __init__(self, profile: Profile) -> None:
        self.profile = profile
        self.url = profile.url
        auth = resolve_auth(profile)
        if not profile.verify_ssl:
            import sys

            print("Warning: TLS certificate verification is disabled", file=sys.stderr)
        transport = httpx.HTTPTransport(retries=DEFAULT_MAX_RETRIES)
        self._client = httpx.Client(
            auth=auth,
            verify=profile.verify_ssl,
            timeout=profile.timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> GraphQLClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _handle_response(self, response: httpx.Response) -> dict[str, Any]:
        status = response.status_code
        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            payload = None
        # GraphQL servers may report errors with a 4xx status and a normal body
        if isinstance(payload, dict) and "errors" in payload:
            return payload
        if status in (401, 403):
            raise AuthenticationError("Authentication failed. Check your API token.")
        if not response.is_success:
            detail = response.text
            if isinstance(payload, dict):
                detail = payload.get("message", detail)
            raise APIError(status, detail)
        if not isinstance(payload, dict):
            raise APIError(status, "Response is not a GraphQL JSON object")
        return payload

    def execute(
        self, query: str, variables: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send *query* and return the decoded response body.

        Raises :class:`LagoonCLIError` subclasses on transport failures.
        """
        body: dict[str, Any] = {"query": query}
        if variables is not None:
            body["variables"] = variables
        try:
            response = self._client.post(self.url, json=body)
        except httpx.ConnectError as exc:
            raise APIConnectionError(
                f"Cannot connect to API at {self.url}: {exc}"
            ) from exc
        except httpx.TimeoutException as exc:
            raise APIConnectionError(
                f"Request to {self.url} timed out: {exc}"
            ) from exc
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise APIConnectionError(
                f"Invalid API URL {self.url}: {exc}"
            ) from exc
        except httpx.TransportError as exc:
            raise APIConnectionError(
                f"Request to {self.url} failed: {exc}"
            ) from exc
        return self._handle_response(response)

    def run_query(
        self, query: str, variables: dict[str, Any] | None = None,
    ) -> GraphQLResult:
        """Send *query* and return a :class:`GraphQLResult`.

        Never raises for transport problems: they are reported as a
        single-entry ``errors`` list instead.
        """
        try:
            payload = self.execute(query, variables)
            return GraphQLResult.model_validate(payload)
        except LagoonCLIError as exc:
            return GraphQLResult(errors=[GraphQLError(message=str(exc))])
        except pydantic.ValidationError as exc:
            return GraphQLResult(
                errors=[GraphQLError(message=f"Malformed GraphQL response: {exc}")]
            )
