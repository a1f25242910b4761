"""GraphQL response envelope models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class GraphQLError(BaseModel):
    """A single entry of a GraphQL ``errors`` array."""

    message: str
    locations: list[dict[str, Any]] | None = None
    path: list[str | int] | None = None
    extensions: dict[str, Any] | None = None


class GraphQLResult(BaseModel):
    """Normalised GraphQL response.

    ``errors`` is ``None`` when the request succeeded. Transport failures are
    folded into ``errors`` by :meth:`GraphQLClient.run_query`, so callers only
    ever need to check this one field.
    """

    data: dict[str, Any] | None = None
    errors: list[GraphQLError] | None = None
