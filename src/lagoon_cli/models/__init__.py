"""Pydantic data models for the Lagoon API."""

from lagoon_cli.models.graphql import GraphQLError, GraphQLResult
from lagoon_cli.models.project import (
    CreatedProject,
    NamedRef,
    ProjectInput,
    ReferenceOption,
)

__all__ = [
    "CreatedProject",
    "GraphQLError",
    "GraphQLResult",
    "NamedRef",
    "ProjectInput",
    "ReferenceOption",
]
