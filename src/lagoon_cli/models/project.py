"""Project-related data models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

ID = int | str


class ReferenceOption(BaseModel):
    """A selectable choice, e.g. a customer or an openshift."""

    value: ID
    name: str


class ProjectInput(BaseModel):
    """Arguments of the ``addProject`` mutation."""

    model_config = ConfigDict(frozen=True)

    customer: ID
    name: str
    git_url: str
    openshift: ID
    active_systems_deploy: str
    active_systems_remove: str
    branches: str
    pullrequests: str | None = None
    production_environment: str | None = None


class NamedRef(BaseModel):
    """A nested object of which only the name is selected."""

    name: str | None = None


class CreatedProject(BaseModel):
    """The project echoed back by ``addProject``."""

    id: ID | None = None
    name: str | None = None
    customer: NamedRef | None = None
    git_url: str | None = None
    active_systems_deploy: str | None = None
    active_systems_remove: str | None = None
    branches: str | bool | None = None
    pullrequests: str | bool | None = None
    openshift: NamedRef | None = None
    created: str | None = None
