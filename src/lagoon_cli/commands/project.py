"""Project commands."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any, Protocol

import pydantic
import typer
from pydantic import AnyUrl, TypeAdapter
from rich.console import Console
from rich.markup import escape

from lagoon_cli.client.errors import err_console, error_handler, print_graphql_errors
from lagoon_cli.commands._common import (
    FormatOpt,
    ProfileOpt,
    TokenOpt,
    UrlOpt,
    make_client,
)
from lagoon_cli.models.graphql import GraphQLResult
from lagoon_cli.models.project import CreatedProject, ProjectInput, ReferenceOption
from lagoon_cli.output.formatter import output
from lagoon_cli.output.tables import kv_table
from lagoon_cli.utils.prompts import Answers, Question, ask

app = typer.Typer(name="project", help="Manage Lagoon projects.")
console = Console()

REFERENCE_QUERY = """
query AllCustomersAndOpenshiftsForProjectCreate {
  allCustomers {
    value: id
    name
  }
  allOpenshifts {
    value: id
    name
  }
}
"""

ADD_PROJECT_MUTATION = """
mutation AddProject($input: ProjectInput!) {
  addProject(input: $input) {
    id
    name
    customer {
      name
    }
    git_url
    active_systems_deploy
    active_systems_remove
    branches
    pullrequests
    openshift {
      name
    }
    created
  }
}
"""

_ABSOLUTE_URL = TypeAdapter(AnyUrl)
_GIT_URL = re.compile(r"(github\.com|bitbucket\.org|gitlab\.com|\.git$)")


class QueryRunner(Protocol):
    def run_query(
        self, query: str, variables: dict[str, Any] | None = None,
    ) -> GraphQLResult: ...


def _raw_host(value: str, scheme: str) -> str | None:
    """Host exactly as typed after ``scheme://``, or ``None`` if it is not there."""
    prefix = f"{scheme}://"
    if not value.lower().startswith(prefix):
        return None
    authority = re.split(r"[/?#]", value[len(prefix):], maxsplit=1)[0]
    host = authority.rpartition("@")[2]
    if host.startswith("["):
        return host.partition("]")[0] + "]"
    return host.partition(":")[0]


def _is_absolute_url(value: str) -> bool:
    if not value or any(ch.isspace() for ch in value):
        return False
    try:
        url = _ABSOLUTE_URL.validate_python(value)
    except pydantic.ValidationError:
        return False
    # AnyUrl repairs "https:host/x" and "host\x"; the submitted text must
    # itself start with scheme://host.
    if not url.host:
        return False
    raw_host = _raw_host(value, url.scheme)
    return raw_host is not None and raw_host.lower() == url.host.lower()


def validate_project_name(value: str) -> bool | str:
    return bool(value) or "Please enter a project name."


def validate_git_url(value: str) -> bool | str:
    """Accept absolute URLs on a known git host or ending in ``.git``."""
    if _is_absolute_url(value) and _GIT_URL.search(value):
        return True
    return "Please enter a valid Git URL."


def auto_select(options: Sequence[ReferenceOption]) -> ReferenceOption | None:
    """Return the only option when there is exactly one, else ``None``."""
    if len(options) == 1:
        return options[0]
    return None


def _single_option_shortcut(
    field: str, label: str, options: Sequence[ReferenceOption], clog: Console,
):
    def when(answers: Answers) -> bool:
        only = auto_select(options)
        if only is None:
            return True
        clog.print(f'[blue]![/] Using only authorized {label} "{escape(only.name)}"')
        answers[field] = only.value
        return False

    return when


def project_questions(
    customers: Sequence[ReferenceOption],
    openshifts: Sequence[ReferenceOption],
    clog: Console,
) -> list[Question]:
    """Questions for a new project, in the order they are asked."""
    return [
        Question(
            type="list",
            name="customer",
            message="Customer",
            choices=customers,
            when=_single_option_shortcut("customer", "customer", customers, clog),
        ),
        Question(
            type="input",
            name="name",
            message="Project name",
            validate=validate_project_name,
        ),
        Question(
            type="input",
            name="git_url",
            message="Git URL",
            validate=validate_git_url,
        ),
        Question(
            type="list",
            name="openshift",
            message="Openshift",
            choices=openshifts,
            when=_single_option_shortcut("openshift", "openshift", openshifts, clog),
        ),
        Question(
            type="input",
            name="active_systems_deploy",
            message='Active system for task "deploy"',
            default="lagoon_openshiftBuildDeploy",
        ),
        Question(
            type="input",
            name="active_systems_remove",
            message='Active system for task "remove"',
            default="lagoon_openshiftRemove",
        ),
        Question(
            type="input",
            name="branches",
            message="Deploy branches",
            default="true",
        ),
        Question(
            type="input",
            name="pullrequests",
            message="Pull requests",
            default=None,
        ),
        Question(
            type="input",
            name="production_environment",
            message="Production environment",
            default=None,
        ),
    ]


def reference_options(data: dict[str, Any] | None, key: str) -> list[ReferenceOption]:
    """Options listed under *key* in a query result; missing means none."""
    items = (data or {}).get(key) or []
    return [ReferenceOption.model_validate(item) for item in items]


def project_rows(project: CreatedProject) -> list[tuple[str, Any]]:
    """Label/value rows describing a created project."""
    return [
        ("Project Name", project.name),
        ("Customer", project.customer.name if project.customer else None),
        ("Git URL", project.git_url),
        ("Active Systems Deploy", project.active_systems_deploy),
        ("Active Systems Remove", project.active_systems_remove),
        ("Branches", _stringify(project.branches)),
        ("Pull Requests", _stringify(project.pullrequests)),
        ("Openshift", project.openshift.name if project.openshift else None),
        ("Created", project.created),
    ]


def _stringify(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def create_project(
    client: QueryRunner,
    *,
    clog: Console,
    cerr: Console,
    fmt: str = "table",
) -> int:
    """Interactively create a project and return the exit code."""
    result = client.run_query(REFERENCE_QUERY)
    if result.errors is not None:
        return print_graphql_errors(cerr, *result.errors)

    customers = reference_options(result.data, "allCustomers")
    openshifts = reference_options(result.data, "allOpenshifts")

    answers = ask(project_questions(customers, openshifts, clog), clog)
    project_input = ProjectInput.model_validate(answers)

    result = client.run_query(
        ADD_PROJECT_MUTATION, {"input": project_input.model_dump()},
    )
    if result.errors is not None:
        return print_graphql_errors(cerr, *result.errors)

    project = CreatedProject.model_validate((result.data or {}).get("addProject") or {})
    clog.print(f'[green]Project "{escape(str(project.name))}" created successfully:[/]')
    if fmt == "table":
        clog.print(kv_table(project_rows(project)))
    else:
        output(project, fmt, console=clog)
    return 0


@app.command()
@error_handler
def create(
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Create new project."""
    with make_client(profile, url, token) as client:
        code = create_project(client, clog=console, cerr=err_console, fmt=fmt)
    if code:
        raise typer.Exit(code)
