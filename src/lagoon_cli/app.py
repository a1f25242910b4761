"""Root Typer app — global options and command group registration."""

from __future__ import annotations

from typing import Optional

import typer

from lagoon_cli import __version__
from lagoon_cli.commands import config_cmd, project

app = typer.Typer(
    name="lagoon-cli",
    help="CLI tool for the Lagoon GraphQL API.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"lagoon-cli {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
) -> None:
    """Lagoon CLI — manage projects and API profiles."""


# Register command groups
app.add_typer(config_cmd.app, name="config")
app.add_typer(project.app, name="project")


def main() -> None:
    app()
