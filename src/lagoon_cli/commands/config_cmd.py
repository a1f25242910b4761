"""Config commands — manage API profiles."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.prompt import Confirm, Prompt

from lagoon_cli.client.errors import err_console, error_handler, print_graphql_errors
from lagoon_cli.config.manager import ConfigManager
from lagoon_cli.config.models import Profile
from lagoon_cli.output.formatter import output

app = typer.Typer(name="config", help="Manage API profiles and CLI configuration.")
console = Console()

PING_QUERY = "query { __typename }"


def _get_manager() -> ConfigManager:
    return ConfigManager()


@app.command()
@error_handler
def init() -> None:
    """Interactive setup wizard — create your first API profile."""
    mgr = _get_manager()
    console.print("[bold]Lagoon CLI Setup Wizard[/]\n")

    name = Prompt.ask("Profile name", default="default")
    url = Prompt.ask("GraphQL endpoint (e.g. https://api.lagoon.example.com/graphql)")
    token = Prompt.ask("API token", default=None)
    verify_ssl = Confirm.ask("Verify SSL certificates?", default=True)

    profile = Profile(
        name=name,
        url=url,
        token=token if token else None,
        verify_ssl=verify_ssl,
    )
    mgr.add_profile(profile)
    console.print(f"\n[green]Profile '{name}' saved.[/]")
    console.print(f"Config file: {mgr.config_path}")


@app.command()
@error_handler
def add(
    name: Annotated[str, typer.Argument(help="Profile name")],
    url: Annotated[str, typer.Option("--url", "-u", help="GraphQL endpoint URL")],
    token: Annotated[Optional[str], typer.Option("--token", "-t", help="API token")] = None,
    timeout: Annotated[Optional[float], typer.Option("--timeout", help="Request timeout in seconds")] = None,
    no_verify_ssl: Annotated[bool, typer.Option("--no-verify-ssl", help="Disable SSL verification")] = False,
    set_default: Annotated[bool, typer.Option("--default", help="Set as default profile")] = False,
) -> None:
    """Add an API profile."""
    mgr = _get_manager()
    fields = {"timeout": timeout} if timeout is not None else {}
    profile = Profile(
        name=name,
        url=url,
        token=token,
        verify_ssl=not no_verify_ssl,
        **fields,
    )
    mgr.add_profile(profile)
    if set_default:
        mgr.set_default(name)
    console.print(f"[green]Profile '{name}' added.[/]")


@app.command("list")
@error_handler
def list_profiles(
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """List all configured profiles."""
    mgr = _get_manager()
    profiles = mgr.config.profiles
    if not profiles:
        console.print("[yellow]No profiles configured. Run 'lagoon-cli config init' to get started.[/]")
        return

    default = mgr.config.default_profile
    columns = ["Name", "URL", "Token", "Default"]
    rows = [
        [name, p.url, "yes" if p.token else "no", "*" if name == default else ""]
        for name, p in profiles.items()
    ]
    data = [p.redacted() for p in profiles.values()]

    output(
        {"profiles": data},
        fmt,
        columns=columns,
        rows=rows,
        title="API Profiles",
    )


@app.command()
@error_handler
def show(
    name: Annotated[str, typer.Argument(help="Profile name")],
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """Show profile details."""
    mgr = _get_manager()
    profile = mgr.get_profile(name)
    if not profile:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)

    output(profile.redacted(), fmt, kv=True, title=f"Profile: {name}")


@app.command("set-default")
@error_handler
def set_default(
    name: Annotated[str, typer.Argument(help="Profile name to set as default")],
) -> None:
    """Set the default API profile."""
    mgr = _get_manager()
    if mgr.set_default(name):
        console.print(f"[green]Default profile set to '{name}'.[/]")
    else:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)


@app.command()
@error_handler
def test(
    name: Annotated[Optional[str], typer.Argument(help="Profile name (uses default if omitted)")] = None,
) -> None:
    """Test connectivity to the API."""
    from lagoon_cli.client.graphql import GraphQLClient

    mgr = _get_manager()
    profile = mgr.resolve_profile(profile_name=name)
    console.print(f"Testing connection to [bold]{profile.url}[/]...")

    with GraphQLClient(profile) as client:
        result = client.run_query(PING_QUERY)
    if result.errors is not None:
        raise typer.Exit(print_graphql_errors(err_console, *result.errors))
    console.print("[green]Connected![/]")


@app.command()
@error_handler
def remove(
    name: Annotated[str, typer.Argument(help="Profile name to remove")],
    force: Annotated[bool, typer.Option("--force", "-f", help="Skip confirmation")] = False,
) -> None:
    """Remove an API profile."""
    mgr = _get_manager()
    if not mgr.get_profile(name):
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)

    if not force:
        if not Confirm.ask(f"Remove profile '{name}'?"):
            console.print("Cancelled.")
            return

    mgr.remove_profile(name)
    console.print(f"[green]Profile '{name}' removed.[/]")
