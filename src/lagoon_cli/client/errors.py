"""Typed exceptions, error handling decorator, and GraphQL error printing."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from lagoon_cli.models.graphql import GraphQLError

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class LagoonCLIError(Exception):
    """Base exception for lagoon-cli."""

    exit_code: int = 1


class APIConnectionError(LagoonCLIError):
    """Cannot reach the API endpoint."""

    exit_code = 2


class AuthenticationError(LagoonCLIError):
    """Authentication failed (401/403)."""

    exit_code = 3


class ConfigurationError(LagoonCLIError):
    """Missing or invalid CLI configuration."""

    exit_code = 4


class PromptError(LagoonCLIError):
    """An interactive question cannot be answered."""

    exit_code = 5


class APIError(LagoonCLIError):
    """Unexpected HTTP response from the API."""

    def __init__(self, status_code: int, detail: str = "") -> None:
        self.status_code = status_code
        super().__init__(f"API returned {status_code}: {detail}")


def print_graphql_errors(cerr: Console, *errors: GraphQLError) -> int:
    """Print GraphQL errors to *cerr* and return the exit code to use."""
    cerr.print("[red]Oops! The Lagoon API returned an error:[/]")
    for error in errors:
        cerr.print(f"[red]{escape(error.message)}[/]")
    return 1


def error_handler(func: F) -> F:
    """Decorator that catches LagoonCLIError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except LagoonCLIError as exc:
            err_console.print(f"[bold red]Error:[/] {escape(str(exc))}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {escape(str(exc))}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
