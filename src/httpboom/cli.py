"""CLI for inspecting the HTTP responses errors render to."""

import json
import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import get_config
from .constructors import method_not_allowed, unauthorized
from .core import create
from .status import STATUS_CODES, is_client_error, is_server_error, parse_status_code

app = typer.Typer(
    name="httpboom",
    help="""
    [bold]HTTP error inspector[/bold]

    Show the status code, payload and headers an error renders to.

    [cyan]Examples:[/cyan]
      httpboom show 404
      httpboom show 401 --message "Bad token" --scheme Bearer
      httpboom show 405 --allow GET --allow POST
      httpboom codes --client
    """,
    no_args_is_help=True,
)

console = Console()
logger = logging.getLogger(__name__)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """HTTP error inspector."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else get_config().log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.command()
def show(
    status_code: str = typer.Argument(..., help="HTTP status code (400+)"),
    message: Optional[str] = typer.Option(
        None,
        "--message",
        "-m",
        help="Error message",
    ),
    scheme: Optional[str] = typer.Option(
        None,
        "--scheme",
        help="WWW-Authenticate scheme (401 only)",
    ),
    allow: Optional[List[str]] = typer.Option(
        None,
        "--allow",
        help="Allowed method, repeatable (405 only)",
    ),
):
    """Print the rendered output of an error as JSON."""
    try:
        code = parse_status_code(status_code)
        if scheme and code != 401:
            raise ValueError("--scheme is only valid with status 401")
        if allow and code != 405:
            raise ValueError("--allow is only valid with status 405")

        if scheme:
            error = unauthorized(message, scheme)
        elif allow:
            error = method_not_allowed(message, None, allow)
        else:
            error = create(code, message)
    except ValueError as e:
        console.print(f"[bold red]✗ Error:[/bold red] {str(e)}")
        raise typer.Exit(code=1)

    logger.debug("Rendering %s", error.output)  # type: ignore[attr-defined]
    print(json.dumps(error.output.to_dict(), indent=2))  # type: ignore[attr-defined]


@app.command()
def codes(
    client: bool = typer.Option(False, "--client", help="Only 4xx codes"),
    server: bool = typer.Option(False, "--server", help="Only 5xx codes"),
):
    """List the known error status codes."""
    table = Table(title="HTTP error status codes")
    table.add_column("Code", justify="right", style="cyan")
    table.add_column("Reason")
    table.add_column("Class")

    for code, phrase in sorted(STATUS_CODES.items()):
        if is_client_error(code):
            kind = "client"
        elif is_server_error(code):
            kind = "server"
        else:
            continue

        if client and kind != "client":
            continue
        if server and kind != "server":
            continue
        table.add_row(str(code), phrase, kind)

    console.print(table)


@app.command()
def version():
    """Show version information."""
    console.print(f"httpboom version {__version__}")


if __name__ == "__main__":
    app()
