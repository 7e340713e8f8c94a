"""Main CLI interface."""

import asyncio
from pathlib import Path
from typing import Optional
import typer
from rich.console import Console
from rich.markup import escape

from .. import __version__
from ..errors import MissingArgumentError, PinError
from ..log import stderr_logging
from ..models.config import PinataConfig
from ..upload.pinata import upload_async

USAGE = "Usage: pinata-pin <path/to/file>"

err_console = Console(stderr=True, soft_wrap=True, emoji=False)
app = typer.Typer(
    help="Upload a file to Pinata and print its IPFS CID.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.command()
def pin(
    file_path: Optional[Path] = typer.Argument(
        None,
        help="Path to the file to upload",
        show_default=False
    ),
    env_file: Optional[Path] = typer.Option(
        None,
        "--env-file",
        help="Env file holding PINATA_JWT (default: ./.env, then ./config/.env)"
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        help="Logging level"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit"
    )
):
    """Upload FILE_PATH to Pinata and print the resulting CID."""
    try:
        with stderr_logging(log_level):
            if file_path is None:
                raise MissingArgumentError()

            config = PinataConfig.from_env(env_file)
            cid = asyncio.run(upload_async(file_path, config))
    except MissingArgumentError as e:
        _report(e)
        err_console.print(USAGE, markup=False, highlight=False)
        raise typer.Exit(1)
    except PinError as e:
        _report(e)
        raise typer.Exit(1)

    typer.echo(cid)


def _report(error: PinError) -> None:
    """Print a one-line diagnostic to stderr."""
    err_console.print(f"[red]Error:[/red] {escape(str(error))}", highlight=False)


def main() -> None:
    """Main entry point."""
    app()
