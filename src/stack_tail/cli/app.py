"""Typer CLI for tailing CloudFormation stacks."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from zoneinfo import ZoneInfo

import typer
from botocore.exceptions import BotoCoreError
from rich.console import Console
from rich.logging import RichHandler

from stack_tail.display import TerminalRenderer, drive
from stack_tail.sources import FetchError
from stack_tail.utils import UnknownTimezoneError, resolve_timezone

from .deps import get_container, load_settings

DEFAULT_LOG_FILE = Path("stack-tail.log")
LOG_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

TIMEZONE_HELP = (
    "Display timestamps adjusted for the provided timezone. See "
    "https://en.wikipedia.org/wiki/List_of_tz_database_time_zones#List"
)

app = typer.Typer(
    help="Tails AWS CloudFormation events for a given stack",
    add_completion=False,
)


def _parse_timezone(value: str | None) -> ZoneInfo | None:
    if value is None:
        return None
    try:
        return resolve_timezone(value)
    except UnknownTimezoneError as exc:
        raise typer.BadParameter(str(exc), param_hint="'--timezone'") from exc


def _build_log_handler(log_file: Path | None, *, interactive: bool) -> logging.Handler:
    """Send logs to a file while the table owns the terminal, else to stderr."""

    if log_file is None and interactive:
        log_file = DEFAULT_LOG_FILE
    if log_file is not None:
        handler = logging.FileHandler(log_file, encoding="utf-8", delay=True)
        handler.setFormatter(logging.Formatter(LOG_FILE_FORMAT))
        return handler
    return RichHandler(console=Console(stderr=True), show_path=False)


def _configure_logging(level: str, handler: logging.Handler) -> None:
    logging.basicConfig(level=level, format="%(message)s", handlers=[handler], force=True)


@app.command()
def tail(
    stack_name: str = typer.Argument(..., help="Name of the CloudFormation stack"),
    resources: bool = typer.Option(
        False, "--resources", "-r", help="Report summarized state for stack resources"
    ),
    timezone: str | None = typer.Option(None, "--timezone", "-t", help=TIMEZONE_HELP),
    follow: bool = typer.Option(
        False,
        "--follow",
        "-f",
        help="Follow the state of progress in changes to a stack until stack completion or failure",
    ),
    region: str | None = typer.Option(None, help="AWS region override"),
    profile: str | None = typer.Option(None, help="Named AWS profile to use"),
    no_reason: bool = typer.Option(False, "--no-reason", help="Hide the status reason column"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output"),
    log_file: Path | None = typer.Option(
        None,
        "--log-file",
        help="Write logs to this file (defaults to stack-tail.log when stdout is a terminal)",
    ),
) -> None:
    """Render the state of STACK_NAME as a live-updating table."""

    zone = _parse_timezone(timezone)
    settings = load_settings().with_overrides(region=region, profile=profile)
    console = Console()
    _configure_logging(
        "DEBUG" if verbose else settings.log_level,
        _build_log_handler(log_file, interactive=console.is_terminal),
    )

    try:
        container = get_container(settings)
    except BotoCoreError as exc:
        typer.echo(f"Unable to configure AWS client: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    source = container.source_for(stack_name, resources=resources)
    engine = container.engine_for(source, follow=follow)
    renderer = TerminalRenderer(console, timezone=zone, include_reason=not no_reason)

    try:
        asyncio.run(drive(engine, renderer))
    except FetchError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
