"""Typer CLI entrypoint for fastladder-bookwalker."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, List, NoReturn, Optional

import structlog
import typer
from rich import box
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import CONFIG_ENV_VAR, AppConfig, ListingMode, load_app_config
from .engine import Fetcher, ListingParser
from .errors import FeedError
from .logging_conf import configure_logging
from .orchestrator import CollectResult, Orchestrator, create_exporter

app = typer.Typer(
    help="Post bookwalker feeds to fastladder",
    add_completion=False,
    rich_markup_mode=None,
)

err_console = Console(stderr=True)

IdentifiersArgument = Annotated[
    List[str],
    typer.Argument(metavar="ID...", help="ID (st1, st2, ct1, ct2, ...)", show_default=False),
]


@dataclass
class AppState:
    config: AppConfig
    dry_run: bool
    verbose: bool
    logger: structlog.BoundLogger


def build_state(
    dry_run: bool, verbose: bool, config_path: Path | None, log_file: Path | None
) -> AppState:
    logger = configure_logging(verbose=verbose, log_file=log_file)
    config = load_app_config(config_path)
    return AppState(config=config, dry_run=dry_run, verbose=verbose, logger=logger)


def _fail(message: str) -> NoReturn:
    err_console.print(message, style="red", markup=False, highlight=False, soft_wrap=True)
    raise typer.Exit(code=1)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"fastladder-bookwalker {__version__}")
        raise typer.Exit()


def _render_summary(mode: ListingMode, result: CollectResult) -> Table:
    table = Table(title=f"{mode.value} · {len(result.feeds)} feeds", box=box.SIMPLE_HEAD)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Page", style="dim", overflow="fold")
    table.add_column("Items", style="green", justify="right")
    for page in result.pages:
        table.add_row(page.identifier, page.url, str(page.count))
    return table


def _run(ctx: typer.Context, mode: ListingMode, identifiers: list[str]) -> None:
    state: AppState = ctx.obj
    log = state.logger.bind(mode=mode.value, dry_run=state.dry_run)
    try:
        # Live settings are checked before any request goes out.
        exporter = create_exporter(state.dry_run)
        with Fetcher(state.config.bookwalker) as fetcher:
            orchestrator = Orchestrator(fetcher, ListingParser(state.config.bookwalker.selectors))
            result = orchestrator.run(mode, identifiers, exporter)
    except FeedError as exc:
        log.error("run_failed", error=str(exc), error_type=exc.__class__.__name__)
        _fail(str(exc))
    log.info("run_completed", identifiers=len(identifiers), feeds=len(result.feeds))
    if state.verbose:
        err_console.print(_render_summary(mode, result))


@app.callback()
def main(
    ctx: typer.Context,
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Print feeds as JSON instead of posting them."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable informational logging."),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        envvar=CONFIG_ENV_VAR,
        help="YAML or JSON settings file.",
        dir_okay=False,
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Also write JSON logs to this file.", dir_okay=False
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    try:
        ctx.obj = build_state(dry_run, verbose, config, log_file)
    except FeedError as exc:
        _fail(str(exc))


@app.command("new", help="Get newly released books")
def new_books(ctx: typer.Context, identifiers: IdentifiersArgument) -> None:
    _run(ctx, ListingMode.NEW, identifiers)


@app.command("schedule", help="Get scheduled books")
def schedule_books(ctx: typer.Context, identifiers: IdentifiersArgument) -> None:
    _run(ctx, ListingMode.SCHEDULE, identifiers)


__all__ = ["AppState", "app", "build_state"]
