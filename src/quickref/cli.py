"""Command line interface for quickref."""

from __future__ import annotations

import logging
import sys
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from quickref.config import (
    DEFAULT_CACHE_DIR,
    DEFAULT_LISTING_URL,
    DEFAULT_PATHS,
    DEFAULT_TIMEOUT,
    AppConfig,
    build_config,
)
from quickref.errors import SyncError
from quickref.models import SyncStats
from quickref.resolver import Resolver
from quickref.sync import Syncer

# stdout is reserved for document content.
console = Console(stderr=True)
LOGGER = logging.getLogger(__name__)
app = typer.Typer(help="quickref - print cached quick reference documents")

NO_RESULTS_HINT = "No documents found. Have you tried 'quickref --sync'?"


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _run_sync(config: AppConfig) -> SyncStats:
    console.print(f"Syncing documents into [bold]{config.cache_dir}[/bold]...")
    try:
        stats = Syncer(config).sync()
    except SyncError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1)

    console.print(f"Downloaded: {stats.downloaded}, failed: {stats.failed}")
    for name, error in stats.failures:
        console.print(f"[yellow]{escape(name)}[/yellow]: {escape(error)}")
    if stats.total and not stats.downloaded:
        console.print("[red]Every document failed to download.[/red]")
        raise typer.Exit(code=1)
    return stats


@app.command()
def main(
    names: Optional[List[str]] = typer.Argument(None, help="Document names to print."),
    sync: bool = typer.Option(False, "--sync", help="Refresh the cache from the remote repository first."),
    cache_dir: str = typer.Option(
        DEFAULT_CACHE_DIR,
        "--cache-dir",
        envvar="QUICKREF_CACHE_DIR",
        help="Directory where synced documents are stored.",
    ),
    paths: str = typer.Option(
        DEFAULT_PATHS,
        "--paths",
        envvar="QUICKREF_PATHS",
        help="Colon separated directories to search; (cache-dir) stands for the cache directory.",
    ),
    listing_url: str = typer.Option(
        DEFAULT_LISTING_URL,
        "--listing-url",
        envvar="QUICKREF_LISTING_URL",
        help="Remote listing of available documents.",
    ),
    timeout: float = typer.Option(
        DEFAULT_TIMEOUT, "--timeout", envvar="QUICKREF_TIMEOUT", help="HTTP timeout in seconds"
    ),
    fail_fast: bool = typer.Option(False, "--fail-fast", help="Abort the sync on the first failed document."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Print the quick reference documents for NAMES."""
    _setup_logging(verbose)
    config = build_config(
        sync=sync,
        cache_dir=cache_dir,
        paths=paths,
        listing_url=listing_url,
        timeout=timeout,
        fail_fast=fail_fast,
    )

    if config.sync:
        _run_sync(config)

    resolver = Resolver(config.search_path, sys.stdout.buffer)
    stats = resolver.resolve(names or [])
    if stats.missing:
        LOGGER.debug("No document found for: %s", ", ".join(stats.missing))
    # A bare --sync has nothing to look up.
    if not stats.found_any and (names or not config.sync):
        console.print(f"[yellow]{NO_RESULTS_HINT}[/yellow]")
