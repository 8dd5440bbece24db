"""CLI for filtering classified-ad listings."""

from __future__ import annotations

import json
import logging
import math
import os
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv
from typing import List, Optional

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import build_predicates, get_filter_criteria, load_config
from .connectors import JsonFileConnector
from .filters import filter_listings
from .models import FilterCriteria, Listing

app = typer.Typer(
    name="listing-filter",
    help="Filter classified-ad listings by price, recency and title keywords",
)
console = Console()
err_console = Console(stderr=True)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _load_criteria(config_path: Optional[Path]) -> FilterCriteria:
    """Criteria from explicit config, $LISTING_FILTER_CONFIG, or the default file if present."""
    path = config_path or os.environ.get("LISTING_FILTER_CONFIG")
    try:
        cfg = load_config(path)
    except FileNotFoundError:
        if path:
            raise
        cfg = {}
    return get_filter_criteria(cfg)


def _fmt_money(value: float) -> str:
    return "unbounded" if math.isinf(value) else f"${value:,.2f}"


def _fmt_age(listing: Listing) -> str:
    age = listing.age_seconds()
    if age is None:
        return "-"
    if age < 3600:
        return f"{age / 60:.0f}m"
    if age < 86400:
        return f"{age / 3600:.1f}h"
    return f"{age / 86400:.1f}d"


def _display_listings(listings: list[Listing], total: int, limit: int) -> None:
    """Display filtered listings in input order."""
    if not listings:
        console.print(f"[yellow]No listings matched ({total} checked).[/yellow]")
        return

    table = Table(title=f"Matching Listings ({len(listings)} of {total})")
    table.add_column("#", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Price", justify="right")
    table.add_column("Age", justify="right")
    table.add_column("URL", style="dim")

    for i, l in enumerate(listings[:limit], 1):
        name = l.name[:40] + "..." if len(l.name) > 40 else l.name
        table.add_row(str(i), name, f"${l.price:,.0f}", _fmt_age(l), l.url)

    console.print(table)
    if len(listings) > limit:
        console.print(f"[dim]... {len(listings) - limit} more not shown[/dim]")


@app.command("filter")
def filter_cmd(
    listings_file: Path = typer.Argument(..., help="JSON file with listing records"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
    min_price: Optional[float] = typer.Option(None, "--min-price", help="Minimum price, inclusive"),
    max_price: Optional[float] = typer.Option(None, "--max-price", help="Maximum price, inclusive"),
    max_age: Optional[float] = typer.Option(None, "--max-age", help="Maximum age in seconds, inclusive"),
    include: Optional[List[str]] = typer.Option(None, "--include", "-i", help="Keyword the title must contain (repeatable)"),
    exclude: Optional[List[str]] = typer.Option(None, "--exclude", "-x", help="Word the title must not contain (repeatable)"),
    limit: int = typer.Option(50, "--limit", "-n", min=1, help="Max listings to show"),
    as_json: bool = typer.Option(False, "--json", help="Print matches as JSON instead of a table"),
    log_level: str = typer.Option(
        os.environ.get("LISTING_FILTER_LOG_LEVEL", "WARNING"), "--log-level", help="Logging level"
    ),
) -> None:
    """Filter listings from a JSON file. CLI options override config values."""
    try:
        _setup_logging(log_level)
        criteria = _load_criteria(config_path)
    except (FileNotFoundError, ValueError) as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    overrides = {
        "min_price": min_price,
        "max_price": max_price,
        "max_age_seconds": max_age,
        "must_include": tuple(include) if include else None,
        "must_exclude": tuple(exclude) if exclude else None,
    }
    criteria = replace(criteria, **{k: v for k, v in overrides.items() if v is not None})

    result = JsonFileConnector(listings_file).fetch()
    for e in result.errors:
        err_console.print(f"[yellow]Warning: {e}[/yellow]")
    if result.errors and not result.raw_payloads:
        err_console.print(f"[red]Could not load listings from {listings_file}[/red]")
        raise typer.Exit(1)

    filtered = filter_listings(result.listings, build_predicates(criteria))

    if as_json:
        typer.echo(json.dumps([l.to_dict() for l in filtered], indent=2))
        return
    _display_listings(filtered, len(result.listings), limit)


@app.command()
def criteria(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
) -> None:
    """Show the filter criteria the config resolves to."""
    try:
        c = _load_criteria(config_path)
    except (FileNotFoundError, ValueError) as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    table = Table(title="Filter Criteria")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("Min price", _fmt_money(c.min_price))
    table.add_row("Max price", _fmt_money(c.max_price))
    table.add_row(
        "Max age",
        "unbounded" if math.isinf(c.max_age_seconds) else f"{c.max_age_seconds:,.0f}s",
    )
    table.add_row("Must include", ", ".join(c.must_include) or "-")
    table.add_row("Must exclude", ", ".join(c.must_exclude) or "-")
    console.print(table)


if __name__ == "__main__":
    app()
