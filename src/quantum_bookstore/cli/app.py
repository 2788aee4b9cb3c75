"""Typer CLI wiring the bookstore services."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import typer
from rich.console import Console
from rich.table import Table

from quantum_bookstore.demo import run_demo
from quantum_bookstore.domain import Book
from quantum_bookstore.inventory import BookStore

from .deps import get_container

app = typer.Typer(help="Quantum Book Store command-line interface")
console = Console()


@app.callback()
def main() -> None:
    """Configure logging from the resolved settings."""

    try:
        settings = get_container().settings
    except ValueError as exc:
        typer.echo(f"Invalid configuration: {exc}")
        raise typer.Exit(code=1) from exc
    logging.basicConfig(
        level=settings.log_level,
        format="[%(name)s] %(levelname)s %(message)s",
    )


def _inventory_table(title: str, books: Sequence[Book]) -> Table:
    table = Table(title=title)
    table.add_column("ISBN")
    table.add_column("Title")
    table.add_column("Author")
    table.add_column("Year", justify="right")
    table.add_column("Price", justify="right")
    table.add_column("Details")
    for book in books:
        table.add_row(
            book.isbn,
            book.title,
            book.author,
            str(book.year),
            f"${book.price:.2f}",
            book.details(),
        )
    return table


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    settings = get_container().settings
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Store name:\t" + settings.store_name)
    typer.echo("Log level:\t" + settings.log_level)
    year = "(clock)" if settings.current_year is None else str(settings.current_year)
    typer.echo("Current year:\t" + year)
    typer.echo(f"Max age:\t{settings.default_max_age}")


@app.command("demo")
def demo(
    current_year: int | None = typer.Option(None, help="Year used to age out books"),
    max_age: int | None = typer.Option(None, min=0, help="Maximum book age in years"),
) -> None:
    """Run the scripted store scenario and report each step."""

    container = get_container()
    # The scripted session needs its own store so repeated runs start from scratch.
    store = BookStore(container.channels)
    year = current_year if current_year is not None else container.resolve_year()
    age = max_age if max_age is not None else container.settings.default_max_age
    name = container.settings.store_name

    typer.echo(f"[{name}] Starting full system test...")
    report = run_demo(store, current_year=year, max_age=age)

    typer.echo(f"[{name}] Added {len(report.initial_inventory)} books")
    console.print(_inventory_table("Initial Inventory", report.initial_books))
    for outcome in report.purchases:
        attempt = outcome.attempt
        typer.echo(f"[{name}] Purchase ISBN={attempt.isbn}, Qty={attempt.quantity}")
        if outcome.succeeded:
            typer.echo(f"[{name}] Purchase successful! Total: ${outcome.total:.2f}")
        else:
            typer.echo(f"[{name}] ERROR: {outcome.error}")

    console.print(_inventory_table("Inventory After Purchases", report.books_after_purchases))
    for title in report.removed_titles:
        typer.echo(f"[{name}] Removed outdated book: {title}")
    if report.final_inventory:
        console.print(_inventory_table("Final Inventory", report.final_books))
    else:
        typer.echo(f"[{name}] Inventory is empty")
    typer.echo(f"[{name}] Full test completed successfully!")
