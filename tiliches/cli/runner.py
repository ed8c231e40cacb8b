# tiliches/cli/runner.py

"""Headless catalog listing, sharing the TUI's loader."""

import json
import logging
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tiliches.models.catalog_state import HomeView, resolve_view
from tiliches.models.product import Product
from tiliches.services.catalog_loader import CatalogLoader
from tiliches.services.product_service import ProductService
from tiliches.ui.formatting import format_category, format_price

logger = logging.getLogger("tiliches.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _print_table(products: tuple[Product, ...]) -> None:
    """Render a Rich table of products to stdout, in catalog order."""
    table = Table(
        title="Tiliches Catalog",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("#", style="dim", justify="right")
    table.add_column("Title", max_width=60)
    table.add_column("Category", style="magenta")
    table.add_column("Price", justify="right", style="green")

    for p in products:
        table.add_row(
            str(p.id),
            escape(p.title),
            escape(format_category(p.category)),
            format_price(p.price),
        )

    Console().print(table)


async def cli_list(
    output_format: str,
    service: ProductService | None = None,
) -> int:
    """Fetch the catalog once and print it (0=ok, 1=error or empty)."""
    loader = CatalogLoader(service=service)
    _err.print(f"[bold]Fetching:[/bold] {loader.service.products_url}")

    await loader.load_products()
    state = loader.state
    view = resolve_view(state)

    if view is HomeView.ERROR:
        message = escape(state.error_message or "")
        _err.print(f"[red]Failed to load products: {message}[/red]")
        return 1
    if view is HomeView.EMPTY:
        _err.print("[yellow]No products available.[/yellow]")
        return 1

    _err.print(f"[green]✓ {len(state.products)} products[/green]")
    if output_format == "table":
        _print_table(state.products)
    else:
        json.dump(
            [p.to_dict() for p in state.products],
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")
    logger.info(
        "Listed %d products as %s", len(state.products), output_format
    )
    return 0
