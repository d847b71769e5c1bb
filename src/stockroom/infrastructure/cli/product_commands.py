"""CLI commands for product lots."""

from __future__ import annotations

import click

from stockroom.application.dto import ProductLineDTO
from stockroom.domain.exceptions import DomainException
from stockroom.domain.model.inventory import AddKind, SortKey
from stockroom.domain.model.product import Product
from stockroom.infrastructure.bootstrap import inventory_store
from stockroom.infrastructure.config import Settings


def _display_products(products: list[Product]) -> None:
    """Shared formatting for product tables."""
    if not products:
        click.echo("No products found.")
        return

    click.echo(
        f"{'SKU':<17} {'Design':<20} {'Size':<6} {'Color':<10} "
        f"{'Stock':>6} {'Sold':>6} {'Price':>10}"
    )
    click.echo("-" * 81)
    for line in (ProductLineDTO.from_product(p) for p in products):
        click.echo(
            f"{line.sku:<17} {line.design:<20} {line.size:<6} {line.color:<10} "
            f"{line.stock:>6} {line.sold:>6} {line.price:>10}"
        )


@click.command("add")
@click.option("--design", required=True, help="Design name.")
@click.option("--size", required=True, help="Size (e.g. M, XL).")
@click.option("--color", required=True, help="Color.")
@click.option("--quantity", required=True, help="Units to add.")
@click.option("--price", required=True, help="Unit price (e.g. 29.99).")
@click.pass_obj
def product_add(
    settings: Settings, design: str, size: str, color: str, quantity: str, price: str
) -> None:
    """Add a new lot, or restock the lot with the same design/size/color."""
    store = inventory_store(settings)

    try:
        result = store.add(design, size, color, quantity, price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    p = result.product
    if result.kind is AddKind.CREATED:
        click.echo(f"New product added: {p.design} (SKU: {p.sku})")
    else:
        click.echo(f"Restocked: {p.design} (+{quantity.strip()} units, Total: {p.stock})")


@click.command("list")
@click.option(
    "--sort",
    "criterion",
    type=click.Choice([k.value for k in SortKey]),
    default=None,
    help="Sort order (default: order added).",
)
@click.pass_obj
def product_list(settings: Settings, criterion: str | None) -> None:
    """List all product lots."""
    store = inventory_store(settings)
    products = store.sort(criterion) if criterion else store.all()
    _display_products(products)


@click.command("search")
@click.argument("query")
@click.pass_obj
def product_search(settings: Settings, query: str) -> None:
    """Find lots whose design or SKU contains QUERY."""
    _display_products(inventory_store(settings).search(query))
