"""CLI commands for selling stock."""

from __future__ import annotations

import click

from stockroom.domain.model.inventory import SaleStatus
from stockroom.infrastructure.bootstrap import inventory_store, scan_session
from stockroom.infrastructure.config import Settings


@click.command("sell")
@click.option("--sku", required=True, help="SKU of the lot to sell one unit from.")
@click.pass_obj
def sale_sell(settings: Settings, sku: str) -> None:
    """Sell a single unit."""
    result = inventory_store(settings).sell(sku)

    if result.status is SaleStatus.NOT_FOUND:
        raise click.ClickException(f"SKU not found: {sku}")
    if result.status is SaleStatus.OUT_OF_STOCK:
        raise click.ClickException(f"Out of stock: {result.product.design}")
    click.echo(f"Sold 1 unit of {result.product.design} ({result.product.stock} left)")


@click.command("scan")
@click.option("--no-sound", is_flag=True, help="Do not ring the terminal bell.")
@click.pass_obj
def scan(settings: Settings, no_sound: bool) -> None:
    """Sell one unit per scanned code read from standard input.

    Point a keyboard-wedge scanner at the terminal; end with Ctrl-D.
    """
    session = scan_session(settings, click.get_text_stream("stdin"), sound=not no_sound)
    if not session.start():
        raise click.ClickException("Scanner could not be started")
    try:
        session.run()
    finally:
        session.stop()
