"""CLI commands for QR labels."""

from __future__ import annotations

from pathlib import Path

import click

from stockroom.domain.exceptions import DomainException
from stockroom.infrastructure.bootstrap import (
    code_renderer,
    inventory_store,
    label_sheet_generator,
)
from stockroom.infrastructure.config import Settings
from stockroom.infrastructure.printing.html_label_sheet import render_label_sheet_html


@click.command("sheet")
@click.option("--sku", required=True, help="SKU to print labels for.")
@click.option(
    "--quantity",
    type=int,
    default=None,
    help="Number of labels (default: units in stock, at least 1).",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="HTML file to write (default: labels_<SKU>.html).",
)
@click.option("--open", "open_file", is_flag=True, help="Open the sheet for printing.")
@click.pass_obj
def label_sheet(
    settings: Settings,
    sku: str,
    quantity: int | None,
    output: Path | None,
    open_file: bool,
) -> None:
    """Write a printable sheet of QR labels."""
    try:
        product = inventory_store(settings).require(sku)
        if quantity is None:
            quantity = max(product.stock, 1)
        sheet = label_sheet_generator(settings).build(product, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    output = output or Path(f"labels_{sku}.html")
    output.write_text(render_label_sheet_html(sheet), encoding="utf-8")
    pages = len(sheet.pages)
    click.echo(
        f"Wrote {sheet.label_count} label(s) on {pages} page{'s' if pages > 1 else ''} to {output}"
    )
    if open_file:
        click.launch(str(output))


@click.command("qr")
@click.option("--sku", required=True, help="SKU to export.")
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="PNG file to write (default: QR_<SKU>.png).",
)
@click.option("--size", type=int, default=None, help="Image size in pixels.")
@click.pass_obj
def label_qr(settings: Settings, sku: str, output: Path | None, size: int | None) -> None:
    """Export a single QR code image."""
    try:
        product = inventory_store(settings).require(sku)
        png = code_renderer().render(product.sku, size or settings.qr_export_size)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    output = output or Path(f"QR_{sku}.png")
    output.write_bytes(png)
    click.echo(f"Wrote QR code for {product.label} to {output}")
