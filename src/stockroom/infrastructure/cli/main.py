from pathlib import Path

import click

from stockroom.infrastructure.cli.analytics_commands import (
    analytics_products,
    analytics_summary,
    analytics_top,
    analytics_watch,
)
from stockroom.infrastructure.cli.label_commands import label_qr, label_sheet
from stockroom.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_search,
)
from stockroom.infrastructure.cli.sale_commands import sale_sell, scan
from stockroom.infrastructure.config import DEFAULT_DATA_DIR, DEFAULT_SLOT, Settings
from stockroom.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    envvar="STOCKROOM_DATA_DIR",
    show_default=True,
    help="Directory holding the inventory file.",
)
@click.option(
    "--slot",
    default=DEFAULT_SLOT,
    envvar="STOCKROOM_SLOT",
    show_default=True,
    help="Storage slot (file name without .json).",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    envvar="STOCKROOM_LOG_LEVEL",
    show_default=True,
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, slot: str, log_level: str) -> None:
    """Stockroom — apparel inventory with QR labels"""
    configure_logging(log_level)
    ctx.obj = Settings(data_dir=data_dir, slot=slot, log_level=log_level.upper())


@cli.group()
def product() -> None:
    """Manage product lots."""


@cli.group()
def sale() -> None:
    """Record sales."""


@cli.group()
def label() -> None:
    """Print QR labels."""


@cli.group()
def analytics() -> None:
    """Turnover analytics."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_search)
sale.add_command(sale_sell)
cli.add_command(scan)
label.add_command(label_sheet)
label.add_command(label_qr)
analytics.add_command(analytics_summary)
analytics.add_command(analytics_top)
analytics.add_command(analytics_products)
analytics.add_command(analytics_watch)
