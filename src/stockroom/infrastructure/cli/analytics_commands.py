"""CLI commands for turnover analytics."""

from __future__ import annotations

import time

import click

from stockroom.application.analytics import AnalyticsAggregator, PerformanceTier
from stockroom.domain.model.product import Product
from stockroom.infrastructure.bootstrap import inventory_store
from stockroom.infrastructure.config import Settings

_EFFICIENCY = {
    PerformanceTier.HIGH: ("High efficiency", "green"),
    PerformanceTier.MEDIUM: ("Moderate efficiency", "yellow"),
    PerformanceTier.LOW: ("Low efficiency", "red"),
}


def _display_summary(products: list[Product]) -> None:
    metrics = AnalyticsAggregator(products).metrics()
    text, color = _EFFICIENCY[metrics.tier]
    click.echo(f"Products:  {metrics.total_products}")
    click.echo(f"In stock:  {metrics.total_stock}")
    click.echo(f"Sold:      {metrics.total_sold}")
    click.echo(f"Turnover:  {metrics.turnover}%  ", nl=False)
    click.secho(text, fg=color)


@click.command("summary")
@click.pass_obj
def analytics_summary(settings: Settings) -> None:
    """Show totals and overall turnover."""
    _display_summary(inventory_store(settings).all())


@click.command("top")
@click.option("--limit", type=click.IntRange(min=1), default=5, show_default=True)
@click.pass_obj
def analytics_top(settings: Settings, limit: int) -> None:
    """Show the best-selling lots."""
    top = AnalyticsAggregator(inventory_store(settings).all()).top_sellers(limit)
    if not top:
        click.echo("No inventory data available.")
        return

    click.echo(f"{'#':<3} {'Product':<32} {'Sold':>6}")
    click.echo("-" * 43)
    for rank, p in enumerate(top, start=1):
        click.echo(f"{rank:<3} {p.label:<32} {p.sold:>6}")


@click.command("products")
@click.pass_obj
def analytics_products(settings: Settings) -> None:
    """Show turnover and performance tier per lot."""
    report = AnalyticsAggregator(inventory_store(settings).all()).performance_report()
    if not report:
        click.echo("No inventory data available. Add products to see analytics.")
        return

    click.echo(f"{'Product':<32} {'Stock':>6} {'Sold':>6} {'Turnover':>9} {'Tier':>7}")
    click.echo("-" * 64)
    for line in report:
        click.echo(
            f"{line.label:<32} {line.stock:>6} {line.sold:>6} "
            f"{str(line.turnover) + '%':>9} {line.tier.value:>7}"
        )


@click.command("watch")
@click.option(
    "--interval",
    type=click.FloatRange(min=0.1),
    default=30.0,
    show_default=True,
    help="Seconds between checks for changes.",
)
@click.pass_obj
def analytics_watch(settings: Settings, interval: float) -> None:
    """Re-print the summary whenever the inventory file changes."""
    store = inventory_store(settings)
    _display_summary(store.all())
    while True:
        time.sleep(interval)
        if store.refresh():
            click.echo()
            _display_summary(store.all())
