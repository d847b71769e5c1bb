"""Application service: turnover analytics.

Read-only aggregation over a snapshot of the product collection.
Turnover is the share of a lot that has already sold::

    turnover = sold / (stock + sold) * 100

rounded half-up to one decimal place.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from stockroom.domain.model.product import Product

ONE_PLACE = Decimal("0.1")
HIGH_THRESHOLD = Decimal("60")
MEDIUM_THRESHOLD = Decimal("30")


class PerformanceTier(Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @staticmethod
    def for_rate(rate: Decimal) -> PerformanceTier:
        if rate > HIGH_THRESHOLD:
            return PerformanceTier.HIGH
        if rate > MEDIUM_THRESHOLD:
            return PerformanceTier.MEDIUM
        return PerformanceTier.LOW


def turnover_rate(stock: int, sold: int) -> Decimal:
    total = stock + sold
    if total <= 0:
        return Decimal("0.0")
    rate = Decimal(sold) / Decimal(total) * 100
    return rate.quantize(ONE_PLACE, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class InventoryMetrics:
    total_products: int
    total_stock: int
    total_sold: int
    turnover: Decimal
    tier: PerformanceTier


@dataclass(frozen=True)
class ProductPerformance:
    sku: str
    label: str
    stock: int
    sold: int
    turnover: Decimal
    tier: PerformanceTier


class AnalyticsAggregator:
    """Computes dashboard figures from a product snapshot.

    Sales trend and demand forecast charts are not offered: the inventory
    only records cumulative units sold, not when they sold.
    """

    def __init__(self, products: list[Product]) -> None:
        self._products = list(products)

    def metrics(self) -> InventoryMetrics:
        total_stock = sum(p.stock for p in self._products)
        total_sold = sum(p.sold for p in self._products)
        rate = turnover_rate(total_stock, total_sold)
        return InventoryMetrics(
            total_products=len(self._products),
            total_stock=total_stock,
            total_sold=total_sold,
            turnover=rate,
            tier=PerformanceTier.for_rate(rate),
        )

    def top_sellers(self, limit: int = 5) -> list[Product]:
        # sorted() is stable, so ties keep collection order
        return sorted(self._products, key=lambda p: p.sold, reverse=True)[:limit]

    def product_performance(self, product: Product) -> ProductPerformance:
        rate = turnover_rate(product.stock, product.sold)
        return ProductPerformance(
            sku=product.sku,
            label=product.label,
            stock=product.stock,
            sold=product.sold,
            turnover=rate,
            tier=PerformanceTier.for_rate(rate),
        )

    def performance_report(self) -> list[ProductPerformance]:
        return [self.product_performance(p) for p in self._products]

    def stock_levels(self, limit: int = 10) -> list[tuple[str, int]]:
        """(label, stock) pairs for a stock-level bar chart."""
        return [(p.label, p.stock) for p in self._products[:limit]]
