"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from stockroom.domain.model.product import Product


@dataclass(frozen=True)
class ProductLineDTO:
    """Output: one product row as displayed to the user."""

    sku: str
    design: str
    size: str
    color: str
    stock: int
    sold: int
    price: str  # formatted, e.g. "$29.99"
    date_added: str

    @staticmethod
    def from_product(product: Product) -> ProductLineDTO:
        return ProductLineDTO(
            sku=product.sku,
            design=product.design,
            size=product.size,
            color=product.color,
            stock=product.stock,
            sold=product.sold,
            price=str(product.price),
            date_added=product.date_added.strftime("%Y-%m-%d %H:%M"),
        )
