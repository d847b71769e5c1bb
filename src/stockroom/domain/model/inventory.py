"""Inventory aggregate — the insertion-ordered collection of product lots.

The Inventory owns every Product and enforces the natural-key rule:
adding a lot whose (design, size, color) already exists restocks it
instead of creating a duplicate.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable

from stockroom.domain.model.product import Product, natural_key
from stockroom.domain.model.value_objects import Money, Quantity


class AddKind(Enum):
    CREATED = "CREATED"
    RESTOCK = "RESTOCK"


class SaleStatus(Enum):
    SOLD = "SOLD"
    OUT_OF_STOCK = "OUT_OF_STOCK"
    NOT_FOUND = "NOT_FOUND"


class SortKey(Enum):
    DESIGN = "design"
    STOCK = "stock"
    SKU = "sku"
    SOLD = "sold"


@dataclass(frozen=True)
class AddResult:
    kind: AddKind
    product: Product


@dataclass(frozen=True)
class SaleResult:
    """Outcome of a single-unit sale.

    ``product`` is None only when the SKU is unknown, so callers can tell
    an exhausted lot from a bad scan.
    """

    status: SaleStatus
    product: Product | None

    @property
    def success(self) -> bool:
        return self.status is SaleStatus.SOLD


_SORTERS: dict[SortKey, Callable[[list[Product]], list[Product]]] = {
    SortKey.DESIGN: lambda items: sorted(
        items, key=lambda p: (p.design.casefold(), p.design)
    ),
    SortKey.STOCK: lambda items: sorted(items, key=lambda p: p.stock, reverse=True),
    SortKey.SKU: lambda items: sorted(items, key=lambda p: p.sku),
    SortKey.SOLD: lambda items: sorted(items, key=lambda p: p.sold, reverse=True),
}


class Inventory:
    """Aggregate root over all product lots.

    Pure in-memory logic; persistence is the store's job.
    """

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products: list[Product] = list(products or [])

    def __len__(self) -> int:
        return len(self._products)

    @property
    def products(self) -> list[Product]:
        return list(self._products)

    # --- Lookups --------------------------------------------------------------

    def find_by_sku(self, sku: str) -> Product | None:
        for product in self._products:
            if product.sku == sku:
                return product
        return None

    def find_by_key(self, design: str, size: str, color: str) -> Product | None:
        key = natural_key(design, size, color)
        for product in self._products:
            if product.key == key:
                return product
        return None

    # --- Mutations ------------------------------------------------------------

    def add(
        self,
        design: str,
        size: str,
        color: str,
        quantity: Quantity,
        price: Money,
        sku_factory: Callable[[str, str, str], str],
        now: datetime,
    ) -> AddResult:
        """Restock the matching lot, or create a new one."""
        existing = self.find_by_key(design, size, color)
        if existing is not None:
            existing.restock(quantity)
            return AddResult(AddKind.RESTOCK, existing)

        product = Product.create(
            sku=sku_factory(design, size, color),
            design=design,
            size=size,
            color=color,
            quantity=quantity,
            price=price,
            date_added=now,
        )
        self._products.append(product)
        return AddResult(AddKind.CREATED, product)

    def sell(self, sku: str) -> SaleResult:
        product = self.find_by_sku(sku)
        if product is None:
            return SaleResult(SaleStatus.NOT_FOUND, None)
        if not product.in_stock:
            return SaleResult(SaleStatus.OUT_OF_STOCK, product)
        product.sell()
        return SaleResult(SaleStatus.SOLD, product)

    # --- Queries --------------------------------------------------------------

    def search(self, query: str) -> list[Product]:
        """Case-insensitive substring match on design or SKU."""
        needle = query.strip().casefold()
        return [
            p
            for p in self._products
            if needle in p.design.casefold() or needle in p.sku.casefold()
        ]

    def sorted_by(self, criterion: str | SortKey) -> list[Product]:
        """Return a new ordering; unknown criteria keep collection order."""
        try:
            key = SortKey(criterion)
        except ValueError:
            return list(self._products)
        return _SORTERS[key](self._products)
