"""Application service: Inventory Store.

Holds the in-memory Inventory aggregate and mirrors it to the
repository after every mutation. Both CLI commands and the scan
session go through this one object, so mutations are serialized with
a lock.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import Callable

from stockroom.domain.exceptions import EntityNotFoundError
from stockroom.domain.model.inventory import (
    AddKind,
    AddResult,
    Inventory,
    SaleResult,
    SaleStatus,
    SortKey,
)
from stockroom.domain.model.product import Product
from stockroom.domain.model.value_objects import Money, Quantity
from stockroom.domain.repository.product_repository import ProductRepository
from stockroom.domain.service.sku_generator import generate_sku

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InventoryStore:

    def __init__(
        self,
        repository: ProductRepository,
        sku_generator: Callable[[str, str, str], str] = generate_sku,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._repository = repository
        self._sku_generator = sku_generator
        self._clock = clock
        self._lock = threading.RLock()
        self._inventory = Inventory(repository.load())

    # --- Commands -------------------------------------------------------------

    def add(
        self,
        design: str,
        size: str,
        color: str,
        quantity: str | int,
        price: str | float | int,
    ) -> AddResult:
        """Create a new lot or restock the one with the same natural key.

        Raises ValidationError before touching anything if the quantity
        or price cannot be parsed.
        """
        qty = Quantity.of(quantity)
        unit_price = Money.of(price)

        with self._lock:
            result = self._inventory.add(
                design,
                size,
                color,
                qty,
                unit_price,
                sku_factory=self._sku_generator,
                now=self._clock(),
            )
            self._persist()

        product = result.product
        if result.kind is AddKind.CREATED:
            logger.info("Created %s (%s) with %d units", product.sku, product.label, qty.value)
        else:
            logger.info("Restocked %s +%d (now %d)", product.sku, qty.value, product.stock)
        return result

    def sell(self, sku: str) -> SaleResult:
        """Sell one unit of *sku*; never raises for unknown or empty lots."""
        with self._lock:
            result = self._inventory.sell(sku)
            if result.status is SaleStatus.SOLD:
                self._persist()

        if result.status is SaleStatus.SOLD:
            logger.info("Sold 1 x %s (%d left)", sku, result.product.stock)
        elif result.status is SaleStatus.OUT_OF_STOCK:
            logger.warning("Sale rejected, %s is out of stock", sku)
        else:
            logger.warning("Sale rejected, unknown SKU %r", sku)
        return result

    def refresh(self) -> bool:
        """Reload from the repository if someone else changed it.

        Returns True when the in-memory collection was replaced.
        """
        fresh = self._repository.load()
        with self._lock:
            if fresh == self._inventory.products:
                return False
            self._inventory = Inventory(fresh)
        logger.info("Inventory changed externally, reloaded %d products", len(fresh))
        return True

    # --- Queries --------------------------------------------------------------

    def get(self, sku: str) -> Product | None:
        with self._lock:
            return self._inventory.find_by_sku(sku)

    def require(self, sku: str) -> Product:
        """Like get, but an unknown SKU raises EntityNotFoundError."""
        product = self.get(sku)
        if product is None:
            raise EntityNotFoundError(f"SKU not found: {sku}")
        return product

    def search(self, query: str) -> list[Product]:
        with self._lock:
            return self._inventory.search(query)

    def sort(self, criterion: str | SortKey) -> list[Product]:
        with self._lock:
            return self._inventory.sorted_by(criterion)

    def all(self) -> list[Product]:
        with self._lock:
            return self._inventory.products

    # --- Internal helpers -----------------------------------------------------

    def _persist(self) -> None:
        products = self._inventory.products
        self._repository.save(products)
        logger.debug("Persisted %d products", len(products))
