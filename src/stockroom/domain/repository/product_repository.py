"""Abstract repository for the product collection.

Defined in the domain layer so the domain never depends on
infrastructure. The collection is stored as a whole in one named slot:
there are no per-record updates, every save rewrites everything.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockroom.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def load(self) -> list[Product]:
        """Return every stored product in insertion order (empty if none)."""

    @abstractmethod
    def save(self, products: list[Product]) -> None:
        """Replace the stored collection with *products*."""
