"""Product aggregate — one lot of a design in a given size and color.

A product is created once, then mutated in place by restocks and sales.
It is never deleted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from stockroom.domain.exceptions import OutOfStockError, ValidationError
from stockroom.domain.model.value_objects import Money, Quantity


def natural_key(design: str, size: str, color: str) -> tuple[str, str, str]:
    """Case-insensitive (design, size, color) key deciding create vs restock."""
    return (
        design.strip().casefold(),
        size.strip().casefold(),
        color.strip().casefold(),
    )


@dataclass
class Product:
    """A product lot tracked by SKU.

    Invariants:
    - ``sku`` never changes after creation
    - ``stock`` and ``sold`` are never negative
    """

    sku: str
    design: str
    size: str
    color: str
    price: Money
    stock: int = 0
    sold: int = 0
    date_added: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def key(self) -> tuple[str, str, str]:
        return natural_key(self.design, self.size, self.color)

    @property
    def label(self) -> str:
        """Short caption used on labels and reports, e.g. ``Hoodie (M/Black)``."""
        return f"{self.design} ({self.size}/{self.color})"

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

    def restock(self, quantity: Quantity) -> None:
        """Add *quantity* units to the lot. Price is left as it was."""
        self.stock += quantity.value

    def sell(self) -> None:
        """Sell a single unit.

        Raises OutOfStockError if nothing is left.
        """
        if self.stock <= 0:
            raise OutOfStockError(f"Out of stock: {self.design}")
        self.stock -= 1
        self.sold += 1

    @staticmethod
    def create(
        sku: str,
        design: str,
        size: str,
        color: str,
        quantity: Quantity,
        price: Money,
        date_added: datetime,
    ) -> Product:
        """Create a new lot, enforcing that the descriptive fields are present."""
        for field_name, value in (("Design", design), ("Size", size), ("Color", color)):
            if not value or not value.strip():
                raise ValidationError(f"{field_name} is required")
        return Product(
            sku=sku,
            design=design.strip(),
            size=size.strip(),
            color=color.strip(),
            price=price,
            stock=quantity.value,
            sold=0,
            date_added=date_added,
        )
