"""Application service: bulk label sheets.

Lays out N copies of a product's QR label onto fixed grid pages
(4 columns x 5 rows on A4 by default). Rendering the pages to a
printable document is left to the infrastructure layer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from stockroom.application.ports import CodeRenderer
from stockroom.domain.exceptions import ValidationError
from stockroom.domain.model.product import Product

logger = logging.getLogger(__name__)

DEFAULT_COLUMNS = 4
DEFAULT_ROWS = 5
MAX_LABELS_PER_SHEET = 500
LABEL_IMAGE_SIZE = 200


def page_sizes(quantity: int, capacity: int = DEFAULT_COLUMNS * DEFAULT_ROWS) -> list[int]:
    """Split *quantity* labels into pages of at most *capacity*.

    >>> page_sizes(45)
    [20, 20, 5]
    """
    if capacity <= 0:
        raise ValidationError("Page capacity must be positive")
    if quantity < 0:
        raise ValidationError("Label quantity cannot be negative")
    full, rest = divmod(quantity, capacity)
    return [capacity] * full + ([rest] if rest else [])


@dataclass(frozen=True)
class Label:
    row: int
    column: int
    sku: str
    caption: str
    image: bytes  # PNG


@dataclass(frozen=True)
class LabelPage:
    number: int
    labels: list[Label]


@dataclass(frozen=True)
class LabelSheet:
    sku: str
    caption: str
    columns: int
    rows: int
    pages: list[LabelPage]

    @property
    def label_count(self) -> int:
        return sum(len(page.labels) for page in self.pages)


class LabelSheetGenerator:

    def __init__(
        self,
        renderer: CodeRenderer,
        columns: int = DEFAULT_COLUMNS,
        rows: int = DEFAULT_ROWS,
        max_quantity: int = MAX_LABELS_PER_SHEET,
        image_size: int = LABEL_IMAGE_SIZE,
    ) -> None:
        self._renderer = renderer
        self._columns = columns
        self._rows = rows
        self._max_quantity = max_quantity
        self._image_size = image_size

    @property
    def capacity(self) -> int:
        return self._columns * self._rows

    def build(self, product: Product, quantity: int) -> LabelSheet:
        """Lay out *quantity* labels for *product*.

        Raises ValidationError unless 1 <= quantity <= max_quantity.
        """
        if quantity < 1:
            raise ValidationError("Please enter a valid quantity (minimum 1)")
        if quantity > self._max_quantity:
            raise ValidationError(
                f"Maximum {self._max_quantity} labels at once, got {quantity}"
            )

        # Every label encodes the same SKU, so render it once.
        image = self._renderer.render(product.sku, self._image_size)

        pages: list[LabelPage] = []
        for number, size in enumerate(page_sizes(quantity, self.capacity), start=1):
            labels = [
                Label(
                    row=slot // self._columns,
                    column=slot % self._columns,
                    sku=product.sku,
                    caption=product.label,
                    image=image,
                )
                for slot in range(size)
            ]
            pages.append(LabelPage(number=number, labels=labels))

        logger.info("Laid out %d labels for %s on %d pages", quantity, product.sku, len(pages))
        return LabelSheet(
            sku=product.sku,
            caption=product.label,
            columns=self._columns,
            rows=self._rows,
            pages=pages,
        )
