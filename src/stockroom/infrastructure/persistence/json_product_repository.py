"""JSON-file-backed implementation of ProductRepository.

One file per storage slot (``<data_dir>/<slot>.json``) holding the whole
collection as a JSON array. Slots written by the browser version of the
app (numeric prices, ``dateAdded`` timestamps) load as well.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from pathlib import Path

from stockroom.domain.exceptions import ValidationError
from stockroom.domain.model.product import Product
from stockroom.domain.model.value_objects import Money
from stockroom.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    @classmethod
    def for_slot(cls, data_dir: Path, slot: str) -> JsonProductRepository:
        return cls(data_dir / f"{slot}.json")

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- ProductRepository interface ------------------------------------------

    def load(self) -> list[Product]:
        products = []
        for index, raw in enumerate(self._load_raw()):
            try:
                products.append(self._to_domain(raw))
            except (KeyError, TypeError, ValueError, InvalidOperation) as exc:
                raise ValidationError(
                    f"Inventory file {self._file_path} has a malformed record at "
                    f"index {index}: {exc!r}"
                ) from exc
        return products

    def save(self, products: list[Product]) -> None:
        self._persist_raw([self._to_raw(p) for p in products])

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "sku": product.sku,
            "design": product.design,
            "size": product.size,
            "color": product.color,
            "stock": product.stock,
            "sold": product.sold,
            "price": str(product.price.amount),
            "date_added": product.date_added.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        stock = int(raw["stock"])
        sold = int(raw.get("sold", 0))
        if stock < 0 or sold < 0:
            raise ValueError(f"negative stock or sold count for {raw['sku']}")
        stamp = raw["date_added"] if "date_added" in raw else raw["dateAdded"]
        date_added = datetime.fromisoformat(stamp.replace("Z", "+00:00"))
        if date_added.tzinfo is None:
            date_added = date_added.replace(tzinfo=timezone.utc)
        return Product(
            sku=raw["sku"],
            design=raw["design"],
            size=raw["size"],
            color=raw["color"],
            stock=stock,
            sold=sold,
            price=Money(Decimal(str(raw["price"]))),
            date_added=date_added,
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        text = self._file_path.read_text(encoding="utf-8")
        try:
            records = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValidationError(
                f"Inventory file {self._file_path} is not valid JSON: {exc}"
            ) from exc
        if not isinstance(records, list):
            raise ValidationError(f"Inventory file {self._file_path} must hold a list")
        return records

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )
        logger.debug("Wrote %d records to %s", len(records), self._file_path)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
