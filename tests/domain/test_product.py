"""Unit tests for the Product aggregate."""

from datetime import datetime, timezone

import pytest

from stockroom.domain.exceptions import OutOfStockError, ValidationError
from stockroom.domain.model.product import Product, natural_key
from stockroom.domain.model.value_objects import Money, Quantity

NOW = datetime(2026, 1, 15, 9, 30, tzinfo=timezone.utc)


def _hoodie(stock: int = 5, sold: int = 0) -> Product:
    return Product(
        sku="HOOD-M-BLA-A1B",
        design="Hoodie",
        size="M",
        color="Black",
        price=Money.of("29.99"),
        stock=stock,
        sold=sold,
        date_added=NOW,
    )


class TestProductCreate:

    def test_create_sets_stock_and_zero_sold(self):
        p = Product.create("SKU", "Hoodie", "M", "Black", Quantity(5), Money.of("29.99"), NOW)
        assert p.stock == 5
        assert p.sold == 0
        assert p.date_added == NOW

    def test_create_strips_text_fields(self):
        p = Product.create("SKU", "  Hoodie ", " M", "Black  ", Quantity(1), Money.of("1"), NOW)
        assert (p.design, p.size, p.color) == ("Hoodie", "M", "Black")

    @pytest.mark.parametrize("design,size,color,field", [
        ("", "M", "Black", "Design"),
        ("Hoodie", "  ", "Black", "Size"),
        ("Hoodie", "M", "", "Color"),
    ])
    def test_blank_fields_rejected(self, design, size, color, field):
        with pytest.raises(ValidationError, match=f"{field} is required"):
            Product.create("SKU", design, size, color, Quantity(1), Money.of("1"), NOW)


class TestProductSell:

    def test_sell_moves_one_unit(self):
        p = _hoodie(stock=2)
        p.sell()
        assert p.stock == 1
        assert p.sold == 1

    def test_sell_empty_lot_rejected(self):
        p = _hoodie(stock=0, sold=5)
        with pytest.raises(OutOfStockError, match="Out of stock: Hoodie"):
            p.sell()
        assert p.stock == 0
        assert p.sold == 5


class TestProductRestock:

    def test_restock_adds_units_only(self):
        p = _hoodie(stock=5, sold=3)
        p.restock(Quantity(4))
        assert p.stock == 9
        assert p.sold == 3
        assert p.sku == "HOOD-M-BLA-A1B"


class TestNaturalKey:

    def test_key_ignores_case_and_padding(self):
        assert natural_key("Hoodie", "M", "Black") == natural_key(" HOODIE", "m", "black ")

    def test_label(self):
        assert _hoodie().label == "Hoodie (M/Black)"
