"""Unit tests for domain value objects and the Product entity."""

from decimal import Decimal

import pytest

from shipcalc.domain.exceptions import ValidationError
from shipcalc.domain.model.order import ProductOrder
from shipcalc.domain.model.product import Product
from shipcalc.domain.model.value_objects import Parcel, Quantity
from shipcalc.domain.service.order_calculator import OrderCalculator
from tests.fakes import FakeCurrencyConverter, FakeProductCatalog, FakeShippingCalculator


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        q = Quantity(5)
        assert q.value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(2.5)

    def test_str(self):
        assert str(Quantity(7)) == "7"


# ── Parcel ───────────────────────────────────────────────────────────────────


class TestParcel:

    def test_empty(self):
        assert Parcel.empty().is_empty
        assert Parcel.empty() == Parcel(Decimal("0"), Decimal("0"))

    def test_addition(self):
        result = Parcel(Decimal("0.4"), Decimal("1")) + Parcel(Decimal("1.1"), Decimal("2"))
        assert result == Parcel(Decimal("1.5"), Decimal("3"))

    def test_coerces_strings(self):
        assert Parcel("0.8", "1.98").weight == Decimal("0.8")

    def test_negative_weight_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Parcel(Decimal("-1"), Decimal("0"))


# ── Product ──────────────────────────────────────────────────────────────────


class TestProduct:

    def test_unit_price_selects_mode(self):
        p = Product(sku=20, price="14.4", wholesale_price="11")
        assert p.unit_price(wholesale=False) == Decimal("14.4")
        assert p.unit_price(wholesale=True) == Decimal("11")

    def test_wholesale_price_defaults_to_price(self):
        p = Product(sku=20, price="10")
        assert p.unit_price(wholesale=True) == Decimal("10")

    def test_product_without_wholesale_price_keeps_price_in_large_batch(self):
        catalog = FakeProductCatalog([Product(sku=20, price="10")])
        calculator = OrderCalculator(catalog, FakeShippingCalculator(), FakeCurrencyConverter())
        assert calculator.get_price([ProductOrder.of(20, 16)]) == Decimal("160")

    def test_footprint_scales_with_quantity(self):
        p = Product(sku=20, price="14.4", weight="0.4", volume="0.99")
        assert p.footprint(2) == Parcel(Decimal("0.8"), Decimal("1.98"))

    def test_invalid_price_rejected(self):
        with pytest.raises(ValidationError, match="Invalid Product price"):
            Product(sku=1, price="abc")

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Product(sku=1, price="-1")


# ── ProductOrder ─────────────────────────────────────────────────────────────


class TestProductOrder:

    def test_of_factory(self):
        order = ProductOrder.of(20, 2)
        assert order.sku == 20
        assert order.quantity == Quantity(2)

    def test_of_rejects_zero_quantity(self):
        with pytest.raises(ValidationError, match="must be positive"):
            ProductOrder.of(20, 0)

    def test_plain_int_quantity_is_wrapped(self):
        order = ProductOrder(sku=20, quantity=2)
        assert order.quantity == Quantity(2)

    def test_plain_int_quantity_prices_like_factory(self):
        catalog = FakeProductCatalog([Product(sku=20, price="14.4")])
        calculator = OrderCalculator(catalog, FakeShippingCalculator(), FakeCurrencyConverter())
        assert calculator.get_price([ProductOrder(sku=20, quantity=2)]) == Decimal("28.8")

    def test_plain_zero_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            ProductOrder(sku=20, quantity=0)

    def test_non_integer_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            ProductOrder(sku=20, quantity="2")
