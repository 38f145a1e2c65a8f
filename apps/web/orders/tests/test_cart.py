"""Tests for the shopping cart."""

from decimal import Decimal

import pytest
from aperture_schemas import (
    CreateMemberOrderRequest,
    NormalizedMenuItem,
    OrderType,
    PaymentMethod,
)

from apps.web.orders.cart import Cart


@pytest.fixture
def pizza() -> NormalizedMenuItem:
    return NormalizedMenuItem(
        id="item-margherita",
        name="Margherita",
        price=Decimal("14.50"),
        category="pizza",
    )


@pytest.fixture
def tiramisu() -> NormalizedMenuItem:
    return NormalizedMenuItem(
        id="item-tiramisu", name="Tiramisu", price=Decimal("7.99"), category="desserts"
    )


class TestCartTotals:
    """Tests for cart arithmetic."""

    def test_empty_cart(self):
        """Test that an empty cart totals zero."""
        cart = Cart()

        assert cart.item_count == 0
        assert cart.subtotal == Decimal("0.00")
        assert cart.total == Decimal("0.00")

    def test_totals_with_tax(self, pizza, tiramisu):
        """Test subtotal, 10% tax and total."""
        cart = Cart()
        cart.add(pizza, quantity=2)
        cart.add(tiramisu)

        assert cart.item_count == 3
        assert cart.subtotal == Decimal("36.99")
        assert cart.tax == Decimal("3.70")
        assert cart.total == Decimal("40.69")

    def test_add_merges_lines(self, pizza):
        """Test that adding the same item bumps its quantity."""
        cart = Cart()
        cart.add(pizza)
        cart.add(pizza)

        assert len(cart.lines) == 1
        assert cart.lines[0].quantity == 2

    def test_add_rejects_non_positive_quantity(self, pizza):
        """Test that a negative add cannot drive an existing line below one."""
        cart = Cart()
        cart.add(pizza)

        with pytest.raises(ValueError):
            cart.add(pizza, -3)
        with pytest.raises(ValueError):
            cart.add(pizza, 0)

        assert cart.item_count == 1
        assert cart.total == Decimal("15.95")

    def test_add_rejects_non_positive_new_line(self, pizza):
        """Test that a new line also needs a quantity of at least one."""
        cart = Cart()

        with pytest.raises(ValueError):
            cart.add(pizza, -1)

        assert cart.lines == []

    def test_update_quantity(self, pizza, tiramisu):
        """Test changing and zeroing quantities."""
        cart = Cart()
        cart.add(pizza)
        cart.add(tiramisu)

        cart.update_quantity(pizza.id, 3)
        cart.update_quantity(tiramisu.id, 0)

        assert [(line.menu_item_id, line.quantity) for line in cart.lines] == [
            ("item-margherita", 3)
        ]

    def test_clear(self, pizza):
        """Test emptying the cart."""
        cart = Cart()
        cart.add(pizza)

        cart.clear()

        assert cart.lines == []


class TestCartToOrder:
    """Tests for building order requests from the cart."""

    def test_member_order(self, pizza, tiramisu):
        """Test the member order request built from the cart."""
        cart = Cart()
        cart.add(pizza, quantity=2)
        cart.add(tiramisu)

        request = cart.to_member_order(
            OrderType.DELIVERY,
            PaymentMethod.CARD,
            delivery_address="1 Harbour Way",
        )

        assert isinstance(request, CreateMemberOrderRequest)
        assert request.to_payload() == {
            "orderType": "DELIVERY",
            "items": [
                {"menuItemId": "item-margherita", "quantity": 2},
                {"menuItemId": "item-tiramisu", "quantity": 1},
            ],
            "paymentMethod": "CARD",
            "deliveryAddress": "1 Harbour Way",
        }

    def test_pre_order(self, pizza):
        """Test the pre-order request built from the cart."""
        cart = Cart()
        cart.add(pizza)

        request = cart.to_pre_order(PaymentMethod.ONLINE, notes="Nut allergy")

        assert request.items[0].menu_item_id == "item-margherita"
        assert request.notes == "Nut allergy"

    def test_empty_cart_rejected(self):
        """Test that an empty cart cannot become an order."""
        with pytest.raises(ValueError, match="empty cart"):
            Cart().to_member_order(OrderType.TAKEAWAY, PaymentMethod.CASH)
