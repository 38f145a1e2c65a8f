"""Shopping cart - line items, totals and conversion to an order request."""

from decimal import ROUND_HALF_UP, Decimal

from aperture_schemas import (
    CreateMemberOrderRequest,
    CreateOrderItemRequest,
    CreatePreOrderRequest,
    NormalizedMenuItem,
    OrderType,
    PaymentMethod,
)
from pydantic import BaseModel, Field

TAX_RATE = Decimal("0.10")
CENTS = Decimal("0.01")


def _to_cents(amount: Decimal) -> Decimal:
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


class CartLine(BaseModel):
    """One menu item in the cart."""

    menu_item_id: str
    name: str
    unit_price: Decimal
    quantity: int = Field(default=1, ge=1)
    notes: str | None = None

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


class Cart(BaseModel):
    """Items a customer is about to order."""

    lines: list[CartLine] = Field(default_factory=list)

    def add(self, item: NormalizedMenuItem, quantity: int = 1) -> None:
        """
        Add an item, merging with an existing line for the same item.

        Raises:
            ValueError: If ``quantity`` is less than 1.
        """
        if quantity < 1:
            raise ValueError(f"Quantity must be at least 1, got {quantity}")
        for line in self.lines:
            if line.menu_item_id == item.id:
                line.quantity += quantity
                return
        self.lines.append(
            CartLine(
                menu_item_id=item.id,
                name=item.name,
                unit_price=item.price,
                quantity=quantity,
            )
        )

    def update_quantity(self, menu_item_id: str, quantity: int) -> None:
        """Set a line's quantity; zero or less removes the line."""
        if quantity <= 0:
            self.remove(menu_item_id)
            return
        for line in self.lines:
            if line.menu_item_id == menu_item_id:
                line.quantity = quantity

    def remove(self, menu_item_id: str) -> None:
        self.lines = [line for line in self.lines if line.menu_item_id != menu_item_id]

    def clear(self) -> None:
        self.lines = []

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)

    @property
    def subtotal(self) -> Decimal:
        return _to_cents(sum((line.line_total for line in self.lines), Decimal("0")))

    @property
    def tax(self) -> Decimal:
        return _to_cents(self.subtotal * TAX_RATE)

    @property
    def total(self) -> Decimal:
        return self.subtotal + self.tax

    def _order_items(self) -> list[CreateOrderItemRequest]:
        if not self.lines:
            raise ValueError("Cannot place an order from an empty cart")
        return [
            CreateOrderItemRequest(
                menu_item_id=line.menu_item_id,
                quantity=line.quantity,
                notes=line.notes,
            )
            for line in self.lines
        ]

    def to_member_order(
        self,
        order_type: OrderType,
        payment_method: PaymentMethod,
        delivery_address: str | None = None,
        notes: str | None = None,
    ) -> CreateMemberOrderRequest:
        """
        Build the member order request for the cart's contents.

        Raises:
            ValueError: If the cart is empty.
        """
        return CreateMemberOrderRequest(
            order_type=order_type,
            items=self._order_items(),
            payment_method=payment_method,
            delivery_address=delivery_address,
            notes=notes,
        )

    def to_pre_order(
        self, payment_method: PaymentMethod, notes: str | None = None
    ) -> CreatePreOrderRequest:
        """Build a pre-order request to attach to a reservation."""
        return CreatePreOrderRequest(
            items=self._order_items(),
            payment_method=payment_method,
            notes=notes,
        )
