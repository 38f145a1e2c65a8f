"""Order flow helpers."""

from apps.web.orders.cart import TAX_RATE, Cart, CartLine

__all__ = ["TAX_RATE", "Cart", "CartLine"]
