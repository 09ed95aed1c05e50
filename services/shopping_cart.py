"""
Shopping cart and checkout.

The cart only tracks items and totals. Persisting the order and printing the
invoice are delegated to record store and printer providers.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional

from config.settings import settings
from interfaces import Document, Record
from providers.capabilities import PERSISTENCE, PRINTING
from providers.registry import CapabilityRegistry

logger = logging.getLogger(__name__)


@dataclass
class CartItem:
    """A product line in a cart."""
    name: str
    price: float
    quantity: int = 1

    def __post_init__(self):
        if self.price < 0:
            raise ValueError(f"Price of {self.name} cannot be negative")
        if self.quantity < 1:
            raise ValueError(f"Quantity of {self.name} must be at least 1")

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity


@dataclass
class ShoppingCart:
    """Items selected by a customer."""
    items: List[CartItem] = field(default_factory=list)

    def add_item(self, item: CartItem) -> None:
        for existing in self.items:
            if existing.name == item.name and existing.price == item.price:
                existing.quantity += item.quantity
                return
        self.items.append(item)

    def remove_item(self, name: str) -> bool:
        """
        Remove every line with the given product name.

        Returns:
            True if anything was removed
        """
        remaining = [item for item in self.items if item.name != name]
        removed = len(remaining) != len(self.items)
        self.items = remaining
        return removed

    def total(self) -> float:
        return round(sum(item.subtotal for item in self.items), 2)

    def is_empty(self) -> bool:
        return not self.items


class CheckoutService:
    """Saves orders and prints invoices for carts."""

    def __init__(self, registry: CapabilityRegistry,
                 store: Optional[str] = None,
                 printer: Optional[str] = None):
        """
        Initialize checkout service.

        Args:
            registry: Registry with persistence and printing providers
            store: Record store for orders, defaults to DEFAULT_RECORD_STORE
            printer: Printer for invoices, defaults to DEFAULT_PRINTER
        """
        self.registry = registry
        self.store = store or settings.DEFAULT_RECORD_STORE
        self.printer = printer or settings.DEFAULT_PRINTER

    @staticmethod
    def build_invoice(cart: ShoppingCart, order_id: str) -> Document:
        lines = [
            f"{item.quantity} x {item.name} @ {item.price:.2f} = {item.subtotal:.2f}"
            for item in cart.items
        ]
        lines.append(f"Total: {cart.total():.2f}")
        return Document(title=f"Invoice {order_id}", content="\n".join(lines))

    def checkout(self, cart: ShoppingCart) -> Dict[str, Any]:
        """
        Save the order and print its invoice.

        Args:
            cart: Cart to check out

        Returns:
            Order id, total and print job id
        """
        if cart.is_empty():
            raise ValueError("Cannot check out an empty cart")

        order = Record(kind="order", data={
            "items": [
                {"name": item.name, "price": item.price, "quantity": item.quantity}
                for item in cart.items
            ],
            "total": cart.total()
        })
        if not self.registry.invoke(PERSISTENCE, self.store, order):
            raise IOError(f"Record store '{self.store}' did not save order {order.record_id}")

        job_id = self.registry.invoke(PRINTING, self.printer, self.build_invoice(cart, order.record_id))
        logger.info(f"Order {order.record_id} checked out, total {cart.total():.2f}, invoice job {job_id}")

        return {"order_id": order.record_id, "total": cart.total(), "print_job": job_id}
