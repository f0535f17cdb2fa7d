"""The product domain model."""

from __future__ import annotations

from dataclasses import dataclass


class InsufficientQuantityError(ValueError):
    """Raised when more units are sold than are in stock."""


@dataclass
class Product:
    """A product offered for sale, with the number of units in stock."""

    id: int
    name: str
    price: int
    description: str
    quantity: int

    def sell(self, quantity: int) -> None:
        """Take ``quantity`` units out of stock."""
        if quantity < 0:
            raise ValueError("quantity must not be negative")
        if quantity > self.quantity:
            raise InsufficientQuantityError("Not enough quantity")
        self.quantity -= quantity