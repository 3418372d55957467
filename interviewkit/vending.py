"""A vending machine with fixed slots, products and payment methods."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional


class Product(ABC):
    """Something the machine sells."""

    @property
    @abstractmethod
    def price(self) -> float:
        """Listed price of the product."""


class Water(Product):
    price = 1.0


class Coke(Product):
    price = 1.2


class Payment(ABC):
    """A way of paying that decides what a product actually costs."""

    @abstractmethod
    def checkout(self, product: Product) -> float:
        """Return the amount charged for ``product``."""


class CardPayment(Payment):
    """Card payments get a 20% discount."""

    def checkout(self, product: Product) -> float:
        return 0.8 * product.price


class CashPayment(Payment):
    """Cash payments are charged the listed price."""

    def checkout(self, product: Product) -> float:
        return 1.0 * product.price


class VendingMachine:
    """Holds products in a limited number of named slots."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self.slots: dict[str, Product] = {}

    def add_product(self, slot_id: str, product: Product) -> bool:
        """Stock a slot; return False when every slot is already used.

        An already stocked slot keeps its product.
        """
        if len(self.slots) >= self.capacity:
            return False
        self.slots.setdefault(slot_id, product)
        return True

    def place_order(self, slot_id: str) -> Optional[Product]:
        """Return the product in ``slot_id``, or None for an unknown slot."""
        return self.slots.get(slot_id)

    def checkout(self, products: Iterable[Product], payment: Payment) -> float:
        """Total charged for ``products`` paid with ``payment``."""
        return sum((payment.checkout(p) for p in products), 0.0)


class Customer:
    """A customer who fills a cart from one machine and then pays."""

    def __init__(self, machine: VendingMachine) -> None:
        self.machine = machine
        self.cart: list[Product] = []

    def select(self, slot_id: str) -> bool:
        """Put the product in ``slot_id`` into the cart; False if there is none."""
        product = self.machine.place_order(slot_id)
        if product is None:
            return False
        self.cart.append(product)
        return True

    def checkout(self, payment: Payment) -> float:
        return self.machine.checkout(self.cart, payment)