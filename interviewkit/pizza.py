"""Pricing a pizza from its base, size and toppings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Protocol


@dataclass(frozen=True)
class Base:
    name: str
    price: float


@dataclass(frozen=True)
class Size:
    name: str
    price: float


@dataclass(frozen=True)
class Topping:
    name: str
    price: float


class _Priced(Protocol):
    @property
    def price(self) -> float: ...


@dataclass
class Pizza:
    """A pizza with one base, one size and any number of toppings."""

    base: Base
    size: Size
    toppings: list[Topping] = field(default_factory=list)

    def add_topping(self, topping: Topping) -> None:
        self.toppings.append(topping)

    def total_price(self) -> float:
        """Sum of the base, size and topping prices."""
        return self.base.price + self.size.price + sum(t.price for t in self.toppings)


def format_options(options: Mapping[str, _Priced], title: str) -> str:
    """List named options with their prices under a title."""
    lines = [f"{title}: \n"]
    lines.extend(f"- {name}: ${option.price:g}\n" for name, option in options.items())
    return "".join(lines)