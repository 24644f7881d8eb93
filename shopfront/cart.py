"""A shopping cart of products and quantities, with checkout table and summary text."""

from __future__ import annotations

import copy
from collections.abc import Iterator
from dataclasses import dataclass, replace

from .products import Product


@dataclass
class CartLine:
    """One product in the cart and how many of it are wanted."""

    product: Product
    quantity: int

    def subtotal(self) -> float:
        """Unit price times quantity."""
        return self.product.price * self.quantity


class Cart:
    """Products keyed by name, kept in the order they were first added."""

    def __init__(self) -> None:
        self._lines: dict[str, CartLine] = {}

    def add(self, product: Product, quantity: int) -> None:
        """Add a copy of the product, or raise the quantity of the one already present."""
        line = self._lines.get(product.name)
        if line is not None:
            line.quantity += quantity
        else:
            self._lines[product.name] = CartLine(copy.copy(product), quantity)

    def remove(self, name: str) -> bool:
        """Drop the product with this name; return whether it was in the cart."""
        return self._lines.pop(name, None) is not None

    def set_quantity(self, name: str, quantity: int) -> None:
        """Set a product's quantity; zero or less removes it. Unknown names are ignored."""
        line = self._lines.get(name)
        if line is None:
            return
        if quantity <= 0:
            del self._lines[name]
        else:
            line.quantity = quantity

    def _line(self, name: str) -> CartLine:
        try:
            return self._lines[name]
        except KeyError:
            raise KeyError(f"{name!r} is not in the cart") from None

    def increase(self, name: str) -> int:
        """Add one to a product's quantity and return the new quantity."""
        line = self._line(name)
        self.set_quantity(name, line.quantity + 1)
        return line.quantity

    def decrease(self, name: str) -> int:
        """Take one from a product's quantity, removing it at zero; return the new quantity."""
        line = self._line(name)
        if line.quantity <= 0:
            return line.quantity
        new_quantity = line.quantity - 1
        self.set_quantity(name, new_quantity)
        return new_quantity

    def lines(self) -> list[CartLine]:
        """Snapshots of the cart's lines, in order."""
        return [replace(line, product=copy.copy(line.product)) for line in self._lines.values()]

    def total(self) -> float:
        """Sum of all line subtotals."""
        return sum((line.subtotal() for line in self._lines.values()), 0.0)

    def total_items(self) -> int:
        """Sum of all quantities."""
        return sum(line.quantity for line in self._lines.values())

    def __iter__(self) -> Iterator[CartLine]:
        return iter(self.lines())

    def __len__(self) -> int:
        return len(self._lines)

    def __bool__(self) -> bool:
        return bool(self._lines)


def format_money(amount: float) -> str:
    """Format an amount as dollars with two decimals."""
    return f"${amount:.2f}"


def checkout_rows(cart: Cart) -> list[tuple[str, str, str, str, str]]:
    """Rows of the checkout table: product, category, quantity, price and subtotal."""
    return [
        (
            line.product.name,
            line.product.category,
            str(line.quantity),
            f"{line.product.price:.2f}",
            f"{line.subtotal():.2f}",
        )
        for line in cart.lines()
    ]


def order_summary(cart: Cart) -> str:
    """The order summary text shown before payment."""
    items = "".join(f"{line.product.name} x {line.quantity}\n" for line in cart.lines())
    return (
        f"Items:\n{items}"
        f"\nTotal Items: {cart.total_items()}"
        f"\nTotal: {format_money(cart.total())}"
    )