"""The shop's stock list, its text file format, and search, filter and sort helpers."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator

from .products import Clothes, Electronics, Furniture, Product

_LEADING_NUMBER = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class Inventory:
    """An ordered collection of products looked up by name."""

    def __init__(self, products: Iterable[Product] | None = None) -> None:
        self._products: list[Product] = list(products or ())

    def add(self, product: Product) -> None:
        """Append a product to the stock list."""
        self._products.append(product)

    def remove(self, name: str) -> int:
        """Remove every product with this name; return how many were removed."""
        kept = [p for p in self._products if p.name != name]
        removed = len(self._products) - len(kept)
        self._products = kept
        return removed

    def update(self, name: str, price: float, category: str, details: str) -> None:
        """Set price, category and details on every product with this name."""
        for product in self._products:
            if product.name == name:
                product.price = price
                product.category = category
                product.details = details

    def get(self, name: str) -> Product | None:
        """Return the first product with this name, or None."""
        return next((p for p in self._products if p.name == name), None)

    def __iter__(self) -> Iterator[Product]:
        return iter(list(self._products))

    def __len__(self) -> int:
        return len(self._products)

    def search(self, text: str) -> list[Product]:
        """Products whose name contains the text, or is contained in it, ignoring case."""
        needle = text.lower()
        return [
            p
            for p in self._products
            if needle in p.name.lower() or p.name.lower() in needle
        ]

    def by_category(self, category: str) -> list[Product]:
        """Products whose category matches exactly."""
        return [p for p in self._products if p.category == category]


def _parse_price(text: str) -> float:
    match = _LEADING_NUMBER.match(text)
    if match is None:
        raise ValueError(f"invalid price: {text!r}")
    return float(match.group(1))


def parse_inventory_line(line: str) -> Product | None:
    """Build a product from one comma-separated stock line.

    Columns are name, price, category, details, then the category's own fields:
    Electronics: company, type, specifications;
    Clothes: size, type, material, brand;
    Furniture: wood type, type, specifications.
    Lines of any other category yield None.
    """
    fields = line.rstrip("\r\n").split(",")
    fields += [""] * (8 - len(fields))
    name, price_text, category, details, a, b, c, d = fields[:8]
    price = _parse_price(price_text)

    if category == "Electronics":
        return Electronics(name, price, category, details,
                           company=a, kind=b, specifications=c)
    if category == "Clothes":
        return Clothes(name, price, category, details,
                       size=a, kind=b, material=c, brand=d)
    if category == "Furniture":
        return Furniture(name, price, category, details,
                         wood_type=a, kind=b, specifications=c)
    return None


def load_inventory(path: str | os.PathLike[str]) -> Inventory:
    """Read a stock file into an inventory, skipping lines of unknown category."""
    inventory = Inventory()
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            product = parse_inventory_line(line)
            if product is not None:
                inventory.add(product)
    return inventory


def sort_by_price(products: Iterable[Product], descending: bool = False) -> list[Product]:
    """Return the products ordered by price, cheapest first unless descending."""
    return sorted(products, key=lambda p: p.price, reverse=descending)