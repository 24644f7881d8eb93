"""Interactive text front end: browse the catalogue, fill a cart, check out and pay."""

from __future__ import annotations

import argparse
import shlex
import sys
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TextIO

from .accounts import AuthenticationError, PaymentMethod, UserRecord, UserStore
from .cart import Cart, checkout_rows, format_money, order_summary
from .inventory import Inventory, load_inventory, sort_by_price
from .products import Product

_HELP = """\
Commands:
  list                          show every product and reset filters
  search TEXT                   show products whose name matches TEXT
  category NAME                 show products of one category
  sort asc|desc                 order the shown products by price
  info NAME                     show a product's details
  add NAME [QUANTITY]           put a product in the cart (default 1)
  cart                          show the cart
  more NAME / less NAME         raise or lower a cart quantity by one
  quantity NAME N               set a cart quantity (0 removes)
  remove NAME                   take a product out of the cart
  checkout                      show the checkout table
  register NAME PASSWORD [ADDRESS EMAIL PHONE]
  login NAME PASSWORD
  details                       show the delivery details of the logged-in user
  pay online USERNAME PASSWORD  pay through the payment gateway
  pay delivery                  pay on delivery
  quit                          leave"""

_PAYMENT_CHOICES = {
    "online": PaymentMethod.ONLINE,
    "delivery": PaymentMethod.ON_DELIVERY,
}


def _expect(args: list[str], low: int, high: int, usage: str) -> None:
    if not low <= len(args) <= high:
        raise ValueError(f"usage: {usage}")


class ShopSession:
    """One shopper's session over a catalogue and a user file, driven by text commands."""

    def __init__(self, inventory: Inventory, store: UserStore, output: TextIO | None = None) -> None:
        self.inventory = inventory
        self.store = store
        self.output = output if output is not None else sys.stdout
        self.cart = Cart()
        self.user: UserRecord | None = None
        self._shown: list[Product] = list(inventory)
        self._descending: bool | None = None
        self._handlers: dict[str, Callable[[list[str]], None]] = {
            "help": self._help,
            "list": self._list,
            "clear": self._list,
            "search": self._search,
            "category": self._category,
            "sort": self._sort,
            "info": self._info,
            "add": self._add,
            "cart": self._cart,
            "more": self._more,
            "less": self._less,
            "quantity": self._quantity,
            "remove": self._remove,
            "checkout": self._checkout,
            "register": self._register,
            "login": self._login,
            "details": self._details,
            "pay": self._pay,
        }

    def _write(self, text: str = "") -> None:
        print(text, file=self.output)

    def execute(self, line: str) -> bool:
        """Run one command; return False when the session should end."""
        parts = shlex.split(line)
        if not parts:
            return True
        command, args = parts[0].lower(), parts[1:]
        if command in ("quit", "exit"):
            return False
        handler = self._handlers.get(command)
        if handler is None:
            raise ValueError(f"unknown command: {command}")
        handler(args)
        return True

    def run(self, lines: Iterable[str]) -> None:
        """Run commands until input ends or quit is given, reporting errors as they occur."""
        for line in lines:
            if line.lstrip().startswith("#"):
                continue
            try:
                if not self.execute(line):
                    return
            except KeyError as exc:
                self._write(f"error: {exc.args[0]}")
            except (ValueError, AuthenticationError) as exc:
                self._write(f"error: {exc}")

    def _help(self, args: list[str]) -> None:
        self._write(_HELP)

    def _show(self, products: Iterable[Product]) -> None:
        self._shown = list(products)
        if not self._shown:
            self._write("No matching results found")
            return
        for number, product in enumerate(self._shown, start=1):
            self._write(f"{number}. {product.name}  $ {product.price:g}")

    def _list(self, args: list[str]) -> None:
        self._descending = None
        self._show(self.inventory)

    def _search(self, args: list[str]) -> None:
        _expect(args, 1, 1, "search TEXT")
        self._show(self.inventory.search(args[0]))

    def _category(self, args: list[str]) -> None:
        _expect(args, 1, 1, "category NAME")
        products = self.inventory.by_category(args[0])
        if self._descending is not None:
            products = sort_by_price(products, self._descending)
        self._show(products)

    def _sort(self, args: list[str]) -> None:
        _expect(args, 1, 1, "sort asc|desc")
        order = args[0].lower()
        if order not in ("asc", "desc"):
            raise ValueError("usage: sort asc|desc")
        self._descending = order == "desc"
        self._show(sort_by_price(self._shown, self._descending))

    def _product(self, name: str) -> Product:
        product = self.inventory.get(name)
        if product is None:
            raise KeyError(f"no such product: {name!r}")
        return product

    def _info(self, args: list[str]) -> None:
        _expect(args, 1, 1, "info NAME")
        product = self._product(args[0])
        self._write(product.name)
        self._write(product.describe())
        self._write(f"Price  :       $  {product.price:g}")

    def _add(self, args: list[str]) -> None:
        _expect(args, 1, 2, "add NAME [QUANTITY]")
        product = self._product(args[0])
        quantity = int(args[1]) if len(args) == 2 else 1
        if quantity < 1:
            raise ValueError("quantity must be at least 1")
        self.cart.add(product, quantity)
        self._write(f"Added {quantity} x {product.name}")

    def _cart(self, args: list[str]) -> None:
        if not self.cart:
            self._write("Your cart is empty")
            return
        for line in self.cart.lines():
            self._write(f"{line.product.name}  {format_money(line.subtotal())}  x{line.quantity}")
        self._write(f"Total : {format_money(self.cart.total())}")

    def _more(self, args: list[str]) -> None:
        _expect(args, 1, 1, "more NAME")
        self.cart.increase(args[0])
        self._cart([])

    def _less(self, args: list[str]) -> None:
        _expect(args, 1, 1, "less NAME")
        self.cart.decrease(args[0])
        self._cart([])

    def _quantity(self, args: list[str]) -> None:
        _expect(args, 2, 2, "quantity NAME N")
        self.cart.set_quantity(args[0], int(args[1]))
        self._cart([])

    def _remove(self, args: list[str]) -> None:
        _expect(args, 1, 1, "remove NAME")
        if not self.cart.remove(args[0]):
            raise KeyError(f"{args[0]!r} is not in the cart")
        self._cart([])

    def _require_items(self) -> None:
        if not self.cart:
            raise ValueError("the cart is empty")

    def _checkout(self, args: list[str]) -> None:
        self._require_items()
        self._write("Product | Category | Quantity | Price ($) | Subtotal ($)")
        for row in checkout_rows(self.cart):
            self._write(" | ".join(row))
        self._write(f"Total: {format_money(self.cart.total())}")

    def _register(self, args: list[str]) -> None:
        _expect(args, 2, 5, "register NAME PASSWORD [ADDRESS EMAIL PHONE]")
        record = UserRecord(*args)
        self.store.register(record)
        self._write(f"Registered {record.name}")

    def _login(self, args: list[str]) -> None:
        _expect(args, 2, 2, "login NAME PASSWORD")
        self.user = self.store.authenticate(args[0], args[1])
        self._write(f"Welcome, {self.user.name}")

    def _require_user(self) -> UserRecord:
        if self.user is None:
            raise ValueError("log in first")
        return self.user

    def _details(self, args: list[str]) -> None:
        user = self._require_user()
        self._write(f"Full Name: {user.name}")
        self._write(f"Street Address: {user.address}")
        self._write(f"Phone Number: {user.phone}")

    def _pay(self, args: list[str]) -> None:
        if not args or args[0].lower() not in _PAYMENT_CHOICES:
            raise ValueError("usage: pay online USERNAME PASSWORD | pay delivery")
        method = _PAYMENT_CHOICES[args[0].lower()]
        user = self._require_user()
        self._require_items()
        if method is PaymentMethod.ONLINE:
            _expect(args, 3, 3, "pay online USERNAME PASSWORD")
            if not self.store.verify_payment(user.name, args[1], args[2]):
                raise AuthenticationError("Invalid Password or Username")
            confirmation = "Payment successful! Thank you."
        else:
            _expect(args, 1, 1, "pay delivery")
            confirmation = "Your order has been placed with Pay On Delivery."
        self._write(order_summary(self.cart))
        self._write(confirmation)
        self.cart = Cart()


def main(argv: list[str] | None = None) -> int:
    """Start a shopping session reading commands from standard input."""
    parser = argparse.ArgumentParser(prog="shopfront", description="A small text shop front.")
    parser.add_argument("--inventory", type=Path, default=Path("Inventory.txt"),
                        help="stock file (default: Inventory.txt)")
    parser.add_argument("--users", type=Path, default=Path("UserDetails.txt"),
                        help="user file (default: UserDetails.txt)")
    options = parser.parse_args(argv)

    try:
        inventory = load_inventory(options.inventory)
    except OSError:
        print(f"Error opening {options.inventory}", file=sys.stderr)
        inventory = Inventory()

    session = ShopSession(inventory, UserStore(options.users), sys.stdout)
    session.run(sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())