import pytest

from shopfront.cart import Cart, CartLine, checkout_rows, format_money, order_summary
from shopfront.products import Clothes, Electronics, Product


@pytest.fixture
def shirt():
    return Clothes("Shirt", 20.0, "Clothes", "Cotton shirt", size="M")


@pytest.fixture
def phone():
    return Electronics("Phone", 300.0, "Electronics", "Smartphone", company="Acme")


def test_cart_line_subtotal(shirt):
    line = CartLine(shirt, 3)
    assert line.subtotal() == shirt.price * 3


def test_empty_cart():
    cart = Cart()
    assert len(cart) == 0
    assert not cart
    assert cart.total() == 0
    assert cart.total_items() == 0
    assert cart.lines() == []


def test_add_merges_same_name(shirt):
    cart = Cart()
    cart.add(shirt, 2)
    cart.add(Product("Shirt", 20.0, "Clothes", ""), 3)
    assert len(cart) == 1
    assert cart.lines()[0].quantity == 5


def test_add_keeps_order(shirt, phone):
    cart = Cart()
    cart.add(shirt, 1)
    cart.add(phone, 1)
    assert [line.product.name for line in cart.lines()] == ["Shirt", "Phone"]


def test_add_stores_copy(shirt):
    cart = Cart()
    cart.add(shirt, 1)
    shirt.price = 999.0
    assert cart.lines()[0].product.price == 20.0


def test_lines_are_snapshots(shirt):
    cart = Cart()
    cart.add(shirt, 1)
    cart.lines()[0].quantity = 50
    assert cart.total_items() == 1


def test_remove(shirt, phone):
    cart = Cart()
    cart.add(shirt, 1)
    cart.add(phone, 1)
    assert cart.remove("Shirt") is True
    assert [line.product.name for line in cart.lines()] == ["Phone"]
    assert cart.remove("Shirt") is False
    assert len(cart) == 1


def test_set_quantity(shirt):
    cart = Cart()
    cart.add(shirt, 1)
    cart.set_quantity("Shirt", 7)
    assert cart.total_items() == 7


@pytest.mark.parametrize("quantity", [0, -2])
def test_set_quantity_non_positive_removes(shirt, quantity):
    cart = Cart()
    cart.add(shirt, 4)
    cart.set_quantity("Shirt", quantity)
    assert len(cart) == 0


def test_set_quantity_unknown_ignored(shirt):
    cart = Cart()
    cart.add(shirt, 2)
    cart.set_quantity("Lamp", 9)
    assert [(l.product.name, l.quantity) for l in cart.lines()] == [("Shirt", 2)]


def test_increase_and_decrease(shirt):
    cart = Cart()
    cart.add(shirt, 1)
    assert cart.increase("Shirt") == 2
    assert cart.decrease("Shirt") == 1
    assert cart.decrease("Shirt") == 0
    assert "Shirt" not in [l.product.name for l in cart.lines()]


def test_increase_unknown_raises():
    with pytest.raises(KeyError):
        Cart().increase("Nothing")


def test_decrease_unknown_raises():
    with pytest.raises(KeyError):
        Cart().decrease("Nothing")


def test_total_and_items(shirt, phone):
    cart = Cart()
    cart.add(shirt, 2)
    cart.add(phone, 1)
    assert cart.total() == shirt.price * 2 + phone.price
    assert cart.total_items() == 3
    assert cart.total() == sum(line.subtotal() for line in cart.lines())


def test_format_money_two_decimals():
    assert format_money(0) == "$0.00"
    assert format_money(5) == "$5.00"


def test_checkout_rows(shirt, phone):
    cart = Cart()
    cart.add(shirt, 2)
    cart.add(phone, 1)
    rows = checkout_rows(cart)
    assert len(rows) == 2
    name, category, quantity, price, subtotal = rows[0]
    assert (name, category, quantity) == ("Shirt", "Clothes", "2")
    assert price == format_money(shirt.price)[1:]
    assert subtotal == format_money(shirt.price * 2)[1:]


def test_order_summary(shirt, phone):
    cart = Cart()
    cart.add(shirt, 2)
    cart.add(phone, 1)
    text = order_summary(cart)
    assert text.startswith("Items:\nShirt x 2\nPhone x 1\n")
    assert f"\nTotal Items: {cart.total_items()}" in text
    assert text.endswith("\nTotal: " + format_money(cart.total()))


def test_order_summary_empty():
    text = order_summary(Cart())
    assert text == "Items:\n\nTotal Items: 0\nTotal: " + format_money(0)