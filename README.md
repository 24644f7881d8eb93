# shopfront

A small shop that runs in the terminal or can be used as a library. It keeps
a catalogue of products in three categories (clothes, electronics and
furniture), lets you search and filter that catalogue, collect items in a
cart, review the order at checkout and pay with a registered account or on
delivery.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the shop

```
shopfront --inventory Inventory.txt --users UserDetails.txt
```

Both options are optional and default to `Inventory.txt` and
`UserDetails.txt` in the current directory. If the inventory file cannot be
opened, an error is printed and the shop starts with an empty catalogue; a
missing user file simply holds no users yet.

The session reads one command per line from standard input. Arguments are
split like a shell command line, so names with spaces can be quoted. Lines
starting with `#` are ignored, and a failing command prints `error: ...` and
the session carries on.

```
list                          show every product and reset the sort order
clear                         same as list
search TEXT                   products whose name contains TEXT, or is contained in it (any case)
category NAME                 products of one category, sorted if a sort order is set
sort asc|desc                 order the shown products by price
info NAME                     a product's details and price
add NAME [QUANTITY]           put a product in the cart (default 1)
cart                          show the cart and its total
more NAME / less NAME         raise or lower a cart quantity by one
quantity NAME N               set a cart quantity (0 or less removes it)
remove NAME                   take a product out of the cart
checkout                      show the checkout table
register NAME PASSWORD [ADDRESS EMAIL PHONE]
login NAME PASSWORD
details                       delivery details of the logged-in user
pay online USERNAME PASSWORD  pay by repeating your own credentials
pay delivery                  pay on delivery
help                          list the commands
quit / exit                   leave
```

A short session:

```
register alice password "1 High Street" alice@example.com
login alice password
search table
add "Oak Table" 2
checkout
pay delivery
```

Paying needs a logged-in user and a non-empty cart. It prints the order
summary and a confirmation, then empties the cart.

## Data files

The inventory is a text file with one product per line, fields separated by
commas. The first four fields are always the name, price, category and
details; the rest depend on the category:

```
Desk Lamp,24.5,Electronics,Adjustable arm,Acme,Lighting,LED 9W
Linen Shirt,30,Clothes,Summer shirt,M,Shirt,Linen,Example Brand
Oak Table,199.99,Furniture,Dining table,Oak,Table,Seats six
```

| Category    | Extra fields                      |
|-------------|-----------------------------------|
| Electronics | company, type, specifications     |
| Clothes     | size, type, material, brand       |
| Furniture   | wood type, type, specifications   |

Lines with any other category are skipped. A price that does not start with
a number raises `ValueError`.

User accounts are kept in a separate text file, one account per line:
full name, password, street address, e-mail and phone number, separated by
commas. Lines without exactly five fields are ignored when reading.
Registering an empty name, a name that is already taken, or a field holding a
comma or line break is refused.

## Using it as a library

```python
from shopfront.inventory import load_inventory, sort_by_price
from shopfront.cart import Cart, format_money, order_summary

inventory = load_inventory("Inventory.txt")

lamps = inventory.search("lamp")
furniture = inventory.by_category("Furniture")
cheapest_first = sort_by_price(inventory)
dearest_first = sort_by_price(inventory, descending=True)

cart = Cart()
cart.add(inventory.get("Oak Table"), 2)
cart.increase("Oak Table")
cart.decrease("Oak Table")

print(format_money(cart.total()))
print(order_summary(cart))
```

The main pieces:

- `shopfront.products` — the `Product` dataclass and its kinds `Clothes`,
  `Electronics` and `Furniture`; `describe()` gives the text shown for a
  product and `str()` a four-line listing.
- `shopfront.inventory` — `Inventory` with `add`, `remove` (removes every
  product of that name and returns the count), `update`, `get`, `search` and
  `by_category`; `parse_inventory_line`, `load_inventory` and
  `sort_by_price`.
- `shopfront.cart` — `Cart` and `CartLine`. `add` stores a copy of the
  product or raises the quantity of one already there; `set_quantity` to zero
  or below removes it; `increase` and `decrease` raise `KeyError` for a
  product not in the cart. `total`, `total_items`, `format_money`,
  `checkout_rows` for the checkout table and `order_summary` for the order
  text.
- `shopfront.accounts` — `UserStore` with `records`, `find`, `register`
  (`DuplicateUserError`), `authenticate` (`AuthenticationError`) and
  `verify_payment`; `UserRecord` for one account; `PaymentMethod` for the
  choice between online payment and payment on delivery.
- `shopfront.cli` — `ShopSession`, which runs the commands above against an
  inventory and a user store, and `main`, the `shopfront` command.

## What it does not do

- There is no graphical interface; the shop is a line-based text session.
- Passwords are stored and compared as plain text in the user file.
- "Online payment" only checks the entered credentials against the shopper's
  own account; no money is moved and no payment service is contacted.
- Carts and orders are not saved: the cart lives only for the session, and a
  paid order is printed and then discarded.
- The inventory is read from its file but never written back.