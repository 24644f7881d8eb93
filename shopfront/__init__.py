"""A small text shop: products, inventory, cart, checkout, user accounts and a command-line session."""

__version__ = "0.1.0"