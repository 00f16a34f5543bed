"""Simple parse trees from concrete syntax trees, and bracket-notation tree utilities."""

__version__ = "0.1.0"
