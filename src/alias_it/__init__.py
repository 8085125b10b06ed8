"""alias-it: append shell aliases to your shell config file."""

__version__ = "0.1.0"
