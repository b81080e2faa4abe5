"""Event catalog for the menu publish/subscribe sample."""

__version__ = "0.1.0"
