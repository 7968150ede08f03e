"""Reporting aggregates for a small-business inventory and invoicing system."""

__version__ = "0.1.0"
