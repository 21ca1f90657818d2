"""Inventory intelligence: in-memory stock state, demand models, warehouse search and Monte Carlo restock decisions."""

__version__ = "2.0.0"