"""Domain model for message catalogs."""

from .catalog import Catalog, Comments, Entry, Reference

__all__ = ["Catalog", "Comments", "Entry", "Reference"]
