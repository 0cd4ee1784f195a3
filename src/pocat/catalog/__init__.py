"""Reading and writing PO catalog text."""

from .parser import CatalogParser, parse_catalog, parse_catalogs
from .formatter import CatalogFormatter, format_catalog, wrap_message

__all__ = [
    "CatalogParser",
    "parse_catalog",
    "parse_catalogs",
    "CatalogFormatter",
    "format_catalog",
    "wrap_message",
]
