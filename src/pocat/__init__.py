"""pocat - merge gettext PO message catalogs."""

__version__ = "0.1.0"

from .app_api import merge, merge_files, parse_catalog, format_catalog
from .config.model import MergeOptions, Order
from .contracts.errors import PocatError, ParseError, ConfigError, ValidationError
from .domain.catalog import Catalog, Comments, Entry, Reference

__all__ = [
    "__version__",
    "merge",
    "merge_files",
    "parse_catalog",
    "format_catalog",
    "MergeOptions",
    "Order",
    "PocatError",
    "ParseError",
    "ConfigError",
    "ValidationError",
    "Catalog",
    "Comments",
    "Entry",
    "Reference",
]
