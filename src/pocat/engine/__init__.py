"""Merge pipeline engine."""

from .context import RunContext
from .filters import drop_fuzzy_entries, drop_obsolete_entries, filter_comments, remove_header_fields
from .merge import merge_catalogs
from .ordering import order_entries
from .pipeline import Pipeline

__all__ = [
    "RunContext",
    "drop_fuzzy_entries",
    "drop_obsolete_entries",
    "filter_comments",
    "remove_header_fields",
    "merge_catalogs",
    "order_entries",
    "Pipeline",
]
