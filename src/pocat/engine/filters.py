"""Comment and entry filters applied to a merged catalog in place."""

from __future__ import annotations
from typing import Iterable, List

import structlog

from ..domain.catalog import Catalog

logger = structlog.get_logger()


def filter_comments(catalog: Catalog, drop_references: bool = False, drop_all: bool = False) -> None:
    """Clear the selected comment categories on every regular entry.

    The header keeps its comments. Entries themselves are never removed.

    Args:
        catalog: Catalog to modify
        drop_references: Clear ``#:`` reference comments
        drop_all: Clear translator, extracted, reference, flag and previous comments
    """
    if not (drop_references or drop_all):
        return
    for entry in catalog.entries:
        if drop_all:
            entry.comments.clear()
        else:
            entry.comments.references.clear()


def drop_fuzzy_entries(catalog: Catalog) -> int:
    """Remove regular entries flagged fuzzy; the header is kept.

    Returns:
        Number of removed entries
    """
    kept = [entry for entry in catalog.entries if not entry.is_fuzzy]
    removed = len(catalog.entries) - len(kept)
    if removed:
        catalog.replace_entries(kept)
        logger.debug("Dropped fuzzy entries", count=removed)
    return removed


def drop_obsolete_entries(catalog: Catalog) -> int:
    """Remove ``#~`` obsolete entries.

    Returns:
        Number of removed entries
    """
    kept = [entry for entry in catalog.entries if not entry.obsolete]
    removed = len(catalog.entries) - len(kept)
    if removed:
        catalog.replace_entries(kept)
        logger.debug("Dropped obsolete entries", count=removed)
    return removed


def remove_header_fields(catalog: Catalog, names: Iterable[str]) -> List[str]:
    """Remove the named ``Key: Value`` lines from the header.

    Returns:
        Names of the fields that were present and removed
    """
    removed = [name for name in names if catalog.remove_header_field(name)]
    if removed:
        logger.debug("Removed header fields", fields=removed)
    return removed
