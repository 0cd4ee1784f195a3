"""Merge engine: concatenate catalogs with first-occurrence-wins dedup."""

from __future__ import annotations
from typing import Iterable

import structlog

from ..domain.catalog import Catalog

logger = structlog.get_logger()


def merge_catalogs(catalogs: Iterable[Catalog]) -> Catalog:
    """Combine parsed catalogs into a new one.

    The first header seen is adopted as-is and every later header is
    ignored. Regular entries keep first-seen order across all inputs; an
    entry whose ``(context, id)`` key is already in the output is dropped
    together with its comments. No fields are merged between duplicates.

    Args:
        catalogs: Parsed catalogs in input order

    Returns:
        A fresh catalog holding copies of the kept entries
    """
    merged = Catalog()
    discarded = 0

    for index, catalog in enumerate(catalogs):
        if catalog.header is not None:
            if merged.header is None:
                merged.header = catalog.header.copy()
                logger.debug("Adopted header", input_index=index)

        for entry in catalog.entries:
            if entry.key in merged:
                discarded += 1
                continue
            merged.add(entry.copy())

    logger.debug("Merged catalogs", entries=len(merged), discarded=discarded)
    return merged
