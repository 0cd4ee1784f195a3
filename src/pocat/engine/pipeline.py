"""Merge pipeline: parse, merge, filter, order and format catalogs."""

from __future__ import annotations
from typing import List, Optional, Sequence

from ..catalog.formatter import CatalogFormatter
from ..catalog.parser import parse_catalogs
from ..config.model import MergeOptions, Order
from ..contracts.errors import PocatError
from ..contracts.stage import Stage
from ..domain.catalog import Catalog
from .context import RunContext
from .filters import (
    drop_fuzzy_entries,
    drop_obsolete_entries,
    filter_comments,
    remove_header_fields,
)
from .merge import merge_catalogs
from .ordering import order_entries


class ParseStage:
    """Parse every input text into a catalog."""

    name = "parse"

    def __init__(self, workers: int = 1):
        self.workers = workers

    def run(self, data: Sequence[str]) -> List[Catalog]:
        return parse_catalogs(data, self.workers)


class MergeStage:
    """Combine parsed catalogs under first-occurrence-wins."""

    name = "merge"

    def run(self, data: Sequence[Catalog]) -> Catalog:
        return merge_catalogs(data)


class EntryFilterStage:
    """Drop fuzzy/obsolete entries and unwanted header fields."""

    name = "filter_entries"

    def __init__(self, include_fuzzy: bool = True, output_obsolete_entries: bool = True,
                 header_fields: Sequence[str] = ()):
        self.include_fuzzy = include_fuzzy
        self.output_obsolete_entries = output_obsolete_entries
        self.header_fields = list(header_fields)

    def run(self, data: Catalog) -> Catalog:
        if not self.include_fuzzy:
            drop_fuzzy_entries(data)
        if not self.output_obsolete_entries:
            drop_obsolete_entries(data)
        if self.header_fields:
            remove_header_fields(data, self.header_fields)
        return data


class OrderStage:
    """Arrange entries by the selected strategy."""

    name = "order"

    def __init__(self, order: Order = Order.PRESERVE):
        self.order = order

    def run(self, data: Catalog) -> Catalog:
        data.replace_entries(order_entries(data.entries, self.order))
        return data


class CommentFilterStage:
    """Strip the configured comment categories."""

    name = "filter_comments"

    def __init__(self, drop_references: bool = False, drop_all: bool = False):
        self.drop_references = drop_references
        self.drop_all = drop_all

    def run(self, data: Catalog) -> Catalog:
        filter_comments(data, drop_references=self.drop_references, drop_all=self.drop_all)
        return data


class FormatStage:
    """Serialize the final catalog."""

    name = "format"

    def __init__(self, max_line_width: int, wrap: bool = True):
        self.formatter = CatalogFormatter(max_line_width, wrap)

    def run(self, data: Catalog) -> str:
        return self.formatter.format(data)


class Pipeline:
    """Sequential merge pipeline built from merge options."""

    def __init__(self, options: Optional[MergeOptions] = None):
        self.options = options or MergeOptions()
        opts = self.options
        self.stages: List[Stage] = [
            ParseStage(opts.workers),
            MergeStage(),
            EntryFilterStage(opts.include_fuzzy, opts.output_obsolete_entries,
                             opts.remove_header_fields),
            OrderStage(opts.order),
            CommentFilterStage(opts.drop_references, opts.drop_all_comments),
            FormatStage(opts.max_line_width, opts.wrap),
        ]

    def run(self, catalog_texts: Sequence[str], context: Optional[RunContext] = None) -> str:
        """Run every stage over the input texts.

        Args:
            catalog_texts: Decoded catalog texts in merge order
            context: Run context for logging and timing

        Returns:
            Serialized merged catalog

        Raises:
            ParseError: If any input is malformed; no output is produced
        """
        context = context or RunContext()
        context.start_run()
        context.logger.debug("Merging catalogs", inputs=len(catalog_texts),
                             order=self.options.order.value)

        data = list(catalog_texts)
        try:
            for stage in self.stages:
                with context.time_stage(stage.name):
                    data = stage.run(data)
        except PocatError as e:
            context.end_run()
            context.logger.error("Merge failed", error=str(e))
            raise

        context.end_run()
        return data
