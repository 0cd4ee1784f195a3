"""Catalog serialization with column-width-aware string wrapping."""

from __future__ import annotations
import re
from typing import List, Optional

from ..config.constants import (
    DEFAULT_MAX_LINE_WIDTH,
    EXTRACTED_COMMENT_MARK,
    FLAG_COMMENT_MARK,
    OBSOLETE_COMMENT_MARK,
    PREVIOUS_COMMENT_MARK,
    REFERENCE_COMMENT_MARK,
    TRANSLATOR_COMMENT_MARK,
)
from ..domain.catalog import Catalog, Entry

LINE_RX = re.compile(r"[^\n]*\n|[^\n]+")

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\v": "\\v",
}


def escape(text: str) -> str:
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


def wrap_message(message: str, max_line_width: int, wrap: bool = True) -> List[str]:
    """Split a logical string into the chunks written on separate lines.

    The string is first split after each newline. With wrapping enabled every
    piece is then cut into raw chunks of ``max_line_width`` characters,
    regardless of word boundaries.
    """
    if message == "":
        return [message]
    chunks: List[str] = []
    for line in LINE_RX.findall(message):
        if not wrap or max_line_width <= 0:
            chunks.append(line)
            continue
        for start in range(0, len(line), max_line_width):
            chunks.append(line[start:start + max_line_width])
    return chunks


class CatalogFormatter:
    """Render a catalog back to PO text."""

    def __init__(self, max_line_width: int = DEFAULT_MAX_LINE_WIDTH, wrap: bool = True):
        self.max_line_width = max_line_width
        self.wrap = wrap

    def format(self, catalog: Catalog) -> str:
        """Render the header followed by the catalog entries in their current order."""
        blocks: List[str] = []
        if catalog.header is not None:
            blocks.append(self.format_entry(catalog.header))
        blocks.extend(self.format_entry(entry) for entry in catalog.entries)
        return "\n".join(blocks)

    def format_entry(self, entry: Entry) -> str:
        lines: List[str] = []
        lines.extend(self._format_comments(entry))

        prefix = f"{OBSOLETE_COMMENT_MARK} " if entry.obsolete else ""
        if entry.context is not None:
            lines.extend(self._format_field("msgctxt", entry.context, prefix))
        lines.extend(self._format_field("msgid", entry.id, prefix))
        if entry.id_plural is not None:
            lines.extend(self._format_field("msgid_plural", entry.id_plural, prefix))
        if isinstance(entry.translation, list):
            for i, text in enumerate(entry.translation):
                lines.extend(self._format_field(f"msgstr[{i}]", text, prefix))
        else:
            lines.extend(self._format_field("msgstr", entry.translation, prefix))
        return "".join(line + "\n" for line in lines)

    def _format_field(self, keyword: str, text: str, prefix: str = "") -> List[str]:
        chunks = wrap_message(text, self.max_line_width, self.wrap)
        if len(chunks) == 1 and not chunks[0].endswith("\n"):
            return [f'{prefix}{keyword} "{escape(chunks[0])}"']
        lines = [f'{prefix}{keyword} ""']
        lines.extend(f'{prefix}"{escape(chunk)}"' for chunk in chunks)
        return lines

    def _format_comments(self, entry: Entry) -> List[str]:
        comments = entry.comments
        lines: List[str] = []
        for text in comments.translator:
            lines.append(f"{TRANSLATOR_COMMENT_MARK} {text}" if text else TRANSLATOR_COMMENT_MARK)
        for text in comments.extracted:
            lines.append(f"{EXTRACTED_COMMENT_MARK} {text}")
        lines.extend(self._format_references(entry))
        if comments.flags:
            lines.append(f"{FLAG_COMMENT_MARK} {', '.join(comments.flags)}")
        for text in comments.previous:
            lines.append(f"{PREVIOUS_COMMENT_MARK} {text}")
        return lines

    def _format_references(self, entry: Entry) -> List[str]:
        """Join references on ``#:`` lines, starting a new line at the width."""
        lines: List[str] = []
        current = ""
        for reference in map(str, entry.comments.references):
            if not current:
                current = f"{REFERENCE_COMMENT_MARK} {reference}"
            elif (self.wrap and self.max_line_width > 0
                    and len(current) + len(reference) > self.max_line_width):
                lines.append(current)
                current = f"{REFERENCE_COMMENT_MARK} {reference}"
            else:
                current += f" {reference}"
        if current:
            lines.append(current)
        return lines


def format_catalog(
    catalog: Catalog,
    width: Optional[int] = None,
    wrap: bool = True,
) -> str:
    """Serialize a catalog to PO text.

    Args:
        catalog: Catalog to render
        width: Characters per quoted line; defaults to DEFAULT_MAX_LINE_WIDTH
        wrap: When False strings are never split by length
    """
    formatter = CatalogFormatter(
        DEFAULT_MAX_LINE_WIDTH if width is None else width,
        wrap,
    )
    return formatter.format(catalog)
