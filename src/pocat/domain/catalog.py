"""Message catalog data model.

Entries are plain dataclasses. A ``Catalog`` keeps its regular entries in
insertion order next to an optional header entry, and maintains an index by
identity key (``(context, id)``) for lookups.
"""

from __future__ import annotations
import copy
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple, Union

from ..config.constants import FUZZY_FLAG

Key = Tuple[Optional[str], str]


@dataclass
class Reference:
    """One source location from a ``#:`` comment."""

    file: str
    line: Optional[int] = None

    @classmethod
    def parse(cls, token: str) -> "Reference":
        """Split ``file:line`` on the last colon.

        Tokens without a numeric suffix are kept whole as the file name.
        """
        file, sep, line = token.rpartition(":")
        if sep and file and line.isdigit():
            return cls(file, int(line))
        return cls(token)

    def __str__(self) -> str:
        if self.line is None:
            return self.file
        return f"{self.file}:{self.line}"


@dataclass
class Comments:
    """The five comment categories attached to an entry."""

    translator: List[str] = field(default_factory=list)
    extracted: List[str] = field(default_factory=list)
    references: List[Reference] = field(default_factory=list)
    flags: List[str] = field(default_factory=list)
    previous: List[str] = field(default_factory=list)

    def clear(self) -> None:
        self.translator.clear()
        self.extracted.clear()
        self.references.clear()
        self.flags.clear()
        self.previous.clear()

    def is_empty(self) -> bool:
        return not (self.translator or self.extracted or self.references
                    or self.flags or self.previous)


@dataclass
class Entry:
    """One translatable unit."""

    id: str
    translation: Union[str, List[str]] = ""
    context: Optional[str] = None
    id_plural: Optional[str] = None
    comments: Comments = field(default_factory=Comments)
    obsolete: bool = False

    @property
    def key(self) -> Key:
        """Identity key used for deduplication."""
        return (self.context, self.id)

    @property
    def is_header(self) -> bool:
        return self.id == "" and self.context is None and not self.obsolete

    @property
    def is_plural(self) -> bool:
        return isinstance(self.translation, list)

    @property
    def is_fuzzy(self) -> bool:
        return FUZZY_FLAG in self.comments.flags

    @property
    def first_reference(self) -> Optional[Reference]:
        if self.comments.references:
            return self.comments.references[0]
        return None

    def copy(self) -> "Entry":
        return copy.deepcopy(self)


class Catalog:
    """Ordered collection of entries plus an optional header."""

    def __init__(self, entries: Optional[List[Entry]] = None, header: Optional[Entry] = None):
        self.header = header
        self.entries: List[Entry] = []
        self._index: Dict[Key, Entry] = {}
        for entry in entries or []:
            self.add(entry)

    def add(self, entry: Entry) -> None:
        """Append an entry; an empty-id entry without context becomes the header.

        A parsed catalog may hold several entries with the same identity
        key. Lookups return the first one.
        """
        if entry.is_header:
            self.header = entry
            return
        self.entries.append(entry)
        self._index.setdefault(entry.key, entry)

    def replace_entries(self, entries: List[Entry]) -> None:
        """Swap the entry sequence, rebuilding the identity index."""
        self.entries = []
        self._index = {}
        for entry in entries:
            self.add(entry)

    def get(self, id: str, context: Optional[str] = None) -> Optional[Entry]:
        return self._index.get((context, id))

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"Catalog(entries={len(self.entries)}, header={self.header is not None})"

    def header_fields(self) -> Dict[str, str]:
        """Decode the header translation into an ordered ``Key: Value`` mapping."""
        fields: Dict[str, str] = {}
        if self.header is None or not isinstance(self.header.translation, str):
            return fields
        for line in self.header.translation.split("\n"):
            name, sep, value = line.partition(":")
            if sep:
                fields[name.strip()] = value.strip()
        return fields

    def remove_header_field(self, name: str) -> bool:
        """Remove every header line whose key is ``name``.

        Returns:
            True if a line was removed
        """
        if self.header is None or not isinstance(self.header.translation, str):
            return False
        lines = self.header.translation.split("\n")
        kept = [line for line in lines if line.partition(":")[0].strip() != name]
        if len(kept) == len(lines):
            return False
        self.header.translation = "\n".join(kept)
        return True
