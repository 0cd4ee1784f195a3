"""PO catalog parser.

Turns the text of one catalog into a :class:`~pocat.domain.catalog.Catalog`.
Multi-line strings are joined while parsing, so the model only ever holds
logical strings.
"""

from __future__ import annotations
import re
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Sequence

import structlog

from ..contracts.errors import ParseError
from ..config.constants import OBSOLETE_COMMENT_MARK
from ..domain.catalog import Catalog, Comments, Entry, Reference

logger = structlog.get_logger()

KEYWORD_RX = re.compile(r"^(msgctxt|msgid_plural|msgid|msgstr)(?:\[(\d+)\])?(?:\s+|(?=\")|$)(.*)$")

_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    '"': '"',
    "\\": "\\",
}


def unquote(text: str) -> Optional[str]:
    """Decode a quoted PO string.

    Returns:
        The unescaped content, or None if the closing quote is missing

    Raises:
        ValueError: If anything but whitespace follows the closing quote
    """
    chars: List[str] = []
    i = 1
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            if i + 1 >= len(text):
                return None
            nxt = text[i + 1]
            chars.append(_ESCAPES.get(nxt, nxt))
            i += 2
            continue
        if ch == '"':
            rest = text[i + 1:]
            if rest.strip():
                raise ValueError(f"unexpected text after closing quote: {rest.strip()!r}")
            return "".join(chars)
        chars.append(ch)
        i += 1
    return None


class _EntryBuilder:
    """Collects the lines of one raw entry."""

    def __init__(self) -> None:
        self.comments = Comments()
        self.context: Optional[str] = None
        self.id: Optional[str] = None
        self.id_plural: Optional[str] = None
        self.msgstr: Optional[str] = None
        self.plural_msgstr: Dict[int, str] = {}
        self.obsolete = False
        self.start_line: Optional[int] = None
        self._last: Optional[tuple] = None

    @property
    def has_keywords(self) -> bool:
        return self.start_line is not None

    @property
    def has_translation(self) -> bool:
        return self.msgstr is not None or bool(self.plural_msgstr)

    def missing_plural_index(self) -> Optional[int]:
        """Lowest msgstr[N] slot left empty below the highest one given."""
        if not self.plural_msgstr:
            return None
        for i in range(max(self.plural_msgstr) + 1):
            if i not in self.plural_msgstr:
                return i
        return None

    def set_field(self, name: str, index: Optional[int], value: str) -> None:
        if name == "msgstr" and index is not None:
            self.plural_msgstr[index] = value
        else:
            setattr(self, _FIELD_ATTRS[name], value)
        self._last = (name, index)

    def append(self, value: str) -> bool:
        """Continue the most recent field; False if there is none."""
        if self._last is None:
            return False
        name, index = self._last
        if name == "msgstr" and index is not None:
            self.plural_msgstr[index] += value
        else:
            attr = _FIELD_ATTRS[name]
            setattr(self, attr, getattr(self, attr) + value)
        return True

    def build(self) -> Entry:
        if self.plural_msgstr:
            translation = [self.plural_msgstr[i] for i in sorted(self.plural_msgstr)]
        else:
            translation = self.msgstr
        return Entry(
            id=self.id,
            translation=translation,
            context=self.context,
            id_plural=self.id_plural,
            comments=self.comments,
            obsolete=self.obsolete,
        )


_FIELD_ATTRS = {
    "msgctxt": "context",
    "msgid": "id",
    "msgid_plural": "id_plural",
    "msgstr": "msgstr",
}


class CatalogParser:
    """Line-oriented parser for one catalog text."""

    def __init__(self, text: str, index: int = 0):
        self.text = text
        self.index = index
        self.catalog = Catalog()
        self._entry = _EntryBuilder()
        self._lineno = 0
        self._line = ""

    def parse(self) -> Catalog:
        for lineno, line in enumerate(self.text.split("\n"), start=1):
            self._lineno = lineno
            self._line = line.rstrip("\r")
            self._parse_line(self._line.strip())
        self._finish_entry()
        logger.debug(
            "Parsed catalog",
            input_index=self.index,
            entries=len(self.catalog),
            header=self.catalog.header is not None,
        )
        return self.catalog

    def _error(self, message: str, line: Optional[int] = None) -> ParseError:
        if line is None:
            return ParseError(message, self.index, self._lineno, self._line)
        return ParseError(message, self.index, line)

    def _parse_line(self, stripped: str) -> None:
        if not stripped:
            return
        if stripped.startswith(OBSOLETE_COMMENT_MARK):
            rest = stripped[len(OBSOLETE_COMMENT_MARK):].strip()
            if rest.startswith("|"):
                self._parse_comment("#" + rest)
            else:
                self._parse_keyword_line(rest, obsolete=True)
        elif stripped.startswith("#"):
            self._parse_comment(stripped)
        elif stripped.startswith('"'):
            if not self._entry.append(self._unquote(stripped)):
                raise self._error("string continuation without a preceding keyword")
        else:
            self._parse_keyword_line(stripped, obsolete=False)

    def _parse_comment(self, stripped: str) -> None:
        if self._entry.has_translation:
            self._finish_entry()
        elif self._entry.has_keywords:
            raise self._error("missing msgstr before comment")

        marker = stripped[1:2]
        body = stripped[2:]
        # "# " already consumed the separator of a translator comment
        if marker not in ("", " ") and body.startswith(" "):
            body = body[1:]
        comments = self._entry.comments

        if marker in ("", " "):
            comments.translator.append(body)
        elif marker == ".":
            comments.extracted.append(body)
        elif marker == ":":
            comments.references.extend(Reference.parse(token) for token in body.split())
        elif marker == ",":
            comments.flags.extend(flag.strip() for flag in body.split(",") if flag.strip())
        elif marker == "|":
            comments.previous.append(body)
        else:
            raise self._error(f"unknown comment marker: {stripped[:2]!r}")

    def _parse_keyword_line(self, stripped: str, obsolete: bool) -> None:
        if not stripped:
            return
        if stripped.startswith('"'):
            if not self._entry.append(self._unquote(stripped)):
                raise self._error("string continuation without a preceding keyword")
            return

        match = KEYWORD_RX.match(stripped)
        if match is None:
            raise self._error(f"unknown keyword: {stripped.split()[0]!r}")
        name, index, rest = match.groups()
        if index is not None and name != "msgstr":
            raise self._error(f"{name} does not take an index")
        if not rest.startswith('"'):
            raise self._error(f"{name} must be followed by a quoted string")
        value = self._unquote(rest)
        plural_index = int(index) if index is not None else None

        entry = self._entry
        if name in ("msgctxt", "msgid") and entry.has_translation:
            self._finish_entry()
            entry = self._entry

        if name == "msgctxt":
            if entry.context is not None:
                raise self._error("duplicate msgctxt")
            if entry.id is not None:
                raise self._error("msgctxt must precede msgid")
        elif name == "msgid":
            if entry.id is not None:
                raise self._error("msgid without msgstr", entry.start_line)
        elif name == "msgid_plural":
            if entry.id is None:
                raise self._error("msgid_plural without msgid")
            if entry.id_plural is not None:
                raise self._error("duplicate msgid_plural")
            if entry.has_translation:
                raise self._error("msgid_plural after msgstr")
        else:
            if entry.id is None:
                raise self._error("msgstr without msgid")
            if plural_index is None:
                if entry.msgstr is not None:
                    raise self._error("duplicate msgstr")
                if entry.plural_msgstr:
                    raise self._error("msgstr mixed with msgstr[N]")
            else:
                if entry.msgstr is not None:
                    raise self._error("msgstr[N] mixed with msgstr")
                if plural_index in entry.plural_msgstr:
                    raise self._error(f"duplicate msgstr[{plural_index}]")

        if entry.start_line is None:
            entry.start_line = self._lineno
        if obsolete:
            entry.obsolete = True
        entry.set_field(name, plural_index, value)

    def _unquote(self, text: str) -> str:
        try:
            value = unquote(text)
        except ValueError as e:
            raise self._error(str(e)) from e
        if value is None:
            raise self._error("unterminated string")
        return value

    def _finish_entry(self) -> None:
        entry = self._entry
        self._entry = _EntryBuilder()
        if not entry.has_keywords:
            # Comments with no entry after them
            return
        if entry.id is None:
            raise self._error("msgctxt without msgid", entry.start_line)
        if not entry.has_translation:
            raise self._error(f"missing msgstr for msgid {entry.id!r}", entry.start_line)
        missing = entry.missing_plural_index()
        if missing is not None:
            raise self._error(
                f"missing msgstr[{missing}] for msgid {entry.id!r}", entry.start_line
            )

        built = entry.build()
        if built.is_header and self.catalog.header is not None:
            raise self._error("duplicate header entry", entry.start_line)
        self.catalog.add(built)


def parse_catalog(text: str, index: int = 0) -> Catalog:
    """Parse the text of one catalog.

    Args:
        text: Decoded catalog text
        index: Position of this catalog among the merge inputs, used in errors

    Returns:
        Parsed catalog

    Raises:
        ParseError: If the text is malformed
    """
    return CatalogParser(text, index).parse()


def parse_catalogs(texts: Sequence[str], workers: int = 1) -> List[Catalog]:
    """Parse several catalog texts, keeping input order.

    With ``workers > 1`` the texts are parsed on a thread pool. Results are
    always joined in input order, and the error of the lowest failing input
    index is raised.

    Raises:
        ParseError: If any text is malformed
    """
    if workers <= 1 or len(texts) <= 1:
        return [parse_catalog(text, index) for index, text in enumerate(texts)]

    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(parse_catalog, text, index) for index, text in enumerate(texts)]
        return [future.result() for future in futures]
