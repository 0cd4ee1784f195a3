"""Pytest configuration and fixtures."""

import sys
import tempfile
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

import pytest

from pocat.config import MergeOptions


LONG_MSGID = "long long long long long long long long long long long long long long long line"


@pytest.fixture
def temp_dir():
    """Temporary directory for test artifacts."""
    with tempfile.TemporaryDirectory() as tmp:
        yield Path(tmp)


@pytest.fixture
def merge_options() -> MergeOptions:
    """Default merge options."""
    return MergeOptions()


@pytest.fixture
def header_po() -> str:
    """A catalog holding only a header."""
    return (
        'msgid ""\n'
        'msgstr ""\n'
        '"Project-Id-Version: gettext 3.0.0\\n"\n'
    )


@pytest.fixture
def full_po() -> str:
    """A catalog using every comment kind, a context, plurals and an obsolete entry."""
    return (
        '# SOME DESCRIPTIVE TITLE.\n'
        '#, fuzzy\n'
        'msgid ""\n'
        'msgstr ""\n'
        '"Project-Id-Version: demo 1.0\\n"\n'
        '"Language: fr\\n"\n'
        '"Content-Type: text/plain; charset=UTF-8\\n"\n'
        '\n'
        '# translator comment\n'
        '#. extracted comment\n'
        '#: src/app.py:10 src/app.py:20\n'
        '#, python-format\n'
        '#| msgid "Hello %s"\n'
        'msgid "Hello %(name)s"\n'
        'msgstr "Bonjour %(name)s"\n'
        '\n'
        'msgctxt "menu"\n'
        'msgid "File"\n'
        'msgstr "Fichier"\n'
        '\n'
        '#: src/app.py:30\n'
        'msgid "One file"\n'
        'msgid_plural "%d files"\n'
        'msgstr[0] "Un fichier"\n'
        'msgstr[1] "%d fichiers"\n'
        '\n'
        '#~ msgid "Gone"\n'
        '#~ msgstr "Parti"\n'
    )


@pytest.fixture
def write_po(temp_dir: Path):
    """Write PO text to a numbered file and return its path."""
    counter = iter(range(1000))

    def _write(text: str) -> Path:
        path = temp_dir / f"input{next(counter)}.po"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
