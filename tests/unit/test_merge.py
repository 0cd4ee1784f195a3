"""Tests for the merge engine."""

from pocat.catalog import parse_catalog
from pocat.domain import Catalog, Entry
from pocat.engine import merge_catalogs


def _catalog(*entries, header=None):
    return Catalog(list(entries), header=header)


class TestHeaderPrecedence:
    """Test which header the merged catalog adopts."""

    def test_first_header_wins(self):
        """Test that the first header is kept."""
        first = _catalog(header=Entry("", "Project-Id-Version: gettext 3.0.0\n"))
        second = _catalog(header=Entry("", "Language: ja\n"))

        merged = merge_catalogs([first, second])

        assert merged.header.translation == "Project-Id-Version: gettext 3.0.0\n"
        assert merged.header_fields() == {"Project-Id-Version": "gettext 3.0.0"}

    def test_header_from_later_input_when_first_has_none(self):
        """Test adopting the header of a later input."""
        first = _catalog(Entry("Hello"))
        second = _catalog(header=Entry("", "Language: ja\n"))

        merged = merge_catalogs([first, second])

        assert merged.header.translation == "Language: ja\n"

    def test_no_header(self):
        """Test inputs without any header."""
        assert merge_catalogs([_catalog(Entry("a"))]).header is None


class TestDedup:
    """Test first-occurrence-wins deduplication."""

    def test_identical_duplicates(self):
        """Test identical entries in two inputs."""
        po = 'msgid "Hello"\nmsgstr "Bonjour"\n'

        merged = merge_catalogs([parse_catalog(po), parse_catalog(po)])

        assert [(e.id, e.translation) for e in merged] == [("Hello", "Bonjour")]

    def test_conflicting_duplicates_keep_first(self):
        """Test that the first translation and its comments win."""
        first = parse_catalog('# first\nmsgid "Hello"\nmsgstr "Bonjour"\n')
        second = parse_catalog('# second\nmsgid "Hello"\nmsgstr "Salut"\n')

        merged = merge_catalogs([first, second])

        assert len(merged) == 1
        assert merged.entries[0].translation == "Bonjour"
        assert merged.entries[0].comments.translator == ["first"]

    def test_duplicates_within_one_input(self):
        """Test duplicates inside a single input."""
        catalog = parse_catalog('msgid "a"\nmsgstr "1"\n\nmsgid "a"\nmsgstr "2"\n')

        merged = merge_catalogs([catalog])

        assert [e.translation for e in merged] == ["1"]

    def test_context_is_part_of_identity(self):
        """Test that entries differing in context are both kept."""
        first = _catalog(Entry("Open", "Ouvrir"))
        second = _catalog(Entry("Open", "Ouvert", context="adjective"))

        merged = merge_catalogs([first, second])

        assert [e.key for e in merged] == [(None, "Open"), ("adjective", "Open")]

    def test_distinct_entries_keep_first_seen_order(self):
        """Test the first-seen order of distinct entries."""
        merged = merge_catalogs([
            _catalog(Entry("Hello"), Entry("b")),
            _catalog(Entry("World"), Entry("Hello")),
        ])

        assert [e.id for e in merged] == ["Hello", "b", "World"]


class TestOwnership:
    """Test that merging copies entries."""

    def test_output_does_not_alias_inputs(self):
        """Test that changing the result leaves the inputs alone."""
        source = _catalog(Entry("Hello", "Bonjour"), header=Entry("", "Language: fr\n"))

        merged = merge_catalogs([source])
        merged.entries[0].comments.translator.append("changed")
        merged.header.translation = ""

        assert source.entries[0].comments.translator == []
        assert source.header.translation == "Language: fr\n"

    def test_inputs_are_not_modified(self):
        """Test that the inputs keep their entries."""
        first = _catalog(Entry("a"))
        second = _catalog(Entry("a"), Entry("b"))

        merge_catalogs([first, second])

        assert len(first) == 1
        assert len(second) == 2
