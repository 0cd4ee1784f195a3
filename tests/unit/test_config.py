"""Tests for the configuration system."""

import os
from pathlib import Path

import pytest

from pocat.config import (
    DEFAULT_MAX_LINE_WIDTH,
    MergeOptions,
    Order,
    default_options,
    load_options,
    validate_options,
)
from pocat.contracts.errors import ConfigError, ValidationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, temp_dir):
    """Isolate tests from user configuration."""
    for key in list(os.environ):
        if key.startswith("POCAT_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(temp_dir)
    monkeypatch.setenv("HOME", str(temp_dir))


class TestMergeOptions:
    """Test the MergeOptions model."""

    def test_defaults(self):
        """Test default option values."""
        options = MergeOptions()

        assert options.order is Order.PRESERVE
        assert not options.drop_references
        assert not options.drop_all_comments
        assert options.width is None
        assert options.wrap
        assert options.include_fuzzy
        assert options.output_obsolete_entries
        assert options.remove_header_fields == []
        assert options.max_line_width == DEFAULT_MAX_LINE_WIDTH == 78

    def test_width_override(self):
        """Test the effective width budget."""
        assert MergeOptions(width=40).max_line_width == 40

    @pytest.mark.parametrize("value, expected", [
        ("msgid", Order.BY_IDENTITY),
        ("output", Order.BY_IDENTITY),
        ("location", Order.BY_LOCATION),
        ("file", Order.BY_LOCATION),
        ("Preserve", Order.PRESERVE),
        ("none", Order.PRESERVE),
    ])
    def test_order_aliases(self, value, expected):
        """Test accepted names for each ordering strategy."""
        assert MergeOptions(order=value).order is expected

    def test_invalid_order(self):
        """Test an unknown ordering strategy."""
        with pytest.raises(ValueError):
            MergeOptions(order="random")

    def test_width_must_be_positive(self):
        """Test the lower bound on width."""
        with pytest.raises(ValueError):
            MergeOptions(width=0)

    def test_header_field_names(self):
        """Test validation of header field names."""
        with pytest.raises(ValueError, match="remove_header_fields"):
            MergeOptions(remove_header_fields=["Language: ja"])


class TestOptionLoading:
    """Test loading options from files and the environment."""

    def test_defaults_without_file(self):
        """Test defaults when no file is found."""
        assert load_options() == default_options()

    def test_load_from_toml_file(self, temp_dir: Path):
        """Test reading the merge table of a TOML file."""
        config_file = temp_dir / "custom.toml"
        config_file.write_text(
            '[merge]\n'
            'order = "location"\n'
            'width = 60\n'
            'drop_references = true\n'
            'remove_header_fields = ["POT-Creation-Date"]\n'
        )

        options = load_options(config_file)

        assert options.order is Order.BY_LOCATION
        assert options.width == 60
        assert options.drop_references
        assert options.remove_header_fields == ["POT-Creation-Date"]

    def test_finds_file_in_current_directory(self, temp_dir: Path):
        """Test discovery of pocat.toml in the working directory."""
        (temp_dir / "pocat.toml").write_text("[merge]\nwrap = false\n")

        assert load_options().wrap is False

    def test_config_env_var(self, temp_dir: Path, monkeypatch):
        """Test the POCAT_CONFIG variable."""
        config_file = temp_dir / "elsewhere.toml"
        config_file.write_text("[merge]\nwidth = 50\n")
        monkeypatch.setenv("POCAT_CONFIG", str(config_file))

        assert load_options().width == 50

    def test_env_overrides(self, monkeypatch):
        """Test POCAT_ field overrides."""
        monkeypatch.setenv("POCAT_WIDTH", "60")
        monkeypatch.setenv("POCAT_WRAP", "false")
        monkeypatch.setenv("POCAT_ORDER", "msgid")
        monkeypatch.setenv("POCAT_REMOVE_HEADER_FIELDS", "X-Generator,POT-Creation-Date")
        monkeypatch.setenv("POCAT_UNKNOWN", "ignored")

        options = load_options()

        assert options.width == 60
        assert options.wrap is False
        assert options.order is Order.BY_IDENTITY
        assert options.remove_header_fields == ["X-Generator", "POT-Creation-Date"]

    def test_invalid_env_override(self, monkeypatch):
        """Test an override that does not validate."""
        monkeypatch.setenv("POCAT_WIDTH", "0")

        with pytest.raises(ConfigError, match="Invalid environment override"):
            load_options()

    def test_load_nonexistent_file(self):
        """Test an explicit path that does not exist."""
        with pytest.raises(ConfigError, match="Configuration file not found"):
            load_options("nonexistent.toml")

    def test_load_invalid_toml(self, temp_dir: Path):
        """Test a file that is not valid TOML."""
        bad_config = temp_dir / "bad.toml"
        bad_config.write_text("invalid toml content [[[")

        with pytest.raises(ConfigError, match="Failed to load config"):
            load_options(bad_config)


class TestOptionValidation:
    """Test validate_options."""

    def test_valid_options(self, merge_options: MergeOptions):
        """Test that defaults pass."""
        validate_options(merge_options)

    def test_duplicate_header_field(self):
        """Test a header field listed twice."""
        options = MergeOptions(remove_header_fields=["Language", "Language"])

        with pytest.raises(ValidationError, match="listed more than once"):
            validate_options(options)

    def test_width_without_wrap_only_warns(self):
        """Test that an unused width is only a warning."""
        validate_options(MergeOptions(width=40, wrap=False))
