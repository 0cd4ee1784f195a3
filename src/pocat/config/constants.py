"""Global constants for catalog parsing and formatting."""

from __future__ import annotations

# Characters per quoted line before wrapping; with the two quotes a wrapped
# line stays within an 80 column terminal.
DEFAULT_MAX_LINE_WIDTH = 78

# Comment markers (the text right after "#")
TRANSLATOR_COMMENT_MARK = "#"
EXTRACTED_COMMENT_MARK = "#."
REFERENCE_COMMENT_MARK = "#:"
FLAG_COMMENT_MARK = "#,"
PREVIOUS_COMMENT_MARK = "#|"
OBSOLETE_COMMENT_MARK = "#~"

FUZZY_FLAG = "fuzzy"

# Configuration discovery
CONFIG_ENV_VAR = "POCAT_CONFIG"
ENV_PREFIX = "POCAT_"
CONFIG_FILE_NAME = "pocat.toml"
