"""Public API for merging PO catalogs.

This module is the stable entry point used by the CLI and by other tools:

    >>> import pocat
    >>> pocat.merge([first_po_text, second_po_text], {"order": "msgid"})
"""

from __future__ import annotations
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Union

from pydantic import ValidationError as PydanticValidationError

from .catalog.formatter import format_catalog
from .catalog.parser import parse_catalog
from .config.load import load_options
from .config.model import MergeOptions
from .config.validation import validate_options
from .contracts.errors import ConfigError, ParseError, PocatError
from .engine.context import RunContext, ensure_logging
from .engine.pipeline import Pipeline

OptionsLike = Union[MergeOptions, Mapping[str, Any], None]

__all__ = [
    "merge",
    "merge_files",
    "parse_catalog",
    "format_catalog",
    "resolve_options",
    "load_options",
]


def resolve_options(options: OptionsLike = None) -> MergeOptions:
    """Turn a mapping (or None) into validated merge options.

    Raises:
        ValidationError: If the options are contradictory
        ConfigError: If a mapping does not describe valid options
    """
    if options is None:
        resolved = MergeOptions()
    elif isinstance(options, MergeOptions):
        resolved = options
    else:
        try:
            resolved = MergeOptions.model_validate(dict(options))
        except PydanticValidationError as e:
            raise ConfigError(f"Invalid merge options: {e}") from e
    validate_options(resolved)
    return resolved


def merge(
    catalog_texts: Sequence[str],
    options: OptionsLike = None,
    run_id: Optional[str] = None,
) -> str:
    """Merge catalog texts into one serialized catalog.

    Args:
        catalog_texts: Decoded catalog texts; earlier inputs win on conflicts
        options: MergeOptions or a mapping of option fields
        run_id: Optional identifier bound to log events

    Returns:
        The merged catalog text

    Logging goes through structlog. If the host application has not
    configured it, events below WARNING are filtered out.

    Raises:
        ParseError: If any input is malformed
    """
    ensure_logging()
    resolved = resolve_options(options)
    return Pipeline(resolved).run(catalog_texts, RunContext(run_id))


def merge_files(
    paths: Sequence[Union[str, Path]],
    options: OptionsLike = None,
    encoding: str = "utf-8",
) -> str:
    """Read PO files and merge them.

    Raises:
        PocatError: If a file cannot be read
        ParseError: If any file is malformed; the error names the file
    """
    texts = []
    for path in paths:
        try:
            texts.append(Path(path).read_text(encoding=encoding))
        except OSError as e:
            raise PocatError(f"Cannot read {path}: {e}", {"path": str(path)}) from e
        except UnicodeDecodeError as e:
            raise PocatError(f"Cannot decode {path} as {encoding}", {"path": str(path)}) from e
    try:
        return merge(texts, options)
    except ParseError as e:
        e.set_path(str(paths[e.input_index]))
        raise
