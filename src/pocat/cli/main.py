"""Command-line interface for merging PO catalogs."""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from .. import app_api
from ..config.model import Order
from ..contracts.errors import PocatError
from ..engine.context import configure_logging

app = typer.Typer(
    name="pocat",
    help="Concatenate and merge PO message catalogs",
    add_completion=False,
)
console = Console(stderr=True)


def _requested_order(
    sort_output: bool,
    sort_by_msgid: bool,
    sort_by_location: bool,
    sort_by_file: bool,
    no_sort_output: bool,
) -> Optional[Order]:
    requested = set()
    if sort_output or sort_by_msgid:
        requested.add(Order.BY_IDENTITY)
    if sort_by_location or sort_by_file:
        requested.add(Order.BY_LOCATION)
    if no_sort_output:
        requested.add(Order.PRESERVE)
    if len(requested) > 1:
        raise typer.BadParameter("choose only one ordering option")
    return requested.pop() if requested else None


@app.command()
def main(
    inputs: List[Path] = typer.Argument(..., help="PO files to merge, highest priority first"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the merged catalog to this file"
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="TOML file with a [merge] table"
    ),
    sort_output: bool = typer.Option(False, "--sort-output", help="Sort entries by msgid"),
    sort_by_msgid: bool = typer.Option(False, "--sort-by-msgid", help="Sort entries by msgctxt and msgid"),
    sort_by_location: bool = typer.Option(False, "--sort-by-location", help="Sort entries by first reference"),
    sort_by_file: bool = typer.Option(False, "--sort-by-file", help="Same as --sort-by-location"),
    no_sort_output: bool = typer.Option(False, "--no-sort-output", help="Keep input order"),
    no_location: bool = typer.Option(False, "--no-location", help="Drop #: reference comments"),
    no_all_comments: bool = typer.Option(False, "--no-all-comments", help="Drop every comment"),
    width: Optional[int] = typer.Option(None, "--width", min=1, help="Characters per quoted line"),
    wrap: Optional[bool] = typer.Option(None, "--wrap/--no-wrap", help="Split long strings"),
    no_fuzzy: bool = typer.Option(False, "--no-fuzzy", help="Drop entries flagged fuzzy"),
    no_obsolete_entries: bool = typer.Option(
        False, "--no-obsolete-entries", help="Drop #~ obsolete entries"
    ),
    remove_header_field: Optional[List[str]] = typer.Option(
        None, "--remove-header-field", help="Header field to remove (repeatable)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log pipeline stages"),
):
    """Merge INPUTS into one catalog; the first definition of an entry wins."""

    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    try:
        options = app_api.load_options(config)

        updates = {}
        order = _requested_order(sort_output, sort_by_msgid, sort_by_location,
                                 sort_by_file, no_sort_output)
        if order is not None:
            updates["order"] = order
        if no_location:
            updates["drop_references"] = True
        if no_all_comments:
            updates["drop_all_comments"] = True
        if width is not None:
            updates["width"] = width
        if wrap is not None:
            updates["wrap"] = wrap
        if no_fuzzy:
            updates["include_fuzzy"] = False
        if no_obsolete_entries:
            updates["output_obsolete_entries"] = False
        if remove_header_field:
            updates["remove_header_fields"] = list(remove_header_field)

        options = app_api.resolve_options({**options.model_dump(), **updates})
        merged = app_api.merge_files(inputs, options)

    except PocatError as e:
        console.print(f"❌ {e}", style="red", markup=False, soft_wrap=True)
        raise typer.Exit(1)

    if output is None:
        typer.echo(merged, nl=False)
    else:
        output.write_text(merged, encoding="utf-8")
        if verbose:
            console.print(f"✓ Wrote {output}")


if __name__ == "__main__":
    app()
