"""Entries command - Show the export entries a package declares."""

import json
from typing import List, Optional

import typer
from bundlekit_common import ConflictingExportTypesError, ManifestDefaults, ValidationError
from bundlekit_core import read_manifest, resolve_entries

from .utils import error, info, success, warning


def entries(
    directory: str = typer.Argument(".", help="Package directory containing package.json"),
    field: Optional[List[str]] = typer.Option(
        None,
        "--field",
        "-f",
        help="Manifest field to read entries from (main, module, exports). Repeatable.",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print entries as a JSON array",
    ),
):
    """
    Show the export entries declared in a package.json.

    \b
    Examples:
        bundlekit entries packages/core
        bundlekit entries packages/core -f main -f module -f exports
        bundlekit entries --json
    """
    manifest = read_manifest(directory)
    if manifest is None:
        warning(f"No usable {ManifestDefaults.FILENAME} in {directory}, no entries declared")
        return

    fields = field or list(ManifestDefaults.ENTRY_FIELDS)
    try:
        resolved = resolve_entries(manifest, fields)
    except (ConflictingExportTypesError, ValidationError) as e:
        error(e.message)
        raise typer.Exit(1)

    if as_json:
        typer.echo(
            json.dumps([entry.model_dump(by_alias=True, mode="json") for entry in resolved], indent=2)
        )
        return

    if not resolved:
        info(f"No entries declared via {', '.join(fields)}")
        return

    for entry in resolved:
        typer.echo(f"{entry.output_path}\t{entry.type.value}\t(from {entry.from_})")
    success(f"Resolved {len(resolved)} entries from {directory}")
