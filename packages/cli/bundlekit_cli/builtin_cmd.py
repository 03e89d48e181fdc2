"""Builtin command - Classify module specifiers as runtime built-ins."""

from typing import List

import typer
from bundlekit_core import is_builtin


def builtin(
    specifiers: List[str] = typer.Argument(..., help="Module specifiers to classify"),
):
    """
    Report whether each specifier is a Node.js built-in module.

    Exits with status 1 if any specifier is not a built-in.

    \b
    Examples:
        bundlekit builtin fs node:path lodash
    """
    all_builtin = True
    for specifier in specifiers:
        builtin_module = is_builtin(specifier)
        all_builtin = all_builtin and builtin_module
        typer.echo(f"{specifier}\t{'builtin' if builtin_module else 'external'}")

    if not all_builtin:
        raise typer.Exit(1)
