"""Root command - Print the common source root of a set of paths."""

import asyncio
from typing import List

import typer
from bundlekit_core import longest_common_ancestor


def root(
    paths: List[str] = typer.Argument(..., help="Absolute file or directory paths"),
):
    """
    Print the deepest directory shared by the given absolute paths.

    \b
    Examples:
        bundlekit root /repo/pkg/src/a.ts /repo/pkg/lib/b.ts
    """
    typer.echo(asyncio.run(longest_common_ancestor(paths)))
