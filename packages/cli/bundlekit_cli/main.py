"""bundlekit CLI - Main entry point."""

import typer

from . import builtin_cmd, entries_cmd, root_cmd

app = typer.Typer(
    name="bundlekit",
    help="bundlekit CLI - Inspect package entries, source roots and built-in modules",
    no_args_is_help=True,
    add_completion=False,
)

# Register all commands
app.command()(entries_cmd.entries)
app.command()(root_cmd.root)
app.command()(builtin_cmd.builtin)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
