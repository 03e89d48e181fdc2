"""Console helpers shared by CLI commands."""

from rich.console import Console
from rich.markup import escape

console = Console()


def success(message: str) -> None:
    console.print(f"[green]✔[/green] {escape(message)}")


def info(message: str) -> None:
    console.print(f"[blue]ℹ[/blue] {escape(message)}")


def warning(message: str) -> None:
    console.print(f"[yellow]⚠[/yellow] {escape(message)}")


def error(message: str) -> None:
    console.print(f"[red]✖[/red] {escape(message)}")
