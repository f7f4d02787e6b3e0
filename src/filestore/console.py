"""Console output for the CLI."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from filestore.types import PathInfo


class Output:
    """Rich-backed output for filestore commands."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_success(self, message: str) -> None:
        """Show success message.

        Args:
            message: Success message.
        """
        self.console.print(f"[green]✓[/green] {message}")

    def show_error(self, message: str) -> None:
        """Show error message.

        Args:
            message: Error message.
        """
        self.console.print(f"[red]✗[/red] {message}")

    def show_content(self, content: str) -> None:
        """Print file content verbatim, without markup or highlighting."""
        self.console.print(content, markup=False, highlight=False, soft_wrap=True, end="")

    def show_entries(self, names: list[str]) -> None:
        """Print one entry name per line."""
        if not names:
            self.console.print("[yellow]Directory is empty[/yellow]")
            return
        for name in names:
            self.console.print(name, markup=False, highlight=False, soft_wrap=True)

    def show_info(self, info: PathInfo) -> None:
        """Display a path snapshot as a table.

        Args:
            info: Snapshot to display.
        """
        table = Table(title=info.path, show_header=False)
        table.add_column("Field", style="bold")
        table.add_column("Value")
        table.add_row("Kind", info.kind.value)
        table.add_row("Exists", _yes_no(info.exists))
        table.add_row("Readable", _yes_no(info.readable))
        table.add_row("Writable", _yes_no(info.writable))
        table.add_row("Size", f"{info.size} bytes")
        self.console.print(table)


def _yes_no(value: bool) -> str:
    return "[green]yes[/green]" if value else "[red]no[/red]"
