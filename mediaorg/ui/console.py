"""Rich console output for batch runs."""

from typing import Iterable, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

# Message kind -> (style, marker)
MESSAGE_STYLES = {
    "warning": ("yellow", "⚠️ "),
    "error": ("red", "❌"),
    "success": ("green", "✓"),
}


class ConsoleUI:
    """
    Styled terminal output for the batch summary.

    Log records go through loguru on stderr; this console only renders
    the configuration panel and the end-of-run summary on stdout.
    """

    def __init__(self, no_color: bool = False, quiet: bool = False) -> None:
        self.console = Console(no_color=no_color, quiet=quiet)

    def _message(self, kind: str, message: str) -> None:
        style, marker = MESSAGE_STYLES[kind]
        self.console.print(f"[{style}]{marker} {message}[/{style}]")

    def print_warning(self, message: str) -> None:
        self._message("warning", message)

    def print_error(self, message: str) -> None:
        self._message("error", message)

    def print_success(self, message: str) -> None:
        self._message("success", message)

    def print_panel(self, content: str, title: str = "", border_style: str = "blue") -> None:
        """Print content in a bordered panel."""
        self.console.print(Panel(content, title=title, border_style=border_style))

    def print_rows(self, title: str, headers: Sequence[str], rows: Iterable[Sequence[str]]) -> None:
        """
        Print rows as a table.

        Args:
            title: Table title.
            headers: Column headers.
            rows: Cell values, one sequence per row.
        """
        table = Table(title=title, show_header=True, header_style="bold magenta")
        for header in headers:
            table.add_column(header)
        for row in rows:
            table.add_row(*row)
        self.console.print(table)
