"""Rich console used by the move command."""

from typing import Iterable, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm
from rich.table import Table

# (style, prefix) per message level
_LEVELS = {
    "info": ("blue", "ℹ️ "),
    "warning": ("yellow", "⚠️ "),
    "error": ("bold red", "❌"),
    "success": ("green", "✓"),
}


class ConsoleUI:
    """
    Styled terminal output for move summaries and prompts.

    Message text is escaped before styling, so release names with
    square brackets ("[1080p]") are printed as they are.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(highlight=False)

    def print(self, *args, **kwargs) -> None:
        """Print renderables or markup as is."""
        self.console.print(*args, **kwargs)

    def message(self, level: str, text: str) -> None:
        """
        Print a one-line message for a level.

        Args:
            level: One of "info", "warning", "error", "success".
            text: Plain message text.
        """
        style, prefix = _LEVELS[level]
        self.console.print(f"{prefix} {escape(text)}", style=style)

    def print_info(self, text: str) -> None:
        self.message("info", text)

    def print_warning(self, text: str) -> None:
        self.message("warning", text)

    def print_error(self, text: str) -> None:
        self.message("error", text)

    def print_success(self, text: str) -> None:
        self.message("success", text)

    def print_panel(self, content: str, title: str = "", border_style: str = "blue") -> None:
        """Print markup content framed in a panel."""
        self.console.print(Panel(content, title=title, border_style=border_style, expand=False))

    def create_table(self, title: str, columns: Iterable[str] = ()) -> Table:
        """
        Build a table with the given column headers.

        Args:
            title: Table title.
            columns: Column headers, left to right.

        Returns:
            Empty Rich Table ready for add_row().
        """
        table = Table(title=title, header_style="bold cyan")
        for header in columns:
            table.add_column(header, overflow="fold")
        return table

    def print_table(self, table: Table) -> None:
        self.console.print(table)

    def confirm(self, question: str, default: bool = False) -> bool:
        """Ask a yes/no question; Enter gives the default."""
        return Confirm.ask(escape(question), default=default, console=self.console)
