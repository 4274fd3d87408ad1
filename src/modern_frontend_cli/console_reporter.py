"""Styled console output for modern-frontend commands.

ConsoleReporter wraps a rich Console and exposes a fixed set of output
methods. It holds no business logic.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table


class ConsoleReporter:
    """Uniform info/note/warning/error/success/listing/table output."""

    def __init__(self, console: Console | None = None, error_console: Console | None = None):
        """Initialize reporter.

        Args:
            console: Console for regular output (default: stdout)
            error_console: Console for error lines (default: stderr, or
                ``console`` when only that one is given)
        """
        if console is None:
            console = Console(highlight=False, soft_wrap=True)
            if error_console is None:
                error_console = Console(stderr=True, highlight=False, soft_wrap=True)
        self.console = console
        self.error_console = error_console if error_console is not None else console

    def info(self, message: str | Sequence[str]) -> None:
        self._block(message, "[blue]", prefix="[!] ")

    def note(self, message: str | Sequence[str]) -> None:
        self._block(message, "[blue]", prefix=" ")

    def warning(self, message: str | Sequence[str]) -> None:
        self._block(message, "[bold yellow]", prefix="[WARNING] ")

    def success(self, message: str | Sequence[str]) -> None:
        self._block(message, "[bold green]", prefix="[OK] ")

    def error(self, message: str | Sequence[str]) -> None:
        for line in self._lines(message):
            self.error_console.print(f"[bold red]{escape('[ERROR] ' + line)}[/bold red]")

    def listing(self, items: Iterable[str]) -> None:
        for item in items:
            self.console.print(f" * {escape(item)}")
        self.new_line()

    def table(
        self,
        headers: Sequence[str],
        rows: Iterable[Sequence[str]],
        title: str | None = None,
    ) -> None:
        """Render a borderless table, optionally preceded by a note-styled title."""
        table = Table(box=box.SIMPLE_HEAD, show_edge=False, header_style="green")
        for header in headers:
            table.add_column(header)
        for row in rows:
            table.add_row(*(str(cell) for cell in row))

        if title:
            self.note(title)
        self.console.print(table)
        self.new_line()

    def new_line(self, count: int = 1) -> None:
        for _ in range(count):
            self.console.print()

    def _block(self, message: str | Sequence[str], style: str, prefix: str) -> None:
        close = "[/" + style[1:]
        for line in self._lines(message):
            self.console.print(f"{style}{escape(prefix + line)}{close}")
        self.new_line()

    @staticmethod
    def _lines(message: str | Sequence[str]) -> list[str]:
        if isinstance(message, str):
            return [message]
        return list(message)
