"""
Terminal renderer using Rich.

Shows the function catalog and generation results in the terminal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from secruleset.catalog import get_function_categories

if TYPE_CHECKING:
    from secruleset.domain.models import FunctionEntry, GenerationResult


class TerminalRenderer:
    """
    Renders catalog listings and generation summaries to the terminal.
    """

    def __init__(
        self,
        console: Console | None = None,
        err_console: Console | None = None,
    ) -> None:
        """
        Initialize the terminal renderer.

        Args:
            console: Rich console to use (creates new one if None).
            err_console: Console for warnings (stderr if None).
        """
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def render_catalog(
        self,
        categories: dict[str, list[FunctionEntry]] | None = None,
    ) -> None:
        """
        Render the forbidden functions as a table grouped by category.

        Numbering matches the interactive menu.
        """
        categories = categories if categories is not None else get_function_categories()

        table = Table(title="Forbidden Functions (CommonSecurity)")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Function", style="cyan")
        table.add_column("Risk", style="white")

        index = 0
        total = 0
        for category, entries in categories.items():
            table.add_section()
            table.add_row("", f"[bold]{category}[/bold]", "")
            for entry in entries:
                index += 1
                table.add_row(str(index), entry.name, entry.reason)
            total += len(entries)

        self.console.print(table)
        self.console.print(f"\nTotal: {total} functions in {len(categories)} categories")

    def render_result(self, result: GenerationResult) -> None:
        """Render a summary of a written ruleset and how to include it."""
        self.console.print(
            Panel(
                f"[bold]Generated:[/bold] [cyan]{escape(result.output)}[/cyan]\n"
                f"Exclusions: {result.exclusion_count}  "
                f"Custom rules: {result.custom_rule_count}  "
                f"Size: {result.bytes_written} bytes",
                title="Ruleset written",
                border_style="green",
            )
        )
        self.console.print("Add this to your phpcs.xml:")
        self.console.print(result.include_snippet, markup=False, highlight=False)

    def render_xml(self, content: bytes) -> None:
        """Write generated XML to the console without any styling."""
        self.console.out(content.decode("utf-8"), highlight=False, end="")

    def warn(self, message: str) -> None:
        self.err_console.print(f"[yellow]{escape(message)}[/yellow]")
