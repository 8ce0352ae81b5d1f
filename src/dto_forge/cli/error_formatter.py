"""Diagnostic formatting with Rich."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from dto_forge.validation.errors import ValidationIssue, ValidationResult


class ErrorFormatter:
    """Formats diagnostics for terminal display."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize formatter.

        Args:
        ----
            console: Rich Console for output.

        """
        self.console = console or Console(stderr=True)

    def format_validation_result(
        self,
        result: ValidationResult,
        source_path: Path | None = None,
    ) -> None:
        """Format and print a diagnostics result.

        Args:
        ----
            result: The result to format.
            source_path: Path to the OpenAPI file (for display).

        """
        if result.is_valid and not result.warnings:
            self.console.print("[green]✓ No schema problems found[/green]")
            return

        error_count = len(result.errors)
        warning_count = len(result.warnings)

        self.console.print(self._build_summary(error_count, warning_count, source_path))
        self.console.print()

        for issue in result.errors:
            self._print_issue(issue, "red")

        for issue in result.warnings:
            self._print_issue(issue, "yellow")

    def _build_summary(
        self,
        errors: int,
        warnings: int,
        source_path: Path | None,
    ) -> Panel:
        """Build summary panel."""
        title = "Schema Problems" if errors > 0 else "Schema Warnings"
        style = "red" if errors > 0 else "yellow"

        content = Text()
        if source_path:
            content.append(f"File: {source_path}\n", style="dim")

        if errors > 0:
            content.append(f"Errors: {errors}", style="red bold")
        if warnings > 0:
            if errors > 0:
                content.append("  ")
            content.append(f"Warnings: {warnings}", style="yellow")

        return Panel(content, title=title, border_style=style)

    def _print_issue(self, issue: ValidationIssue, color: str) -> None:
        """Print a single issue."""
        severity = issue.severity.value.upper()
        self.console.print(
            f"[{color} bold]{severity}[/{color} bold] "
            f"[{color}]\\[{issue.code}][/{color}] "
            f"{issue.message}",
            highlight=False,
        )

        if issue.location:
            self.console.print(f"  [dim]at {issue.location}[/dim]", highlight=False)

        if issue.suggestion:
            self.console.print(f"  [green]💡 {issue.suggestion}[/green]")

        self.console.print()


class ErrorTable:
    """Display diagnostics as a table."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize error table formatter.

        Args:
        ----
            console: Rich Console for output.

        """
        self.console = console or Console(stderr=True)

    def print_result(self, result: ValidationResult) -> None:
        """Print diagnostics as table."""
        table = Table(title="Schema Diagnostics")

        table.add_column("Code", style="cyan", width=6)
        table.add_column("Severity", width=8)
        table.add_column("Location", style="dim")
        table.add_column("Message")

        for issue in result.issues:
            severity_style = "red" if issue.severity.value == "error" else "yellow"
            severity = f"[{severity_style}]{issue.severity.value.upper()}[/{severity_style}]"

            location = str(issue.location) if issue.location else "-"

            table.add_row(
                issue.code,
                severity,
                location,
                issue.message,
            )

        self.console.print(table)
