"""CLI exception handling."""

from __future__ import annotations

import traceback
from collections.abc import Callable
from functools import wraps
from typing import TypeVar

import typer
from rich.console import Console
from rich.panel import Panel

from dto_forge.exceptions import (
    ConfigurationError,
    DtoForgeError,
    LoaderError,
    OutputWriteError,
)
from dto_forge.validation.validator import DiagnosticsError

T = TypeVar("T")

console = Console(stderr=True)


def handle_exceptions(
    verbose: bool = False,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Handle exceptions in CLI commands with formatted output.

    Args:
    ----
        verbose: Whether to show full tracebacks.

    Returns:
    -------
        Decorator function.

    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args: object, **kwargs: object) -> T:
            try:
                return func(*args, **kwargs)
            except typer.Exit:
                raise
            except DiagnosticsError as e:
                _handle_diagnostics_error(e, verbose)
                raise typer.Exit(1) from None
            except ConfigurationError as e:
                _handle_configuration_error(e, verbose)
                raise typer.Exit(1) from None
            except (LoaderError, OutputWriteError) as e:
                _handle_file_error(e, verbose)
                raise typer.Exit(1) from None
            except DtoForgeError as e:
                _handle_generation_error(e, verbose)
                raise typer.Exit(1) from None
            except Exception as e:
                _handle_generic_error(e, verbose)
                raise typer.Exit(1) from None

        return wrapper

    return decorator


def _handle_diagnostics_error(error: DiagnosticsError, verbose: bool) -> None:
    """Handle diagnostics that block generation."""
    from dto_forge.cli.error_formatter import ErrorFormatter

    ErrorFormatter(console).format_validation_result(error.result)
    console.print(f"[red bold]✗ {error}[/red bold]")


def _handle_configuration_error(error: ConfigurationError, verbose: bool) -> None:
    """Handle invalid configuration documents."""
    console.print("[red bold]Configuration Invalid[/red bold]")
    console.print(f"  {error}")
    console.print()

    for detail in error.details:
        console.print(f"[red]✗[/red] {detail}", highlight=False)

    if error.details:
        console.print()
        console.print("[green]💡 Run 'dto-forge example-config' for a documented template[/green]")


def _handle_file_error(error: LoaderError | OutputWriteError, verbose: bool) -> None:
    """Handle unreadable input and unwritable output."""
    console.print(
        Panel(
            f"[red]{error}[/red]\n\n" "Please check that the path is correct and accessible.",
            title="Error",
            border_style="red",
        )
    )


def _handle_generation_error(error: DtoForgeError, verbose: bool) -> None:
    """Handle render and schema recursion errors."""
    console.print(
        Panel(
            f"[red]Generation failed:[/red]\n{error}",
            title="Error",
            border_style="red",
        )
    )

    if verbose:
        console.print("\n[dim]Traceback:[/dim]")
        console.print(traceback.format_exc())


def _handle_generic_error(error: Exception, verbose: bool) -> None:
    """Handle unexpected errors."""
    console.print(
        Panel(
            f"[red]An unexpected error occurred:[/red]\n{error}",
            title="Error",
            border_style="red",
        )
    )

    if verbose:
        console.print("\n[dim]Traceback:[/dim]")
        console.print(traceback.format_exc())
    else:
        console.print("\n[dim]Use --verbose for full traceback[/dim]")
