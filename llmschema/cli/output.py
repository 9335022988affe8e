"""Console output helpers for the llmschema CLI."""

import json
import sys
from typing import Any

from rich.console import Console
from rich.table import Table

from llmschema.repair.pipeline import RepairResult

console = Console()
err_console = Console(stderr=True)


def is_piped() -> bool:
    """Whether stdout is redirected to a file or another process."""
    return not sys.stdout.isatty()


def print_error(message: str, hint: str | None = None) -> None:
    err_console.print(f"[bold red]Error:[/] {message}")
    if hint:
        err_console.print(f"[dim]Hint: {hint}[/]")


def print_success(message: str) -> None:
    console.print(f"[green]✓[/] {message}")


def print_info(message: str) -> None:
    console.print(f"[dim]{message}[/]")


def print_repair_result(
    result: RepairResult, output_format: str = "text", verbose: bool = False
) -> None:
    """Print the outcome of a repair run.

    Text format prints the repaired JSON on stdout and the action log on stderr,
    so the output can be piped straight into another tool.
    """
    if output_format == "json":
        print(json.dumps(result.to_dict(), indent=2))
        return

    if not result.success:
        print_error(f"Could not repair JSON: {result.error}")
        if verbose:
            err_console.print(result.text, markup=False, highlight=False)
        return

    print(json.dumps(result.data, indent=2))

    if verbose or not is_piped():
        if result.repairs:
            for action in result.repairs:
                err_console.print(f"[yellow]•[/] {action.kind}: {action.description}")
        else:
            err_console.print("[dim]Input was already valid JSON[/]")


def print_config(config: dict[str, Any]) -> None:
    """Print configuration sections as tables."""
    for section, values in config.items():
        table = Table(title=section, show_header=False, title_justify="left")
        table.add_column("Key", style="cyan")
        table.add_column("Value")
        for key, value in values.items():
            table.add_row(key, str(value))
        console.print(table)
