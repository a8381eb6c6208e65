"""Shared console helpers for scgen.

All user-visible output goes through the single Rich ``console`` defined here
so tests can capture it and the CLI can print errors consistently. Paths and
messages often carry user input, so every interpolated value is escaped
before it reaches Rich markup.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from scgen.scaffolder.manifest import ManifestEntry

console = Console()

ACTION_COLORS: dict[str, str] = {
    "create": "bright_green",
}


def print_action(action: str, path: str | Path) -> None:
    """Print a right-aligned action label followed by a path (``create  a/b.js``)."""
    color = ACTION_COLORS.get(action, "white")
    label = escape(f"{action:>10}")
    console.print(f"[bold {color}]{label}[/bold {color}]  {escape(str(path))}")


def print_manifest_table(entries: Iterable["ManifestEntry"], title: str = "Manifest") -> None:
    """Print planned directories and render targets as a table.

    Args:
        entries: Manifest entries in execution order.
        title: Table title.
    """
    table = Table(title=escape(title), show_header=True, header_style="bold cyan")
    table.add_column("Kind", style="dim", no_wrap=True)
    table.add_column("Template")
    table.add_column("Target")
    table.add_column("New directories")

    for entry in entries:
        new_dirs = "\n".join(escape(str(d)) for d in entry.directories_to_create) or "-"
        table.add_row(
            entry.kind.value,
            escape(entry.template_id),
            escape(str(entry.target_path)),
            new_dirs,
        )

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")
