"""Spine and manifest command implementations."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from epubkit.models import Document


def execute_spine(document: Document, console: Console) -> None:
    """Display the reading order."""
    spine = document.spine
    table = Table(
        title=f"Spine ({spine.page_progression_direction.value})",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Idref", style="white")
    table.add_column("Path", style="white")
    table.add_column("Media type", style="dim")
    table.add_column("Linear", justify="center")

    for i, entry in enumerate(spine.items):
        item = document.manifest.items.get(entry.idref)
        table.add_row(
            str(i + 1),
            escape(entry.idref),
            escape(item.path) if item else "[red]missing[/]",
            item.media_type.value if item else "",
            "yes" if entry.linear else "[yellow]no[/]",
        )

    console.print(table)


def execute_manifest(document: Document, console: Console) -> None:
    """Display every resource listed in the manifest."""
    table = Table(title="Manifest", show_header=True, header_style="bold cyan")
    table.add_column("Id", style="white")
    table.add_column("Path", style="white")
    table.add_column("Media type", style="green")
    table.add_column("Properties", style="dim")

    for item in sorted(document.manifest.items.values(), key=lambda i: i.path):
        table.add_row(
            escape(item.id),
            escape(item.path),
            item.media_type.value,
            escape(item.properties or ""),
        )

    console.print(table)
