"""Info command implementation."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from epubkit.models import Document


def format_creators(document: Document) -> str:
    """All creator names joined for display."""
    names = [c.name for c in document.metadata.creators if c.name]
    return ", ".join(names) or "Unknown"


def execute_info(document: Document, console: Console) -> None:
    """Display book metadata and structure counts."""
    metadata = document.metadata
    spine = document.spine
    linear = sum(1 for item in spine.items if item.linear)
    toc_entries = sum(1 for _ in document.table_of_contents.walk()) - 1

    info_lines = [
        f"[bold]{escape(document.title or 'Untitled')}[/]",
        f"[dim]Author(s):[/] {escape(format_creators(document))}",
        f"[dim]Publisher:[/] {escape(document.publisher or 'Unknown')}",
        f"[dim]Language:[/] {escape(metadata.language or 'Unknown')}",
        f"[dim]Identifier:[/] {escape(metadata.identifier or 'None')}",
    ]
    if metadata.date:
        info_lines.append(f"[dim]Date:[/] {escape(metadata.date)}")
    info_lines.extend(
        [
            f"[dim]Cover:[/] {escape(str(document.cover or 'None'))}",
            f"[dim]Resources:[/] {len(document.manifest.items)}",
            f"[dim]Spine:[/] {len(spine.items)} ({linear} linear, "
            f"{spine.page_progression_direction.value})",
            f"[dim]TOC entries:[/] {toc_entries}",
        ]
    )

    # Show warnings if any
    if document.warnings:
        info_lines.append("")
        for warning in document.warnings:
            info_lines.append(f"[yellow]! {escape(warning)}[/]")

    console.print(
        Panel(
            "\n".join(info_lines),
            title="Book Info",
            border_style="green",
        )
    )
