"""Export command implementation."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from epubkit.models import Document


def execute_export(
    document: Document,
    output: Path | None,
    console: Console,
) -> None:
    """Write the document as JSON to ``output``, or to stdout."""
    payload = document.model_dump_json(indent=2)

    if output is None:
        # Bypass rich so the JSON stays machine-readable
        console.file.write(payload + "\n")
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(payload, encoding="utf-8")
    console.print(f"[green]Wrote[/] {output}")
