"""Table of contents command implementation."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from epubkit.models import Document, TableOfContents


def build_tree(
    node: TableOfContents, tree: Tree, depth: int | None, level: int = 1
) -> None:
    """Recursively add ``node``'s children to ``tree`` down to ``depth`` levels."""
    if depth is not None and level > depth:
        return
    for entry in node.sub_table:
        branch = tree.add(
            f"{escape(entry.label) or '[dim](no label)[/]'} "
            f"[dim]{escape(entry.item or '')}[/]"
        )
        build_tree(entry, branch, depth, level + 1)


def execute_toc(document: Document, depth: int | None, console: Console) -> None:
    """Display the table of contents as a tree."""
    root = document.table_of_contents
    label = root.label or document.title or "Table of Contents"
    tree = Tree(f"[bold cyan]{escape(label)}[/]")
    build_tree(root, tree, depth)

    if not root.sub_table:
        console.print("[yellow]Table of contents is empty.[/]")
        return
    console.print(tree)
