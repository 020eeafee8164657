"""Console output helpers shared by the scaffolder and the CLI.

All user-facing output goes through one Rich ``Console`` so that tests can
swap or capture it in a single place.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

console = Console()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_step(message: str) -> None:
    """Print a dim progress line for a single scaffolding step."""
    console.print(f"[dim]{escape(message)}[/dim]")


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(escape(key), escape(str(value)))

    console.print(table)
    console.print()


def build_tree(root: Path, files: list[Path]) -> Tree:
    """Build a Rich ``Tree`` of *files* relative to *root*.

    Folders are listed before files at every level; both are sorted by name.
    """
    nested: dict[str, dict] = {}
    for path in files:
        node = nested
        for part in path.relative_to(root).parts:
            node = node.setdefault(part, {})

    tree = Tree(f"[bold]{escape(root.name)}/[/bold]")

    def _add(branch: Tree, node: dict[str, dict]) -> None:
        folders = sorted(name for name, child in node.items() if child)
        leaves = sorted(name for name, child in node.items() if not child)
        for name in folders:
            _add(branch.add(f"[bold blue]{escape(name)}/[/bold blue]"), node[name])
        for name in leaves:
            branch.add(escape(name))

    _add(tree, nested)
    return tree


def print_tree(root: Path, files: list[Path]) -> None:
    """Print the generated file tree."""
    console.print(build_tree(root, files))
    console.print()
