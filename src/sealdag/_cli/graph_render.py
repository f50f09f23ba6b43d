"""Rich rendering utilities for graph commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Iterable

    from rich.console import Console

    from sealdag._graph import SealedDAG


def _join(vertices: Iterable[str]) -> str:
    return ", ".join(escape(vertex) for vertex in vertices)


def render_levels(levels: Iterable[tuple[str, ...]], console: Console, *, reverse: bool = False) -> None:
    """Render topological levels as a Rich table.

    Args:
        levels: Levels in traversal order.
        console: Rich Console to output to.
        reverse: Whether the levels were counted from the sinks.

    """
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Level" if not reverse else "Reverse level", justify="right")
    table.add_column("Count", justify="right")
    table.add_column("Vertices")

    total = 0
    for index, level in enumerate(levels):
        total += len(level)
        table.add_row(str(index), str(len(level)), _join(level))

    if total == 0:
        console.print("[dim]Graph is empty[/dim]")
        return

    console.print(table)
    console.print(f"\n[dim]Total: {total} vertices[/dim]")


def render_summary(dag: SealedDAG[str], console: Console) -> None:
    """Render vertex and edge counts together with sources and sinks.

    Args:
        dag: The sealed graph to describe.
        console: Rich Console to output to.

    """
    edge_count = sum(1 for _ in dag.edges())
    console.print(f"[cyan]Vertices:[/cyan] {len(dag)}")
    console.print(f"[cyan]Edges:[/cyan]    {edge_count}")
    # Sorted so the output does not depend on hash order
    sources = sorted(dag.sources)
    sinks = sorted(dag.sinks)
    console.print(f"[cyan]Sources:[/cyan]  {_join(sources) if sources else '[dim]None[/dim]'}")
    console.print(f"[cyan]Sinks:[/cyan]    {_join(sinks) if sinks else '[dim]None[/dim]'}")
