import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from sealdag._errors import CyclicGraphError
from sealdag._graph import SealedDAG

from .config import ConfigError, SealdagConfig, get_config
from .graph_input import build_graph
from .graph_render import render_levels, render_summary

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

Tokens = Annotated[
    list[str] | None,
    typer.Argument(help="Edges as 'A->B' and isolated vertices as 'A'"),
]
Separator = Annotated[
    str | None,
    typer.Option("--separator", "-s", help="Edge separator (default: [tool.sealdag].separator or '->')"),
]
Reverse = Annotated[
    bool | None,
    typer.Option("--reverse/--forward", help="Traverse from the sinks instead of the sources"),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Sealdag CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _load_config() -> SealdagConfig:
    try:
        return get_config()
    except ConfigError as e:
        err_console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(code=1) from e


def _seal(tokens: list[str] | None, separator: str | None, config: SealdagConfig) -> SealedDAG[str]:
    """Build a graph from command-line tokens and seal it, exiting on a cycle."""
    graph = build_graph(tokens or [], separator if separator is not None else config.separator)
    logger.debug(f"Sealing graph with {len(graph)} vertices")
    try:
        return SealedDAG.from_graph(graph)
    except CyclicGraphError as e:
        err_console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(code=1) from e


@app.command()
def check(tokens: Tokens = None, *, separator: Separator = None) -> None:
    """Check that the graph is acyclic."""
    config = _load_config()
    dag = _seal(tokens, separator, config)
    err_console.print(f"[green]✓ Graph is acyclic ({len(dag)} vertices)[/green]")


@app.command()
def order(tokens: Tokens = None, *, separator: Separator = None, reverse: Reverse = None) -> None:
    """Print the vertices in topological order, one per line."""
    config = _load_config()
    dag = _seal(tokens, separator, config)
    effective_reverse = reverse if reverse is not None else config.reverse
    vertices = dag.reverse_top_order() if effective_reverse else dag.top_order()
    for vertex in vertices:
        out_console.print(vertex, markup=False, highlight=False)


@app.command()
def levels(tokens: Tokens = None, *, separator: Separator = None, reverse: Reverse = None) -> None:
    """Print the vertices grouped by topological level."""
    config = _load_config()
    dag = _seal(tokens, separator, config)
    effective_reverse = reverse if reverse is not None else config.reverse
    batches = dag.reverse_top_levels() if effective_reverse else dag.top_levels()
    render_levels(batches, out_console, reverse=effective_reverse)


@app.command()
def info(tokens: Tokens = None, *, separator: Separator = None) -> None:
    """Print vertex and edge counts, sources and sinks."""
    config = _load_config()
    dag = _seal(tokens, separator, config)
    render_summary(dag, out_console)


def main() -> None:
    app()
