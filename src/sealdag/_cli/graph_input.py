"""Build graphs from command-line edge tokens."""

import logging
from collections.abc import Iterable

import typer

from sealdag._graph import Digraph

logger = logging.getLogger(__name__)


def parse_token(token: str, separator: str) -> tuple[str, str | None]:
    """Split one command-line token into an edge or a single vertex.

    Args:
        token: ``"a->b"`` for an edge, ``"a"`` for a vertex (with the default
            separator).
        separator: The string separating the edge endpoints.

    Returns:
        ``(source, target)`` for an edge, ``(vertex, None)`` for a vertex.

    Raises:
        typer.BadParameter: If the token or one of its endpoints is empty.

    """
    if separator not in token:
        vertex = token.strip()
        if not vertex:
            msg = "Empty vertex name"
            raise typer.BadParameter(msg)
        return vertex, None

    source, _, target = token.partition(separator)
    source, target = source.strip(), target.strip()
    if not source or not target:
        msg = f"Edge '{token}' needs a vertex on both sides of '{separator}'"
        raise typer.BadParameter(msg)
    return source, target


def build_graph(tokens: Iterable[str], separator: str) -> Digraph[str]:
    """Build a mutable graph from edge and vertex tokens, in order."""
    graph: Digraph[str] = Digraph()
    for token in tokens:
        source, target = parse_token(token, separator)
        if target is None:
            graph.add_vertex(source)
        else:
            graph.add_edge(source, target)
    logger.debug(f"Parsed {len(graph)} vertices and {sum(1 for _ in graph.edges())} edges")
    return graph
