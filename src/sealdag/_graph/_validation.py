"""Cycle detection run once, when a graph is sealed."""

import logging
from collections.abc import Hashable

from ._access import GraphAccess

logger = logging.getLogger(__name__)


def has_cycle[T: Hashable](graph: GraphAccess[T]) -> bool:
    """Check whether a directed graph contains a cycle.

    Iterative depth-first search from every source with an explicit stack,
    so deep graphs do not hit the recursion limit. Vertices on the active
    path are gray (``on_stack``); fully explored vertices are black
    (``done``). Reaching a gray vertex again is a back edge.

    A cycle that no source can reach (including a graph without any source)
    leaves its vertices white, so the graph is only acyclic if every vertex
    ends up black.

    Args:
        graph: The graph to check.

    Returns:
        True if the graph has a cycle, False otherwise.

    Example:
        >>> from sealdag import Digraph
        >>> has_cycle(Digraph.from_edges([("a", "b"), ("b", "a")]))
        True

    """
    on_stack: set[T] = set()
    done: set[T] = set()
    stack: list[T] = list(graph.sources)

    while stack:
        vertex = stack[-1]
        if vertex in done:
            # Pushed by more than one parent and already explored
            stack.pop()
            continue
        if vertex not in on_stack:
            on_stack.add(vertex)
            for child in graph.children(vertex):
                if child in on_stack:
                    logger.debug(f"Back edge {vertex!r} -> {child!r}")
                    return True
                if child not in done:
                    stack.append(child)
        else:
            on_stack.discard(vertex)
            done.add(vertex)
            stack.pop()

    unreached = len(graph) - len(done)
    if unreached:
        logger.debug(f"{unreached} vertices unreachable from any source lie on or behind a cycle")
        return True
    return False
