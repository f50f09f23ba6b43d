"""Mutable directed graph used to build a DAG before sealing it."""

from __future__ import annotations

from collections.abc import Hashable, Iterable

from ._access import GraphAccess
from ._sealed import SealedDigraph


class Digraph[T: Hashable](GraphAccess[T]):
    """A mutable directed graph over hashable vertices.

    Edges are not counted: adding the same edge twice leaves the graph as it
    was after the first insertion. ``sources`` and ``sinks`` are kept up to
    date by every mutation.

    Not safe for concurrent mutation. Build it from a single writer, then
    freeze it with :meth:`SealedDAG.from_graph`.

    Example:
        >>> graph = Digraph[str]()
        >>> graph.add_edge("a", "b")
        >>> graph.add_edge("b", "c")
        >>> sorted(graph.sources), sorted(graph.sinks)
        (['a'], ['c'])

    """

    def __init__(self) -> None:
        self._parents = {}
        self._children = {}
        self._sources = {}
        self._sinks = {}

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[T, T]],
        vertices: Iterable[T] = (),
    ) -> Digraph[T]:
        """Build a graph from ``(source, target)`` edges and extra vertices.

        Args:
            edges: Edges to add, in order.
            vertices: Vertices to add before the edges, e.g. isolated ones.

        Returns:
            A new Digraph instance.

        """
        graph = cls()
        for vertex in vertices:
            graph.add_vertex(vertex)
        for source, target in edges:
            graph.add_edge(source, target)
        return graph

    def add_vertex(self, vertex: T) -> None:
        """Add a vertex. Does nothing if it is already in the graph."""
        if vertex in self._parents:
            return
        self._parents[vertex] = {}
        self._children[vertex] = {}
        self._sources[vertex] = None
        self._sinks[vertex] = None

    def add_edge(self, source: T, target: T) -> None:
        """Add the edge ``source -> target``, adding missing endpoints."""
        self.add_vertex(source)
        self.add_vertex(target)
        self._parents[target][source] = None
        self._children[source][target] = None

        self._sources.pop(target, None)
        self._sinks.pop(source, None)

    def remove_edge(self, source: T, target: T) -> None:
        """Remove the edge ``source -> target``. Does nothing if it is absent."""
        if not self.has_edge(source, target):
            return
        del self._parents[target][source]
        del self._children[source][target]

        if not self._parents[target]:
            self._sources[target] = None
        if not self._children[source]:
            self._sinks[source] = None

    def remove_vertex(self, vertex: T) -> None:
        """Remove a vertex together with all of its incident edges.

        Former neighbours that are left without parents (or children) become
        sources (or sinks).
        """
        if vertex not in self._parents:
            return
        for parent in self._parents[vertex]:
            if parent == vertex:
                continue
            del self._children[parent][vertex]
            if not self._children[parent]:
                self._sinks[parent] = None
        for child in self._children[vertex]:
            if child == vertex:
                continue
            del self._parents[child][vertex]
            if not self._parents[child]:
                self._sources[child] = None

        del self._parents[vertex]
        del self._children[vertex]
        self._sources.pop(vertex, None)
        self._sinks.pop(vertex, None)

    def sealed(self) -> SealedDigraph[T]:
        """Take an unvalidated immutable snapshot of the current state.

        The snapshot may contain cycles. Use :meth:`SealedDAG.from_graph` to
        get a validated DAG with traversal support.
        """
        return SealedDigraph.seal(self)
