"""Read-only query surface shared by mutable and sealed graphs."""

from collections.abc import Hashable, Iterator

from sealdag._errors import UnknownVertexError


class GraphAccess[T: Hashable]:
    """Queries over bidirectional adjacency bookkeeping.

    Subclasses provide four containers. Dict keys serve as insertion-ordered
    sets, so traversal order only depends on the order in which the graph was
    built:

    - ``_parents[v]``: vertices with an edge into ``v``
    - ``_children[v]``: vertices with an edge out of ``v``
    - ``_sources``: vertices with no parents
    - ``_sinks``: vertices with no children

    A vertex is a key of both ``_parents`` and ``_children`` or of neither.
    Every query returns a fresh immutable container, so callers cannot reach
    the internal state through a result.
    """

    _parents: dict[T, dict[T, None]]
    _children: dict[T, dict[T, None]]
    _sources: dict[T, None]
    _sinks: dict[T, None]

    def parents(self, vertex: T) -> frozenset[T]:
        """Get the direct predecessors of a vertex.

        Args:
            vertex: The vertex to query.

        Returns:
            Set of vertices with an edge into ``vertex``. Empty if the vertex
            is not in the graph.

        """
        return frozenset(self._parents.get(vertex, ()))

    def children(self, vertex: T) -> frozenset[T]:
        """Get the direct successors of a vertex.

        Args:
            vertex: The vertex to query.

        Returns:
            Set of vertices with an edge out of ``vertex``. Empty if the vertex
            is not in the graph.

        """
        return frozenset(self._children.get(vertex, ()))

    @property
    def sources(self) -> frozenset[T]:
        """Vertices without parents."""
        return frozenset(self._sources)

    @property
    def sinks(self) -> frozenset[T]:
        """Vertices without children."""
        return frozenset(self._sinks)

    def has_edge(self, source: T, target: T) -> bool:
        """Check whether the edge ``source -> target`` exists."""
        return target in self._children.get(source, ())

    def has_vertex(self, vertex: T) -> bool:
        """Check whether a vertex exists."""
        return vertex in self._parents

    def vertex_set(self) -> frozenset[T]:
        """All vertices in the graph."""
        return frozenset(self._parents)

    def parents_count(self, vertex: T) -> int:
        """Count the direct predecessors of a vertex.

        Raises:
            UnknownVertexError: If the vertex is not in the graph.

        """
        try:
            return len(self._parents[vertex])
        except KeyError:
            raise UnknownVertexError(vertex) from None

    def children_count(self, vertex: T) -> int:
        """Count the direct successors of a vertex.

        Raises:
            UnknownVertexError: If the vertex is not in the graph.

        """
        try:
            return len(self._children[vertex])
        except KeyError:
            raise UnknownVertexError(vertex) from None

    def edges(self) -> Iterator[tuple[T, T]]:
        """Iterate over all ``(source, target)`` pairs."""
        for source, targets in self._children.items():
            for target in targets:
                yield source, target

    def _ordered_parents(self, vertex: T) -> tuple[T, ...]:
        return tuple(self._parents.get(vertex, ()))

    def _ordered_children(self, vertex: T) -> tuple[T, ...]:
        return tuple(self._children.get(vertex, ()))

    def _ordered_sources(self) -> tuple[T, ...]:
        return tuple(self._sources)

    def _ordered_sinks(self) -> tuple[T, ...]:
        return tuple(self._sinks)

    def __len__(self) -> int:
        """Return the number of vertices in the graph."""
        return len(self._parents)

    def __contains__(self, vertex: object) -> bool:
        """Check if a vertex is in the graph."""
        return vertex in self._parents

    def __iter__(self) -> Iterator[T]:
        """Iterate over vertices in insertion order."""
        return iter(tuple(self._parents))

    def __str__(self) -> str:
        """Render one ``source -> target`` line per edge."""
        return "".join(f"{source} -> {target}\n" for source, target in self.edges())
