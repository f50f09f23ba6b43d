"""Immutable graph snapshots produced by sealing a mutable graph."""

from __future__ import annotations

import logging
from collections.abc import Hashable
from dataclasses import dataclass, field

from sealdag._errors import CyclicGraphError

from ._access import GraphAccess
from ._traversal import TopologicalLevelIterator, TopologicalOrderIterator
from ._validation import has_cycle

logger = logging.getLogger(__name__)


def _copy_adjacency[T: Hashable](graph: GraphAccess[T]) -> tuple[
    dict[T, dict[T, None]],
    dict[T, dict[T, None]],
    dict[T, None],
    dict[T, None],
]:
    """Deep-copy the four adjacency containers of a graph."""
    return (
        {vertex: dict(parents) for vertex, parents in graph._parents.items()},  # noqa: SLF001
        {vertex: dict(children) for vertex, children in graph._children.items()},  # noqa: SLF001
        dict(graph._sources),  # noqa: SLF001
        dict(graph._sinks),  # noqa: SLF001
    )


@dataclass(frozen=True, slots=True)
class SealedDigraph[T: Hashable](GraphAccess[T]):
    """An immutable snapshot of a directed graph.

    Holds its own copy of the adjacency bookkeeping; later changes to the graph
    it was taken from do not show through. No acyclicity is implied; see
    :class:`SealedDAG` for the validated variant.

    Attributes:
        _parents: Mapping from vertex to its direct predecessors.
        _children: Mapping from vertex to its direct successors.
        _sources: Vertices without parents.
        _sinks: Vertices without children.

    """

    _parents: dict[T, dict[T, None]] = field(default_factory=dict)
    _children: dict[T, dict[T, None]] = field(default_factory=dict)
    _sources: dict[T, None] = field(default_factory=dict)
    _sinks: dict[T, None] = field(default_factory=dict)

    def __hash__(self) -> int:
        # Consistent with the generated __eq__, which ignores insertion order
        return hash(
            (
                frozenset((vertex, frozenset(children)) for vertex, children in self._children.items()),
                frozenset(self._sources),
                frozenset(self._sinks),
            ),
        )

    @classmethod
    def empty(cls) -> SealedDigraph[T]:
        """Return a snapshot without vertices."""
        return SealedDigraph()

    @classmethod
    def seal(cls, graph: GraphAccess[T]) -> SealedDigraph[T]:
        """Copy a graph into a new snapshot without validating it."""
        parents, children, sources, sinks = _copy_adjacency(graph)
        return SealedDigraph(parents, children, sources, sinks)


@dataclass(frozen=True, slots=True)
class SealedDAG[T: Hashable](SealedDigraph[T]):
    """An immutable, validated directed acyclic graph.

    Only :meth:`from_graph` creates instances. Each traversal factory returns
    a fresh iterable; iterating it again starts an independent traversal.

    Example:
        >>> from sealdag import Digraph
        >>> dag = SealedDAG.from_graph(Digraph.from_edges([("a", "b"), ("a", "c"), ("b", "d"), ("c", "d")]))
        >>> list(dag.top_levels())
        [('a',), ('b', 'c'), ('d',)]

    """

    __hash__ = SealedDigraph.__hash__

    def __post_init__(self) -> None:
        # from_graph bypasses __init__, so every other construction path
        # (including dataclasses.replace) ends up here
        msg = "SealedDAG instances are created with SealedDAG.from_graph()"
        raise TypeError(msg)

    @classmethod
    def from_graph(
        cls,
        graph: GraphAccess[T],
        *,
        bypass_validation: bool = False,
    ) -> SealedDAG[T]:
        """Validate a graph and freeze it into a DAG.

        Args:
            graph: The graph to seal, usually a :class:`Digraph`. It is not
                modified and may keep changing afterwards.
            bypass_validation: Skip cycle detection. Only for callers that
                guarantee acyclicity by construction; traversing a cyclic
                graph sealed this way gives undefined (but finite) results and
                may raise CycleDetectedError.

        Returns:
            A SealedDAG sharing no mutable state with ``graph``.

        Raises:
            CyclicGraphError: If ``graph`` contains a cycle and validation was
                not bypassed.

        """
        if not bypass_validation and has_cycle(graph):
            raise CyclicGraphError(graph)
        parents, children, sources, sinks = _copy_adjacency(graph)
        logger.debug(
            f"Sealed DAG with {len(parents)} vertices, "
            f"{len(sources)} sources and {len(sinks)} sinks"
            + (" (validation bypassed)" if bypass_validation else ""),
        )
        dag = object.__new__(SealedDAG)
        object.__setattr__(dag, "_parents", parents)
        object.__setattr__(dag, "_children", children)
        object.__setattr__(dag, "_sources", sources)
        object.__setattr__(dag, "_sinks", sinks)
        return dag

    def top_order(self) -> TopologicalOrderIterator[T]:
        """Vertices with every edge's source before its target."""
        return TopologicalOrderIterator(self)

    def reverse_top_order(self) -> TopologicalOrderIterator[T]:
        """Vertices with every edge's target before its source."""
        return TopologicalOrderIterator(self, reverse=True)

    def top_levels(self) -> TopologicalLevelIterator[T]:
        """Batches of vertices by longest distance from a source."""
        return TopologicalLevelIterator(self)

    def reverse_top_levels(self) -> TopologicalLevelIterator[T]:
        """Batches of vertices by longest distance to a sink."""
        return TopologicalLevelIterator(self, reverse=True)

